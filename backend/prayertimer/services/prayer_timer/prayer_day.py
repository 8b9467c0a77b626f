# prayertimer/services/prayer_timer/prayer_day.py

import datetime
import logging
from typing import Dict, List, Optional, Tuple

from ...utils.time_utils import parse_time_internal
from .calendar_context import CalendarContext
from .models import Prayer, PrayerTime

logger = logging.getLogger(__name__)

# Tomorrow's adhans that can close tonight's windows, in order.
TOMORROW_ANCHORS = (Prayer.FAJR, Prayer.SUNRISE, Prayer.DHUHR)


class PrayerDay:
    """
    The adhan times of one civil day, plus the neighbouring anchors needed to
    close the first and last windows: yesterday's Isha (covers the night before
    Fajr) and tomorrow's early adhans (close tonight's Isha and the windows
    that follow it).
    """

    def __init__(
        self,
        date: datetime.date,
        times: Dict[Prayer, datetime.datetime],
        yesterday_isha: Optional[datetime.datetime] = None,
        tomorrow: Optional[Dict[Prayer, datetime.datetime]] = None,
    ):
        self.date = date
        self.times = times
        self.yesterday_isha = yesterday_isha
        self.tomorrow = tomorrow or {}

    @classmethod
    def from_timings(
        cls,
        day: datetime.date,
        today: Dict[str, str],
        calendar: CalendarContext,
        yesterday: Optional[Dict[str, str]] = None,
        tomorrow: Optional[Dict[str, str]] = None,
    ) -> Optional["PrayerDay"]:
        """
        Builds a PrayerDay from API-style timings ({"Fajr": "05:00", ...}).
        Returns None when any of today's adhan times is missing or unparsable.
        """
        times = {}
        for prayer in Prayer:
            time_obj = parse_time_internal((today or {}).get(prayer.api_key))
            if not time_obj:
                logger.warning(f"PrayerDay: missing or invalid '{prayer.api_key}' time for {day.isoformat()}")
                return None
            times[prayer] = calendar.combine(day, time_obj)

        one_day = datetime.timedelta(days=1)

        yesterday_isha = None
        isha_obj = parse_time_internal((yesterday or {}).get(Prayer.ISHA.api_key))
        if isha_obj:
            yesterday_isha = calendar.combine(day - one_day, isha_obj)

        tomorrow_times = {}
        for prayer in TOMORROW_ANCHORS:
            time_obj = parse_time_internal((tomorrow or {}).get(prayer.api_key))
            if not time_obj:
                break
            tomorrow_times[prayer] = calendar.combine(day + one_day, time_obj)

        return cls(date=day, times=times, yesterday_isha=yesterday_isha, tomorrow=tomorrow_times)

    def _anchors(self) -> List[Tuple[Prayer, datetime.datetime]]:
        anchors = []
        if self.yesterday_isha:
            anchors.append((Prayer.ISHA, self.yesterday_isha))
        anchors.extend((prayer, self.times[prayer]) for prayer in Prayer)
        for prayer in TOMORROW_ANCHORS:
            if prayer not in self.tomorrow:
                break
            anchors.append((prayer, self.tomorrow[prayer]))
        return anchors

    def windows(self) -> List[PrayerTime]:
        """Every closed window the day's data can describe, in order."""
        anchors = self._anchors()
        return [
            PrayerTime(type=prayer, start=start, end=anchors[index + 1][1])
            for index, (prayer, start) in enumerate(anchors[:-1])
        ]

    def current(self, at: datetime.datetime) -> Optional[PrayerTime]:
        for window in self.windows():
            if window.contains(at):
                return window
        return None

    def next(self, at: datetime.datetime, sunrise_after_isha: bool = False) -> Optional[PrayerTime]:
        """
        The window that follows the current one. After Isha this is Fajr, or
        Sunrise when `sunrise_after_isha` is set.

        Only its adhan has to be known: when the adhan closing it is missing,
        the returned window has no end.
        """
        anchors = self._anchors()
        for index, (prayer, start) in enumerate(anchors[:-1]):
            if not start <= at < anchors[index + 1][1]:
                continue
            following = index + 1
            if sunrise_after_isha and prayer == Prayer.ISHA:
                following += 1
            if following >= len(anchors):
                return None
            next_type, next_start = anchors[following]
            next_end = anchors[following + 1][1] if following + 1 < len(anchors) else None
            return PrayerTime(type=next_type, start=next_start, end=next_end)
        return None
