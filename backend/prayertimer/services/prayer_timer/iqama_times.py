# prayertimer/services/prayer_timer/iqama_times.py

import datetime
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from ...utils.time_utils import format_time_internal, parse_time_internal
from .calendar_context import CalendarContext
from .exceptions import InvalidIqamaTimeError
from .models import Prayer, PrayerTime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IqamaTime:
    """
    When congregation starts: either a fixed local wall time, or a number of
    minutes after the adhan.
    """
    fixed_time: Optional[datetime.time] = None
    minutes_after_adhan: Optional[int] = None

    @classmethod
    def parse(cls, value: Union[str, int, None]) -> Optional["IqamaTime"]:
        """Accepts "13:30" for a fixed time, or an integer (or "15") for minutes after adhan."""
        if value is None or value == "":
            return None
        if isinstance(value, bool):
            raise InvalidIqamaTimeError(f"Invalid iqama setting: {value!r}")
        if isinstance(value, int):
            return cls(minutes_after_adhan=value)
        text = str(value).strip()
        if text.lstrip("-").isdigit():
            return cls(minutes_after_adhan=int(text))
        fixed_time = parse_time_internal(text)
        if not fixed_time:
            raise InvalidIqamaTimeError(f"Invalid iqama setting: {value!r}")
        return cls(fixed_time=fixed_time)

    def resolve(self, prayer_time: PrayerTime, calendar: CalendarContext) -> datetime.datetime:
        adhan = prayer_time.start
        if self.minutes_after_adhan is not None:
            return calendar.add_minutes(adhan, max(self.minutes_after_adhan, 0))

        iqama = calendar.combine(calendar.local_date(adhan), self.fixed_time)
        # Business Logic: Iqama can never precede the adhan of its own prayer.
        if iqama < adhan:
            logger.debug(
                f"Iqama for {prayer_time.type.value} ({format_time_internal(self.fixed_time)}) "
                f"is before adhan; using adhan time instead."
            )
            return adhan
        return iqama

    def to_value(self) -> Union[str, int]:
        if self.minutes_after_adhan is not None:
            return self.minutes_after_adhan
        return format_time_internal(self.fixed_time)


class IqamaTimes:
    """Iqama settings for each prayer, with a separate entry for Friday's Jumuah."""

    KEYS = ("fajr", "dhuhr", "asr", "maghrib", "isha", "jumuah")

    def __init__(
        self,
        fajr: Optional[IqamaTime] = None,
        dhuhr: Optional[IqamaTime] = None,
        asr: Optional[IqamaTime] = None,
        maghrib: Optional[IqamaTime] = None,
        isha: Optional[IqamaTime] = None,
        jumuah: Optional[IqamaTime] = None,
    ):
        self.fajr = fajr
        self.dhuhr = dhuhr
        self.asr = asr
        self.maghrib = maghrib
        self.isha = isha
        self.jumuah = jumuah

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "IqamaTimes":
        data = data or {}
        return cls(**{key: IqamaTime.parse(data.get(key)) for key in cls.KEYS})

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for key in self.KEYS:
            entry = getattr(self, key)
            if entry is not None:
                result[key] = entry.to_value()
        return result

    def entry_for(self, prayer_time: PrayerTime, calendar: CalendarContext) -> Optional[IqamaTime]:
        if prayer_time.type == Prayer.SUNRISE:
            return None
        if prayer_time.type == Prayer.DHUHR and calendar.is_jumuah(prayer_time.start) and self.jumuah:
            return self.jumuah
        return getattr(self, prayer_time.type.value)

    def lookup(self, prayer_time: PrayerTime, calendar: CalendarContext) -> Optional[datetime.datetime]:
        """The congregation start for the given prayer window, or None if none applies."""
        entry = self.entry_for(prayer_time, calendar)
        if entry is None:
            return None
        return entry.resolve(prayer_time, calendar)

    def __eq__(self, other):
        if not isinstance(other, IqamaTimes):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"IqamaTimes({self.to_dict()!r})"
