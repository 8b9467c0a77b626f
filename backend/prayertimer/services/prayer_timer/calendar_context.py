# prayertimer/services/prayer_timer/calendar_context.py

import datetime
import zoneinfo
from zoneinfo import ZoneInfo

from ..helpers.constants import JUMUAH_WEEKDAY
from .exceptions import InvalidTimeZoneError


class CalendarContext:
    """
    Calendar arithmetic for a resolved time zone.
    Keeps zoneinfo lookups out of the timer logic so tests can pass any zone.
    """

    def __init__(self, time_zone: datetime.tzinfo):
        self.time_zone = time_zone

    @classmethod
    def from_name(cls, name: str) -> "CalendarContext":
        try:
            return cls(ZoneInfo(name))
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
            raise InvalidTimeZoneError(f"Unknown time zone '{name}'") from e

    @property
    def name(self) -> str:
        return getattr(self.time_zone, "key", str(self.time_zone))

    def localize(self, instant: datetime.datetime) -> datetime.datetime:
        return instant.astimezone(self.time_zone)

    def local_date(self, instant: datetime.datetime) -> datetime.date:
        return self.localize(instant).date()

    def combine(self, day: datetime.date, wall_time: datetime.time) -> datetime.datetime:
        """Turns a local wall-clock time on the given day into an aware instant."""
        return datetime.datetime.combine(day, wall_time, tzinfo=self.time_zone)

    def is_given_weekday(self, instant: datetime.datetime, weekday: int) -> bool:
        return self.localize(instant).weekday() == weekday

    def is_jumuah(self, instant: datetime.datetime) -> bool:
        return self.is_given_weekday(instant, JUMUAH_WEEKDAY)

    def add_minutes(self, instant: datetime.datetime, minutes: int) -> datetime.datetime:
        return instant + datetime.timedelta(minutes=minutes)

    def add_seconds(self, instant: datetime.datetime, seconds: int) -> datetime.datetime:
        return instant + datetime.timedelta(seconds=seconds)

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(self.time_zone)
