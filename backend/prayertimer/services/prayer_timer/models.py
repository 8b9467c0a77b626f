# prayertimer/services/prayer_timer/models.py

import datetime
import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from ..helpers.constants import DANGER_THRESHOLD_FLOOR


class Prayer(str, enum.Enum):
    """The daily prayer occasions, in the order they occur."""
    FAJR = "fajr"
    SUNRISE = "sunrise"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHA = "isha"

    @property
    def api_key(self) -> str:
        return self.value.capitalize()


class TimerType(str, enum.Enum):
    COUNTDOWN = "countdown"
    STOPWATCH = "stopwatch"
    IQAMA = "iqama"


@dataclass(frozen=True)
class PrayerTime:
    """
    A prayer window: the prayer is "current" from its adhan (start) until the
    next adhan (end), as a half-open interval [start, end).
    An upcoming window may have no end when its closing adhan is not known;
    only closed windows are ever current.
    """
    type: Prayer
    start: datetime.datetime
    end: Optional[datetime.datetime]

    @property
    def duration(self) -> datetime.timedelta:
        return self.end - self.start

    def contains(self, at: datetime.datetime) -> bool:
        return self.start <= at and (self.end is None or at < self.end)

    def progress(self, at: datetime.datetime) -> float:
        """Fraction of the window elapsed at the given instant, clamped to [0, 1]."""
        total = self.duration.total_seconds()
        if total <= 0:
            return 1.0 if at >= self.start else 0.0
        elapsed = (at - self.start).total_seconds() / total
        return min(max(elapsed, 0.0), 1.0)

    def danger_threshold(self, minutes: int) -> float:
        """
        Fraction of the window remaining at which the pre-adhan warning fires.
        Floored so short windows still trigger, capped at the whole window.
        """
        total = self.duration.total_seconds()
        if total <= 0:
            return 1.0
        threshold = 1 - (total - minutes * 60) / total
        return min(max(threshold, DANGER_THRESHOLD_FLOOR), 1.0)


@dataclass(frozen=True)
class PrayerTimer:
    """The timer a prayer-times screen should display at `date`."""
    date: datetime.datetime
    type: Prayer
    timer_type: TimerType
    countdown_date: datetime.datetime
    time_range: Tuple[datetime.datetime, datetime.datetime]
    time_remaining: datetime.timedelta
    progress_remaining: float
    danger_threshold: float
    is_danger_threshold: bool
    is_jumuah: bool
    localize_at: Optional[datetime.datetime]
