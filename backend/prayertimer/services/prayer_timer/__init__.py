# prayertimer/services/prayer_timer/__init__.py

from .calendar_context import CalendarContext
from .exceptions import InvalidIqamaTimeError, InvalidTimeZoneError, PrayerTimerError
from .iqama_times import IqamaTime, IqamaTimes
from .models import Prayer, PrayerTime, PrayerTimer, TimerType
from .prayer_day import PrayerDay
from .preferences import PreAdhanMinutes, Preferences
from .timer_resolver import resolve_timer, resolve_timer_for_day, resolve_timer_for_preferences

__all__ = [
    "CalendarContext",
    "InvalidIqamaTimeError",
    "InvalidTimeZoneError",
    "IqamaTime",
    "IqamaTimes",
    "PreAdhanMinutes",
    "Prayer",
    "PrayerDay",
    "PrayerTime",
    "PrayerTimer",
    "PrayerTimerError",
    "Preferences",
    "TimerType",
    "resolve_timer",
    "resolve_timer_for_day",
    "resolve_timer_for_preferences",
]
