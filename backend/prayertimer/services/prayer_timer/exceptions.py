# prayertimer/services/prayer_timer/exceptions.py

class PrayerTimerError(Exception):
    """Base class for prayer timer errors."""


class InvalidTimeZoneError(PrayerTimerError):
    """Raised when a time zone name cannot be resolved."""


class InvalidIqamaTimeError(PrayerTimerError):
    """Raised when a stored iqama setting is neither a wall time nor a minute offset."""
