# prayertimer/services/prayer_timer/preferences.py

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from .iqama_times import IqamaTimes
from .models import Prayer


class PreAdhanMinutes:
    """Minutes before the next adhan that count as running low, per current prayer."""

    def __init__(self, default: int = 0, overrides: Optional[Dict[Prayer, int]] = None):
        self.default = default
        self.overrides = dict(overrides or {})

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]], default: int = 0) -> "PreAdhanMinutes":
        data = dict(data or {})
        default = int(data.pop("default", default))
        overrides = {Prayer(key): int(value) for key, value in data.items() if value is not None}
        return cls(default=default, overrides=overrides)

    def __getitem__(self, prayer: Prayer) -> int:
        return self.overrides.get(prayer, self.default)

    def __eq__(self, other):
        if not isinstance(other, PreAdhanMinutes):
            return NotImplemented
        return self.default == other.default and self.overrides == other.overrides

    def __repr__(self):
        return f"PreAdhanMinutes(default={self.default}, overrides={self.overrides})"


@dataclass(frozen=True)
class Preferences:
    """Read-only snapshot of the settings one timer resolution consumes."""
    iqama_times: IqamaTimes = field(default_factory=IqamaTimes)
    is_iqama_timer_enabled: bool = False
    stopwatch_minutes: int = 0
    pre_adhan_minutes: PreAdhanMinutes = field(default_factory=PreAdhanMinutes)
    sunrise_after_isha: bool = False
    last_time_zone: str = "UTC"

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Preferences":
        """Application-wide defaults, as set in the Flask config."""
        return cls(
            is_iqama_timer_enabled=bool(config.get('DEFAULT_IQAMA_TIMER_ENABLED', False)),
            stopwatch_minutes=int(config.get('DEFAULT_STOPWATCH_MINUTES', 0)),
            pre_adhan_minutes=PreAdhanMinutes(default=int(config.get('DEFAULT_PRE_ADHAN_MINUTES', 0))),
            sunrise_after_isha=bool(config.get('DEFAULT_SUNRISE_AFTER_ISHA', False)),
            last_time_zone=config.get('DEFAULT_TIME_ZONE', "UTC"),
        )

    def merged_with(self, overrides: Optional[Mapping[str, Any]]) -> "Preferences":
        """
        Returns a copy with the given (already validated) fields replaced.
        Keys follow the request payload: isIqamaTimerEnabled, stopwatchMinutes,
        preAdhanMinutes, sunriseAfterIsha, iqamaTimes, timeZone.
        """
        if not overrides:
            return self
        changes = {}
        if overrides.get('isIqamaTimerEnabled') is not None:
            changes['is_iqama_timer_enabled'] = overrides['isIqamaTimerEnabled']
        if overrides.get('stopwatchMinutes') is not None:
            changes['stopwatch_minutes'] = overrides['stopwatchMinutes']
        if overrides.get('preAdhanMinutes') is not None:
            changes['pre_adhan_minutes'] = PreAdhanMinutes.from_dict(
                overrides['preAdhanMinutes'], default=self.pre_adhan_minutes.default
            )
        if overrides.get('sunriseAfterIsha') is not None:
            changes['sunrise_after_isha'] = overrides['sunriseAfterIsha']
        if overrides.get('iqamaTimes') is not None:
            changes['iqama_times'] = IqamaTimes.from_dict(overrides['iqamaTimes'])
        if overrides.get('timeZone'):
            changes['last_time_zone'] = overrides['timeZone']
        return replace(self, **changes)
