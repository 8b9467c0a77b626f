from typing import Dict, Any, Optional, Tuple
import datetime
from flask import current_app

from ..metrics import TIMER_RESOLUTIONS_TOTAL, TIMER_UNAVAILABLE_TOTAL
from ..utils.time_utils import format_duration
from .prayer_timer import CalendarContext, PrayerDay, PrayerTimer, Preferences, resolve_timer_for_preferences


def get_default_preferences() -> Preferences:
    return Preferences.from_config(current_app.config)


def get_prayer_timer_from_service(
    timings: Dict[str, str],
    preference_overrides: Optional[Dict[str, Any]] = None,
    yesterday_timings: Optional[Dict[str, str]] = None,
    tomorrow_timings: Optional[Dict[str, str]] = None,
    at: Optional[datetime.datetime] = None,
) -> Tuple[Optional[PrayerTimer], Preferences]:
    """
    Resolves the prayer timer for the given day's timings.

    Request preferences are layered over the application defaults. The day is
    the local date of `at` (now, when omitted) in the resolved time zone.

    Returns:
        The timer, or None when the timings cannot describe the current and
        next prayer, together with the preferences that were applied.

    Raises:
        InvalidTimeZoneError: if the requested time zone is unknown.
    """
    preferences = get_default_preferences().merged_with(preference_overrides)
    calendar = CalendarContext.from_name(preferences.last_time_zone)

    if not at:
        at = calendar.now()
    elif at.tzinfo is None:
        # Naive datetimes are wall-clock times in the user's time zone.
        at = at.replace(tzinfo=calendar.time_zone)
    else:
        at = calendar.localize(at)
    today_date = calendar.local_date(at)

    prayer_day = PrayerDay.from_timings(
        today_date,
        timings,
        calendar,
        yesterday=yesterday_timings,
        tomorrow=tomorrow_timings,
    )
    timer = resolve_timer_for_preferences(at, prayer_day, preferences)

    if not timer:
        TIMER_UNAVAILABLE_TOTAL.inc()
        current_app.logger.info(f"Timer Service: No current or next prayer window for {at.isoformat()} ({calendar.name}).")
        return None, preferences

    TIMER_RESOLUTIONS_TOTAL.labels(timer_type=timer.timer_type.value).inc()
    current_app.logger.debug(
        f"Timer Service: {timer.timer_type.value} for {timer.type.value} at {at.isoformat()}, "
        f"remaining {format_duration(timer.time_remaining)}"
    )
    return timer, preferences
