# prayertimer/services/prayer_timer/timer_resolver.py
"""
Resolves which timer a prayer-times screen shows at a given instant.

Three modes are mutually exclusive:
- stopwatch: elapsed time since the current prayer's adhan, for the first
  `stopwatch_minutes` of the window.
- iqama: countdown from the current adhan until congregation starts.
- countdown: time left until the next adhan (the default).

Stopwatch wins over iqama, which wins over countdown. On Fridays the Jumuah
khutba and iqama then override that selection for Dhuhr.
"""

import datetime
from typing import Optional

from ..helpers.constants import TIMER_END_BUFFER_SECONDS, TIMER_START_BUFFER_SECONDS
from .calendar_context import CalendarContext
from .iqama_times import IqamaTimes
from .models import Prayer, PrayerTime, PrayerTimer, TimerType
from .prayer_day import PrayerDay
from .preferences import PreAdhanMinutes, Preferences


def is_stopwatch_timer(start: datetime.datetime, at: datetime.datetime, minutes: int, calendar: CalendarContext) -> bool:
    """True if `at` is within `minutes` after `start`, allowing for the tick buffers."""
    if minutes <= 0:
        return False
    lower = calendar.add_seconds(start, -TIMER_START_BUFFER_SECONDS)
    upper = calendar.add_seconds(calendar.add_minutes(start, minutes), -TIMER_END_BUFFER_SECONDS)
    return lower <= at < upper


def is_iqama_timer(start: datetime.datetime, at: datetime.datetime, iqama_time: datetime.datetime, calendar: CalendarContext) -> bool:
    """True if `at` is between the adhan and the iqama, allowing for the tick buffers."""
    lower = calendar.add_seconds(start, -TIMER_START_BUFFER_SECONDS)
    upper = calendar.add_seconds(iqama_time, -TIMER_END_BUFFER_SECONDS)
    return lower <= at < upper


def resolve_timer(
    date: datetime.datetime,
    current_prayer: PrayerTime,
    next_prayer: PrayerTime,
    iqama_times: IqamaTimes,
    is_iqama_timer_enabled: bool,
    stopwatch_minutes: int,
    pre_adhan_minutes: int,
    calendar: CalendarContext,
) -> PrayerTimer:
    iqama_time = None
    if is_iqama_timer_enabled:
        current_iqama = iqama_times.lookup(current_prayer, calendar)
        if current_iqama and is_iqama_timer(current_prayer.start, date, current_iqama, calendar):
            iqama_time = current_iqama

    stopwatch = is_stopwatch_timer(current_prayer.start, date, stopwatch_minutes, calendar)

    if stopwatch:
        timer_type, countdown_date = TimerType.STOPWATCH, current_prayer.start
    elif iqama_time:
        timer_type, countdown_date = TimerType.IQAMA, iqama_time
    else:
        timer_type, countdown_date = TimerType.COUNTDOWN, current_prayer.end

    prayer = next_prayer.type if timer_type == TimerType.COUNTDOWN else current_prayer.type
    localize_at: Optional[datetime.datetime] = date
    progress_remaining = 1 - current_prayer.progress(date)
    danger_threshold = current_prayer.danger_threshold(pre_adhan_minutes)

    is_friday = calendar.is_jumuah(date)
    if is_friday:
        khutba_iqama = iqama_times.lookup(next_prayer, calendar) if next_prayer.type == Prayer.DHUHR else None
        if khutba_iqama:
            timer_type, countdown_date, prayer = TimerType.IQAMA, khutba_iqama, next_prayer.type
        elif current_prayer.type == Prayer.DHUHR:
            if stopwatch:
                # Mid-khutba: show elapsed time without a "starts at" anchor.
                localize_at = None
            else:
                khutba_iqama = iqama_times.lookup(current_prayer, calendar)
                if khutba_iqama and is_stopwatch_timer(khutba_iqama, date, stopwatch_minutes, calendar):
                    timer_type, countdown_date, prayer = TimerType.STOPWATCH, khutba_iqama, current_prayer.type

    return PrayerTimer(
        date=date,
        type=prayer,
        timer_type=timer_type,
        countdown_date=countdown_date,
        time_range=(min(date, countdown_date), max(date, countdown_date)),
        time_remaining=countdown_date - date,
        progress_remaining=progress_remaining,
        danger_threshold=danger_threshold,
        is_danger_threshold=progress_remaining <= danger_threshold,
        is_jumuah=is_friday and prayer == Prayer.DHUHR,
        localize_at=localize_at,
    )


def resolve_timer_for_day(
    date: datetime.datetime,
    prayer_day: PrayerDay,
    iqama_times: IqamaTimes,
    is_iqama_timer_enabled: bool,
    stopwatch_minutes: int,
    pre_adhan_minutes: PreAdhanMinutes,
    sunrise_after_isha: bool,
    calendar: CalendarContext,
) -> Optional[PrayerTimer]:
    """Returns None when the day has no current or next prayer window for `date`."""
    current_prayer = prayer_day.current(date)
    next_prayer = prayer_day.next(date, sunrise_after_isha=sunrise_after_isha)
    if not current_prayer or not next_prayer:
        return None

    return resolve_timer(
        date=date,
        current_prayer=current_prayer,
        next_prayer=next_prayer,
        iqama_times=iqama_times,
        is_iqama_timer_enabled=is_iqama_timer_enabled,
        stopwatch_minutes=stopwatch_minutes,
        pre_adhan_minutes=pre_adhan_minutes[current_prayer.type],
        calendar=calendar,
    )


def resolve_timer_for_preferences(
    date: datetime.datetime,
    prayer_day: Optional[PrayerDay],
    preferences: Preferences,
) -> Optional[PrayerTimer]:
    if not prayer_day:
        return None

    return resolve_timer_for_day(
        date=date,
        prayer_day=prayer_day,
        iqama_times=preferences.iqama_times,
        is_iqama_timer_enabled=preferences.is_iqama_timer_enabled,
        stopwatch_minutes=preferences.stopwatch_minutes,
        pre_adhan_minutes=preferences.pre_adhan_minutes,
        sunrise_after_isha=preferences.sunrise_after_isha,
        calendar=CalendarContext.from_name(preferences.last_time_zone),
    )
