# prayertimer/routes/timer_routes.py
from typing import Dict, Any

from flask_smorest import Blueprint, abort
from prometheus_client import generate_latest

from ..extensions import limiter
from ..schemas import PrayerTimerRequestSchema, PrayerTimerResponseSchema
from ..services.prayer_timer import InvalidTimeZoneError
from ..services.prayer_timer_service import get_prayer_timer_from_service

timer_bp = Blueprint('Timer', __name__, url_prefix='/api', description="Prayer countdown, iqama and stopwatch timers.")


@timer_bp.route('/metrics')
def metrics():
    return generate_latest(), 200, {'Content-Type': 'text/plain; version=0.0.4; charset=utf-8'}


@timer_bp.route('/prayer-timer', methods=['POST'])
@limiter.limit("120 per minute")
@timer_bp.arguments(PrayerTimerRequestSchema)
@timer_bp.response(200, PrayerTimerResponseSchema)
def prayer_timer(args: Dict[str, Any]) -> Dict[str, Any]:
    """
    Resolve the timer to display for the given day's prayer timings.

    A null `timer` means there is nothing to display for that instant
    (the timings do not cover it); clients should not retry.
    """
    preference_overrides = dict(args.get('preferences') or {})
    if args.get('timeZone'):
        preference_overrides['timeZone'] = args['timeZone']

    try:
        timer, preferences = get_prayer_timer_from_service(
            args['timings'],
            preference_overrides=preference_overrides,
            yesterday_timings=args.get('yesterdayTimings'),
            tomorrow_timings=args.get('tomorrowTimings'),
            at=args.get('date'),
        )
    except InvalidTimeZoneError as e:
        abort(422, message=str(e))

    if not timer:
        return {"timer": None, "timeZone": preferences.last_time_zone, "message": "No prayer timer available for this time."}

    return {"timer": timer, "timeZone": preferences.last_time_zone, "message": "Prayer timer resolved."}
