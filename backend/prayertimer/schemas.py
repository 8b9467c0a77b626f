# prayertimer/schemas.py

from marshmallow import Schema, fields, validate, validates, validates_schema, ValidationError

from .services.prayer_timer import CalendarContext, IqamaTime, Prayer, PrayerTimerError
from .utils.time_utils import format_duration

PRE_ADHAN_KEYS = ["default"] + [prayer.value for prayer in Prayer]


def _isoformat(value):
    return value.isoformat() if value else None


class MessageSchema(Schema):
    message = fields.Str(required=True)


class IqamaTimesSchema(Schema):
    """Each entry is a fixed local time ("13:30") or minutes after adhan (15)."""
    fajr = fields.Raw(allow_none=True)
    dhuhr = fields.Raw(allow_none=True)
    asr = fields.Raw(allow_none=True)
    maghrib = fields.Raw(allow_none=True)
    isha = fields.Raw(allow_none=True)
    jumuah = fields.Raw(allow_none=True)

    @validates_schema
    def validate_entries(self, data, **kwargs):
        errors = {}
        for key, value in data.items():
            try:
                IqamaTime.parse(value)
            except PrayerTimerError as e:
                errors[key] = [str(e)]
        if errors:
            raise ValidationError(errors)


class TimerPreferencesSchema(Schema):
    isIqamaTimerEnabled = fields.Bool()
    stopwatchMinutes = fields.Int(validate=validate.Range(min=0))
    preAdhanMinutes = fields.Dict(
        keys=fields.Str(validate=validate.OneOf(PRE_ADHAN_KEYS)),
        values=fields.Int(validate=validate.Range(min=0)),
    )
    sunriseAfterIsha = fields.Bool()
    iqamaTimes = fields.Nested(IqamaTimesSchema)


class TimingsField(fields.Dict):
    def __init__(self, **kwargs):
        super().__init__(keys=fields.Str(), values=fields.Str(), **kwargs)


class PrayerTimerRequestSchema(Schema):
    """Schema for validating a prayer timer request."""
    date = fields.DateTime(load_default=None, allow_none=True)
    timeZone = fields.Str()
    timings = TimingsField(required=True)
    yesterdayTimings = TimingsField(load_default=None, allow_none=True)
    tomorrowTimings = TimingsField(load_default=None, allow_none=True)
    preferences = fields.Nested(TimerPreferencesSchema, load_default=dict)

    @validates("timeZone")
    def validate_time_zone(self, value, **kwargs):
        try:
            CalendarContext.from_name(value)
        except PrayerTimerError as e:
            raise ValidationError(str(e))


class PrayerTimerSchema(Schema):
    """Schema for serializing a resolved prayer timer."""
    date = fields.DateTime(dump_only=True)
    prayer = fields.Function(lambda timer: timer.type.value, dump_only=True)
    timerType = fields.Function(lambda timer: timer.timer_type.value, dump_only=True)
    countdownDate = fields.DateTime(dump_only=True, attribute="countdown_date")
    timeRange = fields.Function(lambda timer: [_isoformat(value) for value in timer.time_range], dump_only=True)
    timeRemaining = fields.Function(lambda timer: timer.time_remaining.total_seconds(), dump_only=True)
    timeRemainingDisplay = fields.Function(lambda timer: format_duration(timer.time_remaining), dump_only=True)
    progressRemaining = fields.Float(dump_only=True, attribute="progress_remaining")
    dangerThreshold = fields.Float(dump_only=True, attribute="danger_threshold")
    isDangerThreshold = fields.Bool(dump_only=True, attribute="is_danger_threshold")
    isJumuah = fields.Bool(dump_only=True, attribute="is_jumuah")
    localizeAt = fields.DateTime(dump_only=True, allow_none=True, attribute="localize_at")


class PrayerTimerResponseSchema(Schema):
    timer = fields.Nested(PrayerTimerSchema, allow_none=True)
    timeZone = fields.Str(required=True)
    message = fields.Str(required=True)
