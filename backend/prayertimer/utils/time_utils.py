import datetime
from typing import Optional


def parse_time_internal(time_str: Optional[str]) -> Optional[datetime.time]:
    """
    Parses a time string (HH:MM or HH:MM:SS) into a datetime.time object.
    Trailing zone labels such as "05:12 (PKT)" are ignored.
    Returns None if parsing fails.
    """
    if not time_str or time_str.lower() == "n/a":
        return None
    value = time_str.strip().split(" ")[0]
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    return None


def format_time_internal(time_obj: Optional[datetime.time]) -> str:
    """
    Formats a datetime.time object into a HH:MM string.
    Returns "N/A" if time_obj is None.
    """
    if not time_obj: return "N/A"
    return time_obj.strftime("%H:%M")


def format_duration(delta: datetime.timedelta) -> str:
    """
    Formats a signed duration as [-]H:MM:SS, e.g. a stopwatch reads "-0:05:00".
    """
    total_seconds = int(delta.total_seconds())
    sign = "-" if total_seconds < 0 else ""
    hours, remainder = divmod(abs(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"
