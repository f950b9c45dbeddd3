"""Epoch-time and value formatters for the forecast report.

All conversions are done in UTC with fixed English names so output does not
depend on the process locale or timezone.
"""

import math
from datetime import UTC, datetime

UNKNOWN = "UNKNOWN"

DAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
DAY_ABBREVS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_ABBREVS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _to_utc(epoch: object) -> datetime | None:
    if isinstance(epoch, bool) or not isinstance(epoch, (int, float)):
        return None
    try:
        if not math.isfinite(epoch):
            return None
        return datetime.fromtimestamp(epoch, UTC)
    except (OverflowError, OSError, ValueError):
        return None


def to_date_time(epoch: object) -> str:
    """RFC 1123 date-time, e.g. 'Thu, 01 Jan 1970 00:00:00 GMT'."""
    dt = _to_utc(epoch)
    if dt is None:
        return UNKNOWN
    return (
        f"{DAY_ABBREVS[dt.weekday()]}, {dt.day:02d} {MONTH_ABBREVS[dt.month - 1]} "
        f"{dt.year:04d} {dt:%H:%M:%S} GMT"
    )


def to_time_only(epoch: object) -> str:
    """24-hour 'HH:MM'."""
    dt = _to_utc(epoch)
    if dt is None:
        return UNKNOWN
    return f"{dt:%H:%M}"


def to_day_name(epoch: object) -> str:
    dt = _to_utc(epoch)
    if dt is None:
        return UNKNOWN
    return DAY_NAMES[dt.weekday()]


def format_value(value: object, suffix: str = "") -> str:
    if value is None:
        return UNKNOWN
    return f"{value}{suffix}"


def format_temperature(value: float | None) -> str:
    if value is None:
        return UNKNOWN
    return f"{value:.1f}°C"


def format_visibility(value: float | None) -> str:
    if value is None:
        return UNKNOWN
    return f"{round(value):,} metres"
