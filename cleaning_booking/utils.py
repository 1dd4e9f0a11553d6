"""Shared utilities used across the booking core."""

from datetime import datetime, timedelta, timezone


def business_timezone(utc_offset_hours: int) -> timezone:
    """Return the fixed-offset civil timezone the business operates in.

    Examples:
        >>> business_timezone(7)
        datetime.timezone(datetime.timedelta(seconds=25200))
    """
    return timezone(timedelta(hours=utc_offset_hours))


def ensure_aware(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes pass through unchanged."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_real_number(value: object) -> bool:
    """True for ints and floats, False for bools and everything else."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
