"""
Booking time admission rules.

A requested date and time are combined in the business's fixed civil
offset and checked in order: parseable, far enough ahead of now, not
beyond the advance-booking horizon, inside working hours. The first
failing rule decides the rejection.

The working-hours rule reads the hour the customer typed, not an hour
derived by converting the instant into some other timezone, so a server
running in UTC still judges "07:30" as 7 o'clock.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from cleaning_booking.config import SchedulingConfig, settings
from cleaning_booking.utils import business_timezone, ensure_aware

logger = logging.getLogger(__name__)

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"


class RejectionReason(str, Enum):
    INVALID_TIME_FORMAT = "InvalidTimeFormat"
    TOO_SOON = "TooSoon"
    TOO_FAR = "TooFar"
    OUTSIDE_HOURS = "OutsideHours"


@dataclass(frozen=True)
class WindowDecision:
    """Outcome of an admission check. ``start_time`` is set only when accepted."""

    accepted: bool
    start_time: Optional[datetime] = None
    reason: Optional[RejectionReason] = None
    message: str = ""


def compose_start(
    booking_date: str, booking_time: str, utc_offset_hours: int
) -> Optional[datetime]:
    """Combine ``YYYY-MM-DD`` and ``HH:MM`` into an aware instant, or None if malformed."""
    try:
        naive = datetime.strptime(f"{booking_date} {booking_time}", DATE_TIME_FORMAT)
    except (TypeError, ValueError):
        return None
    return naive.replace(tzinfo=business_timezone(utc_offset_hours))


def submitted_hour(booking_time: str) -> int:
    """Hour component exactly as the customer entered it ("07:41" -> 7)."""
    return int(booking_time.split(":", 1)[0])


def _reject(reason: RejectionReason, message: str) -> WindowDecision:
    logger.debug("Booking time rejected: %s", reason.value)
    return WindowDecision(accepted=False, reason=reason, message=message)


def check_window(
    booking_date: str,
    booking_time: str,
    now: datetime,
    config: Optional[SchedulingConfig] = None,
) -> WindowDecision:
    """
    Decide whether a requested booking time is admissible.

    Args:
        booking_date: Civil date chosen by the customer, ``YYYY-MM-DD``.
        booking_time: Civil time chosen by the customer, ``HH:MM``.
        now: Current instant. Naive values are treated as UTC.
        config: Scheduling rules; defaults to the loaded settings.

    Returns:
        A WindowDecision carrying the canonical start instant on success.
    """
    config = config or settings.scheduling

    start = compose_start(booking_date, booking_time, config.utc_offset_hours)
    if start is None:
        return _reject(
            RejectionReason.INVALID_TIME_FORMAT, "Invalid booking date or time format."
        )

    now = ensure_aware(now)

    if start < now + timedelta(minutes=config.buffer_minutes):
        return _reject(
            RejectionReason.TOO_SOON,
            f"Bookings must be made at least {config.buffer_minutes} minutes in advance.",
        )

    if start > now + timedelta(days=config.advance_days):
        return _reject(
            RejectionReason.TOO_FAR,
            f"Bookings can only be made within the next {config.advance_days} days.",
        )

    hour = submitted_hour(booking_time)
    if hour < config.work_start_hour or hour >= config.work_end_hour:
        return _reject(
            RejectionReason.OUTSIDE_HOURS,
            f"Service is available from {config.work_start_hour}:00 "
            f"to {config.work_end_hour}:00.",
        )

    return WindowDecision(accepted=True, start_time=start, message="Booking time accepted.")
