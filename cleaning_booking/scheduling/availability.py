"""
Buffered overlap checks between scheduling windows.

Two windows conflict when, with ``b`` minutes of buffer,
``a.start - b < other.end`` and ``other.start - b < a.end``.
Only live bookings (anything but CANCELLED) occupy a calendar.
"""

import logging
from datetime import timedelta
from typing import Iterable, Mapping, Optional

from cleaning_booking.schemas.booking_schema import (
    Booking,
    SchedulingWindow,
    Worker,
    WorkerStatus,
)

logger = logging.getLogger(__name__)


def windows_conflict(a: SchedulingWindow, b: SchedulingWindow, buffer_minutes: int) -> bool:
    """True if the two windows come within ``buffer_minutes`` of each other."""
    buffer = timedelta(minutes=buffer_minutes)
    return a.start - buffer < b.end and b.start - buffer < a.end


def has_conflict(
    candidate: SchedulingWindow,
    existing: Iterable[Booking],
    buffer_minutes: int,
    exclude_booking_id: Optional[int] = None,
) -> bool:
    """Check a candidate window against one worker's existing bookings.

    ``exclude_booking_id`` skips the booking being (re)assigned so it never
    conflicts with itself.
    """
    for booking in existing:
        if not booking.is_live or booking.id == exclude_booking_id:
            continue
        if windows_conflict(candidate, booking.window, buffer_minutes):
            logger.debug(
                "Window %s-%s conflicts with booking %s",
                candidate.start.isoformat(), candidate.end.isoformat(), booking.id,
            )
            return True
    return False


def list_available_workers(
    candidate: SchedulingWindow,
    roster: Iterable[Worker],
    bookings_by_worker: Mapping[int, Iterable[Booking]],
    buffer_minutes: int,
    exclude_booking_id: Optional[int] = None,
) -> list[int]:
    """Return IDs of ACTIVE workers free for ``candidate``, in roster order."""
    available: list[int] = []
    for worker in roster:
        if worker.status != WorkerStatus.ACTIVE:
            continue
        if has_conflict(
            candidate,
            bookings_by_worker.get(worker.id, ()),
            buffer_minutes,
            exclude_booking_id=exclude_booking_id,
        ):
            continue
        available.append(worker.id)
    return available
