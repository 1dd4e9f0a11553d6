"""Request and booking context for log records.

Assignment and intake log through a request-aware logger. Every record
produced while serving one call carries the request ID, and, inside a
``booking_scope``, the booking and cleaner being worked on.

Usage:
    from cleaning_booking.logging_context import booking_scope, get_request_logger

    logger = get_request_logger(__name__)
    with booking_scope(booking_id=15, worker_id=3):
        logger.info("Assigning cleaner")  # record.booking_id == 15, record.worker_id == 3
"""

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

_request_id: ContextVar[str] = ContextVar("request_id", default="NO_REQUEST_ID")
_booking_id: ContextVar[Optional[int]] = ContextVar("booking_id", default=None)
_worker_id: ContextVar[Optional[int]] = ContextVar("worker_id", default=None)


def set_request_id(request_id: str) -> None:
    _request_id.set(request_id)


def new_request_id() -> str:
    """Generate, set and return a fresh ``REQ-xxxxxxxx`` ID."""
    request_id = f"REQ-{uuid.uuid4().hex[:8]}"
    _request_id.set(request_id)
    return request_id


def get_request_id() -> str:
    return _request_id.get()


@contextmanager
def booking_scope(
    booking_id: Optional[int] = None, worker_id: Optional[int] = None
) -> Iterator[None]:
    """Tag records logged inside the block with a booking and/or cleaner.

    IDs left as None keep whatever an enclosing scope set. The previous
    values are restored on exit.
    """
    tokens = []
    if booking_id is not None:
        tokens.append((_booking_id, _booking_id.set(booking_id)))
    if worker_id is not None:
        tokens.append((_worker_id, _worker_id.set(worker_id)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


class BookingContextFilter(logging.Filter):
    """Adds request_id, booking_id and worker_id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()  # type: ignore[attr-defined]
        record.booking_id = _booking_id.get()  # type: ignore[attr-defined]
        record.worker_id = _worker_id.get()  # type: ignore[attr-defined]
        return True


def get_request_logger(name: str) -> logging.Logger:
    """Return a logger with the BookingContextFilter attached.

    Formatters can then use ``%(request_id)s``, ``%(booking_id)s`` and
    ``%(worker_id)s``.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, BookingContextFilter) for f in logger.filters):
        logger.addFilter(BookingContextFilter())
    return logger
