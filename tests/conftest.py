"""Shared test fixtures and helpers."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from cleaning_booking.config import SchedulingConfig
from cleaning_booking.scheduling.coordinator import AssignmentCoordinator
from cleaning_booking.schemas.booking_schema import (
    Booking,
    BookingStatus,
    SchedulingWindow,
    Worker,
    WorkerStatus,
)
from cleaning_booking.seed import seed_store
from cleaning_booking.store import InMemoryStore

BUSINESS_TZ = timezone(timedelta(hours=7))

# 08:00 on 2025-03-10 in the business timezone.
NOW = datetime(2025, 3, 10, 1, 0, tzinfo=timezone.utc)


@pytest.fixture
def scheduling_config():
    return SchedulingConfig(
        buffer_minutes=30,
        advance_days=7,
        work_start_hour=7,
        work_end_hour=19,
        utc_offset_hours=7,
        cancel_deadline_hours=2,
    )


@pytest.fixture
def store():
    return seed_store(InMemoryStore())


@pytest.fixture
def coordinator(store, scheduling_config):
    return AssignmentCoordinator(store, scheduling_config)


def local(day: int, hour: int, minute: int = 0) -> datetime:
    """Instant at a civil time in March 2025, business timezone."""
    return datetime(2025, 3, day, hour, minute, tzinfo=BUSINESS_TZ)


def window(start: datetime, minutes: int = 120) -> SchedulingWindow:
    return SchedulingWindow(start=start, end=start + timedelta(minutes=minutes))


def make_booking(
    booking_id: int,
    start: datetime,
    minutes: int = 120,
    cleaner_id: Optional[int] = None,
    status: BookingStatus = BookingStatus.CONFIRMED,
) -> Booking:
    """Helper to create a Booking with sensible defaults."""
    return Booking(
        id=booking_id,
        customer_id=1,
        service_id=1,
        cleaner_id=cleaner_id,
        status=status,
        start_time=start,
        end_time=start + timedelta(minutes=minutes),
        location="12 Le Loi",
        total_price=400000,
    )


def make_worker(worker_id: int, status: WorkerStatus = WorkerStatus.ACTIVE) -> Worker:
    return Worker(id=worker_id, name=f"Cleaner {worker_id}", phone=f"09000000{worker_id:02d}", status=status)


def add_booking(
    store: InMemoryStore,
    start: datetime,
    minutes: int = 120,
    cleaner_id: Optional[int] = None,
    status: BookingStatus = BookingStatus.PENDING,
) -> Booking:
    """Insert a booking straight into the store, bypassing intake."""
    return store.create_booking(
        customer_id=1,
        service_id=1,
        cleaner_id=cleaner_id,
        status=status,
        start_time=start,
        end_time=start + timedelta(minutes=minutes),
        location="12 Le Loi",
        total_price=400000,
    )
