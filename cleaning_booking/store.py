"""
In-memory booking store.

Stands in for the relational store the core runs against in production.
It offers the two guarantees the scheduling code relies on:

* ``transaction(worker_id)`` serialises work on one worker's calendar,
  the way a row lock on the worker's booking set would.
* ``update_booking(..., expected_status=...)`` is a conditional write that
  only applies if the booking is still in the expected status.

Anything that goes wrong inside the store itself surfaces as StoreError.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from cleaning_booking.schemas.booking_schema import (
    Booking,
    BookingStatus,
    Service,
    Worker,
    WorkerStatus,
)

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Infrastructure failure in the backing store (connectivity, aborted transaction)."""


class InMemoryStore:
    """Thread-safe dictionary-backed store for services, workers and bookings."""

    def __init__(self) -> None:
        self._services: dict[int, Service] = {}
        self._workers: dict[int, Worker] = {}
        self._bookings: dict[int, Booking] = {}
        self._next_booking_id = 1
        self._lock = threading.RLock()
        self._worker_locks: dict[int, threading.Lock] = {}

    # --- Transactions ---

    @contextmanager
    def transaction(self, worker_id: int) -> Iterator[None]:
        """Hold the worker's calendar exclusively for the duration of the block."""
        with self._lock:
            worker_lock = self._worker_locks.setdefault(worker_id, threading.Lock())
        with worker_lock:
            yield

    # --- Services ---

    def add_service(self, service: Service) -> Service:
        with self._lock:
            self._services[service.id] = service
        return service

    def get_service(self, service_id: int) -> Optional[Service]:
        return self._services.get(service_id)

    def update_service_layout(
        self, service_id: int, layout: list[dict[str, Any]]
    ) -> Optional[Service]:
        with self._lock:
            service = self._services.get(service_id)
            if service is None:
                return None
            updated = service.model_copy(update={"layout_config": layout})
            self._services[service_id] = updated
            return updated

    # --- Workers ---

    def add_worker(self, worker: Worker) -> Worker:
        with self._lock:
            self._workers[worker.id] = worker
        return worker

    def get_worker(self, worker_id: int) -> Optional[Worker]:
        return self._workers.get(worker_id)

    def list_workers(self) -> list[Worker]:
        with self._lock:
            return list(self._workers.values())

    def update_worker_status(self, worker_id: int, status: WorkerStatus) -> Optional[Worker]:
        with self._lock:
            worker = self._workers.get(worker_id)
            if worker is None:
                return None
            updated = worker.model_copy(update={"status": status})
            self._workers[worker_id] = updated
            return updated

    # --- Bookings ---

    def create_booking(self, **fields: Any) -> Booking:
        """Insert a booking, assigning the next ID."""
        with self._lock:
            booking = Booking(id=self._next_booking_id, **fields)
            self._bookings[booking.id] = booking
            self._next_booking_id += 1
        logger.info("Booking stored: %s (%s)", booking.id, booking.status.value)
        return booking

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def list_bookings(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def bookings_for_worker(self, worker_id: int) -> list[Booking]:
        with self._lock:
            return [b for b in self._bookings.values() if b.cleaner_id == worker_id]

    def bookings_by_worker(self) -> dict[int, list[Booking]]:
        grouped: dict[int, list[Booking]] = {}
        with self._lock:
            for booking in self._bookings.values():
                if booking.cleaner_id is not None:
                    grouped.setdefault(booking.cleaner_id, []).append(booking)
        return grouped

    def update_booking(
        self,
        booking_id: int,
        expected_status: Optional[BookingStatus] = None,
        **changes: Any,
    ) -> Optional[Booking]:
        """Apply ``changes`` atomically.

        Returns None, leaving the booking untouched, when it does not exist
        or its status no longer matches ``expected_status``.
        """
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None
            if expected_status is not None and booking.status != expected_status:
                logger.info(
                    "Conditional update skipped for booking %s: expected %s, found %s",
                    booking_id, expected_status.value, booking.status.value,
                )
                return None
            changes["updated_at"] = datetime.now(timezone.utc)
            updated = booking.model_copy(update=changes)
            self._bookings[booking_id] = updated
            return updated

    def reset(self) -> None:
        """Clear all records. Used by test fixtures for isolation."""
        with self._lock:
            self._services.clear()
            self._workers.clear()
            self._bookings.clear()
            self._worker_locks.clear()
            self._next_booking_id = 1
