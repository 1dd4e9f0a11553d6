"""
Cleaner assignment and booking status changes.

Assignment rechecks the worker's calendar at the moment of assignment,
inside a store transaction scoped to that worker, and commits with a
write conditioned on the booking still being PENDING. Results from an
earlier available-workers query are never trusted for the decision.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional, TypedDict, Union

from cleaning_booking.config import SchedulingConfig, settings
from cleaning_booking.logging_context import booking_scope, get_request_logger
from cleaning_booking.scheduling.availability import has_conflict, list_available_workers
from cleaning_booking.scheduling.status_machine import (
    BookingStatusMachine,
    InvalidTransitionError,
)
from cleaning_booking.scheduling.window_policy import RejectionReason, check_window
from cleaning_booking.schemas.booking_schema import (
    Booking,
    BookingRequest,
    BookingStatus,
    SchedulingWindow,
    Worker,
    WorkerStatus,
)
from cleaning_booking.utils import ensure_aware

logger = get_request_logger(__name__)


class AssignmentError(str, Enum):
    BOOKING_NOT_FOUND = "BookingNotFound"
    WORKER_NOT_FOUND = "WorkerNotFound"
    WORKER_UNAVAILABLE = "WorkerUnavailable"
    SCHEDULE_CONFLICT = "ScheduleConflict"
    INVALID_STATUS = "InvalidStatus"
    INVALID_TRANSITION = "InvalidTransition"
    WORKER_HAS_FUTURE_BOOKINGS = "WorkerHasFutureBookings"
    SERVICE_NOT_FOUND = "ServiceNotFound"
    TIME_REJECTED = "TimeRejected"


class AssignmentResult(TypedDict, total=False):
    """Result from assign or transition_status."""

    success: bool
    message: str
    error: AssignmentError
    booking: Booking


class AvailableWorkersResult(TypedDict, total=False):
    """Result from available_workers or check_request."""

    success: bool
    message: str
    error: AssignmentError
    reason: RejectionReason
    workers: list[Worker]


class WorkerStatusResult(TypedDict, total=False):
    """Result from change_worker_status."""

    success: bool
    message: str
    error: AssignmentError
    worker: Worker
    blocking_bookings: int


def _fail(error: AssignmentError, message: str) -> dict[str, Any]:
    logger.info("%s: %s", error.value, message)
    return {"success": False, "error": error, "message": message}


def _parse_enum(enum_cls: Any, value: Union[str, Enum]) -> Optional[Any]:
    try:
        return enum_cls(value)
    except ValueError:
        return None


class AssignmentCoordinator:
    """Assigns cleaners to bookings and moves bookings through their lifecycle."""

    def __init__(self, store: Any, config: Optional[SchedulingConfig] = None) -> None:
        self._store = store
        self._config = config or settings.scheduling

    @property
    def buffer_minutes(self) -> int:
        return self._config.buffer_minutes

    def available_workers(self, booking_id: int) -> AvailableWorkersResult:
        """List ACTIVE workers whose calendars leave room for the booking."""
        booking = self._store.get_booking(booking_id)
        if booking is None:
            return _fail(AssignmentError.BOOKING_NOT_FOUND, f"Booking {booking_id} not found.")

        roster = self._store.list_workers()
        free_ids = set(
            list_available_workers(
                booking.window,
                roster,
                self._store.bookings_by_worker(),
                self.buffer_minutes,
                exclude_booking_id=booking.id,
            )
        )
        workers = [worker for worker in roster if worker.id in free_ids]
        return {
            "success": True,
            "workers": workers,
            "message": f"{len(workers)} cleaner(s) available for booking {booking_id}.",
        }

    def check_request(
        self, request: BookingRequest, now: Optional[datetime] = None
    ) -> AvailableWorkersResult:
        """List cleaners free for a booking that has not been made yet.

        The slot must pass the booking window rules first. With
        ``request.worker_id`` set, only that cleaner is considered.
        """
        service = self._store.get_service(request.service_id)
        if service is None or not service.is_active:
            return _fail(
                AssignmentError.SERVICE_NOT_FOUND,
                f"Service {request.service_id} does not exist or is not active.",
            )

        decision = check_window(
            request.booking_date,
            request.booking_time,
            ensure_aware(now or datetime.now(timezone.utc)),
            self._config,
        )
        if not decision.accepted:
            result = _fail(AssignmentError.TIME_REJECTED, decision.message)
            result["reason"] = decision.reason
            return result

        if request.worker_id is None:
            roster = self._store.list_workers()
        else:
            worker = self._store.get_worker(request.worker_id)
            if worker is None:
                return _fail(
                    AssignmentError.WORKER_NOT_FOUND, f"Cleaner {request.worker_id} not found."
                )
            roster = [worker]

        candidate = SchedulingWindow(
            start=decision.start_time,
            end=decision.start_time + timedelta(minutes=service.duration_minutes),
        )
        free_ids = set(
            list_available_workers(
                candidate, roster, self._store.bookings_by_worker(), self.buffer_minutes
            )
        )
        workers = [worker for worker in roster if worker.id in free_ids]
        return {
            "success": True,
            "workers": workers,
            "message": f"{len(workers)} cleaner(s) free at {request.booking_date} {request.booking_time}.",
        }

    def assign(self, booking_id: int, worker_id: int) -> AssignmentResult:
        """Assign ``worker_id`` to a PENDING booking and confirm it."""
        scope = booking_scope(booking_id=booking_id, worker_id=worker_id)
        with scope, self._store.transaction(worker_id):
            worker = self._store.get_worker(worker_id)
            if worker is None:
                return _fail(AssignmentError.WORKER_NOT_FOUND, f"Cleaner {worker_id} not found.")
            if worker.status != WorkerStatus.ACTIVE:
                return _fail(
                    AssignmentError.WORKER_UNAVAILABLE,
                    f"Cleaner {worker.name} is not active ({worker.status.value}).",
                )

            booking = self._store.get_booking(booking_id)
            if booking is None:
                return _fail(AssignmentError.BOOKING_NOT_FOUND, f"Booking {booking_id} not found.")

            try:
                BookingStatusMachine.check(booking.status, BookingStatus.CONFIRMED)
            except InvalidTransitionError as exc:
                return _fail(AssignmentError.INVALID_TRANSITION, str(exc))

            if has_conflict(
                booking.window,
                self._store.bookings_for_worker(worker_id),
                self.buffer_minutes,
                exclude_booking_id=booking.id,
            ):
                return _fail(
                    AssignmentError.SCHEDULE_CONFLICT,
                    f"Cleaner {worker.name} has a conflicting booking.",
                )

            updated = self._store.update_booking(
                booking_id,
                expected_status=BookingStatus.PENDING,
                cleaner_id=worker_id,
                status=BookingStatus.CONFIRMED,
            )
            if updated is None:
                return _fail(
                    AssignmentError.INVALID_TRANSITION,
                    f"Booking {booking_id} changed status before it could be assigned.",
                )
            logger.info("Booking %s assigned to cleaner %s", booking_id, worker_id)

        return {
            "success": True,
            "booking": updated,
            "message": f"Cleaner {worker.name} assigned to booking {booking_id}.",
        }

    def transition_status(
        self, booking_id: int, target: Union[BookingStatus, str]
    ) -> AssignmentResult:
        """Move a booking to ``target`` if the lifecycle allows it."""
        target_status = _parse_enum(BookingStatus, target)
        if target_status is None:
            return _fail(AssignmentError.INVALID_STATUS, f"Unknown booking status: {target!r}.")

        with booking_scope(booking_id=booking_id):
            booking = self._store.get_booking(booking_id)
            if booking is None:
                return _fail(AssignmentError.BOOKING_NOT_FOUND, f"Booking {booking_id} not found.")

            try:
                BookingStatusMachine.check(booking.status, target_status)
            except InvalidTransitionError as exc:
                return _fail(AssignmentError.INVALID_TRANSITION, str(exc))

            updated = self._store.update_booking(
                booking_id, expected_status=booking.status, status=target_status
            )
            if updated is None:
                return _fail(
                    AssignmentError.INVALID_TRANSITION,
                    f"Booking {booking_id} changed status concurrently; reload and retry.",
                )

            logger.info(
                "Booking %s status %s -> %s", booking_id, booking.status.value, target_status.value
            )
            return {
                "success": True,
                "booking": updated,
                "message": f"Booking {booking_id} is now {target_status.value}.",
            }

    def change_worker_status(
        self,
        worker_id: int,
        target: Union[WorkerStatus, str],
        now: Optional[datetime] = None,
    ) -> WorkerStatusResult:
        """Change a worker's status, refusing to sideline them while they hold future jobs."""
        target_status = _parse_enum(WorkerStatus, target)
        if target_status is None:
            return _fail(AssignmentError.INVALID_STATUS, f"Unknown cleaner status: {target!r}.")

        now = ensure_aware(now or datetime.now(timezone.utc))

        with booking_scope(worker_id=worker_id), self._store.transaction(worker_id):
            worker = self._store.get_worker(worker_id)
            if worker is None:
                return _fail(AssignmentError.WORKER_NOT_FOUND, f"Cleaner {worker_id} not found.")

            if target_status != WorkerStatus.ACTIVE:
                blocking = [
                    booking
                    for booking in self._store.bookings_for_worker(worker_id)
                    if booking.is_live and booking.start_time > now
                ]
                if blocking:
                    result = _fail(
                        AssignmentError.WORKER_HAS_FUTURE_BOOKINGS,
                        f"Cannot set cleaner {worker.name} to {target_status.value}: "
                        f"{len(blocking)} upcoming booking(s) still assigned.",
                    )
                    result["blocking_bookings"] = len(blocking)
                    return result

            updated = self._store.update_worker_status(worker_id, target_status)
            logger.info("Cleaner %s status set to %s", worker_id, target_status.value)

        return {
            "success": True,
            "worker": updated,
            "message": f"Cleaner status updated to {target_status.value}.",
        }
