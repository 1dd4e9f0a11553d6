from cleaning_booking.scheduling.availability import (
    has_conflict,
    list_available_workers,
    windows_conflict,
)
from cleaning_booking.scheduling.coordinator import AssignmentCoordinator, AssignmentError
from cleaning_booking.scheduling.intake import (
    IntakeError,
    cancel_booking,
    create_booking,
    update_service_layout,
)
from cleaning_booking.scheduling.status_machine import (
    BookingStatusMachine,
    InvalidTransitionError,
)
from cleaning_booking.scheduling.window_policy import (
    RejectionReason,
    WindowDecision,
    check_window,
)

__all__ = [
    "AssignmentCoordinator",
    "AssignmentError",
    "BookingStatusMachine",
    "IntakeError",
    "InvalidTransitionError",
    "RejectionReason",
    "WindowDecision",
    "cancel_booking",
    "check_window",
    "create_booking",
    "has_conflict",
    "list_available_workers",
    "update_service_layout",
    "windows_conflict",
]
