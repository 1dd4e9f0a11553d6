"""
Booking status lifecycle.

    PENDING -> CONFIRMED -> IN_PROGRESS -> COMPLETED
    PENDING | CONFIRMED -> CANCELLED

Every legal move is listed explicitly. Anything else is rejected with an
error naming the state the booking would have to be in first; a request
is never coerced into a nearby legal state.

Usage:
    BookingStatusMachine.check(booking.status, BookingStatus.IN_PROGRESS)
"""

from dataclasses import dataclass

from cleaning_booking.schemas.booking_schema import BookingStatus


@dataclass(frozen=True)
class Transition:
    """A single valid status transition."""
    from_status: BookingStatus
    to_status: BookingStatus


class InvalidTransitionError(Exception):
    """Raised when a booking cannot move to the requested status."""

    def __init__(
        self,
        current: BookingStatus,
        target: BookingStatus,
        required: list[BookingStatus],
    ) -> None:
        self.current = current
        self.target = target
        self.required = required
        if required:
            needed = " or ".join(status.value for status in required)
            message = (
                f"Booking must be {needed} to move to {target.value} "
                f"(currently {current.value})"
            )
        else:
            message = f"No transition leads to {target.value} (currently {current.value})"
        super().__init__(message)


class BookingStatusMachine:
    """Legal booking status transitions. Stateless; bookings carry their own status."""

    TRANSITIONS: list[Transition] = [
        Transition(BookingStatus.PENDING, BookingStatus.CONFIRMED),
        Transition(BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS),
        Transition(BookingStatus.IN_PROGRESS, BookingStatus.COMPLETED),

        # --- Cancellation ---
        Transition(BookingStatus.PENDING, BookingStatus.CANCELLED),
        Transition(BookingStatus.CONFIRMED, BookingStatus.CANCELLED),
    ]

    @classmethod
    def required_predecessors(cls, target: BookingStatus) -> list[BookingStatus]:
        """States from which ``target`` can be reached."""
        return [t.from_status for t in cls.TRANSITIONS if t.to_status == target]

    @classmethod
    def can_transition(cls, current: BookingStatus, target: BookingStatus) -> bool:
        return any(
            t.from_status == current and t.to_status == target for t in cls.TRANSITIONS
        )

    @classmethod
    def check(cls, current: BookingStatus, target: BookingStatus) -> None:
        """Raise InvalidTransitionError unless ``current -> target`` is legal."""
        if not cls.can_transition(current, target):
            raise InvalidTransitionError(current, target, cls.required_predecessors(target))
