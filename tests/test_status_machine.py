"""Tests for the booking status lifecycle."""

import pytest

from cleaning_booking.scheduling.status_machine import (
    BookingStatusMachine,
    InvalidTransitionError,
)
from cleaning_booking.schemas.booking_schema import BookingStatus

LEGAL = {
    (BookingStatus.PENDING, BookingStatus.CONFIRMED),
    (BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS),
    (BookingStatus.IN_PROGRESS, BookingStatus.COMPLETED),
    (BookingStatus.PENDING, BookingStatus.CANCELLED),
    (BookingStatus.CONFIRMED, BookingStatus.CANCELLED),
}


class TestTransitionTable:
    def test_exactly_the_legal_moves(self):
        for current in BookingStatus:
            for target in BookingStatus:
                expected = (current, target) in LEGAL
                assert BookingStatusMachine.can_transition(current, target) == expected, (
                    f"{current.value} -> {target.value}"
                )

    def test_terminal_states_have_no_way_out(self):
        for terminal in (BookingStatus.COMPLETED, BookingStatus.CANCELLED):
            for target in BookingStatus:
                with pytest.raises(InvalidTransitionError):
                    BookingStatusMachine.check(terminal, target)

    def test_required_predecessors(self):
        assert BookingStatusMachine.required_predecessors(BookingStatus.CANCELLED) == [
            BookingStatus.PENDING,
            BookingStatus.CONFIRMED,
        ]
        assert BookingStatusMachine.required_predecessors(BookingStatus.PENDING) == []


class TestGuards:
    def test_legal_move_passes(self):
        BookingStatusMachine.check(BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS)

    def test_in_progress_requires_confirmed(self):
        with pytest.raises(InvalidTransitionError, match="must be CONFIRMED"):
            BookingStatusMachine.check(BookingStatus.PENDING, BookingStatus.IN_PROGRESS)

    def test_completed_requires_in_progress(self):
        with pytest.raises(InvalidTransitionError, match="must be IN_PROGRESS"):
            BookingStatusMachine.check(BookingStatus.CONFIRMED, BookingStatus.COMPLETED)

    def test_cannot_cancel_in_progress(self):
        with pytest.raises(InvalidTransitionError, match="PENDING or CONFIRMED"):
            BookingStatusMachine.check(BookingStatus.IN_PROGRESS, BookingStatus.CANCELLED)

    def test_nothing_leads_back_to_pending(self):
        with pytest.raises(InvalidTransitionError, match="No transition leads to PENDING"):
            BookingStatusMachine.check(BookingStatus.CONFIRMED, BookingStatus.PENDING)

    def test_error_carries_states(self):
        with pytest.raises(InvalidTransitionError) as exc_info:
            BookingStatusMachine.check(BookingStatus.PENDING, BookingStatus.COMPLETED)
        assert exc_info.value.current == BookingStatus.PENDING
        assert exc_info.value.target == BookingStatus.COMPLETED
        assert exc_info.value.required == [BookingStatus.IN_PROGRESS]
