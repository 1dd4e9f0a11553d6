"""Tests for buffered overlap checks and available-worker listing."""

from datetime import datetime, timedelta, timezone

import pytest

from cleaning_booking.scheduling.availability import (
    has_conflict,
    list_available_workers,
    windows_conflict,
)
from cleaning_booking.schemas.booking_schema import (
    Booking,
    BookingStatus,
    SchedulingWindow,
    WorkerStatus,
)
from tests.conftest import local, make_booking, make_worker, window


class TestSchedulingWindow:
    def test_end_must_follow_start(self):
        start = local(11, 9)
        with pytest.raises(ValueError, match="after start"):
            SchedulingWindow(start=start, end=start)


class TestNaiveBookingTimes:
    def test_naive_times_are_read_as_utc(self):
        booking = Booking(
            id=1,
            customer_id=1,
            service_id=1,
            start_time=datetime(2025, 3, 11, 2, 0),
            end_time=datetime(2025, 3, 11, 4, 0),
        )
        assert booking.start_time == datetime(2025, 3, 11, 2, 0, tzinfo=timezone.utc)
        assert booking.end_time.tzinfo == timezone.utc

    def test_naive_booking_compares_with_aware_candidate(self):
        # 02:00-04:00 UTC is 09:00-11:00 in the business timezone.
        naive = Booking(
            id=1,
            customer_id=1,
            service_id=1,
            cleaner_id=1,
            status=BookingStatus.CONFIRMED,
            start_time=datetime(2025, 3, 11, 2, 0),
            end_time=datetime(2025, 3, 11, 4, 0),
        )
        assert has_conflict(window(local(11, 10)), [naive], 30)
        assert not has_conflict(window(local(11, 11, 30)), [naive], 30)


class TestWindowsConflict:
    def test_overlapping_windows_conflict(self):
        assert windows_conflict(window(local(11, 9)), window(local(11, 10)), 30)

    def test_gap_equal_to_buffer_does_not_conflict(self):
        # 09:00-11:00 and 11:30-13:30
        assert not windows_conflict(window(local(11, 9)), window(local(11, 11, 30)), 30)

    def test_gap_inside_buffer_conflicts(self):
        assert windows_conflict(window(local(11, 9)), window(local(11, 11, 29)), 30)

    def test_symmetric(self):
        a, b = window(local(11, 9)), window(local(11, 11, 15))
        assert windows_conflict(a, b, 30) == windows_conflict(b, a, 30)

    def test_zero_buffer_back_to_back(self):
        assert not windows_conflict(window(local(11, 9)), window(local(11, 11)), 0)

    def test_different_days_never_conflict(self):
        assert not windows_conflict(window(local(11, 9)), window(local(12, 9)), 30)

    def test_containment_conflicts(self):
        outer = window(local(11, 8), minutes=300)
        inner = window(local(11, 10), minutes=30)
        assert windows_conflict(outer, inner, 0)
        assert windows_conflict(inner, outer, 0)

    def test_conflict_is_monotonic_in_buffer(self):
        base = window(local(11, 9))
        for gap in range(0, 181, 15):
            other = window(base.end + timedelta(minutes=gap), minutes=60)
            seen_conflict = False
            for buffer in range(0, 241, 5):
                conflict = windows_conflict(base, other, buffer)
                if seen_conflict:
                    assert conflict, f"gap={gap} buffer={buffer}"
                seen_conflict = seen_conflict or conflict


class TestHasConflict:
    def test_no_existing_bookings(self):
        assert not has_conflict(window(local(11, 9)), [], 30)

    def test_live_booking_conflicts(self):
        existing = [make_booking(1, local(11, 10), cleaner_id=1)]
        assert has_conflict(window(local(11, 9)), existing, 30)

    @pytest.mark.parametrize(
        "status",
        [
            BookingStatus.PENDING,
            BookingStatus.CONFIRMED,
            BookingStatus.IN_PROGRESS,
            BookingStatus.COMPLETED,
        ],
    )
    def test_every_non_cancelled_status_occupies_calendar(self, status):
        existing = [make_booking(1, local(11, 10), cleaner_id=1, status=status)]
        assert has_conflict(window(local(11, 9)), existing, 30)

    def test_cancelled_booking_is_ignored(self):
        existing = [make_booking(1, local(11, 10), cleaner_id=1, status=BookingStatus.CANCELLED)]
        assert not has_conflict(window(local(11, 9)), existing, 30)

    def test_excluded_booking_is_ignored(self):
        existing = [make_booking(7, local(11, 9), cleaner_id=1)]
        assert not has_conflict(window(local(11, 9)), existing, 30, exclude_booking_id=7)


class TestListAvailableWorkers:
    def test_filters_inactive_and_busy_workers(self):
        roster = [
            make_worker(1),
            make_worker(2),
            make_worker(3, WorkerStatus.ON_LEAVE),
            make_worker(4, WorkerStatus.INACTIVE),
            make_worker(5),
        ]
        bookings = {2: [make_booking(10, local(11, 10), cleaner_id=2)]}
        result = list_available_workers(window(local(11, 9)), roster, bookings, 30)
        assert result == [1, 5]

    def test_preserves_roster_order(self):
        roster = [make_worker(9), make_worker(3), make_worker(6)]
        result = list_available_workers(window(local(11, 9)), roster, {}, 30)
        assert result == [9, 3, 6]

    def test_cancelled_bookings_free_the_worker(self):
        roster = [make_worker(1)]
        bookings = {1: [make_booking(10, local(11, 9), cleaner_id=1, status=BookingStatus.CANCELLED)]}
        assert list_available_workers(window(local(11, 9)), roster, bookings, 30) == [1]

    def test_larger_buffer_removes_neighbouring_worker(self):
        roster = [make_worker(1)]
        bookings = {1: [make_booking(10, local(11, 11, 45), cleaner_id=1)]}
        candidate = window(local(11, 9))
        assert list_available_workers(candidate, roster, bookings, 30) == [1]
        assert list_available_workers(candidate, roster, bookings, 60) == []
