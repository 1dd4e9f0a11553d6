"""
Offline console demo. Walks one booking through the whole core.

Seeds the in-memory store with the reference services and cleaners,
then validates the service layout, admits a booking, lists free
cleaners, assigns one, and moves the booking to COMPLETED.

Usage:
    python main.py
    python main.py --scenario moving
"""

import argparse
from datetime import datetime, timedelta, timezone
from typing import Optional

from cleaning_booking.blocks.validator import validate_layout
from cleaning_booking.config import settings
from cleaning_booking.logging_context import new_request_id
from cleaning_booking.scheduling.coordinator import AssignmentCoordinator
from cleaning_booking.scheduling.intake import create_booking
from cleaning_booking.schemas.booking_schema import BookingStatus
from cleaning_booking.seed import seed_store
from cleaning_booking.store import InMemoryStore
from cleaning_booking.utils import business_timezone

GREEN = "\033[92m"
DIM = "\033[2m"
RESET = "\033[0m"

SCENARIOS: dict[str, dict] = {
    "cleaning": {
        "service_id": 1,
        "booking_data": {
            "name": "Pham Minh D",
            "phone": "0912345678",
            "address": "12 Le Loi, District 1",
            "subservice_id": "3br",
        },
    },
    "moving": {
        "service_id": 2,
        "booking_data": {
            "name": "Hoang Thi E",
            "phone": "0987654321",
            "from_address": "5 Nguyen Hue, District 1",
            "to_address": "88 Vo Van Tan, District 3",
            "subservice_id": "truck_1t5",
        },
    },
}


def _tomorrow_at_nine(now: datetime) -> tuple[str, str]:
    local = now.astimezone(business_timezone(settings.scheduling.utc_offset_hours))
    day = (local + timedelta(days=1)).date()
    return day.isoformat(), "09:00"


def run_demo(scenario: str = "cleaning", now: Optional[datetime] = None) -> list[str]:
    """Run a scenario and return the transcript lines."""
    now = now or datetime.now(timezone.utc)
    store = seed_store(InMemoryStore())
    coordinator = AssignmentCoordinator(store)
    lines: list[str] = []

    config = SCENARIOS[scenario]
    service = store.get_service(config["service_id"])
    layout_result = validate_layout(service.layout_config)
    lines.append(f"Layout for '{service.name}' valid: {layout_result.valid}")

    new_request_id()
    booking_date, booking_time = _tomorrow_at_nine(now)
    booking_data = {**config["booking_data"], "booking_date": booking_date, "booking_time": booking_time}
    created = create_booking(store, customer_id=1, service_id=service.id, booking_data=booking_data, now=now)
    lines.append(created["message"])
    if not created["success"]:
        return lines
    booking = created["booking"]
    lines.append(f"Booking {booking.id}: {booking.start_time.isoformat()} total {booking.total_price:,.0f}")

    new_request_id()
    available = coordinator.available_workers(booking.id)
    names = ", ".join(worker.name for worker in available["workers"])
    lines.append(f"Available cleaners: {names or 'none'}")
    if not available["workers"]:
        return lines

    assigned = coordinator.assign(booking.id, available["workers"][0].id)
    lines.append(assigned["message"])

    for status in (BookingStatus.IN_PROGRESS, BookingStatus.COMPLETED):
        lines.append(coordinator.transition_status(booking.id, status)["message"])
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description="Booking core console demo")
    parser.add_argument("--scenario", choices=sorted(SCENARIOS), default="cleaning")
    args = parser.parse_args()

    for line in run_demo(args.scenario):
        print(f"{GREEN}{line}{RESET}")
    print(f"{DIM}  >> done{RESET}")


if __name__ == "__main__":
    main()
