"""
Customer-facing booking flow: create, cancel, and service layout updates.

Bookings are admitted through the window policy, priced from the
service's pricing block, and stored as PENDING with no cleaner.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, TypedDict

from cleaning_booking.blocks.validator import (
    is_empty,
    sort_layout,
    validate_form_submission,
    validate_layout,
)
from cleaning_booking.config import SchedulingConfig, settings
from cleaning_booking.logging_context import get_request_logger
from cleaning_booking.scheduling.status_machine import BookingStatusMachine
from cleaning_booking.scheduling.window_policy import RejectionReason, check_window
from cleaning_booking.schemas.block_schema import BlockType
from cleaning_booking.schemas.booking_schema import Booking, BookingStatus, Service
from cleaning_booking.utils import ensure_aware, is_real_number

logger = get_request_logger(__name__)


class IntakeError(str, Enum):
    SERVICE_NOT_FOUND = "ServiceNotFound"
    MISSING_TIME_DATA = "MissingTimeData"
    TIME_REJECTED = "TimeRejected"
    INVALID_BOOKING_DATA = "InvalidBookingData"
    BOOKING_NOT_FOUND = "BookingNotFound"
    CANNOT_CANCEL = "CannotCancel"
    CANCEL_DEADLINE_PASSED = "CancelDeadlinePassed"
    INVALID_LAYOUT = "InvalidLayout"


class BookingResult(TypedDict, total=False):
    """Result from create_booking or cancel_booking."""

    success: bool
    message: str
    error: IntakeError
    reason: RejectionReason
    errors: list[str]
    booking: Booking


class LayoutResult(TypedDict, total=False):
    """Result from update_service_layout."""

    success: bool
    message: str
    error: IntakeError
    errors: list[str]
    service: Service


def _find_block_data(layout: Iterable[Mapping[str, Any]], block_type: BlockType) -> Optional[dict]:
    for block in layout:
        if isinstance(block, Mapping) and block.get("type") == block_type.value:
            data = block.get("data")
            return data if isinstance(data, dict) else None
    return None


def resolve_price(service: Service, subservice_id: Optional[str]) -> float:
    """Price of the chosen package from the pricing block, else the service base price."""
    if subservice_id:
        pricing = _find_block_data(service.layout_config, BlockType.PRICING) or {}
        for package in pricing.get("subservices") or []:
            if isinstance(package, Mapping) and package.get("id") == subservice_id:
                price = package.get("price")
                if is_real_number(price):
                    return float(price)
        logger.debug("Package %r not priced for service %s", subservice_id, service.id)
    return service.base_price


def resolve_location(booking_data: Mapping[str, Any]) -> str:
    """Single display address: ``address`` for cleaning, ``from -> to`` for moving."""
    address = booking_data.get("address")
    if not is_empty(address):
        return str(address)
    origin, destination = booking_data.get("from_address"), booking_data.get("to_address")
    if not is_empty(origin) and not is_empty(destination):
        return f"{origin} -> {destination}"
    return str(origin or destination or "")


def create_booking(
    store: Any,
    customer_id: int,
    service_id: int,
    booking_data: Mapping[str, Any],
    now: Optional[datetime] = None,
    note: Optional[str] = None,
    config: Optional[SchedulingConfig] = None,
) -> BookingResult:
    """Admit and store a new PENDING booking."""
    config = config or settings.scheduling
    now = ensure_aware(now or datetime.now(timezone.utc))

    service = store.get_service(service_id)
    if service is None or not service.is_active:
        return {
            "success": False,
            "error": IntakeError.SERVICE_NOT_FOUND,
            "message": f"Service {service_id} does not exist or is not active.",
        }

    booking_date = booking_data.get("booking_date")
    booking_time = booking_data.get("booking_time")
    if is_empty(booking_date) or is_empty(booking_time):
        return {
            "success": False,
            "error": IntakeError.MISSING_TIME_DATA,
            "message": "booking_date and booking_time are required in booking_data.",
        }

    decision = check_window(booking_date, booking_time, now, config)
    if not decision.accepted:
        logger.info("Booking for service %s rejected: %s", service_id, decision.reason.value)
        return {
            "success": False,
            "error": IntakeError.TIME_REJECTED,
            "reason": decision.reason,
            "message": decision.message,
        }

    form = _find_block_data(service.layout_config, BlockType.BOOKING) or {}
    form_result = validate_form_submission(form.get("form_schema") or [], booking_data)
    if not form_result.valid:
        return {
            "success": False,
            "error": IntakeError.INVALID_BOOKING_DATA,
            "errors": form_result.errors,
            "message": "Booking data is invalid.",
        }

    start = decision.start_time
    booking = store.create_booking(
        customer_id=customer_id,
        service_id=service_id,
        status=BookingStatus.PENDING,
        start_time=start,
        end_time=start + timedelta(minutes=service.duration_minutes),
        location=resolve_location(booking_data),
        note=note,
        total_price=resolve_price(service, booking_data.get("subservice_id")),
        booking_data=dict(booking_data),
    )
    logger.info(
        "Booking %s created for customer %s at %s", booking.id, customer_id, start.isoformat()
    )
    return {"success": True, "booking": booking, "message": "Booking created."}


def cancel_booking(
    store: Any,
    booking_id: int,
    now: Optional[datetime] = None,
    reason: Optional[str] = None,
    customer_id: Optional[int] = None,
    config: Optional[SchedulingConfig] = None,
) -> BookingResult:
    """Cancel a PENDING or CONFIRMED booking ahead of the cancellation deadline.

    When ``customer_id`` is given, bookings owned by someone else are
    reported as not found.
    """
    config = config or settings.scheduling
    now = ensure_aware(now or datetime.now(timezone.utc))

    booking = store.get_booking(booking_id)
    if booking is None or (customer_id is not None and booking.customer_id != customer_id):
        return {
            "success": False,
            "error": IntakeError.BOOKING_NOT_FOUND,
            "message": f"Booking {booking_id} not found.",
        }

    if not BookingStatusMachine.can_transition(booking.status, BookingStatus.CANCELLED):
        return {
            "success": False,
            "error": IntakeError.CANNOT_CANCEL,
            "message": f"A {booking.status.value} booking cannot be cancelled.",
        }

    if booking.start_time - now < timedelta(hours=config.cancel_deadline_hours):
        return {
            "success": False,
            "error": IntakeError.CANCEL_DEADLINE_PASSED,
            "message": (
                f"Bookings must be cancelled at least {config.cancel_deadline_hours} "
                "hours before the start time."
            ),
        }

    updated = store.update_booking(
        booking_id,
        expected_status=booking.status,
        status=BookingStatus.CANCELLED,
        cancel_reason=reason,
    )
    if updated is None:
        return {
            "success": False,
            "error": IntakeError.CANNOT_CANCEL,
            "message": f"Booking {booking_id} changed status concurrently; reload and retry.",
        }

    logger.info("Booking %s cancelled", booking_id)
    return {"success": True, "booking": updated, "message": "Booking cancelled."}


def update_service_layout(
    store: Any, service_id: int, blocks: list[Any]
) -> LayoutResult:
    """Validate a full layout and store it sorted by ``order``."""
    result = validate_layout(blocks)
    if not result.valid:
        return {
            "success": False,
            "error": IntakeError.INVALID_LAYOUT,
            "errors": result.errors,
            "message": "Layout does not match the block schemas.",
        }

    layout = [block.model_dump() for block in sort_layout(blocks)]
    service = store.update_service_layout(service_id, layout)
    if service is None:
        return {
            "success": False,
            "error": IntakeError.SERVICE_NOT_FOUND,
            "message": f"Service {service_id} not found.",
        }

    logger.info("Layout updated for service %s (%d blocks)", service_id, len(layout))
    return {"success": True, "service": service, "message": "Layout updated."}
