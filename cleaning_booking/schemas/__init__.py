from cleaning_booking.schemas.block_schema import (
    Block,
    BlockSchema,
    BlockType,
    FieldKind,
    FieldRule,
    ValidationResult,
)
from cleaning_booking.schemas.booking_schema import (
    Booking,
    BookingRequest,
    BookingStatus,
    SchedulingWindow,
    Service,
    Worker,
    WorkerStatus,
)

__all__ = [
    "Block", "BlockSchema", "BlockType", "FieldKind", "FieldRule", "ValidationResult",
    "Booking", "BookingRequest", "BookingStatus", "SchedulingWindow",
    "Service", "Worker", "WorkerStatus",
]
