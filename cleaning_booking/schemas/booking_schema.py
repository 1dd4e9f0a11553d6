"""Booking, worker and service records plus the scheduling window type."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from cleaning_booking.utils import ensure_aware


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class WorkerStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    ON_LEAVE = "ON_LEAVE"


@dataclass(frozen=True)
class SchedulingWindow:
    """Half-open time span occupied by one booking."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(
                f"Window end must be after start, got {self.start.isoformat()} "
                f"-> {self.end.isoformat()}"
            )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Booking(BaseModel):
    """Persisted booking row as seen by the core."""

    id: int
    customer_id: int
    service_id: int
    cleaner_id: Optional[int] = None
    status: BookingStatus = BookingStatus.PENDING
    start_time: datetime
    end_time: datetime
    location: str = ""
    note: Optional[str] = None
    cancel_reason: Optional[str] = None
    total_price: float = 0.0
    booking_data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @field_validator("start_time", "end_time")
    @classmethod
    def _attach_timezone(cls, value: datetime) -> datetime:
        """Naive times are read as UTC so they compare with aware windows."""
        return ensure_aware(value)

    @model_validator(mode="after")
    def _check_time_order(self) -> "Booking":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self

    @property
    def is_live(self) -> bool:
        """Live bookings occupy the worker's calendar."""
        return self.status != BookingStatus.CANCELLED

    @property
    def window(self) -> SchedulingWindow:
        return SchedulingWindow(start=self.start_time, end=self.end_time)


class Worker(BaseModel):
    """Cleaner / mover that can be assigned to bookings."""

    id: int
    name: str
    phone: str
    email: Optional[str] = None
    avatar: Optional[str] = None
    address: Optional[str] = None
    status: WorkerStatus = WorkerStatus.ACTIVE


class Service(BaseModel):
    """Bookable service with its page layout."""

    id: int
    name: str
    description: Optional[str] = None
    base_price: float = Field(ge=0)
    duration_minutes: int = Field(gt=0)
    is_active: bool = True
    layout_config: list[dict[str, Any]] = Field(default_factory=list)


class BookingRequest(BaseModel):
    """Prospective booking: a service at a submitted civil date and time.

    ``worker_id`` narrows an availability check to one cleaner.
    """

    service_id: int
    booking_date: str
    booking_time: str
    worker_id: Optional[int] = None
