"""
Centralized configuration with environment variable overrides.

Booking rules (buffer, advance window, working hours, business UTC offset)
are read from the environment once at import time. Nothing in the
scheduling modules hardcodes these values.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class SchedulingConfig:
    """Admission and conflict rules for bookings."""

    buffer_minutes: int = _safe_int("BUFFER_MINUTES", "30")
    advance_days: int = _safe_int("BOOKING_ADVANCE_DAYS", "7")
    work_start_hour: int = _safe_int("WORK_START_HOUR", "7")
    work_end_hour: int = _safe_int("WORK_END_HOUR", "19")
    utc_offset_hours: int = _safe_int("BUSINESS_UTC_OFFSET_HOURS", "7")
    cancel_deadline_hours: int = _safe_int("CANCEL_DEADLINE_HOURS", "2")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    scheduling: SchedulingConfig = field(default_factory=SchedulingConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "cleaning-booking")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    sched = config.scheduling
    if sched.buffer_minutes < 0:
        raise ValueError(f"BUFFER_MINUTES must be >= 0, got {sched.buffer_minutes}")
    if sched.advance_days < 1:
        raise ValueError(f"BOOKING_ADVANCE_DAYS must be >= 1, got {sched.advance_days}")

    for hour_name, hour_value in [
        ("WORK_START_HOUR", sched.work_start_hour),
        ("WORK_END_HOUR", sched.work_end_hour),
    ]:
        if not 0 <= hour_value <= 24:
            raise ValueError(f"{hour_name} must be between 0 and 24, got {hour_value}")

    if sched.work_start_hour >= sched.work_end_hour:
        raise ValueError(
            "WORK_START_HOUR must be before WORK_END_HOUR, "
            f"got {sched.work_start_hour} >= {sched.work_end_hour}"
        )
    if not -12 <= sched.utc_offset_hours <= 14:
        raise ValueError(
            f"BUSINESS_UTC_OFFSET_HOURS must be between -12 and 14, got {sched.utc_offset_hours}"
        )
    if sched.cancel_deadline_hours < 0:
        raise ValueError(
            f"CANCEL_DEADLINE_HOURS must be >= 0, got {sched.cancel_deadline_hours}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.app_name)
    return config


# Singleton instance
settings = load_config()
