from cleaning_booking.blocks.registry import SchemaRegistry, default_registry
from cleaning_booking.blocks.validator import (
    sort_layout,
    validate_block,
    validate_form_submission,
    validate_layout,
)

__all__ = [
    "SchemaRegistry",
    "default_registry",
    "validate_block",
    "validate_layout",
    "validate_form_submission",
    "sort_layout",
]
