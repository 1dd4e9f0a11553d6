"""
Recursive block validator.

Validates a block's ``data`` payload against the field rules of its
block type. Errors accumulate across fields; an empty field only stops
the checks for that field. Validation never raises for bad input, it
always returns a ValidationResult.

Usage:
    result = validate_block("pricing", {"service_title": "X", "subservices": []})
    if not result.valid:
        print(result.errors)
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from cleaning_booking.blocks.registry import SchemaRegistry, default_registry
from cleaning_booking.schemas.block_schema import Block, FieldKind, FieldRule, ValidationResult
from cleaning_booking.utils import is_real_number

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """Absent, None and "" are empty. 0 and False are values."""
    return value is None or (isinstance(value, str) and value == "")


def _subject(path: str, nested: bool) -> str:
    return path if nested else f'field "{path}"'


def _format_bound(bound: float) -> str:
    return f"{bound:g}" if isinstance(bound, float) else str(bound)


def _check_value(
    path: str, rule: FieldRule, value: Any, errors: list[str], nested: bool = False
) -> None:
    subject = _subject(path, nested)

    if is_empty(value):
        if rule.required:
            errors.append(f"{subject} ({rule.label}) is required")
        return

    if rule.kind == FieldKind.NUMBER:
        # Bounds only apply to real numbers; other types are left alone.
        if is_real_number(value):
            if rule.min is not None and value < rule.min:
                errors.append(
                    f"{subject} must be greater than or equal to {_format_bound(rule.min)}"
                )
            if rule.max is not None and value > rule.max:
                errors.append(
                    f"{subject} must be less than or equal to {_format_bound(rule.max)}"
                )
        return

    if rule.kind != FieldKind.ARRAY:
        return

    if not isinstance(value, (list, tuple)):
        errors.append(f"{subject} must be a list")
        return

    if rule.min_items is not None and len(value) < rule.min_items:
        errors.append(f"{subject} requires at least {rule.min_items} item(s)")
    if rule.max_items is not None and len(value) > rule.max_items:
        errors.append(f"{subject} allows at most {rule.max_items} item(s)")

    if rule.item_schema is None:
        return

    for index, item in enumerate(value):
        item_data = item if isinstance(item, Mapping) else {}
        for sub_name, sub_rule in rule.item_schema.items():
            _check_value(
                f"{path}[{index}].{sub_name}",
                sub_rule,
                item_data.get(sub_name),
                errors,
                nested=True,
            )


def validate_block(
    block_type: str,
    data: Optional[Mapping[str, Any]],
    registry: Optional[SchemaRegistry] = None,
) -> ValidationResult:
    """Validate one block's data against the schema of ``block_type``."""
    registry = registry if registry is not None else default_registry
    schema = registry.get(block_type) if isinstance(block_type, str) else None
    if schema is None:
        return ValidationResult(
            valid=False, errors=[f'block type "{block_type}" is not recognized']
        )

    payload: Mapping[str, Any] = data if isinstance(data, Mapping) else {}
    errors: list[str] = []
    for field_name, rule in schema.fields.items():
        _check_value(field_name, rule, payload.get(field_name), errors)

    if errors:
        logger.debug("Block '%s' rejected with %d error(s)", block_type, len(errors))
    return ValidationResult.from_errors(errors)


def _parse_block(raw: Any) -> Block:
    return raw if isinstance(raw, Block) else Block.model_validate(raw)


def validate_layout(
    blocks: Iterable[Any], registry: Optional[SchemaRegistry] = None
) -> ValidationResult:
    """Validate every block of a layout independently.

    Cross-block rules such as unique ``order`` values are not enforced.
    """
    if isinstance(blocks, (str, bytes, Mapping)) or not isinstance(blocks, Iterable):
        return ValidationResult(valid=False, errors=["layout must be a list of blocks"])

    errors: list[str] = []
    for index, raw in enumerate(blocks):
        try:
            block = _parse_block(raw)
        except ValidationError:
            errors.append(f"blocks[{index}] must be an object with type, order and data")
            continue
        result = validate_block(block.type, block.data, registry)
        errors.extend(f"blocks[{index}] ({block.type}): {error}" for error in result.errors)

    return ValidationResult.from_errors(errors)


def sort_layout(blocks: Iterable[Any]) -> list[Block]:
    """Return blocks sorted by ``order``; ties keep their original sequence."""
    return sorted((_parse_block(raw) for raw in blocks), key=lambda block: block.order)


def validate_form_submission(
    form_schema: Iterable[Mapping[str, Any]], submission: Mapping[str, Any]
) -> ValidationResult:
    """Check a customer's booking form data against a booking block's form fields."""
    errors: list[str] = []
    for form_field in form_schema:
        if not isinstance(form_field, Mapping) or not form_field.get("required"):
            continue
        field_name = form_field.get("field_name")
        if not field_name:
            continue
        if is_empty(submission.get(field_name)):
            errors.append(f"{form_field.get('label') or field_name} is required")
    return ValidationResult.from_errors(errors)
