"""Page-builder block models: field rules, block schemas, block instances."""

import copy
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field


class FieldKind(str, Enum):
    TEXT = "text"
    RICHTEXT = "richtext"
    TEXTAREA = "textarea"
    NUMBER = "number"
    BOOLEAN = "boolean"
    IMAGE = "image"
    SELECT = "select"
    ARRAY = "array"


class BlockType(str, Enum):
    """Block types shipped with the default catalog."""

    INTRO = "intro"
    DEFINITION = "definition"
    PRICING = "pricing"
    TASK_TAB = "task_tab"
    PROCESS = "process"
    BOOKING = "booking"


@dataclass(frozen=True)
class FieldRule:
    """Validation contract for one field of a block's data."""

    kind: FieldKind
    label: str
    required: bool = False
    min: Optional[float] = None
    max: Optional[float] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    options: tuple[str, ...] = ()
    item_schema: Optional[Mapping[str, "FieldRule"]] = None
    default: Any = None

    def __post_init__(self) -> None:
        if self.item_schema is not None:
            object.__setattr__(self, "item_schema", MappingProxyType(dict(self.item_schema)))

    def describe(self) -> dict[str, Any]:
        """Plain-dict view of the rule for the authoring UI."""
        info: dict[str, Any] = {
            "type": self.kind.value,
            "label": self.label,
            "required": self.required,
        }
        for key, value in [
            ("min", self.min),
            ("max", self.max),
            ("minItems", self.min_items),
            ("maxItems", self.max_items),
            ("default", self.default),
        ]:
            if value is not None:
                info[key] = copy.deepcopy(value)
        if self.options:
            info["options"] = list(self.options)
        if self.item_schema is not None:
            info["itemSchema"] = {
                name: rule.describe() for name, rule in self.item_schema.items()
            }
        return info


@dataclass(frozen=True)
class BlockSchema:
    """Named bundle of field rules for one block type."""

    block_type: str
    name: str
    description: str
    fields: Mapping[str, FieldRule]
    default_data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        default_data = copy.deepcopy(dict(self.default_data))
        object.__setattr__(self, "default_data", MappingProxyType(default_data))

    def describe(self) -> dict[str, Any]:
        return {
            "type": self.block_type,
            "name": self.name,
            "description": self.description,
            "fields": {name: rule.describe() for name, rule in self.fields.items()},
            "defaultData": copy.deepcopy(dict(self.default_data)),
        }


class Block(BaseModel):
    """One content unit of a service page layout."""

    type: str
    order: int = 0
    data: dict[str, Any] = Field(default_factory=dict)


class ValidationResult(BaseModel):
    """Outcome of validating a block or a layout. Errors keep their order."""

    valid: bool
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "ValidationResult":
        return cls(valid=not errors, errors=list(errors))
