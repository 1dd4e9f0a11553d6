"""
Block schema registry: a read-only catalog keyed by block type.

The registry is built once at import time from the default catalog.
Bootstrap code that needs an extra block type derives a new registry
with ``with_schema`` instead of mutating the shared one, so the
validator never has to change when a block type is added.
"""

import logging
from types import MappingProxyType
from typing import Any, Iterable, Optional

from cleaning_booking.blocks.catalog import DEFAULT_SCHEMAS
from cleaning_booking.schemas.block_schema import BlockSchema

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Immutable mapping of block type -> BlockSchema."""

    def __init__(self, schemas: Iterable[BlockSchema] = ()) -> None:
        table: dict[str, BlockSchema] = {}
        for schema in schemas:
            if schema.block_type in table:
                raise ValueError(f"Block type '{schema.block_type}' registered twice")
            table[schema.block_type] = schema
        self._schemas = MappingProxyType(table)

    def get(self, block_type: str) -> Optional[BlockSchema]:
        """Return the schema for a block type, or None if it is unknown."""
        return self._schemas.get(block_type)

    def __contains__(self, block_type: object) -> bool:
        return block_type in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def block_types(self) -> list[str]:
        """Return registered block types in registration order."""
        return list(self._schemas.keys())

    def all(self) -> list[BlockSchema]:
        return list(self._schemas.values())

    def describe(self) -> dict[str, dict[str, Any]]:
        """Return every schema as plain dicts, keyed by block type."""
        return {block_type: schema.describe() for block_type, schema in self._schemas.items()}

    def with_schema(self, schema: BlockSchema) -> "SchemaRegistry":
        """Return a new registry that also contains ``schema``."""
        logger.debug("Block type registered: %s", schema.block_type)
        return SchemaRegistry([*self._schemas.values(), schema])


default_registry = SchemaRegistry(DEFAULT_SCHEMAS)
