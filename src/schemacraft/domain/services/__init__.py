"""Domain services for SchemaCraft."""

from schemacraft.domain.services.builder import Builder
from schemacraft.domain.services.schema_validator import (
    SchemaValidationError,
    SchemaValidator,
)

__all__ = [
    "Builder",
    "SchemaValidationError",
    "SchemaValidator",
]
