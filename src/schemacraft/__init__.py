"""SchemaCraft - code-first schema definitions.

Declare collections, fields and relations with fluent builders and render
them to canonical descriptors for a schema applier.
"""

__version__ = "0.1.0"

from schemacraft.domain.entities import (
    Collection,
    Field,
    FieldSpecial,
    FieldType,
    OnDelete,
    Relation,
)
from schemacraft.domain.services import Builder, SchemaValidationError, SchemaValidator

__all__ = [
    "Builder",
    "Collection",
    "Field",
    "FieldSpecial",
    "FieldType",
    "OnDelete",
    "Relation",
    "SchemaValidationError",
    "SchemaValidator",
    "__version__",
]
