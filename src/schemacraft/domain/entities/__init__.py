"""Domain entities for SchemaCraft.

Entities describe collections, fields and relations. They have no
dependencies on storage or external frameworks.
"""

from schemacraft.domain.entities.collection import Collection
from schemacraft.domain.entities.field import Field
from schemacraft.domain.entities.relation import Relation
from schemacraft.domain.entities.types import FieldSpecial, FieldType, OnDelete

__all__ = [
    "Collection",
    "Field",
    "FieldSpecial",
    "FieldType",
    "OnDelete",
    "Relation",
]
