"""Relation entity: a directed reference between two collections."""

from dataclasses import dataclass, field
from typing import Any

from schemacraft.domain.entities.types import OnDelete, enum_value


@dataclass
class Relation:
    """A directed edge from a collection field to a related collection.

    Relations are owned by the builder, not by the collection or field that
    declared them. A ``related_collection`` of ``None`` marks a relation the
    schema applier has to resolve itself.

    Attributes:
        collection: Name of the collection holding the foreign key.
        field: Name of the foreign key field.
        related_collection: Name of the referenced collection, if known.
        schema: Storage-level options such as ``on_delete``.
    """

    collection: str
    field: str
    related_collection: str | None = None
    schema: dict[str, Any] = field(default_factory=dict)

    def on_delete(self, policy: OnDelete | str) -> "Relation":
        """Set the delete policy of the relation."""
        self.schema["on_delete"] = enum_value(policy)
        return self

    def render(self) -> dict[str, Any]:
        return {
            "collection": self.collection,
            "field": self.field,
            "related_collection": self.related_collection,
            "schema": dict(self.schema),
        }
