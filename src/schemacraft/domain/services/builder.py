"""Schema builder: the registry that owns collections and relations.

The builder is the entry point of a schema definition. Collections are
created through it and every relation declared by a collection or field is
recorded here, in declaration order.

Example:
    builder = Builder()
    articles = builder.collection("articles").sort("sort")
    articles.primary_key("id", "uuid")
    articles.string("title").notNullable()
    articles.user_created("user_created")
    schema = builder.render()
"""

from typing import Any

from schemacraft.core.config import get_settings
from schemacraft.domain.entities.collection import Collection
from schemacraft.domain.entities.field import Field
from schemacraft.domain.entities.relation import Relation


class Builder:
    """Registry of collections and the relations between them."""

    def __init__(self, strict_primary_key: bool | None = None) -> None:
        """Initialize an empty builder.

        Args:
            strict_primary_key: Reject a second primary key per collection.
                Defaults to the ``strict_primary_key`` setting.
        """
        if strict_primary_key is None:
            strict_primary_key = get_settings().strict_primary_key
        self.strict_primary_key = strict_primary_key
        self._collections: dict[str, Collection] = {}
        self._relations: list[Relation] = []

    @property
    def collections(self) -> list[Collection]:
        return list(self._collections.values())

    @property
    def relations(self) -> list[Relation]:
        return list(self._relations)

    def collection(
        self,
        name: str,
        schema: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
        fields: list[Field] | None = None,
    ) -> Collection:
        """Create a collection, or return the one already registered as ``name``.

        Args:
            name: Collection name.
            schema: Initial storage options (new collections only).
            meta: Initial collection metadata (new collections only).
            fields: Initial fields (new collections only).

        Returns:
            The collection registered under ``name``.
        """
        existing = self._collections.get(name)
        if existing is not None:
            return existing

        collection = Collection(self, name, schema, meta, fields)
        self._collections[name] = collection
        return collection

    def get_collection(self, name: str) -> Collection | None:
        return self._collections.get(name)

    def relation(
        self, collection: str, field: str, related_collection: str | None = None
    ) -> Relation:
        """Record a relation from ``collection.field`` to ``related_collection``.

        The log is append-only; declaring the same relation twice records it
        twice.
        """
        relation = Relation(collection, field, related_collection)
        self._relations.append(relation)
        return relation

    def render(self) -> dict[str, Any]:
        """Render every collection and relation in declaration order."""
        return {
            "collections": [collection.render() for collection in self._collections.values()],
            "relations": [relation.render() for relation in self._relations],
        }
