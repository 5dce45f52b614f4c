"""Field descriptor: one column of a collection.

Fields are created through :meth:`Collection.field` and its helpers, never on
their own. Every setter mutates the descriptor in place and returns it so
calls can be chained.
"""

from copy import deepcopy
from typing import TYPE_CHECKING, Any

from schemacraft.core.exceptions import DuplicatePrimaryKeyError
from schemacraft.domain.entities.types import FieldSpecial, FieldType, OnDelete, enum_value

if TYPE_CHECKING:
    from schemacraft.domain.entities.collection import Collection
    from schemacraft.domain.entities.relation import Relation
    from schemacraft.domain.services.builder import Builder


class Field:
    """A column definition with storage and presentation metadata.

    Attributes:
        name: Field name, unique within its collection.
        collection: The owning collection. Only its name is read, when
            relations are registered.
        schema: Storage constraints (``max_length``, ``numeric_precision``,
            ``numeric_scale``, ``nullable``, ``primary_key``, ``autoincrement``...).
        meta: Presentation metadata (``interface``, ``options``, ``display``,
            ``display_options``, ``special``...).
    """

    def __init__(
        self,
        builder: "Builder",
        collection: "Collection",
        name: str,
        type: FieldType | str,
        schema: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> None:
        self.builder = builder
        self.collection = collection
        self.name = name
        self._type = enum_value(type)
        self.schema = {} if schema is None else schema
        self.meta = {} if meta is None else meta
        self._relation: "Relation | None" = None

    @property
    def type(self) -> str:
        """Storage type; fixed at construction."""
        return self._type

    @property
    def is_primary_key(self) -> bool:
        return bool(self.schema.get("primary_key"))

    # Storage constraints

    def nullable(self, value: bool = True) -> "Field":
        self.schema["nullable"] = value
        return self

    def notNullable(self) -> "Field":
        return self.nullable(False)

    def pk(self) -> "Field":
        """Mark the field as primary key.

        Raises:
            DuplicatePrimaryKeyError: In strict mode, when another field of the
                collection already is the primary key.
        """
        if self.builder.strict_primary_key:
            existing = [f for f in self.collection.primary_keys if f is not self]
            if existing:
                raise DuplicatePrimaryKeyError(
                    self.collection.name, self.name, existing[0].name
                )
        # Primary keys are never nullable
        self.schema["primary_key"] = True
        self.schema["nullable"] = False
        return self

    def autoincrement(self) -> "Field":
        self.schema["autoincrement"] = True
        return self

    def unique(self, value: bool = True) -> "Field":
        self.schema["unique"] = value
        return self

    def default(self, value: Any) -> "Field":
        self.schema["default_value"] = value
        return self

    # Presentation metadata

    def special(self, *kinds: FieldSpecial | str) -> "Field":
        """Append special tags, keeping declaration order and skipping repeats."""
        special = self.meta.setdefault("special", [])
        for kind in kinds:
            value = enum_value(kind)
            if value not in special:
                special.append(value)
        return self

    def interface(self, name: str, options: dict[str, Any] | None = None) -> "Field":
        self.meta["interface"] = name
        if options is not None:
            self.meta["options"] = options
        return self

    def display(self, name: str, options: dict[str, Any] | None = None) -> "Field":
        self.meta["display"] = name
        if options is not None:
            self.meta["display_options"] = options
        return self

    def note(self, text: str) -> "Field":
        self.meta["note"] = text
        return self

    def hidden(self, value: bool = True) -> "Field":
        self.meta["hidden"] = value
        return self

    def readonly(self, value: bool = True) -> "Field":
        self.meta["readonly"] = value
        return self

    def required(self, value: bool = True) -> "Field":
        self.meta["required"] = value
        return self

    def width(self, value: str) -> "Field":
        self.meta["width"] = value
        return self

    # Relations

    def relation(self, related_collection: str | None = None) -> "Field":
        """Register a relation from this field to ``related_collection``."""
        self._relation = self.builder.relation(
            self.collection.name, self.name, related_collection
        )
        return self

    def on_delete(self, policy: OnDelete | str) -> "Field":
        """Set the delete policy of the field's most recent relation.

        A field without a relation gets an unresolved one first.
        """
        if self._relation is None:
            self.relation()
        self._relation.on_delete(policy)
        return self

    def render(self) -> dict[str, Any]:
        return {
            "field": self.name,
            "type": self.type,
            "schema": deepcopy(self.schema),
            "meta": deepcopy(self.meta),
        }

    def __repr__(self) -> str:
        return f"Field({self.collection.name}.{self.name}: {self.type})"
