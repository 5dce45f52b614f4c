"""Collection compiler for code-first schema definitions.

A collection accumulates field descriptors and collection-level metadata
through fluent calls and renders them into the canonical descriptor
``{collection, schema, meta, fields}``.

Two chaining styles are supported. Collection-level setters (``hidden``,
``sort``, ``archive``, ``translation``, ``relation``...) return the
collection; field-declaring methods (``field``, ``string``, ``uuid``,
``file``...) return the new :class:`Field` so it can be configured further.

Cross references such as ``sort("missing")`` are never checked here; see
:class:`~schemacraft.domain.services.schema_validator.SchemaValidator`.
"""

from copy import deepcopy
from typing import TYPE_CHECKING, Any

from schemacraft.core.exceptions import DuplicatePrimaryKeyError
from schemacraft.domain.entities.field import Field
from schemacraft.domain.entities.types import (
    FILES_COLLECTION,
    ON_CREATE_SPECIALS,
    ON_UPDATE_SPECIALS,
    ROLES_COLLECTION,
    USERS_COLLECTION,
    Accountability,
    CreateStamp,
    FieldSpecial,
    FieldType,
    OnDelete,
    PrimaryKeyType,
    UpdateStamp,
)

if TYPE_CHECKING:
    from schemacraft.domain.services.builder import Builder

USER_TEMPLATE = "{{avatar.$thumbnail}} {{first_name}} {{last_name}}"
ROLE_TEMPLATE = "{{name}}"


def date_special(field: Field, on_create: bool, on_update: bool) -> Field:
    """Tag a temporal field as set on create and/or on update."""
    special = []
    if on_create:
        special.append(FieldSpecial.DATE_CREATED)
    if on_update:
        special.append(FieldSpecial.DATE_UPDATED)
    if special:
        field.special(*special)
    return field


class Collection:
    """A logical table definition.

    Attributes:
        builder: The registry that owns this collection and its relations.
        name: Collection name (immutable).
        schema: Opaque storage options, passed through as-is.
        meta: Collection-level metadata. A key is only present once set, so
            an unset ``archive_value`` and an explicit ``None`` stay distinct.
        fields: Declared fields in declaration order.
    """

    def __init__(
        self,
        builder: "Builder",
        name: str,
        schema: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
        fields: list[Field] | None = None,
    ) -> None:
        if not name:
            raise ValueError("Collection name is required")
        self.builder = builder
        self._name = name
        self.schema = {} if schema is None else schema
        self.meta = {} if meta is None else meta
        self.fields = [] if fields is None else fields

    @property
    def name(self) -> str:
        return self._name

    def find_field(self, name: str) -> Field | None:
        """Return the declared field called ``name``, if any."""
        return next((field for field in self.fields if field.name == name), None)

    @property
    def primary_keys(self) -> list[Field]:
        return [field for field in self.fields if field.is_primary_key]

    # Collection metadata

    def hidden(self, value: bool = True) -> "Collection":
        self.meta["hidden"] = value
        return self

    def singleton(self, value: bool = True) -> "Collection":
        self.meta["singleton"] = value
        return self

    def sort(self, field: str) -> "Collection":
        self.meta["sort_field"] = field
        return self

    def archive(
        self,
        field: str,
        archive_value: str | None = "archived",
        unarchive_value: str | None = "draft",
        app_filter: bool = True,
    ) -> "Collection":
        """Use ``field`` as the archive flag of the collection.

        Either value may be ``None`` to state explicitly that there is none.
        """
        self.meta["archive_field"] = field
        self.meta["archive_value"] = archive_value
        self.meta["unarchive_value"] = unarchive_value
        self.meta["archive_app_filter"] = app_filter
        return self

    def accountability(self, value: Accountability) -> "Collection":
        self.meta["accountability"] = value
        return self

    def translation(
        self,
        language: str,
        translation: str,
        singular: str | None = None,
        plural: str | None = None,
    ) -> "Collection":
        """Append a translated collection name."""
        if not isinstance(self.meta.get("translations"), list):
            self.meta["translations"] = []

        entry = {"language": language, "translation": translation}
        if singular is not None:
            entry["singular"] = singular
        if plural is not None:
            entry["plural"] = plural
        self.meta["translations"].append(entry)
        return self

    def relation(self, field: str, related_collection: str | None = None) -> "Collection":
        self.builder.relation(self.name, field, related_collection)
        return self

    # Field declarations

    def field(
        self,
        name: str,
        type: FieldType | str,
        schema: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> Field:
        """Declare a field of ``type`` and return it."""
        field = Field(self.builder, self, name, type, schema, meta)
        self.fields.append(field)
        return field

    def primary_key(self, name: str, type: PrimaryKeyType) -> Field:
        """Declare the primary key.

        Integer keys auto-increment, uuid keys are generated on create,
        string keys are supplied by the caller.

        Raises:
            DuplicatePrimaryKeyError: In strict mode, when the collection
                already has a primary key. Nothing is declared in that case.
        """
        existing = self.primary_keys
        if existing and self.builder.strict_primary_key:
            raise DuplicatePrimaryKeyError(self.name, name, existing[0].name)

        field = self.field(name, type).notNullable().pk()
        if type == "integer":
            return field.autoincrement()
        elif type == "uuid":
            return field.special(FieldSpecial.UUID)
        else:
            return field

    def user_created(self, name: str, template: str = USER_TEMPLATE) -> Field:
        field = (
            self.uuid(name, "user")
            .interface("select-dropdown-m2o", {"template": template})
            .display("user")
        )
        field.relation(USERS_COLLECTION).on_delete(OnDelete.SET_NULL)
        return field

    def role_created(self, name: str, template: str = ROLE_TEMPLATE) -> Field:
        field = (
            self.uuid(name, "role")
            .interface("select-dropdown-m2o", {"template": template})
            .display("related-values", {"template": template})
        )
        field.relation(ROLES_COLLECTION).on_delete(OnDelete.SET_NULL)
        return field

    def user_updated(self, name: str, template: str = USER_TEMPLATE) -> Field:
        field = (
            self.uuid(name, None, "user")
            .interface("select-dropdown-m2o", {"template": template})
            .display("user")
        )
        field.relation(USERS_COLLECTION).on_delete(OnDelete.SET_NULL)
        return field

    def role_updated(self, name: str, template: str = ROLE_TEMPLATE) -> Field:
        field = (
            self.uuid(name, None, "role")
            .interface("select-dropdown-m2o", {"template": template})
            .display("related-values", {"template": template})
        )
        field.relation(ROLES_COLLECTION).on_delete(OnDelete.SET_NULL)
        return field

    def date_created(self, name: str) -> Field:
        return (
            self.timestamp(name, True)
            .interface("datetime")
            .display("datetime", {"relative": True})
        )

    def date_updated(self, name: str) -> Field:
        return (
            self.timestamp(name, False, True)
            .interface("datetime")
            .display("datetime", {"relative": True})
        )

    def string(self, name: str, max_length: int = 255) -> Field:
        return self.field(name, FieldType.STRING, {"max_length": max_length})

    def text(self, name: str) -> Field:
        return self.field(name, FieldType.TEXT)

    def boolean(self, name: str) -> Field:
        return self.field(name, FieldType.BOOLEAN).special(FieldSpecial.BOOLEAN)

    def integer(self, name: str, precision: int = 32) -> Field:
        return self.field(name, FieldType.INTEGER, {"numeric_precision": precision})

    def bigInteger(self, name: str, precision: int = 64) -> Field:
        return self.field(name, FieldType.BIG_INTEGER, {"numeric_precision": precision})

    def float(self, name: str, precision: int = 10, scale: int = 5) -> Field:
        return self.field(
            name,
            FieldType.FLOAT,
            {"numeric_precision": precision, "numeric_scale": scale},
        )

    def decimal(self, name: str, precision: int = 10, scale: int = 5) -> Field:
        return self.field(
            name,
            FieldType.DECIMAL,
            {"numeric_precision": precision, "numeric_scale": scale},
        )

    def datetime(self, name: str, on_create: bool = False, on_update: bool = False) -> Field:
        return date_special(self.field(name, FieldType.DATETIME), on_create, on_update)

    def timestamp(self, name: str, on_create: bool = False, on_update: bool = False) -> Field:
        return date_special(self.field(name, FieldType.TIMESTAMP), on_create, on_update)

    def date(self, name: str, on_create: bool = False, on_update: bool = False) -> Field:
        return date_special(self.field(name, FieldType.DATE), on_create, on_update)

    def time(self, name: str, on_create: bool = False, on_update: bool = False) -> Field:
        return date_special(self.field(name, FieldType.TIME), on_create, on_update)

    def json(self, name: str) -> Field:
        return self.field(name, FieldType.JSON).special(FieldSpecial.JSON)

    def csv(self, name: str) -> Field:
        return self.field(name, FieldType.CSV).special(FieldSpecial.CSV)

    def uuid(
        self,
        name: str,
        on_create: CreateStamp = None,
        on_update: UpdateStamp = None,
    ) -> Field:
        """Declare a uuid field, optionally stamped on create and/or update.

        ``on_create`` is one of ``"uuid"``, ``"user"``, ``"role"``;
        ``on_update`` is one of ``"user"``, ``"role"``. The create tag always
        precedes the update tag. Any other value adds no tag.
        """
        field = self.field(name, FieldType.UUID)

        special = [
            ON_CREATE_SPECIALS.get(on_create),
            ON_UPDATE_SPECIALS.get(on_update),
        ]
        special = [kind for kind in special if kind is not None]
        if special:
            field.special(*special)

        return field

    def hash(self, name: str) -> Field:
        return self.field(name, FieldType.HASH).special(FieldSpecial.HASH)

    def geometryPoint(self, name: str) -> Field:
        return self.field(name, FieldType.GEOMETRY_POINT)

    def geometryLineString(self, name: str) -> Field:
        return self.field(name, FieldType.GEOMETRY_LINE_STRING)

    def geometryPolygon(self, name: str) -> Field:
        return self.field(name, FieldType.GEOMETRY_POLYGON)

    def geometryMultiPoint(self, name: str) -> Field:
        return self.field(name, FieldType.GEOMETRY_MULTI_POINT)

    def geometryMultiLineString(self, name: str) -> Field:
        return self.field(name, FieldType.GEOMETRY_MULTI_LINE_STRING)

    def geometryMultiPolygon(self, name: str) -> Field:
        return self.field(name, FieldType.GEOMETRY_MULTI_POLYGON)

    def file(self, name: str) -> Field:
        field = (
            self.field(name, FieldType.UUID)
            .special(FieldSpecial.FILE)
            .interface("file")
            .display("file")
        )
        field.relation(FILES_COLLECTION).on_delete(OnDelete.SET_NULL)
        return field

    def image(self, name: str) -> Field:
        field = (
            self.field(name, FieldType.UUID)
            .special(FieldSpecial.FILE)
            .interface("file-image")
            .display("image")
        )
        field.relation(FILES_COLLECTION).on_delete(OnDelete.SET_NULL)
        return field

    def render(self) -> dict[str, Any]:
        """Render the collection and its fields in declaration order."""
        return {
            "collection": self.name,
            "schema": deepcopy(self.schema),
            "meta": deepcopy(self.meta),
            "fields": [field.render() for field in self.fields],
        }

    def __repr__(self) -> str:
        return f"Collection({self.name!r}, fields={len(self.fields)})"
