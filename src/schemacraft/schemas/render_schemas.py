"""Pydantic schemas for rendered schema descriptors.

These models describe the wire contract handed to the schema applier. They
are used to check rendered output before it is written; ``model_dump`` with
``exclude_unset=True`` reproduces the input, so keys that were never set stay
absent and explicit ``None`` values survive.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class CollectionTranslation(BaseModel):
    """A translated collection name."""

    language: str
    translation: str
    singular: str | None = None
    plural: str | None = None


class CollectionMetaSchema(BaseModel):
    """Collection-level metadata."""

    model_config = ConfigDict(extra="allow")

    sort_field: str | None = None
    archive_field: str | None = None
    archive_value: str | None = None
    unarchive_value: str | None = None
    archive_app_filter: bool | None = None
    accountability: Literal["all", "activity"] | None = None
    hidden: bool | None = None
    singleton: bool | None = None
    translations: list[CollectionTranslation] | None = None


class FieldSchemaOptions(BaseModel):
    """Storage constraints of a field."""

    model_config = ConfigDict(extra="allow")

    max_length: int | None = None
    numeric_precision: int | None = None
    numeric_scale: int | None = None
    nullable: bool | None = None
    primary_key: bool | None = None
    autoincrement: bool | None = None


class FieldMetaOptions(BaseModel):
    """Presentation metadata of a field."""

    model_config = ConfigDict(extra="allow")

    interface: str | None = None
    options: dict[str, Any] | None = None
    display: str | None = None
    display_options: dict[str, Any] | None = None
    special: list[str] | None = None


class RenderedField(BaseModel):
    """A rendered field descriptor."""

    field: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    schema_: FieldSchemaOptions = Field(default_factory=FieldSchemaOptions, alias="schema")
    meta: FieldMetaOptions = Field(default_factory=FieldMetaOptions)

    model_config = ConfigDict(populate_by_name=True)


class RenderedCollection(BaseModel):
    """A rendered collection descriptor."""

    collection: str = Field(..., min_length=1)
    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")
    meta: CollectionMetaSchema = Field(default_factory=CollectionMetaSchema)
    fields: list[RenderedField] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class RenderedRelation(BaseModel):
    """A rendered relation."""

    collection: str
    field: str
    related_collection: str | None = None
    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")

    model_config = ConfigDict(populate_by_name=True)


class RenderedSchema(BaseModel):
    """Everything a builder renders."""

    collections: list[RenderedCollection] = Field(default_factory=list)
    relations: list[RenderedRelation] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Dump back to the wire shape, keeping only keys that were set."""
        return self.model_dump(by_alias=True, exclude_unset=True)
