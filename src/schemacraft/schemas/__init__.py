"""Pydantic schemas for rendered output."""

from schemacraft.schemas.render_schemas import (
    CollectionMetaSchema,
    CollectionTranslation,
    FieldMetaOptions,
    FieldSchemaOptions,
    RenderedCollection,
    RenderedField,
    RenderedRelation,
    RenderedSchema,
)

__all__ = [
    "CollectionMetaSchema",
    "CollectionTranslation",
    "FieldMetaOptions",
    "FieldSchemaOptions",
    "RenderedCollection",
    "RenderedField",
    "RenderedRelation",
    "RenderedSchema",
]
