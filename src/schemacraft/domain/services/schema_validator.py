"""Consistency checks for built schemas.

Building never validates cross references; this service reports what a
schema applier would reject, so problems surface before the schema leaves
the process. It is never run implicitly by ``render()``.
"""

import re
from dataclasses import dataclass

from schemacraft.domain.entities.collection import Collection
from schemacraft.domain.entities.types import ACCOUNTABILITY_VALUES, FieldType
from schemacraft.domain.services.builder import Builder

# Pattern for valid collection and field names
NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


@dataclass
class SchemaValidationError:
    """A single schema validation error."""

    path: str
    message: str
    code: str


class SchemaValidator:
    """Validator for the collections and relations held by a builder."""

    MAX_NAME_LENGTH = 64

    @classmethod
    def validate_name(cls, name: str, path: str) -> list[SchemaValidationError]:
        """Validate a collection or field name.

        Args:
            name: The name to validate.
            path: Location of the name (for error messages).

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []

        if not name:
            errors.append(
                SchemaValidationError(
                    path=path,
                    message="Name is required",
                    code="name_required",
                )
            )
            return errors

        if len(name) > cls.MAX_NAME_LENGTH:
            errors.append(
                SchemaValidationError(
                    path=path,
                    message=f"Name must be at most {cls.MAX_NAME_LENGTH} characters",
                    code="name_too_long",
                )
            )

        if not NAME_PATTERN.match(name):
            errors.append(
                SchemaValidationError(
                    path=path,
                    message="Name must start with a letter or underscore and contain only alphanumeric characters and underscores",
                    code="name_invalid_format",
                )
            )

        return errors

    @classmethod
    def validate_fields(cls, collection: Collection) -> list[SchemaValidationError]:
        """Validate the fields of a collection.

        Checks names, known types, duplicates and primary key constraints.
        """
        errors = []
        valid_types = {t.value for t in FieldType}
        seen_names: set[str] = set()
        primary_keys = []

        for i, field in enumerate(collection.fields):
            path = f"{collection.name}.fields[{i}]"
            errors.extend(cls.validate_name(field.name, f"{path}.field"))

            if field.type not in valid_types:
                errors.append(
                    SchemaValidationError(
                        path=f"{path}.type",
                        message=f"Unknown field type '{field.type}'",
                        code="field_type_invalid",
                    )
                )

            if field.name in seen_names:
                errors.append(
                    SchemaValidationError(
                        path=f"{path}.field",
                        message=f"Duplicate field name '{field.name}'",
                        code="field_name_duplicate",
                    )
                )
            seen_names.add(field.name)

            if field.is_primary_key:
                primary_keys.append(field.name)
                if field.schema.get("nullable", False) is not False:
                    errors.append(
                        SchemaValidationError(
                            path=f"{path}.schema.nullable",
                            message=f"Primary key '{field.name}' must not be nullable",
                            code="primary_key_nullable",
                        )
                    )

        if len(primary_keys) > 1:
            errors.append(
                SchemaValidationError(
                    path=f"{collection.name}.fields",
                    message=f"Multiple primary keys: {', '.join(primary_keys)}",
                    code="primary_key_multiple",
                )
            )

        return errors

    @classmethod
    def validate_meta(cls, collection: Collection) -> list[SchemaValidationError]:
        """Validate collection metadata against the declared fields."""
        errors = []
        meta = collection.meta
        path = f"{collection.name}.meta"

        for key in ("sort_field", "archive_field"):
            name = meta.get(key)
            if name is not None and collection.find_field(name) is None:
                errors.append(
                    SchemaValidationError(
                        path=f"{path}.{key}",
                        message=f"Field '{name}' does not exist in '{collection.name}'",
                        code=f"{key}_unknown",
                    )
                )

        if "accountability" in meta and meta["accountability"] not in ACCOUNTABILITY_VALUES:
            errors.append(
                SchemaValidationError(
                    path=f"{path}.accountability",
                    message=f"Invalid accountability '{meta['accountability']}'. Valid values: all, activity, null",
                    code="accountability_invalid",
                )
            )

        return errors

    @classmethod
    def validate_relations(cls, builder: Builder) -> list[SchemaValidationError]:
        """Validate that every relation starts at a declared field."""
        errors = []

        for i, relation in enumerate(builder.relations):
            path = f"relations[{i}]"
            collection = builder.get_collection(relation.collection)
            if collection is None:
                errors.append(
                    SchemaValidationError(
                        path=f"{path}.collection",
                        message=f"Unknown collection '{relation.collection}'",
                        code="relation_collection_unknown",
                    )
                )
            elif collection.find_field(relation.field) is None:
                errors.append(
                    SchemaValidationError(
                        path=f"{path}.field",
                        message=f"Field '{relation.field}' does not exist in '{relation.collection}'",
                        code="relation_field_unknown",
                    )
                )

        return errors

    @classmethod
    def validate_collection(cls, collection: Collection) -> list[SchemaValidationError]:
        errors = []
        errors.extend(cls.validate_name(collection.name, f"{collection.name}.collection"))
        errors.extend(cls.validate_fields(collection))
        errors.extend(cls.validate_meta(collection))
        return errors

    @classmethod
    def validate(cls, builder: Builder) -> list[SchemaValidationError]:
        """Validate every collection and relation of a builder.

        Args:
            builder: The builder to validate.

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []
        for collection in builder.collections:
            errors.extend(cls.validate_collection(collection))
        errors.extend(cls.validate_relations(builder))
        return errors
