"""Exceptions raised while building or loading schemas."""


class SchemaError(Exception):
    """Base class for all schema-related errors."""
    pass


class DuplicatePrimaryKeyError(SchemaError):
    """Raised in strict mode when a collection declares a second primary key."""

    def __init__(self, collection: str, field: str, existing: str):
        self.collection = collection
        self.field = field
        self.existing = existing
        super().__init__(
            f"Collection '{collection}' already has primary key '{existing}', "
            f"cannot add '{field}'"
        )


class SchemaLoadError(SchemaError):
    """Raised when a schema target cannot be imported or resolved."""
    pass
