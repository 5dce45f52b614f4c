"""Core SchemaCraft utilities.

This module exports core utilities for use throughout the package.
"""

from schemacraft.core.config import Settings, get_settings
from schemacraft.core.exceptions import (
    DuplicatePrimaryKeyError,
    SchemaError,
    SchemaLoadError,
)
from schemacraft.core.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "SchemaError",
    "DuplicatePrimaryKeyError",
    "SchemaLoadError",
]
