"""Value domains shared by collection and field descriptors.

The string values are part of the rendered wire contract and must match what
the downstream schema applier expects.
"""

from enum import Enum
from typing import Literal


class FieldType(str, Enum):
    """Storage types a field can be declared with."""

    STRING = "string"
    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    BIG_INTEGER = "bigInteger"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    DATE = "date"
    TIME = "time"
    JSON = "json"
    CSV = "csv"
    UUID = "uuid"
    HASH = "hash"
    GEOMETRY_POINT = "geometry.Point"
    GEOMETRY_LINE_STRING = "geometry.LineString"
    GEOMETRY_POLYGON = "geometry.Polygon"
    GEOMETRY_MULTI_POINT = "geometry.MultiPoint"
    GEOMETRY_MULTI_LINE_STRING = "geometry.MultiLineString"
    GEOMETRY_MULTI_POLYGON = "geometry.MultiPolygon"


class FieldSpecial(str, Enum):
    """Behavioral tags interpreted by the schema applier."""

    BOOLEAN = "boolean"
    JSON = "json"
    CSV = "csv"
    HASH = "hash"
    UUID = "uuid"
    FILE = "file"
    DATE_CREATED = "date-created"
    DATE_UPDATED = "date-updated"
    USER_CREATED = "user-created"
    USER_UPDATED = "user-updated"
    ROLE_CREATED = "role-created"
    ROLE_UPDATED = "role-updated"


class OnDelete(str, Enum):
    """Delete policies for relations."""

    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"
    CASCADE = "CASCADE"
    RESTRICT = "RESTRICT"
    NO_ACTION = "NO ACTION"


# System collections referenced by the stamp and file helpers
USERS_COLLECTION = "directus_users"
ROLES_COLLECTION = "directus_roles"
FILES_COLLECTION = "directus_files"

ACCOUNTABILITY_VALUES = ("all", "activity", None)

Accountability = Literal["all", "activity", None]
PrimaryKeyType = Literal["integer", "uuid", "string"]
CreateStamp = Literal["uuid", "user", "role", None]
UpdateStamp = Literal["user", "role", None]

# uuid() argument -> special tag
ON_CREATE_SPECIALS = {
    "uuid": FieldSpecial.UUID,
    "user": FieldSpecial.USER_CREATED,
    "role": FieldSpecial.ROLE_CREATED,
}
ON_UPDATE_SPECIALS = {
    "user": FieldSpecial.USER_UPDATED,
    "role": FieldSpecial.ROLE_UPDATED,
}


def enum_value(value):
    """Return the plain string behind an enum member, or the value unchanged."""
    if isinstance(value, Enum):
        return value.value
    return value
