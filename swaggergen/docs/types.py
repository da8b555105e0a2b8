"""
Column rules: storage type to OpenAPI type, descriptions, file uploads.
"""

import re
from collections.abc import Iterable
from types import MappingProxyType

from ..schema.types import ColumnDescriptor

TYPE_MAP = MappingProxyType(
    {
        "tinyint": "integer",
        "smallint": "integer",
        "mediumint": "integer",
        "int": "integer",
        "bigint": "integer",
        "float": "number",
        "double": "number",
        "decimal": "number",
        "char": "string",
        "varchar": "string",
        "text": "string",
        "mediumtext": "string",
        "longtext": "string",
        "date": "string",
        "datetime": "string",
        "timestamp": "string",
        "time": "string",
        "json": "object",
        "boolean": "boolean",
    }
)

DEFAULT_TYPE = "string"

FILE_UPLOAD_TYPES = frozenset({"blob", "mediumblob", "longblob", "binary"})

DATETIME_FORMAT = " (Format: YYYY-MM-DD HH:mm:ss)"
DATE_FORMAT = " (Format: YYYY-MM-DD)"


def map_type(storage_type: str) -> str:
    """OpenAPI type for a storage type; case-sensitive, "string" when unknown."""
    return TYPE_MAP.get(storage_type, DEFAULT_TYPE)


# Characters after which a new word starts
_WORD_START = re.compile(r"(^|[ \t\r\n\f\v])([^ \t\r\n\f\v])")


def _capitalize_words(text: str) -> str:
    # Only the first letter changes: "api_URL" reads "Api URL", not "Api Url"
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), text)



def describe_column(column: ColumnDescriptor) -> str:
    """
    Human readable description of a column.

    Underscores become spaces and every word is capitalized. Date and time
    columns get their expected input format appended.

    Example:
        >>> describe_column(ColumnDescriptor("created_at", "datetime"))
        'Created At (Format: YYYY-MM-DD HH:mm:ss)'
    """
    description = _capitalize_words(column.name.replace("_", " "))
    if column.type in ("datetime", "timestamp"):
        description += DATETIME_FORMAT
    elif column.type == "date":
        description += DATE_FORMAT
    return description


def is_file_upload_column(column: ColumnDescriptor) -> bool:
    """True when the column stores binary payloads (compared case-insensitively)."""
    return column.type.lower() in FILE_UPLOAD_TYPES


def has_file_upload_columns(columns: Iterable[ColumnDescriptor]) -> bool:
    return any(is_file_upload_column(col) for col in columns)
