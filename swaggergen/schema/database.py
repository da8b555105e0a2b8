"""
Schema provider backed by a live database.

Model classes are imported by dotted path; their table is reflected through
SQLAlchemy's inspector so the documentation follows the deployed schema
rather than the model's Python declarations.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import sqlalchemy.exc

from ..exceptions import ConfigurationError
from ..log import LoggerFactory
from .interface import SchemaProvider
from .models import model_ref
from .types import ColumnDescriptor, ModelRef

if TYPE_CHECKING:
    from sqlalchemy.engine import Dialect

    from ..db import Database

# Dialect spellings of the storage types understood by the type mapping
STORAGE_TYPE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "integer": "int",
        "int2": "smallint",
        "int4": "int",
        "int8": "bigint",
        "serial": "int",
        "bigserial": "bigint",
        "real": "float",
        "float4": "float",
        "float8": "double",
        "double precision": "double",
        "numeric": "decimal",
        "bool": "boolean",
        "character": "char",
        "character varying": "varchar",
        "nvarchar": "varchar",
        "nchar": "char",
        "clob": "text",
        "timestamp without time zone": "timestamp",
        "timestamp with time zone": "timestamp",
        "timestamptz": "timestamp",
        "time without time zone": "time",
        "time with time zone": "time",
        "jsonb": "json",
        "bytea": "blob",
        "varbinary": "binary",
        "tinyblob": "blob",
    }
)

_TYPE_MODIFIERS = ("unsigned", "zerofill")


def storage_type_name(
    type_: Any, dialect: Dialect, aliases: Mapping[str, str] = STORAGE_TYPE_ALIASES
) -> str:
    """
    Get the raw storage type name of a reflected column type.

    The type is compiled for the engine's dialect ("VARCHAR(50)",
    "INT UNSIGNED", "DOUBLE PRECISION"), reduced to its lower-case base name
    and translated through the alias table.

    Args:
        type_: SQLAlchemy type instance from the inspector
        dialect: Dialect of the inspected engine
        aliases: Dialect spelling -> storage type name

    Returns:
        Storage type name, e.g. "varchar"
    """
    try:
        compiled = type_.compile(dialect=dialect)
    except sqlalchemy.exc.CompileError:
        compiled = type(type_).__name__

    words = compiled.split("(", 1)[0].strip().lower().split()
    name = " ".join(w for w in words if w not in _TYPE_MODIFIERS)
    return aliases.get(name, name)


class DatabaseSchemaProvider(SchemaProvider):
    """
    Resolves models by import and reflects their tables from a database.

    Example:
        >>> manager = Manager(lg, config)
        >>> manager.setup()
        >>> provider = DatabaseSchemaProvider(lg, manager.db("db"))
        >>> DocsGenerator("app.models.Product", provider).generate_crud_docs()
    """

    def __init__(
        self,
        lg: Any,
        db: Database | None,
        type_aliases: Mapping[str, str] | None = None,
        schema: str | None = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            lg: Logger instance
            db: Database connection; None when no connection is configured
            type_aliases: Extra dialect spelling -> storage type translations,
                applied on top of STORAGE_TYPE_ALIASES
            schema: Database schema to inspect (dialect default when None)
        """
        if lg is None:
            raise ValueError("Logger cannot be None")

        self._db = db
        self._schema = schema
        self._lg = LoggerFactory.derive(lg, "schema")
        self._aliases = MappingProxyType(
            {
                **STORAGE_TYPE_ALIASES,
                **{k.lower(): v for k, v in (type_aliases or {}).items()},
            }
        )

    @property
    def db(self) -> Database | None:
        return self._db

    @property
    def type_aliases(self) -> Mapping[str, str]:
        return self._aliases

    def resolve_model(self, model: str | type) -> ModelRef:
        ref = model_ref(model)
        self._lg.debug(
            "resolved model",
            extra={"model": ref.identifier, "table": ref.table_name},
        )
        return ref

    def get_columns(self, table_name: str) -> list[ColumnDescriptor] | None:
        if self._db is None:
            raise ConfigurationError("Database connection is not configured")

        try:
            inspector = self._db.inspector()
            if not inspector.has_table(table_name, schema=self._schema):
                self._lg.debug("table not found", extra={"table": table_name})
                return None
            reflected = inspector.get_columns(table_name, schema=self._schema)
        except sqlalchemy.exc.OperationalError as e:
            raise ConfigurationError(
                "Database connection is not available", url=self._db.url
            ) from e

        dialect = self._db.engine.dialect
        columns = [
            ColumnDescriptor(
                name=col["name"],
                type=storage_type_name(col["type"], dialect, self._aliases),
                allow_null=bool(col.get("nullable", True)),
            )
            for col in reflected
        ]

        self._lg.debug(
            "reflected table",
            extra={"table": table_name, "columns": len(columns)},
        )
        return columns
