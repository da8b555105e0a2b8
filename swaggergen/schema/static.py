"""
Schema provider serving models and tables from in-memory mappings.

Useful when no database is reachable: the schema can be written into the
configuration file instead.

    schema:
      models:
        app.models.Product: products
      tables:
        products:
          - {name: id, type: int, nullable: false}
          - {name: name, type: varchar, nullable: false}
          - {name: photo, type: blob}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..exceptions import ConfigurationError
from .interface import SchemaProvider
from .models import model_ref
from .types import ColumnDescriptor, ModelRef


def _to_column(col: ColumnDescriptor | Any) -> ColumnDescriptor:
    if isinstance(col, ColumnDescriptor):
        return col
    return ColumnDescriptor.from_dict(col)


class StaticSchemaProvider(SchemaProvider):
    """
    Provider over fixed model and table definitions.

    Model identifiers are looked up in `models`; their display name is the
    last dotted component. Identifiers not listed there are imported, and
    model classes may be passed directly, as long as they carry a table name.
    `tables=None` means no schema source is configured at all, which is
    reported the same way as a missing database connection.
    """

    def __init__(
        self,
        models: Mapping[str, str] | None = None,
        tables: Mapping[str, Iterable[ColumnDescriptor | Any]] | None = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            models: Model identifier -> table name
            tables: Table name -> column descriptors (or mappings accepted by
                ColumnDescriptor.from_dict)
        """
        self._models = dict(models or {})
        self._tables: dict[str, tuple[ColumnDescriptor, ...]] | None = None
        if tables is not None:
            self._tables = {
                name: tuple(_to_column(c) for c in (cols or ()))
                for name, cols in tables.items()
            }

    @classmethod
    def from_config(cls, cfg: Any) -> StaticSchemaProvider:
        """
        Build a provider from a `schema` configuration section.

        Args:
            cfg: DotDict (or mapping) with optional `models` and `tables` keys
        """
        models = cfg.get("models") or {}
        tables = cfg.get("tables")
        return cls(
            models={str(k): str(v) for k, v in models.items()},
            tables=dict(tables.items()) if tables is not None else None,
        )

    def resolve_model(self, model: str | type) -> ModelRef:
        if isinstance(model, type) or model not in self._models:
            return model_ref(model)

        name = model.replace(":", ".").rsplit(".", 1)[-1]
        return ModelRef(identifier=model, name=name, table_name=self._models[model])

    def get_columns(self, table_name: str) -> list[ColumnDescriptor] | None:
        if self._tables is None:
            raise ConfigurationError("Database connection is not configured")

        columns = self._tables.get(table_name)
        return list(columns) if columns is not None else None
