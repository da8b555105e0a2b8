"""
Value types exchanged between schema providers and the generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Read-only metadata for one table column.

    `type` is the raw storage type name (e.g. "int", "varchar", "blob") and is
    matched case-sensitively by the type mapping.
    """

    name: str
    type: str
    allow_null: bool = True

    @property
    def required(self) -> bool:
        """True when the column does not accept NULL."""
        return not self.allow_null

    @classmethod
    def from_dict(cls, data: Any) -> ColumnDescriptor:
        """
        Build a descriptor from a mapping.

        Accepts `allow_null` or `nullable` for nullability;
        columns are nullable unless stated otherwise.

        Args:
            data: Mapping (or DotDict) with `name` and `type` keys

        Returns:
            ColumnDescriptor instance

        Raises:
            ValueError: If name or type is missing
        """
        name = data.get("name")
        type_ = data.get("type")
        if not name or not type_:
            raise ValueError(f"column definition needs 'name' and 'type': {data}")

        allow_null = data.get("allow_null")
        if allow_null is None:
            allow_null = data.get("nullable", True)

        return cls(name=str(name), type=str(type_), allow_null=bool(allow_null))


@dataclass(frozen=True)
class ModelRef:
    """A resolved model: where it came from, its display name and its table."""

    identifier: str
    name: str
    table_name: str


@dataclass(frozen=True)
class ModelDescriptor:
    """
    Everything the generator knows about one model.

    Built once when a DocsGenerator is constructed and never mutated.
    """

    model_class_identifier: str
    model_name: str
    table_name: str
    columns: tuple[ColumnDescriptor, ...]
