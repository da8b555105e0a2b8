"""
Schema provider interface.

This module defines the abstract base class for the capability a
DocsGenerator is constructed with: resolving a model identifier to its table
and looking up that table's columns.
"""

import abc

from .types import ColumnDescriptor, ModelRef


class SchemaProvider(abc.ABC):
    """
    Abstract base class for schema providers.

    Implementations decide where models and table metadata come from (a live
    database, a configuration file, ...). The generator only relies on the two
    methods below and on the exceptions they raise.
    """

    @abc.abstractmethod
    def resolve_model(self, model: str | type) -> ModelRef:
        """
        Resolve a model identifier to its display name and table.

        Args:
            model: Dotted path of the model class, or the class itself

        Returns:
            ModelRef for the model

        Raises:
            UnknownModelError: If the identifier does not name a class
            UnsupportedModelError: If the class has no table name
        """
        pass  # pragma: no cover

    @abc.abstractmethod
    def get_columns(self, table_name: str) -> list[ColumnDescriptor] | None:
        """
        Get the columns of a table in declaration order.

        Args:
            table_name: Name of the table

        Returns:
            List of column descriptors, or None if the table does not exist

        Raises:
            ConfigurationError: If no connection is configured
        """
        pass  # pragma: no cover
