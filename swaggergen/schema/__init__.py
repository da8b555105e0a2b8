"""
Schema providers: where model and table metadata come from.

Example:
    from swaggergen.schema import StaticSchemaProvider, ColumnDescriptor

    provider = StaticSchemaProvider(
        models={"app.models.Product": "products"},
        tables={"products": [ColumnDescriptor("id", "int", False)]},
    )
"""

from .database import STORAGE_TYPE_ALIASES, DatabaseSchemaProvider, storage_type_name
from .interface import SchemaProvider
from .models import import_model, model_identifier, table_name_of
from .static import StaticSchemaProvider
from .types import ColumnDescriptor, ModelDescriptor, ModelRef

__all__ = [
    "SchemaProvider",
    "DatabaseSchemaProvider",
    "StaticSchemaProvider",
    "ColumnDescriptor",
    "ModelDescriptor",
    "ModelRef",
    "STORAGE_TYPE_ALIASES",
    "storage_type_name",
    "import_model",
    "model_identifier",
    "table_name_of",
]
