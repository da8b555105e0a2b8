"""
OpenAPI documentation for model CRUD endpoints.

Example:
    from swaggergen.docs import DocsGenerator

    generator = DocsGenerator("app.models.Product", provider)
    print(generator.generate_crud_docs())

    # Generate to file
    generator.generate_to_file(Path("docs/Product.php"))
"""

from .generator import DocsGenerator
from .types import (
    TYPE_MAP,
    describe_column,
    has_file_upload_columns,
    is_file_upload_column,
    map_type,
)

__all__ = [
    "DocsGenerator",
    "TYPE_MAP",
    "map_type",
    "describe_column",
    "is_file_upload_column",
    "has_file_upload_columns",
]
