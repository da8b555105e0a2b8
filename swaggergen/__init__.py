from importlib.metadata import PackageNotFoundError, version

from .config import Config
from .docs import DocsGenerator
from .dot_dict import DotDict
from .exceptions import (
    ConfigurationError,
    GeneratorError,
    UnknownModelError,
    UnsupportedModelError,
)
from .schema import (
    ColumnDescriptor,
    DatabaseSchemaProvider,
    ModelDescriptor,
    SchemaProvider,
    StaticSchemaProvider,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("swaggergen")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    "__version__",
    "DocsGenerator",
    "SchemaProvider",
    "DatabaseSchemaProvider",
    "StaticSchemaProvider",
    "ColumnDescriptor",
    "ModelDescriptor",
    "GeneratorError",
    "UnknownModelError",
    "UnsupportedModelError",
    "ConfigurationError",
    "Config",
    "DotDict",
]
