"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the swaggergen test suite.
"""

from collections.abc import Generator

import pytest

from swaggergen.db import Database
from swaggergen.dot_dict import DotDict
from swaggergen.schema import ColumnDescriptor, StaticSchemaProvider

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "tests.fixtures.logging",
]


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (may use DB, filesystem)"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================

PRODUCTS_COLUMNS = [
    ColumnDescriptor("id", "int", allow_null=False),
    ColumnDescriptor("name", "varchar", allow_null=False),
    ColumnDescriptor("photo", "blob", allow_null=True),
]


@pytest.fixture
def products_provider() -> StaticSchemaProvider:
    """
    Provider with a `products` table holding a required name and a photo.

    Returns:
        StaticSchemaProvider: Provider knowing `app.models.Product`
    """
    return StaticSchemaProvider(
        models={"app.models.Product": "products"},
        tables={"products": PRODUCTS_COLUMNS},
    )


@pytest.fixture
def sqlite_db(lg) -> Generator[Database, None, None]:
    """
    In-memory SQLite database with the test models' tables created.

    Yields:
        Database: Connected database
    """
    from tests.fixtures.models import Base

    # In-memory SQLite reuses one connection per thread, so the tables persist
    db = Database(lg, DotDict(url="sqlite://"))
    db.migrate(Base)
    try:
        yield db
    finally:
        db.dispose()


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Add the 'unit' marker to tests without other markers."""
    for item in items:
        if not any(mark.name == "integration" for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
