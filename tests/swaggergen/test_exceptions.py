"""
Tests for the swaggergen exception hierarchy.

Tests key exception features including:
- Base GeneratorError with context
- Specific exception classes
- String representations
"""

import pytest

from swaggergen.exceptions import (
    ConfigurationError,
    GeneratorError,
    UnknownModelError,
    UnsupportedModelError,
)

# =============================================================================
# Test GeneratorError Base Class
# =============================================================================


@pytest.mark.unit
class TestGeneratorError:
    """Test GeneratorError base class."""

    def test_with_message(self):
        """Test GeneratorError with simple message."""
        error = GeneratorError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.context == {}

    def test_with_context(self):
        """Test context is kept and rendered after the message."""
        error = GeneratorError("Cannot open database", url="sqlite://", attempt=2)

        assert error.context == {"url": "sqlite://", "attempt": 2}
        assert str(error) == "Cannot open database (url=sqlite://, attempt=2)"

    def test_can_be_raised(self):
        """Test GeneratorError can be raised and caught."""
        with pytest.raises(GeneratorError) as exc_info:
            raise GeneratorError("Test error")
        assert exc_info.value.message == "Test error"


# =============================================================================
# Test Specific Errors
# =============================================================================


@pytest.mark.unit
class TestSpecificErrors:
    """Test the specific construction failures."""

    @pytest.mark.parametrize(
        "error_cls", [UnknownModelError, UnsupportedModelError, ConfigurationError]
    )
    def test_inherit_from_generator_error(self, error_cls):
        """Test each failure can be caught as GeneratorError."""
        error = error_cls("failed", model="app.models.Product")

        assert isinstance(error, GeneratorError)
        assert isinstance(error, Exception)
        assert str(error) == "failed (model=app.models.Product)"

    def test_distinct_classes(self):
        """Test failures can be told apart."""
        with pytest.raises(UnknownModelError):
            try:
                raise UnknownModelError("The model class 'x' does not exist.")
            except (UnsupportedModelError, ConfigurationError):
                pytest.fail("caught by the wrong class")
