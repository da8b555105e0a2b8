"""
Exception hierarchy for the documentation generator.

All failures of a DocsGenerator happen while it is being constructed, so the
classes here describe why a model could not be turned into documentation.
"""

from typing import Any


class GeneratorError(Exception):
    """
    Base exception for all swaggergen errors.

    Allows callers to catch every construction failure with a single except
    clause.

    Example:
        try:
            generator = DocsGenerator("app.models.Product", provider)
        except GeneratorError as e:
            lg.error(f"cannot document model: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class UnknownModelError(GeneratorError):
    """
    The model identifier does not name an importable class.

    Examples:
        - Module cannot be imported
        - Module has no attribute with the given name
        - Attribute exists but is not a class
    """

    pass


class UnsupportedModelError(GeneratorError):
    """
    The model class cannot report its backing table name.

    Raised for classes without `__tablename__` or `__table__`.
    """

    pass


class ConfigurationError(GeneratorError):
    """
    The environment cannot supply the model's schema.

    Examples:
        - No database connection configured
        - Table does not exist in the connected database
        - Table exists but has no columns
    """

    pass
