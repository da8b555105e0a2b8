"""
Logging configuration errors.
"""

from typing import Any


class LogError(Exception):
    """Logging could not be set up."""


class InvalidLogLevelError(LogError):
    """A level name or number is not recognized."""

    def __init__(self, level: Any) -> None:
        super().__init__(f"Unknown log level '{level}'")
        self.level = level
