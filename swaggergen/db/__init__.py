"""
Database connections used to reflect table schemas.
"""

from .database import Database
from .db import Manager

__all__ = ["Database", "Manager"]
