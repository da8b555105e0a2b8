"""
Structured logging on top of the standard logging module.

Loggers are named after topics: the root is "/", and the database and
schema layers log below it as "/db", "/dbs" and "/schema". Records carry
`[key:value]` fields from the `extra` of each call, and a level of False
switches a logger off entirely. A TRACE level sits below debug.
"""

import logging

from .config import LogConfig, resolve_level
from .constants import TRACE
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

logging.addLevelName(TRACE, "TRACE")

__all__ = [
    "TRACE",
    "Logger",
    "LoggerFactory",
    "LogConfig",
    "LogFormatter",
    "LogError",
    "InvalidLogLevelError",
    "resolve_level",
]
