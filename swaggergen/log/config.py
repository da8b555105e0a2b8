"""
Logging configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LEVEL_NAMES
from .exceptions import InvalidLogLevelError


def resolve_level(level: str | int | bool) -> int | bool:
    """
    Turn a level name, number or flag into a logging level.

    False (or "false") disables logging, True means info.

    Raises:
        InvalidLogLevelError: If the name is unknown
    """
    if isinstance(level, bool):
        return logging.INFO if level else False
    if isinstance(level, int):
        return level

    name = str(level).strip().lower()
    if name.isdigit():
        return int(name)
    if name in LEVEL_NAMES:
        return LEVEL_NAMES[name]
    raise InvalidLogLevelError(level)


@dataclass(frozen=True)
class LogConfig:
    """
    Settings of a root logger.

    Derived loggers take only the level from their parent; how lines look is
    decided by the root's formatter.
    """

    level: int | bool = logging.INFO
    micros: bool = False

    @classmethod
    def from_params(cls, level: str | int | bool, micros: bool = False) -> LogConfig:
        return cls(level=resolve_level(level), micros=micros)

    @classmethod
    def from_config(cls, config_dict: dict[str, Any], section: str = "logging") -> LogConfig:
        """
        Read a configuration section.

        Args:
            config_dict: Plain configuration, e.g. Config.to_dict()
            section: Dotted path of the section

        Example:
            log_config = LogConfig.from_config(Config("etc/swaggergen.yaml").to_dict())
        """
        current: Any = config_dict
        for key in section.split("."):
            current = current.get(key) if isinstance(current, dict) else None
        if not isinstance(current, dict):
            current = {}

        return cls.from_params(
            current.get("level", "info"), micros=bool(current.get("micros", False))
        )
