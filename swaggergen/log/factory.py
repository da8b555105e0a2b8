"""
Creation of root and derived loggers.

Loggers are registered with the logging manager under their topic name, so
asking for the same name again returns the same logger.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any, TextIO

from .config import LogConfig
from .constants import ROOT_NAME
from .formatters import LogFormatter
from .logger import Logger


def _registered(name: str) -> Logger | None:
    existing = logging.root.manager.loggerDict.get(name)
    return existing if isinstance(existing, Logger) else None


def _register(lg: Logger) -> None:
    logging.root.manager.loggerDict[lg.name] = lg


class LoggerFactory:
    """Creates loggers writing to a stream, and topic loggers below them."""

    @staticmethod
    def create_root(
        config: LogConfig,
        logger_class: type[Logger] = Logger,
        stream: TextIO | None = None,
    ) -> Logger:
        """
        Create the "/" logger.

        Example:
            >>> lg = LoggerFactory.create_root(LogConfig.from_params("info"))
            >>> lg.info("generating docs", extra={"model": "Product"})
            [2026-10-19 12:34:56,789] [I] generating docs      [model:Product] [1234] [/]
        """
        return LoggerFactory.create(ROOT_NAME, config, logger_class, stream=stream)

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        logger_class: type[Logger] = Logger,
        fields: Mapping[str, Any] | None = None,
        stream: TextIO | None = None,
    ) -> Logger:
        """
        Create a logger with its own stream handler.

        Args:
            name: Logger name
            config: Level and display settings
            logger_class: Logger class to instantiate
            fields: Structured fields attached to every record
            stream: Destination, stderr by default since documentation goes
                to stdout

        Returns:
            The new logger, or the one already registered under `name`
        """
        existing = _registered(name)
        if existing is not None:
            return existing

        lg = logger_class(name, config, fields)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.parent = logging.root
        lg.propagate = False

        _register(lg)
        return lg

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Get the topic logger below `parent`.

        Examples:
            >>> LoggerFactory.derive(root, "schema").name
            '/schema'
            >>> LoggerFactory.derive(root, ["db", "reflect"]).name
            '/db/reflect'
        """
        if isinstance(tags, str):
            tags = [tags]
        name = "/".join([parent.name.rstrip("/"), *tags])

        existing = _registered(name)
        if existing is not None:
            return existing

        lg = parent.__class__(name, LogConfig(level=parent.get_level()))
        lg.setLevel(logging.NOTSET)
        lg.attach(parent)

        _register(lg)
        return lg
