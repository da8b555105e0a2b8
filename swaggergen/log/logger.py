"""
Logger with structured fields and topic-named children.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config import LogConfig
from .constants import OFF, TRACE

# Record attribute holding the structured fields of a record
FIELDS_ATTR = "swaggergen_fields"


class Logger(logging.Logger):
    """
    Logger whose records carry structured fields.

    Fields given at creation are attached to every record together with the
    `extra` of each call; LogFormatter renders them as `[key:value]`.

    Loggers derived from another one own no handlers and hand their records
    to the handlers of the root they were derived from, so a whole tree of
    topics ("/", "/db", "/schema") writes through one stream.
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        fields: Mapping[str, Any] | None = None,
    ) -> None:
        self._config = config if config is not None else LogConfig()
        self._off = self._config.level is False
        super().__init__(name, OFF if self._off else self._config.level)
        self._fields = dict(fields or {})
        self._root: Logger | None = None

    @property
    def root_logger(self) -> Logger:
        """The logger owning the handlers this one writes through."""
        return self._root if self._root is not None else self

    def get_level(self) -> int | bool:
        """Configured level; False when logging is disabled."""
        return self._config.level

    def attach(self, parent: Logger) -> None:
        """Make this logger a handler-less child of `parent`."""
        self.parent = parent
        self.propagate = False
        self._root = parent.root_logger

    def isEnabledFor(self, level: int) -> bool:
        if self._off or not super().isEnabledFor(level):
            return False
        if isinstance(self.parent, Logger):
            return self.parent.isEnabledFor(level)
        return True

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: str,
        args: tuple,
        exc_info: Any,
        func: str | None = None,
        extra: Mapping[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        fields = {**self._fields, **(extra or {})}
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, None, sinfo
        )
        setattr(record, FIELDS_ATTR, fields)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at TRACE level, below debug."""
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    def callHandlers(self, record: logging.LogRecord) -> None:
        if self._root is None:
            super().callHandlers(record)
            return

        for handler in self._root.handlers:
            if record.levelno >= handler.level:
                handler.handle(record)
