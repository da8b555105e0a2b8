"""
Line layout of log records.

    [2026-10-19 12:34:56,789] [I] wrote docs          [model:Product] [1234] [/]
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import FIELDS_COLUMN, FIELDS_COLUMN_MICROS, LINE_FORMAT
from .logger import FIELDS_ATTR


def _render_value(value: Any) -> Any:
    if isinstance(value, BaseException):
        return type(value).__name__
    return value


def render_fields(fields: dict[str, Any] | None) -> str:
    """Render fields as "[key:value]" pairs sorted by key."""
    if not fields:
        return ""
    return " ".join(f"[{k}:{_render_value(fields[k])}]" for k in sorted(fields))


class LogFormatter(logging.Formatter):
    """
    Formatter aligning structured fields in a column after the message.

    Each line ends with the process id and the logger name. Records from
    loggers that are not swaggergen Loggers simply have no fields.
    """

    def __init__(self, config: LogConfig) -> None:
        super().__init__(LINE_FORMAT)
        self._micros = config.micros
        self._column = FIELDS_COLUMN_MICROS if config.micros else FIELDS_COLUMN

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = super().formatTime(record, datefmt)
        if not self._micros:
            return stamp
        return f"{stamp}.{round(record.created * 1_000_000) % 1000:03d}"

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        first, sep, tail = text.partition("\n")

        fields = render_fields(getattr(record, FIELDS_ATTR, None))
        if fields:
            first = first.ljust(self._column - 1) + " " + fields
        first = f"{first} [{record.process}] [{record.name}]"
        return first + sep + tail
