"""
Levels and layout of log lines.
"""

import logging

TRACE = 5

# Level used for loggers configured with level=False; nothing reaches it
OFF = logging.CRITICAL + 1

LEVEL_NAMES: dict[str, int | bool] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
    "false": False,
}

LINE_FORMAT = "[%(asctime)s] [%(levelname).1s] %(message)s"

# Column where structured fields start
FIELDS_COLUMN = 70
FIELDS_COLUMN_MICROS = 74

ROOT_NAME = "/"
