"""
Database connection wrapper.

Provides a SQLAlchemy engine for any supported URL. Schema providers only
need read access to table metadata, so there is no session pooling or
reconnection handling here.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import sqlalchemy

from ..log import LoggerFactory

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine, Inspector

# dialect:// or dialect+driver://
_URL_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_]*(\+[a-zA-Z0-9_]+)?://")


def _check_config(cfg: Any) -> None:
    """Reject a connection section without a usable URL."""
    if cfg is None:
        raise ValueError("Configuration cannot be None")

    url = getattr(cfg, "url", None)
    if not url:
        raise ValueError("Database configuration has no 'url'")

    if not isinstance(url, str):
        raise ValueError(f"Database URL must be a string, got {type(url).__name__}")

    if not _URL_PATTERN.match(url):
        raise ValueError(f"Invalid database URL: {url}")


def _engine_options(cfg: Any) -> dict[str, Any]:
    """Keyword arguments for create_engine."""
    options: dict[str, Any] = {}

    if cfg.url.startswith("sqlite"):
        check_same_thread = getattr(cfg, "check_same_thread", None)
        options["connect_args"] = {
            "check_same_thread": bool(check_same_thread)
            if check_same_thread is not None
            else False
        }

    if getattr(cfg, "echo", False):
        options["echo"] = True

    return options


class Database:
    """
    SQLAlchemy-backed database connection.

    Example:
        >>> cfg = DotDict(url="sqlite:///./app.db")
        >>> db = Database(lg, cfg)
        >>> db.inspector().get_table_names()
        ['products']
    """

    def __init__(self, lg: Any, cfg: Any) -> None:
        """
        Create the engine for `cfg.url`.

        Args:
            lg: Parent logger; the database logs below it as "/db"
            cfg: Database configuration object with 'url' field and optional
                'echo' and 'check_same_thread' fields

        Raises:
            ValueError: If logger or configuration is invalid
        """
        if lg is None:
            raise ValueError("Logger cannot be None")

        _check_config(cfg)

        self._cfg = cfg
        self._lg = LoggerFactory.derive(lg, "db")
        self._engine: Engine = sqlalchemy.create_engine(
            cfg.url, **_engine_options(cfg)
        )

        self._lg.debug("initialized", extra={"url": self.url})

    @property
    def cfg(self) -> Any:
        """Connection section this database was created from."""
        return self._cfg

    @property
    def url(self) -> str:
        """URL with the password masked, safe for logs."""
        return self._engine.url.render_as_string(hide_password=True)

    @property
    def engine(self) -> Engine:
        """SQLAlchemy engine of the connection."""
        return self._engine

    def inspector(self) -> Inspector:
        """Create a schema inspector bound to the engine."""
        return sqlalchemy.inspect(self._engine)

    def migrate(self, base: Any) -> None:
        """
        Create all tables defined in the metadata if they don't exist.

        Args:
            base: SQLAlchemy declarative base (or MetaData) with table definitions
        """
        metadata = getattr(base, "metadata", base)
        metadata.create_all(self._engine)
        self._lg.debug("migrated schema", extra={"tables": len(metadata.tables)})

    def dispose(self) -> None:
        """Close pooled connections and release the engine."""
        self._engine.dispose()
        self._lg.debug("disposed engine")
