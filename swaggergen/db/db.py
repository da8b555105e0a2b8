"""
Named database connections.

Each entry of the `dbs` configuration section becomes one Database:

    dbs:
      db:
        url: mysql+pymysql://docs@localhost/shop
      reporting:
        url: sqlite:///./reporting.db
"""

from typing import Any

import sqlalchemy.exc

from ..log import LoggerFactory
from .database import Database

# ImportError is raised when the DBAPI driver of a dialect is not installed
_SETUP_ERRORS = (ValueError, ImportError, sqlalchemy.exc.ArgumentError)


class Manager:
    """
    Connections of the `dbs` section, looked up by name.

    A connection that cannot be set up is remembered together with its error
    and does not keep the others from being used.
    """

    def __init__(self, lg: Any, cfg: Any) -> None:
        """
        Args:
            lg: Parent logger; the manager logs below it as "/dbs"
            cfg: Configuration holding the `dbs` section

        Raises:
            ValueError: If lg or cfg is None
        """
        if cfg is None:
            raise ValueError("Configuration cannot be None")
        if lg is None:
            raise ValueError("Logger cannot be None")

        self._cfg = cfg
        self._lg = lg
        self._dbs_lg = LoggerFactory.derive(lg, "dbs")
        self._dbs: dict[str, Database] = {}
        self._failed: dict[str, Exception] = {}

    def setup(self) -> None:
        """
        Create a Database for every configured connection.

        Raises:
            ValueError: If the `dbs` section is missing or empty
            RuntimeError: If not a single connection could be created
        """
        section = getattr(self._cfg, "dbs", None)
        if not section:
            raise ValueError("No database configurations found in 'dbs' section")

        for name, db_cfg in section.items():
            try:
                db = Database(self._lg, db_cfg)
            except _SETUP_ERRORS as e:
                self._failed[name] = e
                self._dbs_lg.error(
                    f"cannot set up database '{name}': {e}",
                    extra={"db": name, "exception": e},
                )
                continue

            self._dbs[name] = db
            self._dbs_lg.debug("registered database", extra={"db": name})

        if not self._dbs:
            raise RuntimeError("Failed to setup any database connections")
        if self._failed:
            self._dbs_lg.warning(
                "some databases are unavailable",
                extra={"ok": len(self._dbs), "failed": len(self._failed)},
            )

    def db(self, name: str) -> Database:
        """
        Connection named `name`.

        Raises:
            RuntimeError: If its setup failed
            KeyError: If no such connection is configured
        """
        if name in self._dbs:
            return self._dbs[name]
        if name in self._failed:
            raise RuntimeError(f"Database '{name}' setup failed: {self._failed[name]}")
        raise KeyError(f"Database connection '{name}' not found")

    def list_databases(self) -> list[str]:
        """Names of the connections that were set up."""
        return list(self._dbs)

    def close_all(self) -> None:
        """Dispose every engine and forget the connections."""
        while self._dbs:
            name, db = self._dbs.popitem()
            db.dispose()
            self._dbs_lg.debug("closed database connection", extra={"db": name})
