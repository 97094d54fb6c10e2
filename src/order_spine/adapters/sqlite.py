"""SQLite database adapter."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any

from order_spine.errors import DatabaseConnectionError
from order_spine.protocols import Connection

from .base import DatabaseAdapter
from .types import DatabaseConfig, DatabaseType


class SQLiteAdapter(DatabaseAdapter):
    """
    SQLite database adapter.

    Uses the built-in sqlite3 module. Suitable for:
    - Development and testing
    - Single-process deployments
    """

    def __init__(
        self,
        path: str = ":memory:",
        *,
        timeout: float = 5.0,
        **kwargs: Any,
    ):
        config = DatabaseConfig(
            db_type=DatabaseType.SQLITE,
            path=path,
            timeout=timeout,
            options=kwargs,
        )
        super().__init__(config)
        self._conn: sqlite3.Connection | None = None

    def connect(self) -> None:
        """Connect to SQLite database, creating the parent directory if needed."""
        path = self._config.path or ":memory:"
        uri = path.startswith("file:")

        try:
            if path != ":memory:" and not uri:
                Path(path).parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(
                path,
                timeout=self._config.timeout,
                check_same_thread=False,
                uri=uri,
            )
            self._conn.row_factory = sqlite3.Row
            self._connected = True
        except (sqlite3.Error, OSError) as e:
            raise DatabaseConnectionError(
                f"Failed to connect to SQLite: {e}",
                cause=e,
            ) from e

    def disconnect(self) -> None:
        """Close SQLite connection."""
        if self._conn:
            self._conn.close()
            self._conn = None
            self._connected = False

    def get_connection(self) -> Connection:
        """Get the SQLite connection."""
        if not self._conn:
            self.connect()
        return self._conn


__all__ = [
    "SQLiteAdapter",
]
