"""PostgreSQL database adapter (psycopg 3)."""

from __future__ import annotations

from typing import Any

from order_spine.errors import ConfigError, DatabaseConnectionError
from order_spine.protocols import Connection

from .base import DatabaseAdapter
from .types import DatabaseConfig, DatabaseType


class PostgreSQLAdapter(DatabaseAdapter):
    """
    PostgreSQL database adapter.

    Holds a single psycopg connection opened with ``dict_row`` so result
    rows decode by column name.  The driver is imported at ``connect()``
    time; install it with ``pip install order-spine[postgres]``.
    """

    def __init__(
        self,
        conninfo: str = "",
        *,
        connect_timeout: int = 10,
        **kwargs: Any,
    ):
        config = DatabaseConfig(
            db_type=DatabaseType.POSTGRESQL,
            conninfo=conninfo,
            connect_timeout=connect_timeout,
            options=kwargs,
        )
        super().__init__(config)
        self._conn: Any = None

    def connect(self) -> None:
        """Connect to PostgreSQL database."""
        try:
            import psycopg
            from psycopg.rows import dict_row
        except ImportError:
            raise ConfigError(
                "psycopg is required for PostgreSQL. Install with: pip install order-spine[postgres]"
            ) from None

        try:
            self._conn = psycopg.connect(
                self._config.conninfo,
                connect_timeout=self._config.connect_timeout,
                row_factory=dict_row,
                **self._config.options,
            )
            self._connected = True
        except psycopg.Error as e:
            raise DatabaseConnectionError(
                f"Failed to connect to PostgreSQL: {e}",
                cause=e,
            ) from e

    def disconnect(self) -> None:
        """Close PostgreSQL connection."""
        if self._conn:
            self._conn.close()
            self._conn = None
            self._connected = False

    def get_connection(self) -> Connection:
        """Get the PostgreSQL connection."""
        if not self._conn:
            self.connect()
        return self._conn


__all__ = [
    "PostgreSQLAdapter",
]
