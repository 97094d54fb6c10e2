"""Database adapters -- caller-side connection lifecycle.

Repositories receive an already-open connection.  Adapters are how an
application (or the CLI) opens that connection from a URL and closes it
at shutdown.

Architecture::

    DatabaseAdapter (base.py)        Abstract base with connect/disconnect
        |-- SQLiteAdapter            stdlib sqlite3 (always available)
        |-- PostgreSQLAdapter        psycopg (optional extra)

    DatabaseConfig (types.py)        Connection parameters + URL parsing
    DatabaseType (types.py)          Enum of supported backends
    create_adapter(url)              URL -> configured, unconnected adapter

Usage:
    >>> with create_adapter("sqlite://:memory:") as adapter:
    ...     repo = OrderRepository(adapter.get_connection(), adapter.dialect)

Tags:
    order-spine, database, adapters, sqlite, postgresql
"""

from __future__ import annotations

from .base import DatabaseAdapter
from .postgresql import PostgreSQLAdapter
from .sqlite import SQLiteAdapter
from .types import DatabaseConfig, DatabaseType


def create_adapter(url: str) -> DatabaseAdapter:
    """Build an adapter for ``url`` (see :meth:`DatabaseConfig.from_url`)."""
    config = DatabaseConfig.from_url(url)
    if config.db_type is DatabaseType.POSTGRESQL:
        return PostgreSQLAdapter(config.conninfo)
    return SQLiteAdapter(config.path or ":memory:")


__all__ = [
    "DatabaseType",
    "DatabaseConfig",
    "DatabaseAdapter",
    "SQLiteAdapter",
    "PostgreSQLAdapter",
    "create_adapter",
]
