"""Base repository with dialect-aware database access.

Provides :class:`BaseRepository` - a base class that pairs an injected
:class:`~order_spine.protocols.Connection` with a
:class:`~order_spine.dialect.Dialect` so that table repositories can write
portable SQL without referencing a specific database driver.

Architecture::

    ┌────────────────────────────────────────────────────────────────────┐
    │                       BaseRepository                               │
    │                                                                    │
    │   conn: Connection        ← injected, owned by the caller          │
    │   dialect: Dialect         ← from order_spine.dialect               │
    │                                                                    │
    │   ph(count)                → "?, ?" / "%s, %s"                     │
    │   execute(sql, params)     → cursor                                │
    │   commit() / rollback()                                            │
    └────────────────────────────────────────────────────────────────────┘

The repository never opens or closes ``conn``; its lifecycle belongs to
whoever constructed it (see :mod:`order_spine.adapters`).

Tags:
    repository, database, abstraction, portability
"""

from __future__ import annotations

from typing import Any

from order_spine.dialect import Dialect, SQLiteDialect
from order_spine.protocols import Connection


class BaseRepository:
    """Dialect-aware base class for data-access repositories.

    Parameters:
        conn: Any object satisfying the :class:`Connection` protocol.
        dialect: SQL dialect to use.  Defaults to :class:`SQLiteDialect`
                 so a raw ``sqlite3.Connection`` works without extra setup.
    """

    def __init__(self, conn: Connection, dialect: Dialect | None = None) -> None:
        self.conn = conn
        self.dialect: Dialect = dialect or SQLiteDialect()

    def ph(self, count: int) -> str:
        """Shortcut for ``self.dialect.placeholders(count)``.

        Embed directly in f-strings:

            f"SELECT * FROM t WHERE id = {self.ph(1)}"
        """
        return self.dialect.placeholders(count)

    def execute(self, sql: str, params: tuple = ()) -> Any:
        """Execute a statement and return the raw cursor."""
        return self.conn.execute(sql, params)

    def commit(self) -> None:
        """Commit the current transaction."""
        self.conn.commit()

    def rollback(self) -> None:
        """Roll back the current transaction."""
        self.conn.rollback()


__all__ = [
    "BaseRepository",
]
