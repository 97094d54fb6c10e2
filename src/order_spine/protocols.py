"""
Structural protocols for database access.

The repository layer depends on the *shape* of a DB-API connection, not
on a driver.  ``sqlite3.Connection`` and ``psycopg.Connection`` both
satisfy :class:`Connection` without any wrapping: ``execute`` returns a
cursor, and the cursor can be fetched from and closed.

Architecture:
    ::

        Connection Protocol:
        ┌────────────────────────────────────────────────────────┐
        │ execute(sql, params)   → Cursor                        │
        │ commit()               → Commit transaction            │
        │ rollback()             → Rollback transaction          │
        └────────────────────────────────────────────────────────┘

        Cursor Protocol:
        ┌────────────────────────────────────────────────────────┐
        │ fetchone()             → one row or None               │
        │ fetchall()             → remaining rows                │
        │ close()                → release the result set        │
        └────────────────────────────────────────────────────────┘

Guardrails:
    ❌ DON'T: Import sqlite3 or psycopg in repository code
    ✅ DO: Type against Connection and let the caller inject the driver

Tags:
    protocol, connection, cursor, database, order-spine
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Cursor(Protocol):
    """Result cursor returned by :meth:`Connection.execute`."""

    def fetchone(self) -> Any:
        """Fetch the next row, or None when exhausted."""
        ...

    def fetchall(self) -> list:
        """Fetch all remaining rows."""
        ...

    def close(self) -> None:
        """Release the cursor and its result set."""
        ...


@runtime_checkable
class Connection(Protocol):
    """
    Minimal SYNCHRONOUS connection interface used by repositories.

    Examples:
        >>> cursor = conn.execute("SELECT COUNT(*) FROM orders", ())
        >>> cursor.fetchone()[0]
        0
    """

    def execute(self, sql: str, params: tuple = ()) -> Any:
        """Execute one SQL statement and return its cursor."""
        ...

    def commit(self) -> None:
        """Commit current transaction."""
        ...

    def rollback(self) -> None:
        """Rollback current transaction."""
        ...


__all__ = [
    "Connection",
    "Cursor",
]
