"""SQL dialect abstraction for driver-agnostic repositories.

Repositories build their SQL from ``Dialect`` fragments so the same
statement text works on SQLite (``?`` qmark style) and PostgreSQL via
psycopg (``%s`` format style).  Values are always bound by the driver;
the dialect only decides what the placeholder looks like.

Architecture::

    ┌────────────────────────────────────────────────────────────────┐
    │  sql = f"INSERT INTO orders (...) VALUES ({d.placeholders(4)})"│
    │  conn.execute(sql, order.to_params())                          │
    └────────────────────────────────────────────────────────────────┘
                              │
                              ▼
              ┌──────────────┐     ┌──────────────────┐
              │ SQLite       │     │ PostgreSQL       │
              │ ?, ?, ?, ?   │     │ %s, %s, %s, %s   │
              └──────────────┘     └──────────────────┘

Examples:
    >>> from order_spine.dialect import get_dialect
    >>> get_dialect("sqlite").placeholders(4)
    '?, ?, ?, ?'
    >>> get_dialect("postgresql").placeholders(2)
    '%s, %s'

Tags:
    dialect, sql, placeholders, portability, order-spine
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from order_spine.errors import ConfigError


@runtime_checkable
class Dialect(Protocol):
    """SQL dialect contract."""

    @property
    def name(self) -> str:
        """Human-readable dialect name (e.g. ``'sqlite'``)."""
        ...

    def placeholder(self, index: int) -> str:
        """Single positional placeholder (0-based index)."""
        ...

    def placeholders(self, count: int) -> str:
        """Comma-separated placeholder list.

        >>> dialect.placeholders(3)
        '?, ?, ?'          # SQLite
        '%s, %s, %s'       # PostgreSQL
        """
        ...


class SQLiteDialect:
    """SQLite dialect - ``?`` placeholders."""

    @property
    def name(self) -> str:
        return "sqlite"

    def placeholder(self, index: int) -> str:
        return "?"

    def placeholders(self, count: int) -> str:
        return ", ".join("?" for _ in range(count))


class PostgreSQLDialect:
    """PostgreSQL dialect - ``%s`` placeholders (psycopg)."""

    @property
    def name(self) -> str:
        return "postgresql"

    def placeholder(self, index: int) -> str:
        return "%s"

    def placeholders(self, count: int) -> str:
        return ", ".join("%s" for _ in range(count))


# =========================================================================
# Registry / Factory
# =========================================================================

# Dialects are stateless, so one instance each is enough
_DIALECTS: dict[str, Dialect] = {
    "sqlite": SQLiteDialect(),
    "postgresql": PostgreSQLDialect(),
    "postgres": PostgreSQLDialect(),  # alias
}


def get_dialect(db_type: str) -> Dialect:
    """Get a dialect by database type name.

    Raises:
        ConfigError: If ``db_type`` is not recognised.
    """
    key = db_type.lower()
    if key not in _DIALECTS:
        raise ConfigError(
            f"Unknown dialect '{db_type}'. "
            f"Supported: {sorted(set(_DIALECTS) - {'postgres'})}"
        )
    return _DIALECTS[key]


def register_dialect(name: str, dialect: Dialect) -> None:
    """Register a custom dialect implementation (third-party drivers, test doubles)."""
    _DIALECTS[name.lower()] = dialect


__all__ = [
    "Dialect",
    "SQLiteDialect",
    "PostgreSQLDialect",
    "get_dialect",
    "register_dialect",
]
