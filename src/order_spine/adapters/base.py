"""Database adapter base class.

Adapters own the connection lifecycle on the caller's side: they open
the connection, hand it to repositories, and close it at shutdown.
Repositories never call ``connect()`` or ``disconnect()`` themselves.

Features:
    - Abstract ``connect()``, ``disconnect()``, ``get_connection()``
    - Property-based dialect and connection-state introspection
    - Context-manager protocol for connection lifecycle

Tags:
    order-spine, database, abstract-base, adapter-pattern
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_spine.dialect import Dialect, get_dialect
from order_spine.protocols import Connection

from .types import DatabaseConfig, DatabaseType


class DatabaseAdapter(ABC):
    """
    Abstract base class for database adapters.

    Provides common functionality and defines the interface
    that all adapters must implement.
    """

    def __init__(self, config: DatabaseConfig):
        self._config = config
        self._connected = False
        self._dialect: Dialect = get_dialect(config.db_type.value)

    @property
    def dialect(self) -> Dialect:
        """SQL dialect for this adapter's database type."""
        return self._dialect

    @property
    def db_type(self) -> DatabaseType:
        """Database type."""
        return self._config.db_type

    @property
    def is_connected(self) -> bool:
        """Whether adapter is connected."""
        return self._connected

    @abstractmethod
    def connect(self) -> None:
        """Establish connection to database."""
        ...

    @abstractmethod
    def disconnect(self) -> None:
        """Close connection to database."""
        ...

    @abstractmethod
    def get_connection(self) -> Connection:
        """Get the open connection, connecting first if needed."""
        ...

    def __enter__(self) -> DatabaseAdapter:
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.disconnect()


__all__ = [
    "DatabaseAdapter",
]
