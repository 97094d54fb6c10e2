"""
Shared pytest fixtures for order-spine tests.

This module provides:
- In-memory SQLite connections with the ``orders`` table under both
  duplicate-id policies
- Repositories bound to those connections
- structlog / settings reset between tests

Usage:
    Fixtures are auto-discovered by pytest.

    def test_something(repo):
        repo.save(Order("o1", 100.0, 10.0, 110.0))
"""

import sqlite3
import sys
from pathlib import Path
from typing import Generator

import pytest
import structlog

# Ensure order_spine package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from order_spine.dialect import SQLiteDialect
from order_spine.repositories import OrderRepository
from order_spine.schema import create_orders_table
from order_spine.settings import reset_settings


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark CLI tests as integration, everything else as unit."""
    for item in items:
        if Path(item.fspath).name == "test_cli.py":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings and structlog configuration around each test."""
    for var in (
        "ORDER_SPINE_DATABASE_URL",
        "ORDER_SPINE_UNIQUE_ORDER_IDS",
        "ORDER_SPINE_LOG_LEVEL",
        "ORDER_SPINE_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def conn() -> Generator[sqlite3.Connection, None, None]:
    """In-memory SQLite connection; ``orders.id`` is a PRIMARY KEY."""
    c = sqlite3.connect(":memory:")
    c.row_factory = sqlite3.Row
    create_orders_table(c, unique_ids=True)
    yield c
    c.close()


@pytest.fixture
def conn_no_constraint() -> Generator[sqlite3.Connection, None, None]:
    """In-memory SQLite connection; ``orders.id`` has no uniqueness constraint."""
    c = sqlite3.connect(":memory:")
    c.row_factory = sqlite3.Row
    create_orders_table(c, unique_ids=False)
    yield c
    c.close()


@pytest.fixture
def repo(conn: sqlite3.Connection) -> OrderRepository:
    return OrderRepository(conn, SQLiteDialect())


@pytest.fixture
def repo_no_constraint(conn_no_constraint: sqlite3.Connection) -> OrderRepository:
    return OrderRepository(conn_no_constraint, SQLiteDialect())
