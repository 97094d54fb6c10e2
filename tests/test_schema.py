"""Tests for order_spine.schema."""

import sqlite3

from order_spine.schema import create_orders_table, orders_ddl


def _pk_columns(conn: sqlite3.Connection) -> list[str]:
    return [row[1] for row in conn.execute("PRAGMA table_info(orders)") if row[5]]


def test_unique_ids_makes_primary_key():
    conn = sqlite3.connect(":memory:")
    create_orders_table(conn, unique_ids=True)
    assert _pk_columns(conn) == ["id"]


def test_no_constraint():
    conn = sqlite3.connect(":memory:")
    create_orders_table(conn, unique_ids=False)
    assert _pk_columns(conn) == []


def test_idempotent():
    conn = sqlite3.connect(":memory:")
    create_orders_table(conn)
    create_orders_table(conn)
    columns = [row[1] for row in conn.execute("PRAGMA table_info(orders)")]
    assert columns == ["id", "price", "tax", "final_price"]


def test_ddl_text():
    assert "PRIMARY KEY" in orders_ddl()
    assert "PRIMARY KEY" not in orders_ddl(unique_ids=False)
