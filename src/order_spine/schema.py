"""DDL for the ``orders`` table.

Bootstrap helper for development databases and tests.  Production
schemas are managed outside order-spine; :class:`OrderRepository` only
assumes the four columns exist.

``unique_ids`` selects the duplicate-id policy:

- ``True``  - ``id`` is the PRIMARY KEY; a second save with the same id
  fails with ``PersistenceError``.
- ``False`` - no constraint; duplicate ids are stored side by side.
"""

from __future__ import annotations

from order_spine.protocols import Connection


def orders_ddl(*, unique_ids: bool = True) -> str:
    """``CREATE TABLE IF NOT EXISTS`` statement for ``orders``."""
    id_column = "id TEXT PRIMARY KEY" if unique_ids else "id TEXT NOT NULL"
    return (
        "CREATE TABLE IF NOT EXISTS orders (\n"
        f"    {id_column},\n"
        "    price NUMERIC NOT NULL,\n"
        "    tax NUMERIC NOT NULL,\n"
        "    final_price NUMERIC NOT NULL\n"
        ")"
    )


def create_orders_table(conn: Connection, *, unique_ids: bool = True) -> None:
    """Create the ``orders`` table if it does not exist, and commit."""
    conn.execute(orders_ddl(unique_ids=unique_ids), ())
    conn.commit()


__all__ = [
    "orders_ddl",
    "create_orders_table",
]
