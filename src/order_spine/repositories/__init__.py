"""Repositories for order-spine tables.

Each repository extends :class:`~order_spine.repository.BaseRepository`
and owns the SQL for one table.

    orders.py  - OrderRepository (save, count_all, list_all)
"""

from order_spine.repositories.orders import OrderRepository

__all__ = [
    "OrderRepository",
]
