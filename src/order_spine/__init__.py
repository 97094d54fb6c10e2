"""
order-spine - a persistence adapter for the ``orders`` table.

    >>> import sqlite3
    >>> from order_spine import Order, OrderRepository
    >>> repo = OrderRepository(sqlite3.connect("orders.db"))
    >>> repo.save(Order.create("o1", 100.0, 10.0))
    >>> repo.count_all()
    1
"""

__version__ = "0.1.0"

from order_spine.errors import OrderSpineError, PersistenceError
from order_spine.models import Order
from order_spine.repositories import OrderRepository

__all__ = [
    "__version__",
    "Order",
    "OrderRepository",
    "OrderSpineError",
    "PersistenceError",
]
