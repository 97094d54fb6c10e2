"""Order repository.

Tags:
    order-spine, repository, orders

Doc-Types:
    api-reference
"""

from __future__ import annotations

from order_spine.errors import PersistenceError
from order_spine.logging import get_logger
from order_spine.models import ORDER_COLUMNS, Order
from order_spine.repository import BaseRepository

logger = get_logger(__name__)


class OrderRepository(BaseRepository):
    """Insert, count and list rows of the ``orders`` table.

    Each method is one statement and one round-trip.  Every driver failure
    is re-raised as :class:`~order_spine.errors.PersistenceError` with the
    driver exception chained; nothing is retried.  Whether a duplicate id
    is rejected depends on the table's constraints, not on this class.

    Reads commit too, so a psycopg connection is not left idle in
    transaction; a failed statement is rolled back.
    """

    TABLE = "orders"

    def save(self, order: Order) -> None:
        """Insert one order and commit it."""
        cols = ", ".join(ORDER_COLUMNS)
        sql = f"INSERT INTO {self.TABLE} ({cols}) VALUES ({self.ph(len(ORDER_COLUMNS))})"
        try:
            cursor = self.execute(sql, order.to_params())
            cursor.close()
            self.commit()
        except Exception as e:
            self._rollback_quietly()
            logger.warning("order_save_failed", order_id=order.id, error=str(e))
            raise PersistenceError(f"Failed to save order {order.id!r}: {e}", cause=e).with_context(
                operation="save", table=self.TABLE, order_id=order.id
            ) from e
        logger.debug("order_saved", order_id=order.id)

    def count_all(self) -> int:
        """Number of rows in the table."""
        try:
            cursor = self.execute(f"SELECT COUNT(*) AS total FROM {self.TABLE}")
            try:
                row = cursor.fetchone()
            finally:
                cursor.close()
            # dict_row (psycopg) rows are keyed by column alias
            total = int(row["total"] if hasattr(row, "keys") else row[0])
            self.commit()
        except Exception as e:
            self._rollback_quietly()
            logger.warning("order_count_failed", error=str(e))
            raise PersistenceError(f"Failed to count orders: {e}", cause=e).with_context(
                operation="count_all", table=self.TABLE
            ) from e
        return total

    def list_all(self) -> list[Order]:
        """All rows, in whatever order the engine returns them.

        Rows are decoded eagerly and the cursor is closed before returning,
        on success and on failure alike.  A row that fails to decode fails
        the whole call; no partial list is returned.
        """
        cols = ", ".join(ORDER_COLUMNS)
        try:
            cursor = self.execute(f"SELECT {cols} FROM {self.TABLE}")
        except Exception as e:
            self._rollback_quietly()
            logger.warning("order_list_failed", error=str(e))
            raise PersistenceError(f"Failed to query orders: {e}", cause=e).with_context(
                operation="list_all", table=self.TABLE
            ) from e

        try:
            try:
                orders = [Order.from_row(row) for row in cursor.fetchall()]
            finally:
                cursor.close()
            self.commit()
        except Exception as e:
            self._rollback_quietly()
            logger.warning("order_decode_failed", error=str(e))
            raise PersistenceError(f"Failed to read order rows: {e}", cause=e).with_context(
                operation="list_all", table=self.TABLE
            ) from e

        logger.debug("orders_listed", count=len(orders))
        return orders

    def _rollback_quietly(self) -> None:
        # A failed statement leaves psycopg in an aborted transaction.
        try:
            self.rollback()
        except Exception as e:
            logger.warning("order_rollback_failed", error=str(e))


__all__ = [
    "OrderRepository",
]
