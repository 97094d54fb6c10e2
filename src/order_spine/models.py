"""Order entity (``orders`` table).

Tags:
    order-spine, models, dataclasses, schema-mapping

Doc-Types:
    api-reference, data-model
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from order_spine.errors import ValidationError

ORDER_COLUMNS: tuple[str, ...] = ("id", "price", "tax", "final_price")


@dataclass(frozen=True)
class Order:
    """A row in the ``orders`` table.

    The store persists and returns these four fields exactly as given;
    ``final_price`` is computed by whoever builds the order.

    Amounts are plain ``float`` values.  ``sqlite3`` cannot bind
    ``decimal.Decimal``, so a Decimal amount makes ``save`` fail with
    ``PersistenceError``; convert before building the order.
    """

    id: str
    price: float
    tax: float
    final_price: float

    @classmethod
    def create(cls, id: str, price: float, tax: float) -> Order:
        """Build a validated order with ``final_price = price + tax``.

        Raises:
            ValidationError: empty id, or non-positive price or tax.
        """
        if not id:
            raise ValidationError("Order id is required", field="id", value=id)
        if price <= 0:
            raise ValidationError("Price must be greater than zero", field="price", value=price)
        if tax <= 0:
            raise ValidationError("Tax must be greater than zero", field="tax", value=tax)
        return cls(id=id, price=price, tax=tax, final_price=price + tax)

    @classmethod
    def from_row(cls, row: Any) -> Order:
        """Decode a result row.

        Accepts mapping-style rows (``sqlite3.Row``, psycopg ``dict_row``)
        and plain 4-tuples.  Raises ``KeyError``, ``TypeError`` or
        ``ValueError`` when the row does not hold the four expected fields.
        """
        if hasattr(row, "keys"):
            values = tuple(row[col] for col in ORDER_COLUMNS)
        else:
            values = tuple(row)
        if len(values) != len(ORDER_COLUMNS):
            raise ValueError(f"Expected {len(ORDER_COLUMNS)} columns, got {len(values)}")

        order_id, price, tax, final_price = values
        if order_id is None:
            raise ValueError("Order id is NULL")
        if isinstance(order_id, (bytes, bytearray, memoryview)):
            # BLOB ids; a non-UTF-8 id raises UnicodeDecodeError
            order_id = bytes(order_id).decode("utf-8")
        return cls(
            id=str(order_id),
            price=float(price),
            tax=float(tax),
            final_price=float(final_price),
        )

    def to_params(self) -> tuple[str, float, float, float]:
        """Positional bind values in ``ORDER_COLUMNS`` order."""
        return (self.id, self.price, self.tax, self.final_price)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = [
    "ORDER_COLUMNS",
    "Order",
]
