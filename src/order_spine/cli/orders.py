"""
CLI: ``order-spine orders`` - save, count and list orders.
"""

from __future__ import annotations

import typer

from order_spine.cli.utils import (
    console,
    handle_errors,
    open_repository,
    output_orders,
    output_value,
)
from order_spine.logging import bind_context
from order_spine.models import Order

app = typer.Typer(no_args_is_help=True)


@app.command()
def save(
    order_id: str = typer.Argument(..., help="Order identifier"),
    price: float = typer.Argument(..., help="Pre-tax price"),
    tax: float = typer.Argument(..., help="Tax amount"),
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL"),
) -> None:
    """Save one order; the final price is price + tax."""
    bind_context(command="orders.save")
    with handle_errors():
        order = Order.create(order_id, price, tax)
        with open_repository(database) as repo:
            repo.save(order)
    console.print(f"[green]Saved[/green] {order.id} (final price {order.final_price:.2f})")


@app.command()
def count(
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Count all orders."""
    bind_context(command="orders.count")
    with handle_errors():
        with open_repository(database) as repo:
            total = repo.count_all()
    output_value("total", total, as_json=json_out)


@app.command("list")
def list_(
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """List all orders."""
    bind_context(command="orders.list")
    with handle_errors():
        with open_repository(database) as repo:
            orders = repo.list_all()
    output_orders(orders, as_json=json_out, title="Orders")
