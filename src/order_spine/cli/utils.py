"""
CLI utility helpers - output formatting and connection management.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from order_spine.adapters import DatabaseAdapter, create_adapter
from order_spine.errors import OrderSpineError
from order_spine.models import Order
from order_spine.repositories import OrderRepository
from order_spine.settings import get_settings

console = Console()
err_console = Console(stderr=True)


# ── Connection helper ────────────────────────────────────────────────────


@contextmanager
def open_adapter(database: str | None = None) -> Iterator[DatabaseAdapter]:
    """Connect to ``database`` (default: settings URL) and close on exit."""
    url = database or get_settings().database_url
    adapter = create_adapter(url)
    adapter.connect()
    try:
        yield adapter
    finally:
        adapter.disconnect()


@contextmanager
def open_repository(database: str | None = None) -> Iterator[OrderRepository]:
    """Yield an ``OrderRepository`` over a CLI-owned connection."""
    with open_adapter(database) as adapter:
        yield OrderRepository(adapter.get_connection(), adapter.dialect)


@contextmanager
def handle_errors() -> Iterator[None]:
    """Print an ``OrderSpineError`` in red and exit with status 1."""
    try:
        yield
    except OrderSpineError as e:
        err_console.print(f"[bold red]Error[/bold red] ({e.category.value}): {e.message}")
        raise typer.Exit(code=1) from e


# ── Output helpers ───────────────────────────────────────────────────────


def output_orders(orders: list[Order], *, as_json: bool = False, title: str = "") -> None:
    """Render orders as a Rich table, or as a JSON array."""
    if as_json:
        console.print_json(json.dumps([o.to_dict() for o in orders], default=str))
        return

    if not orders:
        console.print("[dim]No orders.[/dim]")
        return

    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col, justify in (("id", "left"), ("price", "right"), ("tax", "right"), ("final_price", "right")):
        table.add_column(col, justify=justify, overflow="fold")
    for order in orders:
        table.add_row(
            order.id,
            _fmt(order.price),
            _fmt(order.tax),
            _fmt(order.final_price),
        )
    console.print(table)


def output_value(label: str, value: Any, *, as_json: bool = False) -> None:
    """Render a single scalar result."""
    if as_json:
        console.print_json(json.dumps({label: value}, default=str))
        return
    console.print(f"[cyan]{label}[/cyan]: {value}")


def _fmt(value: float) -> str:
    return f"{value:.2f}"
