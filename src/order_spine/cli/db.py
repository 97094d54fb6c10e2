"""
CLI: ``order-spine db`` - database bootstrap.
"""

from __future__ import annotations

import typer

from order_spine.cli.utils import console, handle_errors, open_adapter
from order_spine.schema import create_orders_table
from order_spine.settings import get_settings

app = typer.Typer(no_args_is_help=True)


@app.command()
def init(
    database: str | None = typer.Option(None, "--database", "-d", help="Database URL"),
    allow_duplicates: bool = typer.Option(
        False,
        "--allow-duplicates",
        help="Create the table without a PRIMARY KEY on id",
    ),
) -> None:
    """Create the orders table if it does not exist."""
    unique_ids = get_settings().unique_order_ids and not allow_duplicates

    with handle_errors():
        with open_adapter(database) as adapter:
            create_orders_table(adapter.get_connection(), unique_ids=unique_ids)
    policy = "unique ids" if unique_ids else "duplicate ids allowed"
    console.print(f"[green]orders table ready[/green] ({policy})")
