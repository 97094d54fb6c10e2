"""
Root Typer application for the order-spine CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from order_spine.logging import configure_logging
from order_spine.settings import get_settings

app = Typer(
    name="order-spine",
    help="order-spine - save, count and list orders in a SQL database.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        from order_spine import __version__

        typer.echo(f"order-spine {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """order-spine CLI - manage the orders table."""
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_format == "json",
    )


from order_spine.cli.db import app as db_app  # noqa: E402
from order_spine.cli.orders import app as orders_app  # noqa: E402

app.add_typer(db_app, name="db", help="Database bootstrap.")
app.add_typer(orders_app, name="orders", help="Save, count and list orders.")
