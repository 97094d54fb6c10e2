"""order-spine command line interface (``order-spine``)."""

from order_spine.cli.app import app

__all__ = ["app"]
