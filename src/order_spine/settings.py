"""Configuration management using Pydantic Settings.

All fields can be set via ``ORDER_SPINE_*`` environment variables (e.g.
``ORDER_SPINE_DATABASE_URL=postgresql://localhost/orders``) or a ``.env``
file in the working directory.  Unknown variables are ignored.

Tags:
    order-spine, configuration, settings, pydantic
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OrderSpineSettings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORDER_SPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Database ─────────────────────────────────────────────────
    database_url: str = Field(
        default="sqlite:///data/orders.db",
        description="sqlite:///<path>, sqlite://:memory: or postgresql://...",
    )
    unique_order_ids: bool = Field(
        default=True,
        description="Create the orders table with a PRIMARY KEY on id",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "console"] = "console"


_settings: OrderSpineSettings | None = None


def get_settings() -> OrderSpineSettings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = OrderSpineSettings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None


__all__ = [
    "OrderSpineSettings",
    "get_settings",
    "reset_settings",
]
