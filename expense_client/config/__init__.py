"""Configuration module: client settings."""

from expense_client.config.settings import ClientSettings

__all__ = [
    "ClientSettings",
]
