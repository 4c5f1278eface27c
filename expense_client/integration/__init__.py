"""HTTP integration with the expense-tracking backend."""

from expense_client.integration.api_client import ApiClient, get_api_client, reset_api_client

__all__ = [
    "ApiClient",
    "get_api_client",
    "reset_api_client",
]
