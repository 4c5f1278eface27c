"""Async client for the personal expense-tracking REST API."""

from expense_client.errors import (
    ApiRequestError,
    ExpenseClientError,
    NoDataReceivedError,
    ResponseShapeError,
    get_error_message,
)
from expense_client.integration.api_client import ApiClient, get_api_client, reset_api_client
from expense_client.main import ExpenseClient, create_client
from expense_client.models.responses import ApiResult, Page, ServerEnvelope

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiRequestError",
    "ApiResult",
    "ExpenseClient",
    "ExpenseClientError",
    "NoDataReceivedError",
    "Page",
    "ResponseShapeError",
    "ServerEnvelope",
    "create_client",
    "get_api_client",
    "get_error_message",
    "reset_api_client",
]
