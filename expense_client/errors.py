"""Error hierarchy and error-message normalization.

All client-specific errors extend ExpenseClientError. The HTTP facade never
raises these for ordinary HTTP or transport failures; it folds them into an
``ApiResult`` instead. Resource services raise them when a result carries an
error, when a nominally successful call has no payload, or when the payload
does not match the expected model.
"""

from __future__ import annotations

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ExpenseClientError(Exception):
    """Base error for all expense-client errors."""

    message: str = "Expense client error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ApiRequestError(ExpenseClientError):
    """The backend call failed with a transport fault or a non-2xx status."""

    message = "Request failed"


class NoDataReceivedError(ExpenseClientError):
    """A nominally successful call returned no payload."""

    message = "No data received"


class ResponseShapeError(ExpenseClientError):
    """The payload of a successful call does not match the expected model."""

    message = "Unexpected response payload"


# ---------------------------------------------------------------------------
# Normalization helper
# ---------------------------------------------------------------------------


def get_error_message(error: object) -> str:
    """Reduce any caught fault value to a single message string.

    Objects with a string ``message`` attribute yield that attribute,
    exceptions yield ``str(exc)`` (or their class name when that is empty),
    strings are returned verbatim, and everything else maps to
    ``UNKNOWN_ERROR_MESSAGE``. Never raises.
    """
    try:
        if isinstance(error, str):
            return error

        message = getattr(error, "message", None)
        if isinstance(message, str) and message:
            return message

        if isinstance(error, BaseException):
            return str(error) or error.__class__.__name__
    except Exception:  # noqa: BLE001
        return UNKNOWN_ERROR_MESSAGE

    return UNKNOWN_ERROR_MESSAGE
