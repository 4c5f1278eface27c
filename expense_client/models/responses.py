"""Generic response envelope models.

``ApiResult`` is what the HTTP facade returns for every call:
{ data: T | None, error: str | None } with exactly one of the two populated.

``ServerEnvelope`` is the JSON shape the backend wraps every payload in:
{ status: "success" | "error", data: T, message: str | None }
"""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class ApiResult(BaseModel, Generic[T]):
    """Result envelope returned by ``ApiClient``; success and failure are exclusive."""

    model_config = ConfigDict(frozen=True)

    data: T | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "ApiResult[T]":
        if (self.data is None) == (self.error is None):
            raise ValueError("exactly one of 'data' and 'error' must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any) -> "ApiResult[Any]":
        return cls(data=data, error=None)

    @classmethod
    def failure(cls, error: str) -> "ApiResult[Any]":
        return cls(data=None, error=error)


class ServerEnvelope(BaseModel, Generic[T]):
    """JSON envelope the backend wraps around every resource payload."""

    status: Literal["success", "error"]
    data: T
    message: str | None = None


class Page(BaseModel, Generic[T]):
    """Paginated list payload."""

    items: list[T]
    total: int
    page: int
    size: int
    pages: int
