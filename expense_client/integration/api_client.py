"""Generic async HTTP client for the expense-tracking backend.

Centralizes URL construction, header injection, JSON (de)serialization and
error normalization. Every call returns an ``ApiResult`` carrying either the
parsed JSON body or an error message; transport faults and non-2xx statuses
are folded into that result and never raised to the caller.

No retries, no caching. Each call opens its own ``httpx.AsyncClient``, so
concurrent calls share nothing but the client's configuration and the
current Authorization header.

SECURITY: Never logs request headers, bodies, or bearer tokens.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel
from pydantic_core import to_json

from expense_client.config.settings import ClientSettings
from expense_client.errors import get_error_message
from expense_client.models.responses import ApiResult
from expense_client.utils.helpers import stringify_query_value

logger = logging.getLogger(__name__)

QueryValue = str | int | float | bool | list | tuple | None

_DEFAULT_HEADERS = {"Content-Type": "application/json"}


class ApiClient:
    """HTTP facade returning ``ApiResult`` envelopes.

    Parameters
    ----------
    base_url:
        Backend base URL (e.g. "http://localhost:8000"). A path component is
        preserved; request paths are appended to it.
    default_headers:
        Headers sent with every request. Per-call headers win on conflict.
    timeout_seconds:
        Per-request timeout. ``None`` (the default) disables the timeout.
    transport:
        Optional httpx transport, used to route requests in-process.
    """

    def __init__(
        self,
        base_url: str,
        *,
        default_headers: Mapping[str, str] | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._default_headers: dict[str, str] = dict(default_headers or {})
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_seconds(self) -> float | None:
        return self._timeout_seconds

    # ------------------------------------------------------------------
    # Authorization header
    # ------------------------------------------------------------------

    @property
    def auth_token(self) -> str | None:
        """Bearer token currently attached to every request, if any."""
        header = self._default_headers.get("Authorization")
        if header is None or not header.startswith("Bearer "):
            return None
        return header[len("Bearer "):]

    def set_auth_token(self, token: str) -> None:
        """Attach ``Authorization: Bearer <token>`` to every subsequent request."""
        self._default_headers["Authorization"] = f"Bearer {token}"
        logger.debug("Authorization header set")

    def remove_auth_token(self) -> None:
        """Stop sending the Authorization header."""
        self._default_headers.pop("Authorization", None)
        logger.debug("Authorization header cleared")

    # ------------------------------------------------------------------
    # URL construction
    # ------------------------------------------------------------------

    def build_url(self, path: str, params: Mapping[str, QueryValue] | None = None) -> str:
        """Build an absolute URL for ``path`` with ``params`` as the query string.

        Parameters whose value is ``None`` are omitted. Other values are
        coerced to strings; mapping order is preserved.
        """
        if not path.startswith("/"):
            path = f"/{path}"
        url = httpx.URL(f"{self._base_url}{path}")

        query = {
            key: stringify_query_value(value)
            for key, value in (params or {}).items()
            if value is not None
        }
        if query:
            url = url.copy_merge_params(query)
        return str(url)

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    async def get(
        self,
        path: str,
        params: Mapping[str, QueryValue] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResult[Any]:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResult[Any]:
        return await self.request("POST", path, body=body, headers=headers)

    async def put(
        self,
        path: str,
        body: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResult[Any]:
        return await self.request("PUT", path, body=body, headers=headers)

    async def delete(
        self,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResult[Any]:
        return await self.request("DELETE", path, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, QueryValue] | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResult[Any]:
        """Issue a request and fold the outcome into an ``ApiResult``.

        Only POST and PUT carry a body; a ``None`` body sends no content.
        """
        method = method.upper()
        url = path
        started = time.monotonic()

        try:
            url = self.build_url(path, params)
            request_headers = httpx.Headers(_DEFAULT_HEADERS)
            request_headers.update(self._default_headers)
            request_headers.update(headers or {})

            content = None
            if method in ("POST", "PUT") and body is not None:
                content = _serialize_body(body)

            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout_seconds,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    content=content,
                    headers=request_headers,
                )

        except httpx.HTTPError as exc:
            message = get_error_message(exc)
            logger.warning(
                "%s %s failed: %s",
                method,
                url,
                message,
                extra={"method": method, "url": url, "error_reason": message},
            )
            return ApiResult.failure(message)

        except Exception as exc:  # noqa: BLE001
            message = get_error_message(exc)
            logger.warning(
                "%s %s could not be issued: %s",
                method,
                url,
                message,
                exc_info=True,
                extra={"method": method, "url": url, "error_reason": message},
            )
            return ApiResult.failure(message)

        duration_ms = round((time.monotonic() - started) * 1000, 2)
        log_extra = {
            "method": method,
            "url": url,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        }

        if not response.is_success:
            message = _extract_error_message(response)
            logger.info(
                "%s %s returned %d: %s",
                method,
                url,
                response.status_code,
                message,
                extra=log_extra,
            )
            return ApiResult.failure(message)

        try:
            data = response.json()
        except (ValueError, RecursionError):
            logger.warning(
                "%s %s returned %d with a non-JSON body",
                method,
                url,
                response.status_code,
                extra=log_extra,
            )
            return ApiResult.failure(
                f"Invalid JSON in response (status {response.status_code})"
            )

        if data is None:
            return ApiResult.failure("No data received")

        logger.debug("%s %s -> %d", method, url, response.status_code, extra=log_extra)
        return ApiResult.success(data)


def _serialize_body(body: Any) -> bytes:
    """JSON-encode a request body; pydantic models drop fields never set."""
    if isinstance(body, BaseModel):
        return body.model_dump_json(exclude_unset=True).encode("utf-8")
    return to_json(body)


def _extract_error_message(response: httpx.Response) -> str:
    """Pull the server's ``detail`` out of an error body, else a status message."""
    fallback = f"HTTP error! status: {response.status_code}"
    try:
        payload = response.json()
    except (ValueError, RecursionError):
        return fallback

    if not isinstance(payload, dict):
        return fallback

    detail = payload.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    if isinstance(detail, (int, float)) and not isinstance(detail, bool):
        return str(detail)
    if isinstance(detail, list):
        # FastAPI validation errors: [{"loc": [...], "msg": "...", "type": "..."}]
        messages = [
            item["msg"]
            for item in detail
            if isinstance(item, dict) and isinstance(item.get("msg"), str)
        ]
        if messages:
            return "; ".join(messages)
    return fallback


# ---------------------------------------------------------------------------
# Shared instance
# ---------------------------------------------------------------------------

_state: dict = {}


def get_api_client(settings: ClientSettings | None = None) -> ApiClient:
    """Return the process-wide client, building it from settings on first use."""
    client = _state.get("client")
    if client is None:
        settings = settings or ClientSettings()
        client = ApiClient(
            settings.api_base_url,
            timeout_seconds=settings.request_timeout_seconds,
        )
        _state["client"] = client
        logger.info("API client configured for %s", settings.api_base_url)
    return client


def reset_api_client() -> None:
    """Drop the process-wide client so the next call rebuilds it."""
    _state.pop("client", None)
