"""Shared plumbing for the resource services.

A service binds a path prefix and response models to the ``ApiClient``
facade and turns failed ``ApiResult`` envelopes into raised errors.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from expense_client.errors import ApiRequestError, NoDataReceivedError, ResponseShapeError
from expense_client.integration.api_client import ApiClient, get_api_client
from expense_client.models.requests import PageParams
from expense_client.models.responses import ApiResult, Page, ServerEnvelope

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
ItemT = TypeVar("ItemT", bound=BaseModel)


class ResourceService:
    """Base class for services bound to one path prefix."""

    prefix: str = ""

    def __init__(self, client: ApiClient | None = None) -> None:
        self._client = client or get_api_client()

    @property
    def client(self) -> ApiClient:
        return self._client

    def _path(self, *parts: object) -> str:
        return "/".join([self.prefix, *(str(part) for part in parts)])

    @staticmethod
    def _query(params: BaseModel | None) -> dict[str, Any] | None:
        if params is None:
            return None
        return params.model_dump(mode="json", exclude_none=True)

    @staticmethod
    def _unwrap(result: ApiResult[Any], model: type[M]) -> M:
        """Return the validated payload or raise.

        Raises
        ------
        ApiRequestError
            If the result carries an error message.
        NoDataReceivedError
            If a successful result has no payload.
        ResponseShapeError
            If the payload does not match ``model``.
        """
        if result.error is not None:
            raise ApiRequestError(result.error)
        if result.data is None:
            raise NoDataReceivedError()
        try:
            return model.model_validate(result.data)
        except PydanticValidationError as exc:
            logger.warning("Response did not match %s: %s", model.__name__, exc)
            raise ResponseShapeError(
                f"Unexpected response payload for {model.__name__}",
                errors=exc.errors(include_url=False),
            ) from exc


class CrudService(ResourceService, Generic[ItemT]):
    """List/get/create/update/delete for a resource collection."""

    item_model: type[BaseModel]

    async def get_all(self, params: PageParams | None = None) -> ServerEnvelope[Page[ItemT]]:
        result = await self._client.get(self.prefix, self._query(params))
        return self._unwrap(result, ServerEnvelope[Page[self.item_model]])  # type: ignore[name-defined]

    async def get_by_id(self, item_id: int) -> ServerEnvelope[ItemT]:
        result = await self._client.get(self._path(item_id))
        return self._unwrap(result, ServerEnvelope[self.item_model])  # type: ignore[name-defined]

    async def create(self, payload: BaseModel) -> ServerEnvelope[ItemT]:
        result = await self._client.post(self.prefix, payload)
        return self._unwrap(result, ServerEnvelope[self.item_model])  # type: ignore[name-defined]

    async def update(self, item_id: int, payload: BaseModel) -> ServerEnvelope[ItemT]:
        result = await self._client.put(self._path(item_id), payload)
        return self._unwrap(result, ServerEnvelope[self.item_model])  # type: ignore[name-defined]

    async def delete(self, item_id: int) -> ServerEnvelope[None]:
        result = await self._client.delete(self._path(item_id))
        return self._unwrap(result, ServerEnvelope[None])
