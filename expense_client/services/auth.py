"""Authentication endpoints and bearer-token handling.

The access token returned by ``login`` is attached to the shared client with
``set_auth_token`` and dropped again by ``logout``.
"""

from __future__ import annotations

import logging

from expense_client.models.requests import LoginCredentials, RegisterData
from expense_client.models.responses import ServerEnvelope
from expense_client.models.schemas import AuthToken, User
from expense_client.services.base import ResourceService

logger = logging.getLogger(__name__)


class AuthService(ResourceService):
    prefix = "/auth"

    async def login(self, credentials: LoginCredentials) -> ServerEnvelope[AuthToken]:
        result = await self._client.post(self._path("token"), credentials)
        return self._unwrap(result, ServerEnvelope[AuthToken])

    async def register(self, data: RegisterData) -> ServerEnvelope[User]:
        result = await self._client.post(self._path("register"), data)
        return self._unwrap(result, ServerEnvelope[User])

    async def get_current_user(self) -> ServerEnvelope[User]:
        result = await self._client.get(self._path("me"))
        return self._unwrap(result, ServerEnvelope[User])

    async def authenticate(self, credentials: LoginCredentials) -> AuthToken:
        """Log in and attach the returned token to every subsequent request."""
        envelope = await self.login(credentials)
        self.set_auth_token(envelope.data.access_token)
        logger.info("Logged in as %s", credentials.username)
        return envelope.data

    def set_auth_token(self, token: str) -> None:
        self._client.set_auth_token(token)

    def remove_auth_token(self) -> None:
        self._client.remove_auth_token()

    def logout(self) -> None:
        self.remove_auth_token()
        logger.info("Logged out")
