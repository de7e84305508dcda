"""Backend user-data source — user and preference lookups through the TARS API."""

import logging
from typing import Any

from tars_client.application.interfaces import TarsBackend, UserDataSource
from tars_client.domain.exceptions import ExternalCallFailed

logger = logging.getLogger(__name__)


class BackendUserDataSource(UserDataSource):
    """Infrastructure adapter that forwards every lookup to the TARS backend."""

    def __init__(self, backend: TarsBackend):
        self._backend = backend

    @property
    def source_name(self) -> str:
        return "backend"

    async def list_clients(self) -> list[dict[str, Any]]:
        return await self._backend.get_clients()

    async def list_tars_users(self) -> list[dict[str, Any]]:
        return await self._backend.get_tars_users()

    async def find_preferences_by_user(self, user_id: int) -> dict[str, Any] | None:
        try:
            return await self._backend.get_user_preference(user_id) or None
        except ExternalCallFailed as exc:
            if exc.is_not_found:
                logger.info("Backend has no preferences for userId %s", user_id)
                return None
            raise

    async def find_preferences_by_client(self, client_id: int) -> dict[str, Any] | None:
        try:
            return await self._backend.get_user_by_client_id(client_id) or None
        except ExternalCallFailed as exc:
            if exc.is_not_found:
                logger.info("Backend has no preferences for clientId %s", client_id)
                return None
            raise

    async def save_preferences(
        self, user_id: int, preferences: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._backend.set_user_preference(user_id, preferences)

    async def authenticate(
        self,
        username: str | None = None,
        email: str | None = None,
        user_id: int | str | None = None,
    ) -> dict[str, Any]:
        return await self._backend.login(username=username, email=email, user_id=user_id)
