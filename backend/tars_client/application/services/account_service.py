"""Application service (use case) for clients, TARS users and login."""

import logging
from typing import Any

from tars_client.application.interfaces import UserDataSource
from tars_client.application.schemas.accounts import LoginRequest
from tars_client.domain.exceptions import ExternalCallFailed

logger = logging.getLogger(__name__)


class AccountService:
    """Account lookups over whichever UserDataSource is configured."""

    def __init__(self, data_source: UserDataSource):
        self._data_source = data_source

    async def list_clients(self) -> list[dict[str, Any]]:
        clients = await self._data_source.list_clients()
        return clients if isinstance(clients, list) else []

    async def list_tars_users(self) -> list[dict[str, Any]]:
        """Every TARS user; any load failure reads as [] so the dashboard still renders."""
        try:
            users = await self._data_source.list_tars_users()
        except (ExternalCallFailed, OSError, ValueError) as exc:
            logger.error(
                "Could not load TARS users via %s: %s", self._data_source.source_name, exc
            )
            return []
        return users if isinstance(users, list) else []

    async def login(self, data: LoginRequest) -> dict[str, Any]:
        logger.info(
            "Login attempt via %s: username=%s email=%s userId=%s",
            self._data_source.source_name,
            data.username,
            data.email,
            data.user_id,
        )
        result = await self._data_source.authenticate(
            username=data.username or None,
            email=data.email or None,
            user_id=data.user_id if data.user_id not in (None, "") else None,
        )
        logger.info(
            "Login successful for user: %s",
            result.get("username") or result.get("email") or result.get("userId"),
        )
        return result
