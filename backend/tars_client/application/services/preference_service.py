"""Application service (use case) for user preference records."""

import logging
from typing import Any

from tars_client.application.interfaces import UserDataSource
from tars_client.application.schemas.preferences import PreferenceUpdate
from tars_client.domain.entities import PreferenceRecord

logger = logging.getLogger(__name__)


class PreferenceService:
    """Reads and saves preference records; a missing record reads as empty arrays.

    Records are keyed by user id. The client-id lookup is a secondary path
    that returns the first record owned by that client.
    """

    def __init__(self, data_source: UserDataSource):
        self._data_source = data_source

    async def get_for_user(self, user_id: int) -> dict[str, Any]:
        record = await self._data_source.find_preferences_by_user(user_id)
        if record is None:
            logger.info(
                "No preferences found for userId %s, returning empty preferences", user_id
            )
            return PreferenceRecord.empty_for_user(user_id).to_dict()
        return {**record, "userId": user_id}

    async def get_for_client(self, client_id: int) -> dict[str, Any]:
        record = await self._data_source.find_preferences_by_client(client_id)
        if record is None:
            logger.info(
                "No preferences found for clientId %s, returning empty preferences",
                client_id,
            )
            return PreferenceRecord.empty_for_client(client_id).to_dict()
        return record

    async def save(self, user_id: int, data: PreferenceUpdate) -> dict[str, Any]:
        payload = data.model_dump(by_alias=True, exclude_none=True)
        logger.info(
            "Setting preferences for userId %s via %s",
            user_id,
            self._data_source.source_name,
        )
        return await self._data_source.save_preferences(user_id, payload)
