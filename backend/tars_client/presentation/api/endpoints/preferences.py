"""Preference record endpoints — reads fall back to empty arrays when nothing is stored."""

from typing import Any

from fastapi import APIRouter, Depends

from tars_client.application.schemas import PreferenceUpdate
from tars_client.application.services import PreferenceService
from tars_client.infrastructure.dependencies import get_preference_service

router = APIRouter(tags=["Preferences"])


@router.put("/setPreference/{user_id}")
async def set_preference(
    user_id: int,
    data: PreferenceUpdate | None = None,
    service: PreferenceService = Depends(get_preference_service),
) -> Any:
    return await service.save(user_id, data or PreferenceUpdate())


@router.get("/user/client/{client_id}")
async def get_preferences_by_client(
    client_id: int,
    service: PreferenceService = Depends(get_preference_service),
) -> dict[str, Any]:
    return await service.get_for_client(client_id)


@router.get("/preferences/user/{user_id}")
async def get_preferences_by_user(
    user_id: int,
    service: PreferenceService = Depends(get_preference_service),
) -> dict[str, Any]:
    """Preferences for the profile page, always including ``userId``."""
    return await service.get_for_user(user_id)
