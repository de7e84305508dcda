"""User listing, removal and login endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from tars_client.application.interfaces import TarsBackend
from tars_client.application.schemas import LoginRequest
from tars_client.application.services import AccountService
from tars_client.domain.exceptions import (
    EntityNotFoundError,
    ExternalCallFailed,
    InactiveAccountError,
    UserDatabaseError,
)
from tars_client.infrastructure.dependencies import get_account_service, get_tars_backend

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])


@router.get("/user/{user_id}")
async def get_user(
    user_id: int,
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    return await backend.get_user(user_id)


@router.put("/user/{user_id}/add")
async def add_user(
    user_id: int,
    user: dict[str, Any] | None = Body(None),
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    """Create a preference entry; the body is forwarded to the backend unchanged."""
    logger.info("Adding preferences for userId %s via TARS backend", user_id)
    return await backend.add_user(user_id, user or {})


@router.put("/user/{user_id}/update")
async def update_user(
    user_id: int,
    user: dict[str, Any] | None = Body(None),
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    """Update an existing preference entry; a missing entry keeps the upstream 404."""
    logger.info("Updating preferences for userId %s via TARS backend", user_id)
    return await backend.update_user(user_id, user or {})


@router.put("/user/{user_id}/remove")
async def remove_user(
    user_id: int,
    backend: TarsBackend = Depends(get_tars_backend),
) -> dict:
    """Remove a user; the backend's plain-text reply is wrapped as ``{message}``."""
    result = await backend.remove_user(user_id)
    return {"message": result}


@router.get("/userList")
async def get_user_list(
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    return await backend.get_user_list()


@router.get("/userList/client/{client_id}")
async def get_client_user_list(
    client_id: int,
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    return await backend.get_client_user_list(client_id)


@router.get("/tarsUsers")
async def list_tars_users(
    service: AccountService = Depends(get_account_service),
) -> list[dict[str, Any]]:
    """All TARS users, for the admin dashboard; [] when they cannot be loaded."""
    return await service.list_tars_users()


@router.delete("/tarsUsers/{user_id}")
async def delete_tars_user(
    user_id: int,
    backend: TarsBackend = Depends(get_tars_backend),
) -> dict:
    """Delete a TARS user through the backend.

    Any not-found failure from the backend becomes a 404 with a fixed
    message; other failures keep their upstream status.
    """
    logger.info("Deleting user with ID: %s", user_id)
    try:
        deleted_user = await backend.delete_tars_user(user_id)
    except ExternalCallFailed as exc:
        if exc.is_not_found:
            logger.warning("Delete failed, user %s not found: %s", user_id, exc)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"User with ID {user_id} not found",
            )
        raise

    username = deleted_user.get("username") if isinstance(deleted_user, dict) else None
    logger.info("Deleted user %s (ID: %s) via TARS backend", username, user_id)
    return {
        "message": f'User "{username}" deleted successfully',
        "deletedUser": deleted_user,
    }


@router.post("/login")
async def login(
    data: LoginRequest | None = None,
    service: AccountService = Depends(get_account_service),
) -> Any:
    """Resolve a username, email or userId to the identity the browser stores."""
    if data is None or not data.has_identifier:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username, email, or userId is required",
        )
    try:
        return await service.login(data)
    except EntityNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found. Please check your credentials.",
        )
    except InactiveAccountError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive.",
        )
    except UserDatabaseError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        )
