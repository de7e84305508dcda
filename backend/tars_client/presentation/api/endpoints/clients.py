"""Client registration endpoints and the backend welcome message."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from tars_client.application.interfaces import TarsBackend
from tars_client.application.schemas import ClientCreate, ClientUserCreate
from tars_client.application.services import AccountService
from tars_client.infrastructure.dependencies import get_account_service, get_tars_backend

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Clients"])


@router.get("/index")
async def get_index(
    backend: TarsBackend = Depends(get_tars_backend),
) -> dict:
    """Return the backend's welcome message wrapped as ``{message}``."""
    message = await backend.get_index()
    return {"message": message}


@router.get("/client-id")
async def get_client_id(
    backend: TarsBackend = Depends(get_tars_backend),
) -> dict:
    """Return this installation's client id, registering one on first use."""
    client_id = await backend.get_or_create_client_id()
    return {"clientId": client_id}


@router.get("/clients")
async def list_clients(
    service: AccountService = Depends(get_account_service),
) -> list[dict[str, Any]]:
    return await service.list_clients()


@router.post("/client/create")
async def create_client(
    data: ClientCreate | None = None,
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    if data is None or not data.name or not data.email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name and email are required",
        )
    return await backend.create_client(data.name, data.email)


@router.post("/client/createUser")
async def create_client_user(
    data: ClientUserCreate | None = None,
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    """Create a TARS user under a client; the backend's user record is returned as-is."""
    if data is None or not data.is_complete:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="clientId, username, email, and role are required",
        )
    return await backend.create_client_user(
        data.client_id, data.username, data.email, data.role
    )
