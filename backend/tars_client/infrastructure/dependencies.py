"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from tars_client.config import get_settings
from tars_client.application.interfaces import TarsBackend, UserDataSource
from tars_client.application.services import AccountService, PreferenceService
from tars_client.infrastructure.storage import ClientConfigStore, JsonFileUserDataSource
from tars_client.infrastructure.tars import BackendUserDataSource, TarsApiClient


@lru_cache
def get_client_config_store() -> ClientConfigStore:
    """One shared client-id store per process, loaded on first use."""
    settings = get_settings()
    return ClientConfigStore(settings.client_config_path)


async def get_tars_backend() -> AsyncGenerator[TarsBackend, None]:
    """Provides a TarsApiClient bound to the configured backend URL."""
    settings = get_settings()
    yield TarsApiClient(
        base_url=settings.tars_backend_url,
        config_store=get_client_config_store(),
        timeout=settings.tars_request_timeout,
    )


async def get_user_data_source(
    backend: TarsBackend = Depends(get_tars_backend),
) -> AsyncGenerator[UserDataSource, None]:
    """JSON files when TARS_DATA_DIR is set, otherwise the backend."""
    settings = get_settings()
    if settings.local_data_enabled:
        yield JsonFileUserDataSource(settings.tars_data_dir)
    else:
        yield BackendUserDataSource(backend)


async def get_preference_service(
    data_source: UserDataSource = Depends(get_user_data_source),
) -> AsyncGenerator[PreferenceService, None]:
    """Provides a PreferenceService over the configured data source."""
    yield PreferenceService(data_source)


async def get_account_service(
    data_source: UserDataSource = Depends(get_user_data_source),
) -> AsyncGenerator[AccountService, None]:
    """Provides an AccountService over the configured data source."""
    yield AccountService(data_source)
