"""Shared fixtures: an ASGI client wired to an in-memory TARS backend."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tars_client.config import get_settings
from tars_client.infrastructure.dependencies import get_tars_backend
from tars_client.main import app
from tests.fakes import FakeTarsBackend


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Backend-only mode with every local file under tmp_path."""
    monkeypatch.delenv("TARS_DATA_DIR", raising=False)
    monkeypatch.setenv("CLIENT_CONFIG_PATH", str(tmp_path / "client-config.json"))
    monkeypatch.setenv("CLIENT_BUILD_DIR", str(tmp_path / "build"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_backend() -> FakeTarsBackend:
    return FakeTarsBackend()


@pytest_asyncio.fixture
async def api_client(fake_backend: FakeTarsBackend):
    app.dependency_overrides[get_tars_backend] = lambda: fake_backend
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
