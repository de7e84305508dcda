from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "TARS Client Server"
    app_version: str = "0.1.0"
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]

    # TARS backend service
    tars_backend_url: str = "http://localhost:8080"
    tars_request_timeout: float | None = None   # None waits indefinitely

    # Local state
    client_config_path: str = "client-config.json"
    tars_data_dir: str = ""                      # Empty = backend-only mode
    client_build_dir: str = "client/build"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_tars: str = "INFO"             # TARS backend client + data stores

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def local_data_enabled(self) -> bool:
        return bool(self.tars_data_dir.strip())


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
