"""Local JSON file storage package."""

from .client_config_store import ClientConfigStore
from .json_user_data_source import JsonFileUserDataSource

__all__ = ["ClientConfigStore", "JsonFileUserDataSource"]
