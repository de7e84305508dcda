"""TARS backend infrastructure package."""

from .backend_user_data_source import BackendUserDataSource
from .tars_api_client import TarsApiClient

__all__ = ["BackendUserDataSource", "TarsApiClient"]
