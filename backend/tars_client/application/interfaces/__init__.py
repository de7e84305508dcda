from .tars_backend import TarsBackend
from .user_data_source import UserDataSource

__all__ = [
    "TarsBackend",
    "UserDataSource",
]
