from .accounts import ClientCreate, ClientUserCreate, LoginRequest
from .preferences import PreferenceUpdate

__all__ = [
    "ClientCreate",
    "ClientUserCreate",
    "LoginRequest",
    "PreferenceUpdate",
]
