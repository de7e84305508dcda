from .account_service import AccountService
from .preference_service import PreferenceService

__all__ = [
    "AccountService",
    "PreferenceService",
]
