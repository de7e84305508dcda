from .client_identifier import ClientIdentifier
from .login_result import LoginResult
from .preferences import PREFERENCE_FIELDS, PreferenceRecord

__all__ = [
    "ClientIdentifier",
    "LoginResult",
    "PREFERENCE_FIELDS",
    "PreferenceRecord",
]
