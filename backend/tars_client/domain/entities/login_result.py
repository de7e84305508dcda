"""Domain entity — the identity handed to the browser after a login."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class LoginResult:
    """A matched TARS user plus their preference arrays.

    There is no server-side session; the browser keeps this record and
    presents it back on later requests.
    """

    user_id: int
    client_id: int | None
    username: str | None
    email: str | None
    role: str | None
    preferences: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_tars_user(
        cls, user: dict[str, Any], preferences: dict[str, Any] | None
    ) -> "LoginResult":
        preferences = preferences or {}
        return cls(
            user_id=user["userId"],
            client_id=user.get("clientId"),
            username=user.get("username"),
            email=user.get("email"),
            role=user.get("role"),
            preferences={
                "cityPreferences": preferences.get("cityPreferences") or [],
                "weatherPreferences": preferences.get("weatherPreferences") or [],
                "temperaturePreferences": preferences.get("temperaturePreferences") or [],
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "clientId": self.client_id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
            "preferences": self.preferences,
        }
