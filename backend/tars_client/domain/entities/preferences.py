"""Domain entity — a user's stored city/weather/temperature preferences."""

from dataclasses import dataclass, field
from typing import Any

PREFERENCE_FIELDS = (
    "cityPreferences",
    "weatherPreferences",
    "temperaturePreferences",
)


@dataclass
class PreferenceRecord:
    """Preference arrays keyed by user.

    ``id`` is the user id in every record this server writes; ``client_id``
    is only a secondary lookup key.
    """

    id: int | None
    user_id: int | None = None
    client_id: int | None = None
    city_preferences: list[str] = field(default_factory=list)
    weather_preferences: list[str] = field(default_factory=list)
    temperature_preferences: list[str] = field(default_factory=list)

    @classmethod
    def empty_for_user(cls, user_id: int) -> "PreferenceRecord":
        return cls(id=user_id, user_id=user_id)

    @classmethod
    def empty_for_client(cls, client_id: int) -> "PreferenceRecord":
        return cls(id=None, client_id=client_id)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id}
        if self.user_id is not None:
            data["userId"] = self.user_id
        if self.client_id is not None:
            data["clientId"] = self.client_id
        data["cityPreferences"] = list(self.city_preferences)
        data["weatherPreferences"] = list(self.weather_preferences)
        data["temperaturePreferences"] = list(self.temperature_preferences)
        return data
