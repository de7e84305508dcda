"""Abstract TARS backend interface — port for the HTTP client adapter.

Every capability the local server forwards is one method here. Results are
the backend's JSON (or plain text) passed through unchanged.
"""

from abc import ABC, abstractmethod
from typing import Any


class TarsBackend(ABC):
    """Port — defines what the application layer needs from the TARS backend.

    Implementations raise ``ExternalCallFailed`` for every failure,
    whatever its cause.
    """

    @abstractmethod
    async def get_or_create_client_id(self) -> int:
        """Return this installation's client id, registering one on first use."""
        ...

    @abstractmethod
    async def get_index(self) -> Any:
        """Fetch the backend's welcome message."""
        ...

    # ── Clients & users ──

    @abstractmethod
    async def get_clients(self) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def create_client(self, name: str, email: str) -> dict[str, Any]:
        ...

    @abstractmethod
    async def create_client_user(
        self, client_id: int | str, username: str, email: str, role: str
    ) -> dict[str, Any]:
        ...

    @abstractmethod
    async def get_user_list(self) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def get_client_user_list(self, client_id: int) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def get_tars_users(self) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def delete_tars_user(self, user_id: int) -> dict[str, Any]:
        """Delete a TARS user and return the deleted record."""
        ...

    @abstractmethod
    async def login(
        self,
        username: str | None = None,
        email: str | None = None,
        user_id: int | str | None = None,
    ) -> dict[str, Any]:
        """Resolve a TARS user by any one identifier.

        Args:
            username: Case-insensitive username.
            email: Case-insensitive email address.
            user_id: Numeric user id.

        Returns:
            The user record with its preference arrays.
        """
        ...

    # ── Preferences ──

    @abstractmethod
    async def set_user_preference(
        self, user_id: int, preferences: dict[str, Any]
    ) -> dict[str, Any]:
        ...

    @abstractmethod
    async def add_user(self, user_id: int, user: dict[str, Any]) -> Any:
        """Create the preference entry for ``user_id``; the body is forwarded as-is."""
        ...

    @abstractmethod
    async def update_user(self, user_id: int, user: dict[str, Any]) -> Any:
        """Replace the existing preference entry for ``user_id``."""
        ...

    @abstractmethod
    async def remove_user(self, user_id: int) -> Any:
        ...

    @abstractmethod
    async def get_user(self, user_id: int) -> dict[str, Any]:
        ...

    @abstractmethod
    async def get_user_by_client_id(self, client_id: int) -> dict[str, Any]:
        ...

    @abstractmethod
    async def get_user_preference(self, user_id: int) -> dict[str, Any]:
        ...

    # ── Weather, crime & travel ──

    @abstractmethod
    async def get_weather_recommendation(self, city: str, days: int) -> Any:
        ...

    @abstractmethod
    async def get_weather_alerts_by_city(self, city: str) -> Any:
        ...

    @abstractmethod
    async def get_weather_alerts_by_coordinates(self, lat: float, lon: float) -> Any:
        ...

    @abstractmethod
    async def get_user_weather_alerts(self, user_id: int) -> Any:
        ...

    @abstractmethod
    async def get_crime_summary(
        self, state: str, offense: str, month: str, year: str
    ) -> Any:
        ...

    @abstractmethod
    async def get_country_advisory(self, country: str) -> Any:
        ...

    @abstractmethod
    async def get_city_summary(
        self,
        city: str,
        start_date: str | None = None,
        end_date: str | None = None,
        state: str | None = None,
    ) -> Any:
        ...

    @abstractmethod
    async def get_country_summary(self, country: str) -> Any:
        ...
