"""Abstract user-data source — port for the backend and JSON-file adapters.

The local server reads clients, TARS users and preference records either
through the backend or straight from the backend's JSON files on disk.
Both adapters implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class UserDataSource(ABC):
    """Port — user and preference lookups independent of where the data lives."""

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Short label for logs (e.g. 'backend', 'json-files')."""
        ...

    @abstractmethod
    async def list_clients(self) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def list_tars_users(self) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def find_preferences_by_user(self, user_id: int) -> dict[str, Any] | None:
        """Return the preference record for ``user_id``, or None when none exists."""
        ...

    @abstractmethod
    async def find_preferences_by_client(self, client_id: int) -> dict[str, Any] | None:
        """Return the first preference record owned by ``client_id``, or None."""
        ...

    @abstractmethod
    async def save_preferences(
        self, user_id: int, preferences: dict[str, Any]
    ) -> dict[str, Any]:
        """Store the given preference arrays for ``user_id`` and return the record."""
        ...

    @abstractmethod
    async def authenticate(
        self,
        username: str | None = None,
        email: str | None = None,
        user_id: int | str | None = None,
    ) -> dict[str, Any]:
        """Resolve a login to the identity the browser keeps.

        Raises:
            EntityNotFoundError: No TARS user matches.
            InactiveAccountError: The matched user is not active.
            ExternalCallFailed: The backend rejected the login.
        """
        ...
