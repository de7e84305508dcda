"""JSON-file user-data source — reads the backend's data files directly.

Expected files under ``data_dir``:
    clients.json          — [{clientId, name, email}, ...]
    users.json            — [{userId, clientId, username, email, role, active, signUpDate}, ...]
    userPreferences.json  — [{id, clientId, cityPreferences, weatherPreferences, temperaturePreferences}, ...]

In ``userPreferences.json`` a record's ``id`` is the user id. Ids stored as
strings compare equal to their numeric form.
"""

import logging
from pathlib import Path
from typing import Any

from tars_client.application.interfaces import UserDataSource
from tars_client.domain.entities import PREFERENCE_FIELDS, LoginResult, PreferenceRecord
from tars_client.domain.exceptions import (
    EntityNotFoundError,
    InactiveAccountError,
    UserDatabaseError,
)
from tars_client.infrastructure.storage.json_files import (
    as_int,
    read_json_list,
    write_json_atomic,
)

logger = logging.getLogger(__name__)

CLIENTS_FILE = "clients.json"
USERS_FILE = "users.json"
PREFERENCES_FILE = "userPreferences.json"


class JsonFileUserDataSource(UserDataSource):
    """Infrastructure adapter over the backend's JSON data directory."""

    def __init__(self, data_dir: str | Path):
        self._data_dir = Path(data_dir)

    @property
    def source_name(self) -> str:
        return "json-files"

    async def list_clients(self) -> list[dict[str, Any]]:
        clients = read_json_list(self._data_dir / CLIENTS_FILE)
        logger.info("Loaded %d clients from %s", len(clients), CLIENTS_FILE)
        return clients

    async def list_tars_users(self) -> list[dict[str, Any]]:
        users = read_json_list(self._data_dir / USERS_FILE)
        logger.info("Loaded %d users from %s", len(users), USERS_FILE)
        return users

    async def find_preferences_by_user(self, user_id: int | None) -> dict[str, Any] | None:
        records = read_json_list(self._data_dir / PREFERENCES_FILE)
        return _record_for_user(records, user_id)

    async def find_preferences_by_client(self, client_id: int) -> dict[str, Any] | None:
        for record in read_json_list(self._data_dir / PREFERENCES_FILE):
            if as_int(record.get("clientId")) == client_id:
                return record
        return None

    async def save_preferences(
        self, user_id: int, preferences: dict[str, Any]
    ) -> dict[str, Any]:
        path = self._data_dir / PREFERENCES_FILE
        records = read_json_list(path)
        updates = {
            key: list(preferences[key])
            for key in PREFERENCE_FIELDS
            if preferences.get(key) is not None
        }
        client_id = as_int(preferences.get("clientId"))

        record = _record_for_user(records, user_id)
        if record is not None:
            record.update(updates)
            if client_id is not None:
                record["clientId"] = client_id
        else:
            record = PreferenceRecord(id=user_id, client_id=client_id).to_dict()
            record.update(updates)
            records.append(record)

        write_json_atomic(path, records)
        logger.info(
            "Saved preferences for userId %s (cities=%d, weather=%d, temp=%d)",
            user_id,
            len(record.get("cityPreferences", [])),
            len(record.get("weatherPreferences", [])),
            len(record.get("temperaturePreferences", [])),
        )
        return record

    async def authenticate(
        self,
        username: str | None = None,
        email: str | None = None,
        user_id: int | str | None = None,
    ) -> dict[str, Any]:
        users = self._load_user_database()
        user = _match_user(users, username=username, email=email, user_id=user_id)
        if user is None:
            raise EntityNotFoundError("TarsUser", user_id or username or email or "")
        if not user.get("active"):
            raise InactiveAccountError(user.get("userId"))

        matched_id = as_int(user.get("userId"))
        preferences = None
        if matched_id is None:
            logger.warning(
                "User %r has no numeric userId; skipping preference lookup",
                user.get("username"),
            )
        else:
            preferences = await self.find_preferences_by_user(matched_id)
        if preferences is None:
            logger.info(
                "No preferences stored for userId %s — using empty preferences",
                user.get("userId"),
            )
        return LoginResult.from_tars_user(user, preferences).to_dict()

    def _load_user_database(self) -> list[dict[str, Any]]:
        """users.json for login; unlike the listings, a missing file is an error."""
        path = self._data_dir / USERS_FILE
        if not path.exists():
            logger.error("%s not found at %s", USERS_FILE, path)
            raise UserDatabaseError("User database not found")
        try:
            users = read_json_list(path)
        except (OSError, ValueError) as exc:
            logger.error("Could not read %s: %s", path, exc)
            raise UserDatabaseError(f"Failed to read user database: {exc}") from exc
        logger.info("Loaded %d users from %s", len(users), USERS_FILE)
        return users


def _record_for_user(
    records: list[dict[str, Any]], user_id: int | None
) -> dict[str, Any] | None:
    """The record whose numeric ``id`` equals ``user_id``; records without one never match."""
    if user_id is None:
        return None
    for record in records:
        record_id = as_int(record.get("id"))
        if record_id is not None and record_id == user_id:
            return record
    return None


def _match_user(
    users: list[dict[str, Any]],
    *,
    username: str | None,
    email: str | None,
    user_id: int | str | None,
) -> dict[str, Any] | None:
    """Find a user by id, else username, else email (names compared case-insensitively)."""
    if user_id not in (None, ""):
        wanted = as_int(user_id)
        if wanted is None:
            return None
        return next((u for u in users if as_int(u.get("userId")) == wanted), None)
    if username:
        wanted_name = username.strip().lower()
        return next(
            (u for u in users if (u.get("username") or "").lower() == wanted_name),
            None,
        )
    if email:
        wanted_email = email.strip().lower()
        return next(
            (u for u in users if (u.get("email") or "").lower() == wanted_email),
            None,
        )
    return None
