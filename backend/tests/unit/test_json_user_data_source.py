"""Unit tests for the JSON-file user data source."""

import json

import pytest

from tars_client.domain.exceptions import (
    EntityNotFoundError,
    InactiveAccountError,
    UserDatabaseError,
)
from tars_client.infrastructure.storage import JsonFileUserDataSource


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "clients.json").write_text(
        json.dumps([{"clientId": 1, "name": "Acme", "email": "ops@acme.test"}])
    )
    (tmp_path / "users.json").write_text(
        json.dumps(
            [
                {
                    "userId": "7",
                    "clientId": 1,
                    "username": "Alice",
                    "email": "alice@acme.test",
                    "role": "admin",
                    "active": True,
                },
                {
                    "userId": 8,
                    "clientId": 1,
                    "username": "bob",
                    "email": "bob@acme.test",
                    "role": "user",
                    "active": False,
                },
            ]
        )
    )
    (tmp_path / "userPreferences.json").write_text(
        json.dumps(
            [
                {
                    "id": "7",
                    "clientId": 1,
                    "cityPreferences": ["Rome"],
                    "weatherPreferences": [],
                    "temperaturePreferences": ["mild"],
                }
            ]
        )
    )
    return tmp_path


@pytest.fixture
def source(data_dir) -> JsonFileUserDataSource:
    return JsonFileUserDataSource(data_dir)


@pytest.mark.asyncio
async def test_lists_clients_and_users(source: JsonFileUserDataSource):
    clients = await source.list_clients()
    users = await source.list_tars_users()

    assert [c["name"] for c in clients] == ["Acme"]
    assert [u["username"] for u in users] == ["Alice", "bob"]


@pytest.mark.asyncio
async def test_missing_files_read_as_empty(tmp_path):
    source = JsonFileUserDataSource(tmp_path / "absent")

    assert await source.list_clients() == []
    assert await source.find_preferences_by_user(1) is None


@pytest.mark.asyncio
async def test_string_ids_match_numeric_lookups(source: JsonFileUserDataSource):
    by_user = await source.find_preferences_by_user(7)
    by_client = await source.find_preferences_by_client(1)

    assert by_user["cityPreferences"] == ["Rome"]
    assert by_client == by_user


@pytest.mark.asyncio
async def test_save_updates_existing_record(source: JsonFileUserDataSource, data_dir):
    saved = await source.save_preferences(7, {"cityPreferences": ["Paris"]})

    assert saved["cityPreferences"] == ["Paris"]
    assert saved["temperaturePreferences"] == ["mild"]

    stored = json.loads((data_dir / "userPreferences.json").read_text())
    assert len(stored) == 1
    assert stored[0]["cityPreferences"] == ["Paris"]


@pytest.mark.asyncio
async def test_save_appends_new_record_keyed_by_user(source: JsonFileUserDataSource):
    await source.save_preferences(
        9, {"cityPreferences": ["Oslo"], "clientId": 1}
    )

    record = await source.find_preferences_by_user(9)
    assert record == {
        "id": 9,
        "clientId": 1,
        "cityPreferences": ["Oslo"],
        "weatherPreferences": [],
        "temperaturePreferences": [],
    }


@pytest.mark.asyncio
async def test_authenticate_by_username_is_case_insensitive(source: JsonFileUserDataSource):
    result = await source.authenticate(username="  alice ")

    assert result["userId"] == "7"
    assert result["role"] == "admin"
    assert result["preferences"]["cityPreferences"] == ["Rome"]


@pytest.mark.asyncio
async def test_authenticate_by_user_id(source: JsonFileUserDataSource):
    result = await source.authenticate(user_id="7")
    assert result["username"] == "Alice"


@pytest.mark.asyncio
async def test_authenticate_unknown_user(source: JsonFileUserDataSource):
    with pytest.raises(EntityNotFoundError):
        await source.authenticate(email="nobody@acme.test")


@pytest.mark.asyncio
async def test_authenticate_non_numeric_user_id(source: JsonFileUserDataSource):
    with pytest.raises(EntityNotFoundError):
        await source.authenticate(user_id="abc")


@pytest.mark.asyncio
async def test_authenticate_inactive_user(source: JsonFileUserDataSource):
    with pytest.raises(InactiveAccountError):
        await source.authenticate(username="bob")


@pytest.mark.asyncio
async def test_user_without_numeric_id_gets_no_foreign_preferences(tmp_path):
    (tmp_path / "users.json").write_text(
        json.dumps([{"userId": None, "username": "ghost", "active": True}])
    )
    (tmp_path / "userPreferences.json").write_text(
        json.dumps(
            [
                {
                    "clientId": 5,
                    "cityPreferences": ["Reykjavik"],
                    "weatherPreferences": ["snow"],
                    "temperaturePreferences": ["cold"],
                }
            ]
        )
    )
    source = JsonFileUserDataSource(tmp_path)

    result = await source.authenticate(username="ghost")

    assert result["preferences"] == {
        "cityPreferences": [],
        "weatherPreferences": [],
        "temperaturePreferences": [],
    }
    assert await source.find_preferences_by_user(None) is None


@pytest.mark.asyncio
async def test_save_skips_records_without_numeric_id(tmp_path):
    (tmp_path / "userPreferences.json").write_text(
        json.dumps([{"id": "n/a", "cityPreferences": ["Kept"]}])
    )
    source = JsonFileUserDataSource(tmp_path)

    await source.save_preferences(3, {"cityPreferences": ["Quito"]})

    stored = json.loads((tmp_path / "userPreferences.json").read_text())
    assert stored[0] == {"id": "n/a", "cityPreferences": ["Kept"]}
    assert stored[1]["id"] == 3
    assert stored[1]["cityPreferences"] == ["Quito"]


@pytest.mark.asyncio
async def test_authenticate_without_user_database(tmp_path):
    source = JsonFileUserDataSource(tmp_path)

    with pytest.raises(UserDatabaseError, match="User database not found"):
        await source.authenticate(username="alice")


@pytest.mark.asyncio
async def test_authenticate_with_unreadable_user_database(tmp_path):
    (tmp_path / "users.json").write_text("{not json")
    source = JsonFileUserDataSource(tmp_path)

    with pytest.raises(UserDatabaseError, match="Failed to read user database"):
        await source.authenticate(username="alice")
