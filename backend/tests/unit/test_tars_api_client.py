"""Unit tests for the TarsApiClient."""

import json

import httpx
import pytest

from tars_client.domain.exceptions import ExternalCallFailed
from tars_client.infrastructure.storage import ClientConfigStore
from tars_client.infrastructure.tars import TarsApiClient


# ── Helpers ──


class _Recorder:
    """MockTransport handler that keeps every request it receives."""

    def __init__(self, status_code: int = 200, json_data=None, text: str | None = None):
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._json_data = json_data
        self._text = text

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._text is not None:
            return httpx.Response(self._status_code, text=self._text)
        return httpx.Response(self._status_code, json=self._json_data)


def _client(
    handler,
    tmp_path,
    base_url: str = "http://tars.test",
) -> TarsApiClient:
    return TarsApiClient(
        base_url=base_url,
        config_store=ClientConfigStore(tmp_path / "client-config.json"),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


# ── URL building ──


@pytest.mark.asyncio
async def test_trailing_slash_is_stripped_from_base_url(tmp_path):
    recorder = _Recorder(json_data=[])
    client = _client(recorder, tmp_path, base_url="http://tars.test/")

    await client.get_user_list()

    assert client.base_url == "http://tars.test"
    assert str(recorder.requests[0].url) == "http://tars.test/userList"


@pytest.mark.asyncio
async def test_country_name_is_percent_encoded_in_path(tmp_path):
    recorder = _Recorder(json_data={"country": "United States"})
    client = _client(recorder, tmp_path)

    result = await client.get_country_summary("United States")

    assert recorder.requests[0].url.raw_path == b"/countrySummary/United%20States"
    assert result == {"country": "United States"}


@pytest.mark.asyncio
async def test_weather_recommendation_uses_trailing_slash_path(tmp_path):
    recorder = _Recorder(json_data={"ok": True})
    client = _client(recorder, tmp_path)

    await client.get_weather_recommendation("Paris", 3)

    request = recorder.requests[0]
    assert request.url.path == "/recommendation/weather/"
    assert request.url.params["city"] == "Paris"
    assert request.url.params["days"] == "3"


@pytest.mark.asyncio
async def test_city_summary_sends_only_supplied_params(tmp_path):
    recorder = _Recorder(json_data={})
    client = _client(recorder, tmp_path)

    await client.get_city_summary("Austin", start_date="2024-01-01", state="TX")

    params = recorder.requests[0].url.params
    assert params["startDate"] == "2024-01-01"
    assert params["state"] == "TX"
    assert "endDate" not in params


@pytest.mark.asyncio
async def test_login_body_omits_missing_fields(tmp_path):
    recorder = _Recorder(json_data={"userId": 7})
    client = _client(recorder, tmp_path)

    await client.login(username="alice")

    request = recorder.requests[0]
    assert request.method == "POST"
    assert json.loads(request.content) == {"username": "alice"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method_name, path",
    [("add_user", "/user/7/add"), ("update_user", "/user/7/update")],
)
async def test_preference_entry_writes_put_the_user_body(tmp_path, method_name, path):
    recorder = _Recorder(json_data={"id": 7, "cityPreferences": ["Lima"]})
    client = _client(recorder, tmp_path)
    user = {"clientId": 1, "userId": 7, "cityPreferences": ["Lima"]}

    result = await getattr(client, method_name)(7, user)

    request = recorder.requests[0]
    assert request.method == "PUT"
    assert request.url.path == path
    assert json.loads(request.content) == user
    assert result["cityPreferences"] == ["Lima"]


@pytest.mark.asyncio
async def test_update_of_missing_entry_raises_not_found(tmp_path):
    recorder = _Recorder(status_code=404, json_data={"error": "User not found"})
    client = _client(recorder, tmp_path)

    with pytest.raises(ExternalCallFailed) as exc_info:
        await client.update_user(7, {"cityPreferences": []})

    assert str(exc_info.value) == "Failed to update user: User not found"
    assert exc_info.value.is_not_found


@pytest.mark.asyncio
async def test_plain_text_body_is_returned_as_string(tmp_path):
    recorder = _Recorder(text="Exercise increased caution")
    client = _client(recorder, tmp_path)

    advisory = await client.get_country_advisory("France")

    assert advisory == "Exercise increased caution"


# ── Error normalization ──


@pytest.mark.asyncio
async def test_structured_error_field_becomes_message(tmp_path):
    recorder = _Recorder(status_code=404, json_data={"error": "User not found"})
    client = _client(recorder, tmp_path)

    with pytest.raises(ExternalCallFailed) as exc_info:
        await client.get_user(12)

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "User not found"
    assert str(exc_info.value) == "Failed to get user: User not found"
    assert exc_info.value.is_not_found


@pytest.mark.asyncio
async def test_nested_error_message_is_used(tmp_path):
    recorder = _Recorder(status_code=400, json_data={"error": {"message": "Bad city"}})
    client = _client(recorder, tmp_path)

    with pytest.raises(ExternalCallFailed) as exc_info:
        await client.get_weather_alerts_by_city("???")

    assert exc_info.value.message == "Bad city"
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_raw_body_used_when_no_structured_error(tmp_path):
    recorder = _Recorder(status_code=503, text="backend warming up")
    client = _client(recorder, tmp_path)

    with pytest.raises(ExternalCallFailed) as exc_info:
        await client.get_clients()

    assert exc_info.value.message == "backend warming up"
    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_transport_error_has_no_status(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client = _client(handler, tmp_path)

    with pytest.raises(ExternalCallFailed) as exc_info:
        await client.get_index()

    assert exc_info.value.status_code is None
    assert "Connection refused" in exc_info.value.message


# ── Client id ──


@pytest.mark.asyncio
async def test_client_id_is_created_once_and_persisted(tmp_path):
    recorder = _Recorder(json_data={"clientId": 42, "name": "Client-1"})
    client = _client(recorder, tmp_path)

    first = await client.get_or_create_client_id()
    second = await client.get_or_create_client_id()

    assert first == second == 42
    assert len(recorder.requests) == 1
    body = json.loads(recorder.requests[0].content)
    assert body["name"].startswith("Client-")
    assert body["email"].endswith("@tars.local")

    saved = json.loads((tmp_path / "client-config.json").read_text())
    assert saved == {"clientId": 42}


@pytest.mark.asyncio
async def test_persisted_client_id_is_reused_by_new_instance(tmp_path):
    (tmp_path / "client-config.json").write_text('{"clientId": 5}')
    recorder = _Recorder(json_data={"clientId": 6})
    client = _client(recorder, tmp_path)

    assert await client.get_or_create_client_id() == 5
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_missing_client_id_in_response_raises(tmp_path):
    recorder = _Recorder(json_data={"name": "Client-1"})
    client = _client(recorder, tmp_path)

    with pytest.raises(ExternalCallFailed):
        await client.get_or_create_client_id()

    assert client.client_id is None
    assert not (tmp_path / "client-config.json").exists()
