"""TARS backend API client — implements the TarsBackend interface.

Communicates with the TARS backend service (default http://localhost:8080)
using httpx. Each method performs exactly one outbound request. There are
no retries: a call either succeeds once or raises ExternalCallFailed once.
"""

import json
import logging
import time
from typing import Any
from urllib.parse import quote

import httpx

from tars_client.application.interfaces import TarsBackend
from tars_client.domain.exceptions import ExternalCallFailed
from tars_client.infrastructure.storage.client_config_store import ClientConfigStore

logger = logging.getLogger(__name__)


def _segment(value: Any) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(str(value), safe="")


class TarsApiClient(TarsBackend):
    """Infrastructure adapter — connects to the TARS backend service.

    The client id cache lives in the injected ClientConfigStore, so several
    client instances in one process share a single identifier.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        config_store: ClientConfigStore | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._config_store = config_store or ClientConfigStore("client-config.json")
        self._http_client = http_client
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def client_id(self) -> int | None:
        return self._config_store.client_id

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
    ) -> Any:
        """Send one request and return its parsed body.

        Every failure (transport error or non-2xx status) is converted to
        ExternalCallFailed here, so callers never inspect httpx errors.
        """
        url = f"{self._base_url}{path}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.request(
                    method, url, params=params, json=json_body
                )
            except httpx.HTTPError as exc:
                message = str(exc) or type(exc).__name__
                logger.error("%s %s failed: %s", method, url, message)
                raise ExternalCallFailed(operation, message) from exc

            if response.is_error:
                self._raise_call_failed(operation, response)

            return self._parse_body(response)

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """JSON when the body parses as JSON, otherwise the raw text."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _raise_call_failed(operation: str, response: httpx.Response) -> None:
        """Raise ExternalCallFailed from a non-2xx httpx Response.

        Message priority: structured ``error``/``message`` field, raw body,
        HTTP reason phrase.
        """
        message = ""
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict):
                error = error.get("message")
            message = error or data.get("message") or ""
            if not isinstance(message, str):
                message = json.dumps(message)
        if not message:
            message = response.text or response.reason_phrase

        logger.error(
            "TARS backend returned %d for %s %s: %s",
            response.status_code,
            response.request.method,
            response.request.url,
            message,
        )
        raise ExternalCallFailed(operation, message, status_code=response.status_code)

    # ── Client id ──

    async def get_or_create_client_id(self) -> int:
        store = self._config_store
        async with store.lock:
            if store.client_id is not None:
                return store.client_id

            timestamp = int(time.time() * 1000)
            result = await self.create_client(
                f"Client-{timestamp}", f"client-{timestamp}@tars.local"
            )
            client_id = result.get("clientId") if isinstance(result, dict) else None
            if client_id in (None, ""):
                raise ExternalCallFailed(
                    "get or create client ID",
                    "backend response did not include a clientId",
                )
            store.save(int(client_id))
            return int(client_id)

    async def get_index(self) -> Any:
        return await self._request("get index", "GET", "/")

    # ── Clients & users ──

    async def get_clients(self) -> list[dict[str, Any]]:
        return await self._request("get clients", "GET", "/clients")

    async def create_client(self, name: str, email: str) -> dict[str, Any]:
        return await self._request(
            "create client",
            "POST",
            "/client/create",
            json_body={"name": name, "email": email},
        )

    async def create_client_user(
        self, client_id: int | str, username: str, email: str, role: str
    ) -> dict[str, Any]:
        return await self._request(
            "create user",
            "POST",
            "/client/createUser",
            json_body={
                "clientId": client_id,
                "username": username,
                "email": email,
                "role": role,
            },
        )

    async def get_user_list(self) -> list[dict[str, Any]]:
        return await self._request("get user list", "GET", "/userList")

    async def get_client_user_list(self, client_id: int) -> list[dict[str, Any]]:
        return await self._request(
            "get client user list", "GET", f"/userList/client/{_segment(client_id)}"
        )

    async def get_tars_users(self) -> list[dict[str, Any]]:
        return await self._request("get TARS users", "GET", "/tarsUsers")

    async def delete_tars_user(self, user_id: int) -> dict[str, Any]:
        return await self._request(
            "delete TARS user", "DELETE", f"/tarsUsers/{_segment(user_id)}"
        )

    async def login(
        self,
        username: str | None = None,
        email: str | None = None,
        user_id: int | str | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if username is not None:
            body["username"] = username
        if email is not None:
            body["email"] = email
        if user_id is not None:
            body["userId"] = user_id
        return await self._request("login", "POST", "/login", json_body=body)

    # ── Preferences ──

    async def set_user_preference(
        self, user_id: int, preferences: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._request(
            "set user preference",
            "PUT",
            f"/setPreference/{_segment(user_id)}",
            json_body=preferences,
        )

    async def add_user(self, user_id: int, user: dict[str, Any]) -> Any:
        return await self._request(
            "add user", "PUT", f"/user/{_segment(user_id)}/add", json_body=user
        )

    async def update_user(self, user_id: int, user: dict[str, Any]) -> Any:
        return await self._request(
            "update user", "PUT", f"/user/{_segment(user_id)}/update", json_body=user
        )

    async def remove_user(self, user_id: int) -> Any:
        return await self._request(
            "remove user", "PUT", f"/user/{_segment(user_id)}/remove"
        )

    async def get_user(self, user_id: int) -> dict[str, Any]:
        return await self._request("get user", "GET", f"/user/{_segment(user_id)}")

    async def get_user_by_client_id(self, client_id: int) -> dict[str, Any]:
        return await self._request(
            "get user by client ID", "GET", f"/user/client/{_segment(client_id)}"
        )

    async def get_user_preference(self, user_id: int) -> dict[str, Any]:
        return await self._request(
            "get user preference", "GET", f"/preferences/user/{_segment(user_id)}"
        )

    # ── Weather, crime & travel ──

    async def get_weather_recommendation(self, city: str, days: int) -> Any:
        return await self._request(
            "get weather recommendation",
            "GET",
            "/recommendation/weather/",
            params={"city": city, "days": days},
        )

    async def get_weather_alerts_by_city(self, city: str) -> Any:
        return await self._request(
            "get weather alerts", "GET", "/alert/weather", params={"city": city}
        )

    async def get_weather_alerts_by_coordinates(self, lat: float, lon: float) -> Any:
        return await self._request(
            "get weather alerts",
            "GET",
            "/alert/weather",
            params={"lat": lat, "lon": lon},
        )

    async def get_user_weather_alerts(self, user_id: int) -> Any:
        return await self._request(
            "get user weather alerts",
            "GET",
            f"/alert/weather/user/{_segment(user_id)}",
        )

    async def get_crime_summary(
        self, state: str, offense: str, month: str, year: str
    ) -> Any:
        return await self._request(
            "get crime summary",
            "GET",
            "/crime/summary",
            params={
                "state": str(state),
                "offense": str(offense),
                "month": str(month),
                "year": str(year),
            },
        )

    async def get_country_advisory(self, country: str) -> Any:
        return await self._request(
            "get country advisory", "GET", f"/country/{_segment(country)}"
        )

    async def get_city_summary(
        self,
        city: str,
        start_date: str | None = None,
        end_date: str | None = None,
        state: str | None = None,
    ) -> Any:
        params: dict[str, str] = {}
        if start_date:
            params["startDate"] = start_date
        if end_date:
            params["endDate"] = end_date
        if state:
            params["state"] = state
        return await self._request(
            "get city summary", "GET", f"/summary/{_segment(city)}", params=params
        )

    async def get_country_summary(self, country: str) -> Any:
        return await self._request(
            "get country summary", "GET", f"/countrySummary/{_segment(country)}"
        )
