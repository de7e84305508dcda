"""Weather recommendation and alert endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tars_client.application.interfaces import TarsBackend
from tars_client.infrastructure.dependencies import get_tars_backend

router = APIRouter(tags=["Weather"])


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.get("/recommendation/weather")
async def get_weather_recommendation(
    city: str | None = Query(None),
    days: str | None = Query(None),
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    if not city or not days:
        raise _bad_request("city and days parameters are required")
    try:
        day_count = int(days)
    except ValueError:
        raise _bad_request("days must be a whole number")
    return await backend.get_weather_recommendation(city, day_count)


@router.get("/alert/weather")
async def get_weather_alerts(
    city: str | None = Query(None),
    lat: str | None = Query(None),
    lon: str | None = Query(None),
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    """Alerts by city name, or by coordinates when no city is given."""
    if city:
        return await backend.get_weather_alerts_by_city(city)
    if lat and lon:
        try:
            latitude, longitude = float(lat), float(lon)
        except ValueError:
            raise _bad_request("lat and lon must be numbers")
        return await backend.get_weather_alerts_by_coordinates(latitude, longitude)
    raise _bad_request("Either city or lat/lon parameters are required")


@router.get("/alert/weather/user/{user_id}")
async def get_user_weather_alerts(
    user_id: int,
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    return await backend.get_user_weather_alerts(user_id)
