"""Crime, country and city summary endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tars_client.application.interfaces import TarsBackend
from tars_client.infrastructure.dependencies import get_tars_backend

router = APIRouter(tags=["Travel"])


@router.get("/crime/summary")
async def get_crime_summary(
    state: str | None = Query(None),
    offense: str | None = Query(None),
    month: str | None = Query(None),
    year: str | None = Query(None),
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    """Forward a crime summary lookup; all four parameters are trimmed strings."""
    if not state or not offense or not month or not year:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="state, offense, month, and year parameters are required",
        )
    return await backend.get_crime_summary(
        state.strip(), offense.strip(), month.strip(), year.strip()
    )


@router.get("/country/{country}")
async def get_country_advisory(
    country: str,
    backend: TarsBackend = Depends(get_tars_backend),
) -> dict:
    advisory = await backend.get_country_advisory(country)
    return {"advisory": advisory}


@router.get("/summary/{city}")
async def get_city_summary(
    city: str,
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    state: str | None = Query(None),
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    return await backend.get_city_summary(city, start_date, end_date, state)


@router.get("/countrySummary/{country}")
async def get_country_summary(
    country: str,
    backend: TarsBackend = Depends(get_tars_backend),
) -> Any:
    """Country summary; percent-encoded names arrive here already decoded."""
    return await backend.get_country_summary(country)
