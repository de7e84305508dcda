"""Top-level API router — every JSON endpoint lives under /api."""

from fastapi import APIRouter, HTTPException, Request, status

from tars_client.presentation.api.endpoints.health import router as health_router
from tars_client.presentation.api.endpoints.clients import router as clients_router
from tars_client.presentation.api.endpoints.users import router as users_router
from tars_client.presentation.api.endpoints.preferences import router as preferences_router
from tars_client.presentation.api.endpoints.weather import router as weather_router
from tars_client.presentation.api.endpoints.travel import router as travel_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(clients_router)
router.include_router(users_router)
router.include_router(preferences_router)
router.include_router(weather_router)
router.include_router(travel_router)


# Must stay last: unmatched /api paths answer with JSON, never the SPA page.
@router.api_route(
    "/{unmatched_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def api_not_found(request: Request, unmatched_path: str) -> None:
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"API endpoint not found: {request.url.path}",
    )
