"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the local server's health status."""
    return {"status": "ok", "message": "TARS Client Server is running"}
