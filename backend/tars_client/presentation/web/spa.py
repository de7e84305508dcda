"""Browser bundle serving — static files plus an index.html fallback for client-side routes."""

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from tars_client.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(include_in_schema=False)

_NOT_BUILT = (
    'React app not built. Run "cd client && npm run build" first, '
    "or start React dev server separately."
)


def _resolve_asset(build_dir: Path, requested: str) -> Path | None:
    """Return the file for ``requested`` inside ``build_dir``; None if absent or outside it."""
    if not requested:
        return None
    candidate = (build_dir / requested).resolve()
    if not candidate.is_relative_to(build_dir) or not candidate.is_file():
        return None
    return candidate


@router.get("/{full_path:path}")
async def serve_browser_app(full_path: str) -> FileResponse:
    """Serve a bundle asset, else index.html so the browser router can take over."""
    build_dir = Path(get_settings().client_build_dir).resolve()

    asset = _resolve_asset(build_dir, full_path)
    if asset is not None:
        return FileResponse(asset)

    index_file = build_dir / "index.html"
    if index_file.is_file():
        return FileResponse(index_file)

    logger.warning("Browser bundle not found at %s (requested /%s)", build_dir, full_path)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_BUILT)
