"""Exception handlers — every API failure is rendered as ``{"error": message}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tars_client.domain.exceptions import ExternalCallFailed

logger = logging.getLogger(__name__)


def upstream_status(exc: ExternalCallFailed) -> int:
    """The backend's own status when it sent an error status, else 500."""
    if exc.status_code is not None and 400 <= exc.status_code < 600:
        return exc.status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid request — {message}"},
    )


async def _external_call_failed_handler(
    request: Request, exc: ExternalCallFailed
) -> JSONResponse:
    status_code = upstream_status(exc)
    logger.error(
        "Error handling %s %s (upstream status=%s): %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc,
    )
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc) or type(exc).__name__},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(ExternalCallFailed, _external_call_failed_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
