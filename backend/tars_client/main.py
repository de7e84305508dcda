"""FastAPI application factory."""

import logging
import time
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from tars_client.config import get_settings
from tars_client.infrastructure.dependencies import get_client_config_store
from tars_client.infrastructure.logging.colored_logger import RequestLogger
from tars_client.infrastructure.logging.log_config import setup_logging
from tars_client.presentation.api.error_handlers import register_exception_handlers
from tars_client.presentation.api.router import router as api_router
from tars_client.presentation.web.spa import router as spa_router

logger = logging.getLogger(__name__)

request_log = RequestLogger("RequestLog")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and load the cached client id."""
    settings = get_settings()
    setup_logging()

    store = get_client_config_store()
    if store.client_id is None:
        logger.info("No client ID stored at %s yet", store.path)

    if settings.local_data_enabled:
        logger.info("User data is read from JSON files in %s", settings.tars_data_dir)
    logger.info(
        "TARS Client Server running on http://localhost:%d (backend: %s)",
        settings.port,
        settings.tars_backend_url,
    )
    logger.info("Dashboard available at http://localhost:%d/dashboard", settings.port)

    yield


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log every inbound request with its outcome and elapsed time."""
    method, path = request.method, request.url.path
    extra = {"query": request.url.query} if request.url.query else {}
    request_log.received(method, path, **extra)
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        request_log.failed(method, path, e, time.perf_counter() - start)
        raise
    request_log.completed(method, path, response.status_code, time.perf_counter() - start)
    return response


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    # API routes first; the browser bundle catch-all must come last
    app.include_router(api_router)
    app.include_router(spa_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tars_client.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
    )
