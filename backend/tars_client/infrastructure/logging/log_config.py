"""Logging setup for the TARS client server.

Four knobs, all read from Settings:
    LOG_LEVEL          root level for everything not listed below
    LOG_LEVEL_HTTP     httpx / httpcore (outbound calls to the backend)
    LOG_LEVEL_UVICORN  uvicorn server and access logs
    LOG_LEVEL_TARS     backend client, JSON stores and the request log

The request log (``RequestLog``) already prints one line per request, so the
uvicorn access logger is capped at WARNING unless LOG_LEVEL_UVICORN asks for
something quieter still.
"""

import logging
import sys

from tars_client.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_CATEGORY_LOGGERS: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.error"),
    "log_level_tars": (
        "tars_client.infrastructure.tars",
        "tars_client.infrastructure.storage",
        "RequestLog",
    ),
}


def category_levels(settings: Settings) -> dict[str, int]:
    """Map each configured logger name to its numeric level."""
    levels: dict[str, int] = {}
    for field_name, logger_names in _CATEGORY_LOGGERS.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            levels[name] = level
    levels["uvicorn.access"] = max(
        logging.WARNING, _parse_level(settings.log_level_uvicorn)
    )
    return levels


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the configured levels; safe to call more than once."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        # uvicorn normally installs its own handlers; plain scripts and tests do not
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)

    for name, level in category_levels(settings).items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s http=%s uvicorn=%s tars=%s",
        settings.log_level,
        settings.log_level_http,
        settings.log_level_uvicorn,
        settings.log_level_tars,
    )


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
