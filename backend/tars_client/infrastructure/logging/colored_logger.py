"""Colored request logger — ANSI-colored console logging for inbound requests.

Provides a RequestLogger that prints one line per request as it arrives and
one line as it completes, color-coded by where the request went and how it
ended, so API traffic and static-asset traffic are easy to tell apart.

Color scheme:
    🔵 Blue    — /api request received
    ⚪ Gray    — static / SPA request received, timing
    🟢 Green   — 2xx / 3xx response
    🟡 Yellow  — 4xx response
    🔴 Red     — 5xx response or unhandled error
"""

import logging
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    GRAY = "\033[90m"


# ── Request Kind Definitions ─────────────────────────────────────────

class RequestKind:
    """Predefined request kinds with colors and labels."""

    API = ("API", _Colors.BLUE)
    STATIC = ("STATIC", _Colors.GRAY)


def request_kind(path: str) -> tuple[str, str]:
    """API for anything under /api/, STATIC otherwise."""
    return RequestKind.API if path.startswith("/api/") else RequestKind.STATIC


def _status_color(status_code: int) -> str:
    if status_code >= 500:
        return _Colors.RED
    if status_code >= 400:
        return _Colors.YELLOW
    return _Colors.GREEN


# ── RequestLogger ────────────────────────────────────────────────────

class RequestLogger:
    """Color-coded logger for inbound HTTP requests.

    Usage:
        log = RequestLogger("RequestLog")
        log.received("GET", "/api/health")
        log.completed("GET", "/api/health", 200, elapsed=0.004)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def received(self, method: str, path: str, **kwargs: Any) -> None:
        label, color = request_kind(path)
        formatted = (
            f"{color}{_Colors.BOLD}[{label}]{_Colors.RESET} "
            f"{color}{method} {path}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    def completed(self, method: str, path: str, status_code: int, elapsed: float) -> None:
        color = _status_color(status_code)
        formatted = (
            f"{color}{method} {path} → {status_code}{_Colors.RESET} "
            f"{_Colors.GRAY}({elapsed * 1000:.1f} ms){_Colors.RESET}"
        )
        if status_code >= 500:
            self._logger.error(formatted)
        elif status_code >= 400:
            self._logger.warning(formatted)
        else:
            self._logger.info(formatted)

    def failed(self, method: str, path: str, error: Exception, elapsed: float) -> None:
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ {method} {path}{_Colors.RESET} "
            f"{_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET} "
            f"{_Colors.GRAY}({elapsed * 1000:.1f} ms){_Colors.RESET}"
        )
        self._logger.error(formatted)
