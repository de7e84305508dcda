"""Small helpers for the JSON files this server reads and writes."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json_list(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of objects, returning [] if the file is missing.

    A file whose top level is not an array also reads as []. Unreadable or
    malformed files raise, so callers can surface the failure.
    """
    if not path.exists():
        logger.warning("%s not found — treating as empty", path)
        return []
    data = json.loads(path.read_text("utf-8"))
    if not isinstance(data, list):
        logger.warning("%s does not hold a JSON array — treating as empty", path)
        return []
    return [item for item in data if isinstance(item, dict)]


def write_json_atomic(path: Path, data: Any) -> None:
    """Write ``data`` as 2-space indented JSON via temp file + rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)
            fh.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def as_int(value: Any) -> int | None:
    """Coerce an id that may be stored as a string; None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None
