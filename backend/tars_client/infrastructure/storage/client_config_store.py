"""Local persistence for the installation's TARS client id.

File layout (pretty-printed, 2-space indent):
    {
      "clientId": 42
    }

Writes go to a sibling temp file which is then renamed over the target, so a
reader never sees a half-written file. The asyncio lock only serializes
callers inside this process; two processes creating a client id at the same
time can still both register one.
"""

import asyncio
import json
import logging
from pathlib import Path

from tars_client.domain.entities import ClientIdentifier
from tars_client.infrastructure.storage.json_files import write_json_atomic

logger = logging.getLogger(__name__)


class ClientConfigStore:
    """Infrastructure adapter for the ``client-config.json`` file."""

    def __init__(self, config_path: str | Path):
        self._path = Path(config_path)
        self._identifier: ClientIdentifier | None = None
        self.lock = asyncio.Lock()
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def client_id(self) -> int | None:
        return self._identifier.client_id if self._identifier else None

    def load(self) -> int | None:
        """Read the persisted client id; a missing or unreadable file leaves it unset."""
        if not self._path.exists():
            return self.client_id
        try:
            data = json.loads(self._path.read_text("utf-8"))
            self._identifier = ClientIdentifier.from_dict(data)
            logger.info("Loaded client ID: %s", self.client_id)
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Could not load client ID from %s: %s", self._path, exc)
        return self.client_id

    def save(self, client_id: int) -> None:
        """Persist ``client_id``; the in-memory value is kept even if the write fails."""
        self._identifier = ClientIdentifier(client_id=int(client_id))
        try:
            write_json_atomic(self._path, self._identifier.to_dict())
            logger.info("Saved client ID: %s", client_id)
        except OSError as exc:
            logger.error("Could not save client ID to %s: %s", self._path, exc)
