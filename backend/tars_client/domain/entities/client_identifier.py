"""Domain entity — the identifier of this installation on the TARS backend."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ClientIdentifier:
    """Persisted as ``{"clientId": <int>}``."""

    client_id: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientIdentifier | None":
        raw = data.get("clientId")
        if raw is None or raw == "":
            return None
        return cls(client_id=int(raw))

    def to_dict(self) -> dict[str, int]:
        return {"clientId": self.client_id}
