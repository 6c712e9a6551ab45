from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AccessRecord:
    """One visit to the application (`accesos` row)."""

    ip: str
    accessed_at: datetime
    record_id: Optional[int] = None

    def as_dict(self) -> dict:
        return {"id": self.record_id, "ip": self.ip, "fecha": self.accessed_at.isoformat()}
