from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import AccessRecord


class AccessLogRepository(Protocol):
    def add(self, *, ip: str, accessed_at: datetime) -> int:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[AccessRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AccessRecord]:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
