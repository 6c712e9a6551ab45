from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .model import AccessRecord
from .repository import AccessLogRepository


class AccessLogService:
    def __init__(self, records: AccessLogRepository, *, default_limit: int = 100):
        self._records = records
        self._default_limit = int(default_limit)

    def register(self, ip: str, *, now: datetime | None = None) -> AccessRecord:
        ip = require_non_empty(ip, "La IP")
        now = now or now_local()
        record_id = self._records.add(ip=ip, accessed_at=now)
        return AccessRecord(record_id=record_id, ip=ip, accessed_at=now)

    def list_recent(self, *, current_role: Role, limit: int | None = None) -> Sequence[AccessRecord]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos de administrador")
        return self._records.list_recent(int(limit or self._default_limit))

    def clear(self, *, current_role: Role) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos de administrador")
        return self._records.delete_all()
