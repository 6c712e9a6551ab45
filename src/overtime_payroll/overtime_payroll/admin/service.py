from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from werkzeug.security import check_password_hash

from ..access_log.repository import AccessLogRepository
from ..common.datetime_utils import now_local
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..salary_tiers.repository import SalaryTierRepository

logger = logging.getLogger(__name__)


class AdminAuthService:
    """Use case: unlock the administrative actions with the shared password."""

    def __init__(self, password_hash: Optional[str]):
        self._password_hash = password_hash or ""

    def authenticate(self, password: str) -> Role:
        if not self._password_hash:
            logger.warning("Admin login attempted but ADMIN_PASSWORD_HASH is not configured")
            raise AuthenticationError("Contraseña incorrecta")

        try:
            ok = check_password_hash(self._password_hash, password or "")
        except ValueError:
            # unknown hashing method in the configured value
            ok = False

        if not ok:
            raise AuthenticationError("Contraseña incorrecta")
        return Role.ADMIN


class ExportService:
    """Dump the access log and the salary tiers as one JSON document."""

    def __init__(self, access_log: AccessLogRepository, tiers: SalaryTierRepository):
        self._access_log = access_log
        self._tiers = tiers

    def export(self, *, current_role: Role, now: datetime | None = None) -> dict:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos de administrador")

        now = now or now_local()
        return {
            "fecha_exportacion": now.isoformat(),
            "accesos": [r.as_dict() for r in self._access_log.list_all()],
            "cargos": [t.as_dict() for t in self._tiers.list_all()],
        }
