from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AccessRecord
from .repository import AccessLogRepository

logger = logging.getLogger(__name__)


def _to_record(r: dict) -> AccessRecord:
    # `fecha` is stored as the ISO text of the visit.
    accessed_at = r["fecha"]
    if not isinstance(accessed_at, datetime):
        accessed_at = datetime.fromisoformat(str(accessed_at).replace("Z", "+00:00"))
    return AccessRecord(record_id=int(r["id"]), ip=r["ip"], accessed_at=accessed_at)


class MySQLAccessLogRepository(AccessLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, *, ip: str, accessed_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO accesos (ip, fecha) VALUES (%s, %s)", (ip, accessed_at.isoformat()))
            return int(cur.lastrowid)

    def list_recent(self, limit: int) -> Sequence[AccessRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, ip, fecha FROM accesos ORDER BY id DESC LIMIT %s", (int(limit),))
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AccessRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, ip, fecha FROM accesos ORDER BY id")
            return [_to_record(r) for r in fetchall(cur)]

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM accesos")
            removed = int(cur.rowcount)
        logger.info("Access log cleared (%d records)", removed)
        return removed
