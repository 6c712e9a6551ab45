from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..core.enums import HolidayKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Holiday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


def _to_holiday(r: dict) -> Holiday:
    return Holiday(
        holiday_id=int(r["id"]),
        holiday_date=normalize_mysql_date(r["fecha"]),
        name=r["nombre"],
        kind=HolidayKind(r["tipo"]),
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, fecha, nombre, tipo FROM festivos ORDER BY fecha")
            return [_to_holiday(r) for r in fetchall(cur)]

    def list_for_year(self, year: int) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, fecha, nombre, tipo FROM festivos WHERE YEAR(fecha)=%s ORDER BY fecha",
                (int(year),),
            )
            return [_to_holiday(r) for r in fetchall(cur)]

    def get_by_date(self, holiday_date: date) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, fecha, nombre, tipo FROM festivos WHERE fecha=%s", (holiday_date,))
            r = fetchone(cur)
            return _to_holiday(r) if r else None

    def add(self, *, holiday_date: date, name: str, kind: HolidayKind) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO festivos (fecha, nombre, tipo) VALUES (%s, %s, %s)",
                (holiday_date, name, kind.value),
            )
            logger.info("Holiday added: %s %s (%s)", holiday_date.isoformat(), name, kind.value)
            return int(cur.lastrowid)

    def delete_by_date(self, holiday_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM festivos WHERE fecha=%s", (holiday_date,))
            deleted = cur.rowcount > 0
        if deleted:
            logger.info("Holiday deleted: %s", holiday_date.isoformat())
        else:
            logger.warning("No holiday found on %s", holiday_date.isoformat())
        return deleted

    def replace_all(self, holidays: Sequence[Holiday]) -> int:
        # One connection: db_cursor rolls the DELETE back if any INSERT fails.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM festivos")
            removed = int(cur.rowcount)
            for h in holidays:
                cur.execute(
                    "INSERT INTO festivos (fecha, nombre, tipo) VALUES (%s, %s, %s)",
                    (h.holiday_date, h.name, h.kind.value),
                )
        logger.info("Holiday table replaced: removed=%d added=%d", removed, len(holidays))
        return removed
