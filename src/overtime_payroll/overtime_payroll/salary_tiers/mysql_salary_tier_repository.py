from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SalaryTier
from .repository import SalaryTierRepository

logger = logging.getLogger(__name__)


def _to_tier(r: dict) -> SalaryTier:
    return SalaryTier(tier_id=int(r["id"]), name=r["nombre"], monthly_salary=int(r["salario"]))


class MySQLSalaryTierRepository(SalaryTierRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[SalaryTier]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, nombre, salario FROM cargos ORDER BY salario, nombre")
            return [_to_tier(r) for r in fetchall(cur)]

    def get_by_id(self, tier_id: int) -> Optional[SalaryTier]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, nombre, salario FROM cargos WHERE id=%s", (int(tier_id),))
            r = fetchone(cur)
            return _to_tier(r) if r else None

    def get_by_name(self, name: str) -> Optional[SalaryTier]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, nombre, salario FROM cargos WHERE nombre=%s", (name,))
            r = fetchone(cur)
            return _to_tier(r) if r else None

    def add(self, *, name: str, monthly_salary: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO cargos (nombre, salario) VALUES (%s, %s)", (name, int(monthly_salary)))
            logger.info("Salary tier added: %s (%d)", name, monthly_salary)
            return int(cur.lastrowid)

    def update(self, *, tier_id: int, name: str, monthly_salary: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE cargos SET nombre=%s, salario=%s WHERE id=%s",
                (name, int(monthly_salary), int(tier_id)),
            )
            # rowcount is 0 when the values did not change, so check existence.
            cur.execute("SELECT COUNT(*) AS total FROM cargos WHERE id=%s", (int(tier_id),))
            found = int((fetchone(cur) or {}).get("total", 0)) > 0
        if found:
            logger.info("Salary tier %d updated: %s (%d)", tier_id, name, monthly_salary)
        return found

    def delete(self, tier_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM cargos WHERE id=%s", (int(tier_id),))
            deleted = cur.rowcount > 0
        if deleted:
            logger.info("Salary tier %d deleted", tier_id)
        return deleted
