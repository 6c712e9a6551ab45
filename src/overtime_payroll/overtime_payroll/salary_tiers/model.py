from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SalaryTier:
    """Domain entity: a firefighter rank and its base monthly salary (`cargos`)."""

    name: str
    monthly_salary: int
    tier_id: Optional[int] = None

    def as_dict(self) -> dict:
        return {"id": self.tier_id, "nombre": self.name, "salario": self.monthly_salary}
