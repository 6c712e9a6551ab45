from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import HolidayKind


@dataclass(frozen=True)
class Holiday:
    """Domain entity: a non-working day (`festivos` row)."""

    holiday_date: date
    name: str
    kind: HolidayKind
    holiday_id: Optional[int] = None

    def as_dict(self) -> dict:
        return {
            "id": self.holiday_id,
            "fecha": self.holiday_date.isoformat(),
            "nombre": self.name,
            "tipo": self.kind.value,
        }
