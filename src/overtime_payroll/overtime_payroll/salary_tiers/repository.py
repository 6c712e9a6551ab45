from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SalaryTier


class SalaryTierRepository(Protocol):
    def list_all(self) -> Sequence[SalaryTier]:
        raise NotImplementedError

    def get_by_id(self, tier_id: int) -> Optional[SalaryTier]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[SalaryTier]:
        raise NotImplementedError

    def add(self, *, name: str, monthly_salary: int) -> int:
        raise NotImplementedError

    def update(self, *, tier_id: int, name: str, monthly_salary: int) -> bool:
        raise NotImplementedError

    def delete(self, tier_id: int) -> bool:
        raise NotImplementedError
