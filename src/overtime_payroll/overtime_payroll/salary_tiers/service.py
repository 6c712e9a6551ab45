from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import DEFAULT_SALARY_TIER
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import SalaryTier
from .repository import SalaryTierRepository


class SalaryTierService:
    def __init__(self, tiers: SalaryTierRepository):
        self._tiers = tiers

    def list_tiers(self) -> Sequence[SalaryTier]:
        return self._tiers.list_all()

    def resolve(self, name: Optional[str] = None) -> SalaryTier:
        """Tier used for a calculation; BOMBERO when no name is given."""

        wanted = str(name or DEFAULT_SALARY_TIER).strip().upper()
        tier = self._tiers.get_by_name(wanted)
        if not tier:
            raise NotFoundError(f"El cargo {wanted} no existe")
        return tier

    def _clean(self, name: str, salary: Any) -> tuple[str, int]:
        name = require_non_empty(name, "El nombre del cargo").upper()
        salary = require_positive_int(salary, "El salario")
        return name, salary

    def add(self, *, current_role: Role, name: str, monthly_salary: Any) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos de administrador")

        name, salary = self._clean(name, monthly_salary)
        if self._tiers.get_by_name(name):
            raise ValidationError(f"Ya existe el cargo {name}")
        return self._tiers.add(name=name, monthly_salary=salary)

    def update(self, *, current_role: Role, tier_id: int, name: str, monthly_salary: Any) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos de administrador")

        name, salary = self._clean(name, monthly_salary)
        existing = self._tiers.get_by_name(name)
        if existing and existing.tier_id != int(tier_id):
            raise ValidationError(f"Ya existe el cargo {name}")
        if not self._tiers.update(tier_id=int(tier_id), name=name, monthly_salary=salary):
            raise NotFoundError("El cargo no existe")

    def delete(self, *, current_role: Role, tier_id: int, selected_name: Optional[str] = None) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos de administrador")

        tier = self._tiers.get_by_id(int(tier_id))
        if not tier:
            raise NotFoundError("El cargo no existe")
        if selected_name and tier.name == selected_name.strip().upper():
            raise ValidationError("No se puede eliminar el cargo seleccionado actualmente")
        if not self._tiers.delete(int(tier_id)):
            raise NotFoundError("El cargo no existe")
