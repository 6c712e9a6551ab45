from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import to_civil_date
from ..common.validators import require_non_empty
from ..core.constants import HOLIDAY_FIRST_YEAR, HOLIDAY_LAST_YEAR
from ..core.enums import HolidayKind, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .calendar import HolidayCalendar
from .generator import GenerationReport, unique_holidays
from .model import Holiday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_holidays(self, *, year: Optional[int] = None) -> Sequence[Holiday]:
        if year is None:
            return self._holidays.list_all()
        return self._holidays.list_for_year(int(year))

    def calendar(self) -> HolidayCalendar:
        return HolidayCalendar.from_holidays(self._holidays.list_all())

    def add(self, *, current_role: Role, holiday_date, name: str, kind: str = HolidayKind.FIXED.value) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos de administrador")

        try:
            when = to_civil_date(holiday_date)
        except (TypeError, ValueError):
            raise ValidationError("Fecha inválida (use YYYY-MM-DD)")
        name = require_non_empty(name, "El nombre del festivo")
        try:
            holiday_kind = HolidayKind(str(kind).upper())
        except ValueError:
            raise ValidationError("Tipo de festivo inválido (FIJO o MOVIL)")

        if self._holidays.get_by_date(when):
            raise ValidationError(f"Ya existe un festivo el {when.isoformat()}")

        return self._holidays.add(holiday_date=when, name=name, kind=holiday_kind)

    def delete(self, *, current_role: Role, holiday_date) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos de administrador")

        try:
            when = to_civil_date(holiday_date)
        except (TypeError, ValueError):
            raise ValidationError("Fecha inválida (use YYYY-MM-DD)")

        if not self._holidays.delete_by_date(when):
            raise NotFoundError(f"No existe un festivo el {when.isoformat()}")

    def generate(
        self,
        *,
        current_role: Role,
        first_year: int = HOLIDAY_FIRST_YEAR,
        last_year: int = HOLIDAY_LAST_YEAR,
    ) -> GenerationReport:
        """Replace the whole table with the generated Colombian holidays."""

        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos de administrador")
        if int(first_year) > int(last_year):
            raise ValidationError("El año inicial no puede ser mayor que el año final")

        report = GenerationReport()
        holidays = unique_holidays(int(first_year), int(last_year), report)

        removed = self._holidays.replace_all(holidays)
        report.added = len(holidays)

        logger.info(
            "Holidays regenerated for %d-%d: removed=%d added=%d duplicates=%d",
            first_year, last_year, removed, report.added, len(report.duplicates),
        )
        for dup in report.duplicates:
            logger.debug("Duplicate holiday skipped: %s %s", dup.holiday_date.isoformat(), dup.name)
        return report
