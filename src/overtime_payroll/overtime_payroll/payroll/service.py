from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import month_days, month_weeks, parse_year_month, shift_month, to_civil_date
from ..common.formatting import format_day_total, format_minutes, format_money
from ..core.enums import PayCategory, ShiftField
from ..core.exceptions import ValidationError
from ..holidays.calendar import HolidayCalendar
from ..holidays.repository import HolidayRepository
from ..salary_tiers.model import SalaryTier
from ..salary_tiers.service import SalaryTierService
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .classifier import day_total_minutes
from .model import CalculationResult, DayRecord, MonthlyContext, ValidationResult

logger = logging.getLogger(__name__)

# JSON key -> DayRecord field
WIRE_FIELDS = {
    "entrada1": ShiftField.ENTRY1,
    "salida1": ShiftField.EXIT1,
    "entrada2": ShiftField.ENTRY2,
    "salida2": ShiftField.EXIT2,
}

CATEGORY_LABELS = {
    PayCategory.NORMAL: "Horas normales",
    PayCategory.NIGHT_SURCHARGE_WEEKDAY: "Recargo nocturno L-S (35%)",
    PayCategory.DAY_SURCHARGE_HOLIDAY: "Recargo diurno dominical/festivo (200%)",
    PayCategory.NIGHT_SURCHARGE_HOLIDAY: "Recargo nocturno dominical/festivo (235%)",
    PayCategory.OVERTIME_DAY_WEEKDAY: "Hora extra diurna L-S (125%)",
    PayCategory.OVERTIME_NIGHT_WEEKDAY: "Hora extra nocturna L-S (175%)",
    PayCategory.OVERTIME_DAY_HOLIDAY: "Hora extra diurna dominical/festivo (225%)",
    PayCategory.OVERTIME_NIGHT_HOLIDAY: "Hora extra nocturna dominical/festivo (275%)",
}


def day_total_display(day: DayRecord) -> str:
    try:
        return format_day_total(day_total_minutes(day))
    except ValueError:
        return "Error"


class PayrollService:
    """Use case: register a month of shifts and liquidate it for one salary tier."""

    def __init__(
        self,
        tiers: SalaryTierService,
        holidays: HolidayRepository,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._tiers = tiers
        self._holidays = holidays
        self._calculator = calculator or StandardPayrollCalculator()

    def calendar(self) -> HolidayCalendar:
        return HolidayCalendar.from_holidays(self._holidays.list_all())

    def empty_month(self, month: date, *, calendar: Optional[HolidayCalendar] = None) -> list[DayRecord]:
        if calendar is None:
            calendar = self.calendar()
        return [DayRecord(work_date=d, is_holiday=calendar.is_listed_holiday(d)) for d in month_days(month)]

    def clear(self, days: Iterable[DayRecord]) -> list[DayRecord]:
        return [d.cleared() for d in days]

    def month_view(self, month_s: str) -> dict:
        try:
            month = parse_year_month(month_s)
        except ValueError:
            raise ValidationError("Mes inválido (use YYYY-MM)")

        calendar = self.calendar()
        days = self.empty_month(month, calendar=calendar)
        return {
            "mes": month.strftime("%Y-%m"),
            "mes_anterior": shift_month(month, -1).strftime("%Y-%m"),
            "mes_siguiente": shift_month(month, 1).strftime("%Y-%m"),
            "semanas": [{"inicio": s.isoformat(), "fin": e.isoformat()} for s, e in month_weeks(month)],
            "dias": [self._day_dict(d, calendar) for d in days],
        }

    def days_from_payload(self, payload: Sequence[Mapping], *, calendar: Optional[HolidayCalendar] = None) -> list[DayRecord]:
        """Build DayRecords from the JSON rows of the registration grid.

        Holiday flags are recomputed from the stored calendar; whatever the
        client sent for them is ignored.
        """

        if not isinstance(payload, (list, tuple)):
            raise ValidationError("Se esperaba una lista de días")

        if calendar is None:
            calendar = self.calendar()
        days: dict[date, DayRecord] = {}
        for row in payload:
            if not isinstance(row, Mapping):
                raise ValidationError("Cada día debe ser un objeto")
            try:
                work_date = to_civil_date(row.get("fecha"))
            except (TypeError, ValueError):
                raise ValidationError(f"Fecha inválida: {row.get('fecha')!r}")
            if work_date in days:
                raise ValidationError(f"Fecha repetida: {work_date.isoformat()}")

            times = {f.value: str(row.get(key) or "") for key, f in WIRE_FIELDS.items()}
            days[work_date] = DayRecord(work_date=work_date, is_holiday=calendar.is_listed_holiday(work_date)).with_times(**times)

        return [days[d] for d in sorted(days)]

    def validate(self, days: Sequence[DayRecord]) -> ValidationResult:
        return self._calculator.validate_month(days)

    def calculate(self, days: Sequence[DayRecord], *, tier_name: Optional[str] = None) -> tuple[SalaryTier, CalculationResult]:
        tier = self._tiers.resolve(tier_name)
        result = self._calculator.calculate(days, MonthlyContext(base_monthly_salary=tier.monthly_salary))
        if result.ok:
            logger.info(
                "Liquidated %d day(s) for %s: %d minutes, payable %.2f",
                len(days), tier.name, result.total_minutes_worked, result.total_payable,
            )
        return tier, result

    def _day_dict(self, day: DayRecord, calendar: HolidayCalendar) -> dict:
        return {
            "fecha": day.work_date.isoformat(),
            "es_festivo": day.is_holiday,
            "es_domingo": day.is_sunday,
            "nombre_festivo": calendar.name_of(day.work_date),
            **{key: day.value_of(f) for key, f in WIRE_FIELDS.items()},
            "total": day_total_display(day),
        }

    def validation_report(self, validation: ValidationResult) -> dict:
        field_keys = {f: key for key, f in WIRE_FIELDS.items()}
        return {
            "valido": validation.is_valid,
            "resumen": validation.summary,
            "errores": [
                {
                    "fecha": d.work_date.isoformat(),
                    "mensajes": [e.message for e in d.errors],
                    "campos": sorted(field_keys[f] for f in d.error_fields),
                }
                for d in validation.invalid_days
            ],
            "advertencias": [
                {"fecha": when.isoformat(), "codigo": w.code.value, "mensaje": w.message}
                for when, w in validation.warnings
            ],
        }

    def report(self, tier: SalaryTier, result: CalculationResult) -> dict:
        totals = result.totals
        categories = []
        for category, label in CATEGORY_LABELS.items():
            minutes = totals.minutes_for(category)
            money = totals.money_for(category)
            categories.append({
                "categoria": category.value,
                "etiqueta": label,
                "minutos": minutes,
                "horas": format_minutes(minutes),
                "valor": money,
                "valor_formateado": format_money(money),
            })

        crossing = result.cap_reached_at
        return {
            "ok": result.ok,
            "cargo": tier.as_dict(),
            "total_horas": format_minutes(result.total_minutes_worked),
            "total_minutos": result.total_minutes_worked,
            "categorias": categories,
            "total_recargos": format_money(result.total_surcharge_money),
            "total_extras_calculado": format_money(result.total_overtime_money_calculated),
            "total_extras_pagado": format_money(result.total_overtime_money_paid),
            "total_a_pagar": format_money(result.total_payable),
            "tope_extras": format_money(MonthlyContext(base_monthly_salary=tier.monthly_salary).overtime_cap_amount),
            "tope_alcanzado": None if crossing is None else {
                "fecha": crossing.work_date.isoformat(),
                "hora": crossing.time_of_day,
                "excedente": format_money(crossing.excess),
            },
            "minutos_compensatorios": result.compensatory_minutes,
            "horas_compensatorias": result.compensatory_hours,
            "dias_omitidos": [d.isoformat() for d in result.skipped_dates],
            "validacion": self.validation_report(result.validation),
        }
