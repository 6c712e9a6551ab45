from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.constants import STANDARD_MONTHLY_MINUTES
from ..core.enums import OVERTIME_CATEGORIES, SURCHARGE_CATEGORIES, PayCategory, Regime
from .classifier import classify_day
from .model import (
    CalculationResult,
    CapCrossing,
    CategoryTotals,
    ClassifiedMinute,
    DayRecord,
    MonthlyContext,
    ValidationResult,
)
from .rates import rate_for

logger = logging.getLogger(__name__)

# (regime, holiday or Sunday, night) -> exactly one bucket.
_DISPATCH: dict[tuple[Regime, bool, bool], PayCategory] = {
    (Regime.SURCHARGE, False, False): PayCategory.NORMAL,
    (Regime.SURCHARGE, False, True): PayCategory.NIGHT_SURCHARGE_WEEKDAY,
    (Regime.SURCHARGE, True, False): PayCategory.DAY_SURCHARGE_HOLIDAY,
    (Regime.SURCHARGE, True, True): PayCategory.NIGHT_SURCHARGE_HOLIDAY,
    (Regime.OVERTIME, False, False): PayCategory.OVERTIME_DAY_WEEKDAY,
    (Regime.OVERTIME, False, True): PayCategory.OVERTIME_NIGHT_WEEKDAY,
    (Regime.OVERTIME, True, False): PayCategory.OVERTIME_DAY_HOLIDAY,
    (Regime.OVERTIME, True, True): PayCategory.OVERTIME_NIGHT_HOLIDAY,
}


def regime_for(total_minutes_worked: int) -> Regime:
    if total_minutes_worked <= STANDARD_MONTHLY_MINUTES:
        return Regime.SURCHARGE
    return Regime.OVERTIME


def categorize(minute: ClassifiedMinute, regime: Regime) -> PayCategory:
    return _DISPATCH[(regime, minute.is_holiday_or_sunday, minute.is_night)]


class PayrollAccumulator:
    """Running state of one month's calculation.

    Minutes must be fed in chronological order (date, then shift 1 before
    shift 2): the 190-hour threshold and the overtime cap depend on how many
    minutes came before. One instance per calculation run.
    """

    def __init__(self, context: MonthlyContext):
        self._context = context
        self._cap = context.overtime_cap_amount

        self.total_minutes_worked = 0
        self.overtime_money_accrued = 0.0
        self.cap_reached = False
        self.compensatory_minutes = 0
        self.cap_crossing: Optional[CapCrossing] = None

        self._minutes = {c: 0 for c in SURCHARGE_CATEGORIES + OVERTIME_CATEGORIES}
        self._paid_minutes = {c: 0 for c in OVERTIME_CATEGORIES}

    def add(self, minute: ClassifiedMinute) -> PayCategory:
        self.total_minutes_worked += 1
        regime = regime_for(self.total_minutes_worked)
        category = categorize(minute, regime)

        if category is PayCategory.NORMAL:
            return category

        self._minutes[category] += 1
        if regime is Regime.SURCHARGE:
            return category

        minute_value = self._context.minute_rate * rate_for(category)
        if self.overtime_money_accrued < self._cap:
            self.overtime_money_accrued += minute_value
            self._paid_minutes[category] += 1
            if not self.cap_reached and self.overtime_money_accrued >= self._cap:
                self.cap_reached = True
                self.cap_crossing = CapCrossing(
                    work_date=minute.instant.date(),
                    time_of_day=minute.instant.strftime("%H:%M"),
                    excess=self.overtime_money_accrued - self._cap,
                )
                logger.info(
                    "Overtime cap %.2f reached on %s at %s",
                    self._cap,
                    self.cap_crossing.work_date.isoformat(),
                    self.cap_crossing.time_of_day,
                )
        else:
            self.compensatory_minutes += 1
        return category

    def add_all(self, minutes: Iterable[ClassifiedMinute]) -> None:
        for minute in minutes:
            self.add(minute)

    def totals(self) -> CategoryTotals:
        minute_rate = self._context.minute_rate
        money = {}
        for category in SURCHARGE_CATEGORIES:
            money[category] = minute_rate * self._minutes[category] * rate_for(category)
        for category in OVERTIME_CATEGORIES:
            money[category] = minute_rate * self._paid_minutes[category] * rate_for(category)
        return CategoryTotals(
            minutes=dict(self._minutes),
            money=money,
            total_minutes_worked=self.total_minutes_worked,
        )

    def result(self, *, validation: ValidationResult, skipped_dates: Sequence[date] = ()) -> CalculationResult:
        totals = self.totals()
        total_surcharge = (
            totals.money_for(PayCategory.NIGHT_SURCHARGE_WEEKDAY)
            + totals.money_for(PayCategory.NIGHT_SURCHARGE_HOLIDAY)
            + totals.money_for(PayCategory.DAY_SURCHARGE_HOLIDAY)
        )
        total_overtime = (
            totals.money_for(PayCategory.OVERTIME_DAY_WEEKDAY)
            + totals.money_for(PayCategory.OVERTIME_NIGHT_WEEKDAY)
            + totals.money_for(PayCategory.OVERTIME_DAY_HOLIDAY)
            + totals.money_for(PayCategory.OVERTIME_NIGHT_HOLIDAY)
        )
        paid_overtime = min(total_overtime, self._cap)

        return CalculationResult(
            ok=True,
            validation=validation,
            total_minutes_worked=self.total_minutes_worked,
            totals=totals,
            total_surcharge_money=total_surcharge,
            total_overtime_money_calculated=total_overtime,
            total_overtime_money_paid=paid_overtime,
            total_payable=total_surcharge + paid_overtime,
            compensatory_minutes=self.compensatory_minutes,
            compensatory_hours=self.compensatory_minutes // 60,
            cap_reached_at=self.cap_crossing,
            skipped_dates=tuple(skipped_dates),
        )


def accumulate(
    days: Iterable[DayRecord],
    context: MonthlyContext,
    *,
    validation: Optional[ValidationResult] = None,
) -> CalculationResult:
    """Fold every worked minute of the month into a CalculationResult.

    Days are walked in date order. A day whose times cannot be parsed is left
    out entirely and reported in `skipped_dates`.
    """

    accumulator = PayrollAccumulator(context)
    skipped: list[date] = []

    for day in sorted(days, key=lambda d: d.work_date):
        try:
            shifts = classify_day(day)
        except ValueError:
            logger.warning("Skipping %s: unparseable shift times", day.work_date.isoformat())
            skipped.append(day.work_date)
            continue
        for shift in shifts:
            accumulator.add_all(shift)

    return accumulator.result(validation=validation or ValidationResult(), skipped_dates=skipped)
