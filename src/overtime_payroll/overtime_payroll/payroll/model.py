from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Mapping, Optional

from ..core.constants import MINUTES_PER_HOUR, OVERTIME_CAP_RATIO, STANDARD_MONTHLY_HOURS, STANDARD_MONTHLY_MINUTES
from ..core.enums import IssueCode, PayCategory, ShiftField


@dataclass(frozen=True)
class DayRecord:
    """One calendar day of the active month with up to two shifts.

    Times are kept as entered (`HH:mm` strings, empty when absent) so that the
    validator can report exactly what the user typed.
    """

    work_date: date
    entry1: str = ""
    exit1: str = ""
    entry2: str = ""
    exit2: str = ""
    is_holiday: bool = False

    @property
    def is_sunday(self) -> bool:
        return self.work_date.weekday() == 6

    @property
    def is_holiday_or_sunday(self) -> bool:
        return self.is_holiday or self.is_sunday

    @property
    def shifts(self) -> tuple[tuple[str, str], tuple[str, str]]:
        return ((self.entry1, self.exit1), (self.entry2, self.exit2))

    def value_of(self, f: ShiftField) -> str:
        return getattr(self, f.value)

    def with_times(self, **times: str) -> "DayRecord":
        unknown = set(times) - {f.value for f in ShiftField}
        if unknown:
            raise ValueError(f"Unknown shift fields: {sorted(unknown)}")
        return replace(self, **{k: (v or "").strip() for k, v in times.items()})

    def cleared(self) -> "DayRecord":
        return replace(self, entry1="", exit1="", entry2="", exit2="")


@dataclass(frozen=True)
class MonthlyContext:
    """Salary scope of one calculation run."""

    base_monthly_salary: float

    @property
    def hourly_rate(self) -> float:
        return self.base_monthly_salary / STANDARD_MONTHLY_HOURS

    @property
    def minute_rate(self) -> float:
        return self.hourly_rate / MINUTES_PER_HOUR

    @property
    def overtime_cap_amount(self) -> float:
        return self.base_monthly_salary * OVERTIME_CAP_RATIO


@dataclass(frozen=True)
class ClassifiedMinute:
    """One worked minute tagged by time-of-day and day type."""

    instant: datetime
    is_night: bool
    is_holiday_or_sunday: bool

    @property
    def is_day(self) -> bool:
        return not self.is_night


@dataclass(frozen=True)
class ShiftIssue:
    code: IssueCode
    fields: tuple[ShiftField, ...]
    message: str


@dataclass(frozen=True)
class DayValidation:
    work_date: date
    errors: tuple[ShiftIssue, ...] = ()
    warnings: tuple[ShiftIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_fields(self) -> frozenset[ShiftField]:
        return frozenset(f for issue in self.errors for f in issue.fields)


@dataclass(frozen=True)
class ValidationResult:
    """Month-level outcome of the shift validator.

    Only days carrying at least one error or warning are kept.
    """

    days: tuple[DayValidation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return all(d.is_valid for d in self.days)

    @property
    def invalid_days(self) -> tuple[DayValidation, ...]:
        return tuple(d for d in self.days if not d.is_valid)

    @property
    def warnings(self) -> tuple[tuple[date, ShiftIssue], ...]:
        return tuple((d.work_date, w) for d in self.days for w in d.warnings)

    @property
    def summary(self) -> str:
        if self.is_valid:
            return ""
        lines = ["Corrija los siguientes errores antes de calcular:"]
        for d in self.invalid_days:
            reasons = "; ".join(e.message for e in d.errors)
            lines.append(f"{d.work_date.isoformat()}: {reasons}")
        return "\n".join(lines)

    def for_date(self, work_date: date) -> Optional[DayValidation]:
        for d in self.days:
            if d.work_date == work_date:
                return d
        return None


@dataclass(frozen=True)
class CategoryTotals:
    """Minute count and money per labor category (NORMAL excluded)."""

    minutes: Mapping[PayCategory, int]
    money: Mapping[PayCategory, float]
    total_minutes_worked: int = 0

    @property
    def normal_minutes(self) -> int:
        # Derived remainder, never tracked as its own counter.
        surcharge = (
            self.minutes_for(PayCategory.NIGHT_SURCHARGE_WEEKDAY)
            + self.minutes_for(PayCategory.NIGHT_SURCHARGE_HOLIDAY)
            + self.minutes_for(PayCategory.DAY_SURCHARGE_HOLIDAY)
        )
        return min(self.total_minutes_worked, STANDARD_MONTHLY_MINUTES) - surcharge

    def minutes_for(self, category: PayCategory) -> int:
        if category is PayCategory.NORMAL:
            return self.normal_minutes
        return int(self.minutes.get(category, 0))

    def money_for(self, category: PayCategory) -> float:
        return float(self.money.get(category, 0.0))


@dataclass(frozen=True)
class CapCrossing:
    """Minute at which accrued overtime money first reached the cap."""

    work_date: date
    time_of_day: str
    excess: float


@dataclass(frozen=True)
class CalculationResult:
    ok: bool
    validation: ValidationResult
    total_minutes_worked: int = 0
    totals: CategoryTotals = field(default_factory=lambda: CategoryTotals(minutes={}, money={}))
    total_surcharge_money: float = 0.0
    total_overtime_money_calculated: float = 0.0
    total_overtime_money_paid: float = 0.0
    total_payable: float = 0.0
    compensatory_minutes: int = 0
    compensatory_hours: int = 0
    cap_reached_at: Optional[CapCrossing] = None
    skipped_dates: tuple[date, ...] = ()

    @classmethod
    def refused(cls, validation: ValidationResult) -> "CalculationResult":
        return cls(ok=False, validation=validation)

    @property
    def cap_reached(self) -> bool:
        return self.cap_reached_at is not None
