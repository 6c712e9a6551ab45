from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..model import CalculationResult, DayRecord, MonthlyContext, ValidationResult


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def validate_month(self, days: Sequence[DayRecord]) -> ValidationResult:
        raise NotImplementedError

    @abstractmethod
    def calculate(self, days: Sequence[DayRecord], context: MonthlyContext) -> CalculationResult:
        raise NotImplementedError
