from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..accumulator import accumulate
from ..model import CalculationResult, DayRecord, MonthlyContext, ValidationResult
from ..validator import ShiftValidator
from .base import PayrollCalculator

logger = logging.getLogger(__name__)


class StandardPayrollCalculator(PayrollCalculator):
    """Colombian rule: surcharges up to 190 h/month, capped overtime after."""

    def __init__(self, validator: Optional[ShiftValidator] = None):
        self._validator = validator or ShiftValidator()

    def validate_month(self, days: Sequence[DayRecord]) -> ValidationResult:
        return self._validator.validate_month(days)

    def calculate(self, days: Sequence[DayRecord], context: MonthlyContext) -> CalculationResult:
        validation = self.validate_month(days)
        if not validation.is_valid:
            logger.info("Calculation refused: %d day(s) with errors", len(validation.invalid_days))
            return CalculationResult.refused(validation)

        result = accumulate(days, context, validation=validation)
        logger.debug(
            "Calculated %d minutes, payable %.2f, compensatory %d h",
            result.total_minutes_worked,
            result.total_payable,
            result.compensatory_hours,
        )
        return result
