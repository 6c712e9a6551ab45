from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import is_valid_hhmm, minutes_of_day, parse_hhmm
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import IssueCode, ShiftField
from .model import DayRecord, DayValidation, ShiftIssue, ValidationResult

_SLOTS = (
    (1, ShiftField.ENTRY1, ShiftField.EXIT1),
    (2, ShiftField.ENTRY2, ShiftField.EXIT2),
)

_FIELD_LABELS = {
    ShiftField.ENTRY1: "entrada del turno 1",
    ShiftField.EXIT1: "salida del turno 1",
    ShiftField.ENTRY2: "entrada del turno 2",
    ShiftField.EXIT2: "salida del turno 2",
}


class ShiftValidator:
    """Structural checks on a day's shift pairs.

    Every rule runs independently so the user sees all problems of a day at
    once. Entry after exit is accepted (the shift ends the next day) and only
    produces a warning.
    """

    def validate_day(self, day: DayRecord) -> DayValidation:
        errors: list[ShiftIssue] = []
        warnings: list[ShiftIssue] = []
        spans: dict[int, tuple[int, int]] = {}

        for slot, entry_field, exit_field in _SLOTS:
            entry = day.value_of(entry_field).strip()
            exit_ = day.value_of(exit_field).strip()

            if entry and not exit_:
                errors.append(ShiftIssue(IssueCode.INCOMPLETE, (exit_field,), f"Falta la {_FIELD_LABELS[exit_field]}"))
            if exit_ and not entry:
                errors.append(ShiftIssue(IssueCode.INCOMPLETE, (entry_field,), f"Falta la {_FIELD_LABELS[entry_field]}"))

            malformed = False
            for f, value in ((entry_field, entry), (exit_field, exit_)):
                if value and not is_valid_hhmm(value):
                    malformed = True
                    errors.append(
                        ShiftIssue(IssueCode.MALFORMED, (f,), f"Hora inválida en la {_FIELD_LABELS[f]} (use HH:mm)")
                    )

            if not entry or not exit_ or malformed:
                continue

            start = minutes_of_day(parse_hhmm(entry))
            end = minutes_of_day(parse_hhmm(exit_))
            spans[slot] = (start, end)

            if start == end:
                errors.append(
                    ShiftIssue(
                        IssueCode.ZERO_DURATION,
                        (entry_field, exit_field),
                        f"El turno {slot} tiene la misma hora de entrada y salida",
                    )
                )
            elif start > end:
                warnings.append(
                    ShiftIssue(
                        IssueCode.CROSSES_MIDNIGHT,
                        (entry_field, exit_field),
                        f"El turno {slot} termina al día siguiente",
                    )
                )

        if 1 in spans and 2 in spans and self._overlaps(spans[1], spans[2]):
            errors.append(
                ShiftIssue(
                    IssueCode.OVERLAP,
                    tuple(ShiftField),
                    "Los turnos 1 y 2 se superponen",
                )
            )

        return DayValidation(work_date=day.work_date, errors=tuple(errors), warnings=tuple(warnings))

    def validate_month(self, days: Iterable[DayRecord]) -> ValidationResult:
        flagged = []
        for day in days:
            result = self.validate_day(day)
            if result.errors or result.warnings:
                flagged.append(result)
        return ValidationResult(days=tuple(flagged))

    @staticmethod
    def _overlaps(first: tuple[int, int], second: tuple[int, int]) -> bool:
        entry1, exit1 = first
        entry2, exit2 = second
        if exit1 == entry2:
            return False  # back-to-back
        end1 = exit1 + MINUTES_PER_DAY if exit1 < entry1 else exit1
        end2 = exit2 + MINUTES_PER_DAY if exit2 < entry2 else exit2
        return entry1 < end2 and entry2 < end1
