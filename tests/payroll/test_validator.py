from __future__ import annotations

from datetime import date

from src.overtime_payroll.overtime_payroll.core.enums import IssueCode, ShiftField
from src.overtime_payroll.overtime_payroll.payroll.model import DayRecord
from src.overtime_payroll.overtime_payroll.payroll.validator import ShiftValidator

MONDAY = date(2025, 3, 3)


def _day(**times) -> DayRecord:
    return DayRecord(work_date=MONDAY).with_times(**times)


def _codes(result):
    return [e.code for e in result.errors]


def test_empty_day_is_valid():
    result = ShiftValidator().validate_day(DayRecord(work_date=MONDAY))
    assert result.is_valid
    assert result.warnings == ()


def test_missing_exit_is_reported_on_the_exit_field():
    result = ShiftValidator().validate_day(_day(entry1="08:00"))
    assert _codes(result) == [IssueCode.INCOMPLETE]
    assert result.error_fields == frozenset({ShiftField.EXIT1})
    assert result.errors[0].message == "Falta la salida del turno 1"


def test_missing_entry_is_reported_on_the_entry_field():
    result = ShiftValidator().validate_day(_day(exit2="12:00"))
    assert result.error_fields == frozenset({ShiftField.ENTRY2})


def test_malformed_values_are_rejected():
    for bad in ("8:00", "24:00", "12:60", "ab:cd", "08:00:00"):
        result = ShiftValidator().validate_day(_day(entry2=bad, exit2="18:00"))
        assert IssueCode.MALFORMED in _codes(result), bad
        assert ShiftField.ENTRY2 in result.error_fields


def test_zero_duration_shift_is_an_error():
    result = ShiftValidator().validate_day(_day(entry1="08:00", exit1="08:00"))
    assert _codes(result) == [IssueCode.ZERO_DURATION]
    assert result.error_fields == frozenset({ShiftField.ENTRY1, ShiftField.EXIT1})


def test_entry_after_exit_only_warns():
    result = ShiftValidator().validate_day(_day(entry1="22:00", exit1="06:00"))
    assert result.is_valid
    assert [w.code for w in result.warnings] == [IssueCode.CROSSES_MIDNIGHT]


def test_back_to_back_shifts_do_not_overlap():
    result = ShiftValidator().validate_day(_day(entry1="08:00", exit1="12:00", entry2="12:00", exit2="16:00"))
    assert result.is_valid


def test_overlapping_shifts_flag_all_four_fields():
    result = ShiftValidator().validate_day(_day(entry1="08:00", exit1="13:00", entry2="12:00", exit2="17:00"))
    assert _codes(result) == [IssueCode.OVERLAP]
    assert result.error_fields == frozenset(ShiftField)


def test_overlap_with_a_shift_crossing_midnight():
    result = ShiftValidator().validate_day(_day(entry1="20:00", exit1="02:00", entry2="23:00", exit2="23:30"))
    assert IssueCode.OVERLAP in _codes(result)


def test_every_rule_is_reported_for_the_same_day():
    result = ShiftValidator().validate_day(_day(entry1="08:00", exit1="08:00", entry2="9:00"))
    assert set(_codes(result)) == {IssueCode.ZERO_DURATION, IssueCode.INCOMPLETE, IssueCode.MALFORMED}


def test_month_summary_lists_each_invalid_day():
    days = [
        DayRecord(work_date=date(2025, 3, 3)).with_times(entry1="08:00"),
        DayRecord(work_date=date(2025, 3, 4)).with_times(entry1="08:00", exit1="16:00"),
        DayRecord(work_date=date(2025, 3, 5)).with_times(entry1="22:00", exit1="06:00"),
        DayRecord(work_date=date(2025, 3, 6)).with_times(entry1="10:00", exit1="10:00"),
    ]
    validation = ShiftValidator().validate_month(days)

    assert not validation.is_valid
    assert [d.work_date for d in validation.invalid_days] == [date(2025, 3, 3), date(2025, 3, 6)]
    assert [when for when, _ in validation.warnings] == [date(2025, 3, 5)]
    assert validation.summary.splitlines() == [
        "Corrija los siguientes errores antes de calcular:",
        "2025-03-03: Falta la salida del turno 1",
        "2025-03-06: El turno 1 tiene la misma hora de entrada y salida",
    ]
