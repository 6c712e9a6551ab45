from __future__ import annotations

from datetime import date

import pytest

from src.overtime_payroll.overtime_payroll.core.enums import HolidayKind
from src.overtime_payroll.overtime_payroll.holidays.generator import (
    GenerationReport,
    colombian_holidays,
    easter_sunday,
    next_monday,
    unique_holidays,
)


def test_easter_sunday():
    assert easter_sunday(2024) == date(2024, 3, 31)
    assert easter_sunday(2025) == date(2025, 4, 20)
    assert easter_sunday(2026) == date(2026, 4, 5)


def test_next_monday():
    assert next_monday(date(2025, 1, 6)) == date(2025, 1, 6)
    assert next_monday(date(2025, 3, 19)) == date(2025, 3, 24)
    assert next_monday(date(2025, 6, 29)) == date(2025, 6, 30)


def test_holy_week_is_not_moved():
    by_name = {h.name: h for h in colombian_holidays(2024)}
    assert by_name["Jueves Santo"].holiday_date == date(2024, 3, 28)
    assert by_name["Viernes Santo"].holiday_date == date(2024, 3, 29)
    assert by_name["Viernes Santo"].kind is HolidayKind.MOVABLE


def test_easter_relative_holidays_land_on_mondays():
    by_name = {h.name: h.holiday_date for h in colombian_holidays(2025)}
    assert by_name["Ascensión del Señor"] == date(2025, 6, 2)
    assert by_name["Corpus Christi"] == date(2025, 6, 23)
    assert by_name["Sagrado Corazón de Jesús"] == date(2025, 6, 30)


def test_fixed_holidays_keep_their_date():
    fixed = [h for h in colombian_holidays(2025) if h.kind is HolidayKind.FIXED]
    assert [h.holiday_date for h in fixed] == [
        date(2025, 1, 1),
        date(2025, 5, 1),
        date(2025, 7, 20),
        date(2025, 8, 7),
        date(2025, 12, 8),
        date(2025, 12, 25),
    ]


def test_duplicated_dates_are_reported_once():
    report = GenerationReport()
    holidays = unique_holidays(2025, 2025, report)

    assert len(holidays) == 17
    assert len({h.holiday_date for h in holidays}) == 17
    assert [(d.holiday_date, d.name) for d in report.duplicates] == [
        (date(2025, 6, 30), "Sagrado Corazón de Jesús")
    ]


def test_year_range_must_be_ordered():
    with pytest.raises(ValueError):
        unique_holidays(2030, 2024)
