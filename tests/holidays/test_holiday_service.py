from __future__ import annotations

from datetime import date

import pytest

from src.overtime_payroll.overtime_payroll.core.enums import HolidayKind, Role
from src.overtime_payroll.overtime_payroll.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.overtime_payroll.overtime_payroll.holidays.calendar import HolidayCalendar
from src.overtime_payroll.overtime_payroll.holidays.model import Holiday
from src.overtime_payroll.overtime_payroll.holidays.service import HolidayService
from tests.fakes import FakeHolidayRepo


def test_add_requires_admin():
    svc = HolidayService(FakeHolidayRepo())
    with pytest.raises(AuthorizationError):
        svc.add(current_role=Role.GUEST, holiday_date="2025-01-01", name="Año Nuevo")


def test_add_normalizes_input():
    repo = FakeHolidayRepo()
    svc = HolidayService(repo)

    svc.add(current_role=Role.ADMIN, holiday_date="2025-03-24T05:00:00.000Z", name=" San José ", kind="movil")

    (h,) = repo.list_all()
    assert h.holiday_date == date(2025, 3, 24)
    assert h.name == "San José"
    assert h.kind is HolidayKind.MOVABLE


def test_add_rejects_bad_values():
    svc = HolidayService(FakeHolidayRepo())
    with pytest.raises(ValidationError):
        svc.add(current_role=Role.ADMIN, holiday_date="24/03/2025", name="X")
    with pytest.raises(ValidationError):
        svc.add(current_role=Role.ADMIN, holiday_date="2025-03-24", name="  ")
    with pytest.raises(ValidationError):
        svc.add(current_role=Role.ADMIN, holiday_date="2025-03-24", name="X", kind="OTRO")


def test_add_rejects_existing_date():
    svc = HolidayService(FakeHolidayRepo())
    svc.add(current_role=Role.ADMIN, holiday_date="2025-01-01", name="Año Nuevo")
    with pytest.raises(ValidationError):
        svc.add(current_role=Role.ADMIN, holiday_date="2025-01-01", name="Otro")


def test_delete_missing_date():
    svc = HolidayService(FakeHolidayRepo())
    with pytest.raises(NotFoundError):
        svc.delete(current_role=Role.ADMIN, holiday_date="2025-01-01")


def test_generate_replaces_existing_rows():
    repo = FakeHolidayRepo([Holiday(holiday_date=date(2025, 2, 14), name="Inventado", kind=HolidayKind.FIXED)])
    svc = HolidayService(repo)

    report = svc.generate(current_role=Role.ADMIN, first_year=2025, last_year=2025)

    assert report.added == 17
    assert repo.get_by_date(date(2025, 2, 14)) is None
    assert repo.get_by_date(date(2025, 6, 30)).name == "San Pedro y San Pablo"
    assert len(svc.list_holidays(year=2025)) == 17
    assert svc.list_holidays(year=2024) == []


def test_generate_requires_admin():
    with pytest.raises(AuthorizationError):
        HolidayService(FakeHolidayRepo()).generate(current_role=Role.GUEST)


def test_calendar_treats_sundays_as_holidays():
    cal = HolidayCalendar.from_dates(["2025-01-01", date(2025, 3, 24)])

    assert cal.is_holiday_or_sunday(date(2025, 3, 2))
    assert not cal.is_listed_holiday(date(2025, 3, 2))
    assert cal.is_listed_holiday(date(2025, 1, 1))
    assert not cal.is_holiday_or_sunday(date(2025, 3, 3))
    assert len(cal) == 2


class FailingInsertHolidayRepo(FakeHolidayRepo):
    """Raises on the n-th insert, like a connection dropping mid-run."""

    def __init__(self, holidays=(), *, fail_on: int):
        self._inserts = 0
        self._fail_on = fail_on
        super().__init__(holidays)

    def add(self, *, holiday_date, name, kind):
        self._inserts += 1
        if self._inserts == self._fail_on:
            raise RuntimeError("connection lost")
        return super().add(holiday_date=holiday_date, name=name, kind=kind)


def test_failed_generation_keeps_the_previous_holidays():
    existing = [
        Holiday(holiday_date=date(2025, 1, 1), name="Año Nuevo", kind=HolidayKind.FIXED),
        Holiday(holiday_date=date(2025, 12, 25), name="Navidad", kind=HolidayKind.FIXED),
    ]
    # the two seed rows count as inserts 1 and 2
    repo = FailingInsertHolidayRepo(existing, fail_on=6)
    svc = HolidayService(repo)

    with pytest.raises(RuntimeError):
        svc.generate(current_role=Role.ADMIN, first_year=2025, last_year=2026)

    assert [(h.holiday_date, h.name) for h in repo.list_all()] == [
        (date(2025, 1, 1), "Año Nuevo"),
        (date(2025, 12, 25), "Navidad"),
    ]


def test_add_rejects_trailing_characters_in_date():
    svc = HolidayService(FakeHolidayRepo())
    with pytest.raises(ValidationError):
        svc.add(current_role=Role.ADMIN, holiday_date="2025-03-031", name="San José")
