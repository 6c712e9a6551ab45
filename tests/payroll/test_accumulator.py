from __future__ import annotations

from collections import Counter
from datetime import date, datetime

import pytest

from src.overtime_payroll.overtime_payroll.common.datetime_utils import month_days
from src.overtime_payroll.overtime_payroll.core.enums import OVERTIME_CATEGORIES, SURCHARGE_CATEGORIES, PayCategory, Regime
from src.overtime_payroll.overtime_payroll.payroll.accumulator import PayrollAccumulator, accumulate, categorize
from src.overtime_payroll.overtime_payroll.payroll.classifier import classify_day, day_total_minutes
from src.overtime_payroll.overtime_payroll.payroll.model import ClassifiedMinute, DayRecord, MonthlyContext

BOMBERO = MonthlyContext(base_monthly_salary=2054865)
# minute_rate == 1.0 and cap == 5700.0, which keeps the money arithmetic exact
UNIT = MonthlyContext(base_monthly_salary=11400)

MARCH_WORKDAYS = [d for d in month_days(date(2025, 3, 1)) if d.weekday() != 6]


def _full_190_hours() -> list[DayRecord]:
    # 19 weekdays x 10 daytime hours = 11400 minutes
    return [DayRecord(work_date=d).with_times(entry1="08:00", exit1="18:00") for d in MARCH_WORKDAYS[:19]]


def test_weekday_daytime_shift_earns_no_premium():
    result = accumulate([DayRecord(work_date=date(2025, 3, 3)).with_times(entry1="08:00", exit1="18:00")], BOMBERO)

    assert result.total_minutes_worked == 600
    assert result.totals.normal_minutes == 600
    assert result.total_payable == 0
    assert all(result.totals.minutes_for(c) == 0 for c in PayCategory if c is not PayCategory.NORMAL)


def test_weekday_night_surcharge_money():
    result = accumulate([DayRecord(work_date=date(2025, 3, 4)).with_times(entry1="20:00", exit1="23:00")], BOMBERO)

    assert result.totals.minutes_for(PayCategory.NIGHT_SURCHARGE_WEEKDAY) == 180
    assert result.totals.money_for(PayCategory.NIGHT_SURCHARGE_WEEKDAY) == (2054865 / 190 / 60) * 180 * 0.35
    assert result.totals.normal_minutes == 0
    assert result.total_payable == result.total_surcharge_money


def test_holiday_flag_uses_holiday_rates():
    day = DayRecord(work_date=date(2025, 3, 24), is_holiday=True).with_times(entry1="16:00", exit1="20:00")
    result = accumulate([day], UNIT)

    assert result.totals.minutes_for(PayCategory.DAY_SURCHARGE_HOLIDAY) == 120
    assert result.totals.minutes_for(PayCategory.NIGHT_SURCHARGE_HOLIDAY) == 120
    assert result.total_surcharge_money == 120 * 2.0 + 120 * 2.35


def test_minutes_after_190_hours_are_overtime():
    days = _full_190_hours()
    days.append(DayRecord(work_date=MARCH_WORKDAYS[19]).with_times(entry1="06:00", exit1="08:00"))

    result = accumulate(days, BOMBERO)

    assert result.total_minutes_worked == 11400 + 120
    assert result.totals.minutes_for(PayCategory.OVERTIME_DAY_WEEKDAY) == 120
    assert result.totals.normal_minutes == 11400
    assert result.total_overtime_money_paid == BOMBERO.minute_rate * 120 * 1.25
    assert not result.cap_reached
    assert result.compensatory_hours == 0


def test_cap_crossing_turns_later_minutes_into_compensatory_time():
    days = _full_190_hours()
    # six full days of daytime overtime, then one more that crosses the cap
    for d in MARCH_WORKDAYS[19:26]:
        days.append(DayRecord(work_date=d).with_times(entry1="06:00", exit1="18:00"))

    result = accumulate(days, UNIT)

    assert result.cap_reached_at is not None
    assert result.cap_reached_at.work_date == date(2025, 3, 31)
    assert result.cap_reached_at.time_of_day == "09:59"
    assert result.cap_reached_at.excess == 0.0
    assert result.totals.minutes_for(PayCategory.OVERTIME_DAY_WEEKDAY) == 7 * 720
    assert result.total_overtime_money_calculated == 5700.0
    assert result.total_overtime_money_paid == 5700.0
    assert result.compensatory_minutes == 480
    assert result.compensatory_hours == 8


def test_paid_overtime_never_exceeds_cap():
    days = _full_190_hours()
    for d in MARCH_WORKDAYS[19:26]:
        days.append(DayRecord(work_date=d).with_times(entry1="18:00", exit1="06:00"))

    result = accumulate(days, UNIT)

    assert result.total_overtime_money_paid <= UNIT.overtime_cap_amount
    assert result.compensatory_minutes > 0


def test_days_are_walked_in_date_order():
    early = DayRecord(work_date=date(2025, 3, 3)).with_times(entry1="20:00", exit1="21:00")
    late = DayRecord(work_date=date(2025, 3, 4)).with_times(entry1="20:00", exit1="21:00")

    assert accumulate([late, early], BOMBERO) == accumulate([early, late], BOMBERO)


def test_unparseable_day_is_skipped():
    good = DayRecord(work_date=date(2025, 3, 3)).with_times(entry1="08:00", exit1="10:00")
    bad = DayRecord(work_date=date(2025, 3, 4)).with_times(entry1="8am", exit1="10:00")

    result = accumulate([good, bad], BOMBERO)

    assert result.total_minutes_worked == 120
    assert result.skipped_dates == (date(2025, 3, 4),)


DISPATCH_CASES = [
    (Regime.SURCHARGE, False, False, PayCategory.NORMAL),
    (Regime.SURCHARGE, False, True, PayCategory.NIGHT_SURCHARGE_WEEKDAY),
    (Regime.SURCHARGE, True, False, PayCategory.DAY_SURCHARGE_HOLIDAY),
    (Regime.SURCHARGE, True, True, PayCategory.NIGHT_SURCHARGE_HOLIDAY),
    (Regime.OVERTIME, False, False, PayCategory.OVERTIME_DAY_WEEKDAY),
    (Regime.OVERTIME, False, True, PayCategory.OVERTIME_NIGHT_WEEKDAY),
    (Regime.OVERTIME, True, False, PayCategory.OVERTIME_DAY_HOLIDAY),
    (Regime.OVERTIME, True, True, PayCategory.OVERTIME_NIGHT_HOLIDAY),
]


@pytest.mark.parametrize("regime, holiday, night, expected", DISPATCH_CASES)
def test_categorize_every_combination(regime, holiday, night, expected):
    minute = ClassifiedMinute(instant=datetime(2025, 3, 3, 12, 0), is_night=night, is_holiday_or_sunday=holiday)
    assert categorize(minute, regime) is expected


def test_each_category_has_exactly_one_combination():
    assert sorted(c.value for *_, c in DISPATCH_CASES) == sorted(c.value for c in PayCategory)


def _mixed_month() -> list[DayRecord]:
    days = []
    for d in month_days(date(2025, 3, 1)):
        day = DayRecord(work_date=d, is_holiday=d in (date(2025, 3, 24), date(2025, 3, 25)))
        if d.day % 2:
            day = day.with_times(entry1="14:00", exit1="02:00")
        else:
            day = day.with_times(entry1="05:00", exit1="09:00", entry2="17:30", exit2="23:15")
        days.append(day)
    return days


def test_mixed_month_buckets_add_up():
    days = _mixed_month()
    result = accumulate(days, BOMBERO)
    totals = result.totals
    total = result.total_minutes_worked

    surcharge = sum(totals.minutes_for(c) for c in SURCHARGE_CATEGORIES)
    overtime = sum(totals.minutes_for(c) for c in OVERTIME_CATEGORIES)

    assert total == sum(day_total_minutes(d) for d in days)
    assert total > 11400
    assert totals.normal_minutes + surcharge == min(total, 11400)
    assert overtime == max(0, total - 11400)
    assert all(totals.minutes_for(c) > 0 for c in SURCHARGE_CATEGORIES + OVERTIME_CATEGORIES)


def test_every_minute_lands_in_exactly_one_bucket():
    days = _mixed_month()
    acc = PayrollAccumulator(BOMBERO)
    seen = Counter()
    for day in days:
        for shift in classify_day(day):
            for minute in shift:
                seen[acc.add(minute)] += 1

    totals = acc.totals()
    assert sum(seen.values()) == acc.total_minutes_worked
    for category in PayCategory:
        assert seen[category] == totals.minutes_for(category), category
