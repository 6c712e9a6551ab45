from __future__ import annotations

import calendar
import re
from datetime import date, datetime, time, timedelta
from typing import Any

from ..core.constants import HHMM_PATTERN

_HHMM_RE = re.compile(HHMM_PATTERN)
_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:$|T)")


def is_valid_hhmm(value: str | None) -> bool:
    """True for a 24h `HH:mm` string (zero padded, no seconds)."""
    return bool(value) and bool(_HHMM_RE.match(value))


def parse_hhmm(value: str) -> time:
    """Parse `HH:mm` into time. Raises ValueError on anything else."""
    m = _HHMM_RE.match(value or "")
    if not m:
        raise ValueError(f"Invalid HH:mm value: {value!r}")
    return time(hour=int(m.group(1)), minute=int(m.group(2)))


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_year_month(value: str) -> date:
    """Parse YYYY-MM into the first day of that month."""
    return datetime.strptime(value, "%Y-%m").date()


def to_civil_date(value: Any) -> date:
    """Normalize a stored holiday date to a plain calendar date.

    Drivers and JSON payloads hand us dates in several shapes:
    - datetime.date / datetime.datetime
    - 'YYYY-MM-DD'
    - ISO datetime strings ('2025-01-01T00:00:00.000Z')

    Only the calendar part is kept; no timezone conversion is ever applied,
    a UTC shift would move the holiday to the previous day.
    """

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        m = _ISO_DATE_RE.match(value.strip())
        if not m:
            raise ValueError(f"Invalid date string: {value!r}")
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    raise TypeError(f"Unsupported date value type: {type(value)!r}")


def month_days(month: date) -> list[date]:
    """Every calendar day of the month containing `month`, in order."""
    first = month.replace(day=1)
    days_in_month = calendar.monthrange(first.year, first.month)[1]
    return [first + timedelta(days=i) for i in range(days_in_month)]


def month_weeks(month: date) -> list[tuple[date, date]]:
    """Monday-start weeks overlapping the month as (start, end) pairs."""
    days = month_days(month)
    start = days[0] - timedelta(days=days[0].weekday())
    weeks = []
    while start <= days[-1]:
        end = start + timedelta(days=6)
        weeks.append((start, end))
        start = end + timedelta(days=1)
    return weeks


def shift_month(month: date, delta: int) -> date:
    """First day of the month `delta` months away from `month`."""
    index = month.year * 12 + (month.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
