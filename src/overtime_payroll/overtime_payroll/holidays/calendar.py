from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import to_civil_date
from .model import Holiday


@dataclass(frozen=True)
class HolidayCalendar:
    """Immutable lookup of non-working days.

    Sundays are always non-working, whether or not they are listed.
    """

    names: Mapping[date, str] = field(default_factory=dict)

    @classmethod
    def from_holidays(cls, holidays: Iterable[Holiday]) -> "HolidayCalendar":
        return cls(names={to_civil_date(h.holiday_date): h.name for h in holidays})

    @classmethod
    def from_dates(cls, dates: Iterable[date | str]) -> "HolidayCalendar":
        return cls(names={to_civil_date(d): "" for d in dates})

    def is_listed_holiday(self, day: date) -> bool:
        return day in self.names

    def is_holiday_or_sunday(self, day: date) -> bool:
        return day.weekday() == 6 or self.is_listed_holiday(day)

    def name_of(self, day: date) -> Optional[str]:
        return self.names.get(day)

    def __len__(self) -> int:
        return len(self.names)
