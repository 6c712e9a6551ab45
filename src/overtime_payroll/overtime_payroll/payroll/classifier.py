from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator

from ..common.datetime_utils import is_valid_hhmm, minutes_of_day, parse_hhmm
from ..core.constants import DAY_START_HOUR, MINUTES_PER_DAY, NIGHT_START_HOUR
from .model import ClassifiedMinute, DayRecord

ONE_MINUTE = timedelta(minutes=1)


def is_night_hour(hour: int) -> bool:
    """18:00-06:00 is night; 06:00-18:00 is day."""
    return hour >= NIGHT_START_HOUR or hour < DAY_START_HOUR


def shift_duration_minutes(entry: time, exit_: time) -> int:
    """Whole minutes from entry to exit, wrapping past midnight."""
    return (minutes_of_day(exit_) - minutes_of_day(entry)) % MINUTES_PER_DAY


class ShiftMinutes:
    """Minute-by-minute view of one entry -> exit interval.

    Iterating yields one ClassifiedMinute per worked minute of the half-open
    interval [entry, exit). Each iteration starts over, so the same object can
    be walked more than once.
    """

    def __init__(self, entry: time, exit_: time, reference_date: date, is_holiday_or_sunday: bool):
        self.start = datetime.combine(reference_date, entry)
        end = datetime.combine(reference_date, exit_)
        if end < self.start:
            end += timedelta(days=1)
        self.end = end
        self.is_holiday_or_sunday = bool(is_holiday_or_sunday)

    def __len__(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)

    def __iter__(self) -> Iterator[ClassifiedMinute]:
        current = self.start
        while current < self.end:
            yield ClassifiedMinute(
                instant=current,
                is_night=is_night_hour(current.hour),
                is_holiday_or_sunday=self.is_holiday_or_sunday,
            )
            current += ONE_MINUTE


def shift_intervals(day: DayRecord) -> list[tuple[time, time]]:
    """Complete shift pairs of a day, shift 1 first.

    Raises ValueError when any entered value is not a valid HH:mm; a pair with
    one side missing is ignored.
    """

    intervals = []
    for entry, exit_ in day.shifts:
        entry, exit_ = entry.strip(), exit_.strip()
        for value in (entry, exit_):
            if value and not is_valid_hhmm(value):
                raise ValueError(f"Invalid HH:mm value on {day.work_date}: {value!r}")
        if entry and exit_:
            intervals.append((parse_hhmm(entry), parse_hhmm(exit_)))
    return intervals


def classify_day(day: DayRecord) -> list[ShiftMinutes]:
    return [
        ShiftMinutes(entry, exit_, day.work_date, day.is_holiday_or_sunday)
        for entry, exit_ in shift_intervals(day)
    ]


def day_total_minutes(day: DayRecord) -> int:
    return sum(shift_duration_minutes(entry, exit_) for entry, exit_ in shift_intervals(day))
