from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterator

from ..core.enums import HolidayKind
from .model import Holiday

# (month, day, name)
FIXED_HOLIDAYS = (
    (1, 1, "Año Nuevo"),
    (5, 1, "Día del Trabajo"),
    (7, 20, "Independencia de Colombia"),
    (8, 7, "Batalla de Boyacá"),
    (12, 8, "Inmaculada Concepción"),
    (12, 25, "Navidad"),
)

# Moved to the following Monday (Ley Emiliani).
MONDAY_HOLIDAYS = (
    (1, 6, "Reyes Magos"),
    (3, 19, "San José"),
    (6, 29, "San Pedro y San Pablo"),
    (8, 15, "Asunción de la Virgen"),
    (10, 12, "Día de la Raza"),
    (11, 1, "Todos los Santos"),
    (11, 11, "Independencia de Cartagena"),
)

# (days from Easter Sunday, name, moved to Monday)
EASTER_HOLIDAYS = (
    (-3, "Jueves Santo", False),
    (-2, "Viernes Santo", False),
    (43, "Ascensión del Señor", True),
    (64, "Corpus Christi", True),
    (71, "Sagrado Corazón de Jesús", True),
)


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (anonymous Meeus/Jones/Butcher algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def next_monday(value: date) -> date:
    """`value` itself when it is a Monday, otherwise the next Monday."""
    return value + timedelta(days=(7 - value.weekday()) % 7)


def colombian_holidays(year: int) -> Iterator[Holiday]:
    """Yield the national holidays of `year`, possibly with repeated dates."""
    for month, day, name in FIXED_HOLIDAYS:
        yield Holiday(holiday_date=date(year, month, day), name=name, kind=HolidayKind.FIXED)

    for month, day, name in MONDAY_HOLIDAYS:
        yield Holiday(holiday_date=next_monday(date(year, month, day)), name=name, kind=HolidayKind.MOVABLE)

    easter = easter_sunday(year)
    for offset, name, moved in EASTER_HOLIDAYS:
        when = easter + timedelta(days=offset)
        if moved:
            when = next_monday(when)
        yield Holiday(holiday_date=when, name=name, kind=HolidayKind.MOVABLE)


@dataclass
class GenerationReport:
    added: int = 0
    duplicates: list[Holiday] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "agregados": self.added,
            "duplicados": len(self.duplicates),
            "detalle_duplicados": [h.as_dict() for h in self.duplicates],
        }


def unique_holidays(first_year: int, last_year: int, report: GenerationReport | None = None) -> list[Holiday]:
    """Holidays for every year in [first_year, last_year], one per date.

    When two holidays land on the same date the first one wins and the other is
    recorded as a duplicate on `report`.
    """

    if first_year > last_year:
        raise ValueError("first_year must not be after last_year")

    seen: set[date] = set()
    out: list[Holiday] = []
    for year in range(first_year, last_year + 1):
        for holiday in colombian_holidays(year):
            if holiday.holiday_date in seen:
                if report is not None:
                    report.duplicates.append(holiday)
                continue
            seen.add(holiday.holiday_date)
            out.append(holiday)
    return out
