from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Session role used for the administrative gate."""

    ADMIN = "admin"
    GUEST = "guest"


class HolidayKind(str, Enum):
    """How a holiday date is obtained (stored as in the `festivos` table)."""

    FIXED = "FIJO"
    MOVABLE = "MOVIL"


class Regime(str, Enum):
    """Which side of the 190-hour monthly threshold a minute falls on."""

    SURCHARGE = "SURCHARGE"
    OVERTIME = "OVERTIME"


class PayCategory(str, Enum):
    """Labor category of one worked minute.

    NORMAL is the ordinary weekday daytime bucket inside the 190 hours; it is
    reported as a derived remainder and earns no premium.
    """

    NORMAL = "normal"
    NIGHT_SURCHARGE_WEEKDAY = "night_surcharge_weekday"
    DAY_SURCHARGE_HOLIDAY = "day_surcharge_holiday"
    NIGHT_SURCHARGE_HOLIDAY = "night_surcharge_holiday"
    OVERTIME_DAY_WEEKDAY = "overtime_day_weekday"
    OVERTIME_NIGHT_WEEKDAY = "overtime_night_weekday"
    OVERTIME_DAY_HOLIDAY = "overtime_day_holiday"
    OVERTIME_NIGHT_HOLIDAY = "overtime_night_holiday"

    @property
    def regime(self) -> Regime | None:
        if self is PayCategory.NORMAL:
            return None
        if self.value.startswith("overtime_"):
            return Regime.OVERTIME
        return Regime.SURCHARGE


SURCHARGE_CATEGORIES = (
    PayCategory.NIGHT_SURCHARGE_WEEKDAY,
    PayCategory.DAY_SURCHARGE_HOLIDAY,
    PayCategory.NIGHT_SURCHARGE_HOLIDAY,
)

OVERTIME_CATEGORIES = (
    PayCategory.OVERTIME_DAY_WEEKDAY,
    PayCategory.OVERTIME_NIGHT_WEEKDAY,
    PayCategory.OVERTIME_DAY_HOLIDAY,
    PayCategory.OVERTIME_NIGHT_HOLIDAY,
)


class ShiftField(str, Enum):
    """The four time inputs of a day."""

    ENTRY1 = "entry1"
    EXIT1 = "exit1"
    ENTRY2 = "entry2"
    EXIT2 = "exit2"


class IssueCode(str, Enum):
    """Reasons a day's shift entries are rejected or flagged."""

    INCOMPLETE = "INCOMPLETE"
    MALFORMED = "MALFORMED"
    ZERO_DURATION = "ZERO_DURATION"
    OVERLAP = "OVERLAP"
    CROSSES_MIDNIGHT = "CROSSES_MIDNIGHT"
