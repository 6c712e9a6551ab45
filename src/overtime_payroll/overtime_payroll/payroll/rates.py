"""Premium multipliers applied to the per-minute wage."""

from __future__ import annotations

from types import MappingProxyType

from ..core.enums import PayCategory

RATE_TABLE = MappingProxyType(
    {
        PayCategory.NORMAL: 0.0,
        PayCategory.NIGHT_SURCHARGE_WEEKDAY: 0.35,
        PayCategory.DAY_SURCHARGE_HOLIDAY: 2.0,
        PayCategory.NIGHT_SURCHARGE_HOLIDAY: 2.35,
        PayCategory.OVERTIME_DAY_WEEKDAY: 1.25,
        PayCategory.OVERTIME_NIGHT_WEEKDAY: 1.75,
        PayCategory.OVERTIME_DAY_HOLIDAY: 2.25,
        PayCategory.OVERTIME_NIGHT_HOLIDAY: 2.75,
    }
)


def rate_for(category: PayCategory) -> float:
    return RATE_TABLE[category]
