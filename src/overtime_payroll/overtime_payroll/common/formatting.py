from __future__ import annotations


def format_money(value: float | int | None) -> str:
    """Two decimals, space as thousands separator, period as decimal point.

    >>> format_money(2054865)
    '2 054 865.00'
    """
    if value is None:
        return "0"
    return f"{float(value):,.2f}".replace(",", " ")


def format_minutes(minutes: int) -> str:
    """Minutes as zero padded `HH:MM` (hours may exceed 24)."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_day_total(minutes: int) -> str:
    """Per-day total shown next to the shift inputs (`H:MM`, empty when zero)."""
    if minutes <= 0:
        return ""
    return f"{minutes // 60}:{minutes % 60:02d}"
