"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_MONTHLY_HOURS = 190
MINUTES_PER_HOUR = 60
STANDARD_MONTHLY_MINUTES = STANDARD_MONTHLY_HOURS * MINUTES_PER_HOUR
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

DAY_START_HOUR = 6
NIGHT_START_HOUR = 18

OVERTIME_CAP_RATIO = 0.5

HHMM_PATTERN = r"^([01]\d|2[0-3]):([0-5]\d)$"

DEFAULT_SALARY_TIERS = (
    ("BOMBERO", 2054865),
    ("CABO DE BOMBERO", 2197821),
    ("SARGENTO DE BOMBERO", 2269299),
    ("TENIENTE DE BOMBERO", 2510541),
)
DEFAULT_SALARY_TIER = "BOMBERO"

HOLIDAY_FIRST_YEAR = 2024
HOLIDAY_LAST_YEAR = 2040
