"""Rebuild the `festivos` table with the Colombian holidays of a year range.

Usage: python scripts/generate_holidays.py [FIRST_YEAR] [LAST_YEAR]
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.overtime_payroll.overtime_payroll.container import build_container
from src.overtime_payroll.overtime_payroll.core.constants import HOLIDAY_FIRST_YEAR, HOLIDAY_LAST_YEAR
from src.overtime_payroll.overtime_payroll.core.enums import Role


def main(argv: list[str]) -> None:
    first_year = int(argv[0]) if len(argv) > 0 else HOLIDAY_FIRST_YEAR
    last_year = int(argv[1]) if len(argv) > 1 else HOLIDAY_LAST_YEAR

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))
    report = container.holiday_service.generate(current_role=Role.ADMIN, first_year=first_year, last_year=last_year)

    print(f"OK: {report.added} holidays generated for {first_year}-{last_year}")
    for dup in report.duplicates:
        print(f"  duplicate skipped: {dup.holiday_date.isoformat()} {dup.name}")


if __name__ == "__main__":
    main(sys.argv[1:])
