from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.overtime_payroll.overtime_payroll.database.bootstrap import apply_seed_sql, ensure_default_salary_tiers


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    inserted = ensure_default_salary_tiers(db_config)

    print(
        "OK: Seeded salary tiers -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(inserted={inserted})"
    )


if __name__ == "__main__":
    main()
