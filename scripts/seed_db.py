"""Load demo employees, memberships and monthly stats for salary calculation.

Usage: python scripts/seed_db.py [--seed-file PATH]
"""
from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_payroll.hr_payroll.database.bootstrap import apply_seed_sql


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load payroll demo data into the configured MySQL database.")
    parser.add_argument("--seed-file", type=Path, default=REPO_ROOT / "database" / "seed.sql")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    db_config = dict(importlib.import_module(get_settings_module()).DB_CONFIG)
    apply_seed_sql(db_config, seed_path=args.seed_file)

    print(
        f"Loaded {args.seed_file.name} into {db_config.get('database')}; "
        "try POST /api/admin/manage-salary/calculate/E001?employeeName=Anna%20Schmidt&year=2024&month=5"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
