"""Create the payroll database and tables, optionally loading demo data.

Usage: python scripts/init_db.py [--seed] [--schema PATH]
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

from src.hr_payroll.hr_payroll.database.bootstrap import apply_schema, apply_seed_sql, list_tables

PAYROLL_TABLES = {"employees", "employee_departments", "attendance", "monthly_stats", "salaries"}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Apply the payroll schema to the configured MySQL database.")
    parser.add_argument("--schema", type=Path, default=REPO_ROOT / "database" / "schema.sql")
    parser.add_argument("--seed", action="store_true", help="also load database/seed.sql")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

    settings_module = get_settings_module()
    db_config = dict(importlib.import_module(settings_module).DB_CONFIG)

    apply_schema(db_config, schema_path=args.schema)
    if args.seed:
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    missing = sorted(PAYROLL_TABLES - set(list_tables(db_config)))
    if missing:
        print(f"Payroll schema incomplete in {db_config.get('database')}: missing {', '.join(missing)}")
        return 1

    print(
        f"Payroll schema ready ({settings_module}) -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
        + (" with demo employees" if args.seed else "")
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
