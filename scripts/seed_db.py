"""Load database/seed.sql and (re)hash the demo accounts' passwords."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.worker_management.worker_management.database.bootstrap import (
    DEMO_ACCOUNTS,
    apply_seed_sql,
    ensure_demo_users,
)
from src.worker_management.worker_management.database.connection import DBConfig
from src.worker_management.worker_management.main import DATABASE_DIR, configure_logging

logger = logging.getLogger("seed_db")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
    ensure_demo_users(db_config)
    logger.info(
        "Seeded %s; demo logins: %s",
        DBConfig.from_settings(db_config).dsn,
        ", ".join(f"{a[4]} ({a[6]})" for a in DEMO_ACCOUNTS),
    )


if __name__ == "__main__":
    main()
