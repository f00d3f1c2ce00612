"""Create the database (if needed) and apply database/schema.sql."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.worker_management.worker_management.database.bootstrap import apply_schema, list_tables
from src.worker_management.worker_management.database.connection import DBConfig
from src.worker_management.worker_management.main import DATABASE_DIR, configure_logging

logger = logging.getLogger("init_db")


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
    tables = list_tables(db_config)
    logger.info("Schema ready on %s: %s", DBConfig.from_settings(db_config).dsn, ", ".join(sorted(tables)))


if __name__ == "__main__":
    main()
