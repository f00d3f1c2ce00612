"""Example: print a department salary report through the service layer (no Flask)."""

import importlib
import json
import sys

from config import get_settings_module

from src.worker_management.worker_management.container import build_container


def main(department_id: str = "dep_security", year: int = 2025, month: int = 1) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    report = container.salary_service.department_report(department_id, year, month)
    print(json.dumps(report.to_json(), indent=2))


if __name__ == "__main__":
    main(*sys.argv[1:2])
