from __future__ import annotations

import re
from typing import Any, Mapping, Optional

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

_MISSING = object()


def snake_case(name: str) -> str:
    """``workDurationHours`` -> ``work_duration_hours``."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def pick(data: Mapping[str, Any], name: str, default: Any = None) -> Any:
    """Read a field by its camelCase wire name, falling back to snake_case.

    ``None`` values are skipped so ``{"monthlySalary": null, "monthly_salary": 10}``
    resolves to ``10``.
    """

    for key in (name, snake_case(name)):
        value = data.get(key, _MISSING)
        if value is not _MISSING and value is not None:
            return value
    return default


def pick_id(data: Mapping[str, Any]) -> str:
    value = pick(data, "id")
    if value is None:
        value = data.get("_id")
    return "" if value is None else str(value)


def optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
