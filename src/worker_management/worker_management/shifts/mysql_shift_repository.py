from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..database.connection import DatabaseConnection
from ..database.mysql_base import normalize_mysql_time, optional_float, query_all, query_one
from .model import Shift
from .repository import ShiftRepository

_SELECT = """
    SELECT s.id, s.shift_id, s.name, s.job_role, s.department_id, d.name AS department_name,
           s.start_time, s.end_time, s.work_duration_hours,
           s.overtime_allowed, s.overtime_multiplier, s.is_active
    FROM shifts s
    LEFT JOIN departments d ON d.id = s.department_id
"""


def _to_shift(r: Dict[str, Any]) -> Shift:
    multiplier = optional_float(r.get("overtime_multiplier"))
    return Shift(
        id=str(r["id"]),
        shift_id=r.get("shift_id") or "",
        name=r["name"],
        job_role=r.get("job_role"),
        department_id=r.get("department_id"),
        department_name=r.get("department_name"),
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        work_duration_hours=optional_float(r.get("work_duration_hours")),
        overtime_allowed=bool(r.get("overtime_allowed", True)),
        overtime_multiplier=multiplier if multiplier is not None else DEFAULT_OVERTIME_MULTIPLIER,
        is_active=bool(r.get("is_active", True)),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Shift]:
        return [_to_shift(r) for r in query_all(self._conn_factory, _SELECT + " ORDER BY s.name")]

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        r = query_one(self._conn_factory, _SELECT + " WHERE s.id=%s OR s.shift_id=%s LIMIT 1", (shift_id, shift_id))
        return _to_shift(r) if r else None
