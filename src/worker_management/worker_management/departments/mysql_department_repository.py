from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_all, query_one
from .model import Department
from .repository import DepartmentRepository

_SELECT = """
    SELECT d.id, d.department_id, d.name, d.code, d.head_id, d.is_active,
           CONCAT(h.first_name, ' ', h.last_name) AS head_name,
           (SELECT COUNT(*) FROM employees e WHERE e.department_id = d.id AND e.is_active = 1) AS employee_count
    FROM departments d
    LEFT JOIN employees h ON h.id = d.head_id
"""


def _to_department(r: Dict[str, Any]) -> Department:
    return Department(
        id=str(r["id"]),
        name=r["name"],
        department_id=r.get("department_id"),
        code=r.get("code"),
        head_id=r.get("head_id"),
        head_name=r.get("head_name"),
        employee_count=int(r.get("employee_count") or 0),
        is_active=bool(r.get("is_active", True)),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, active_only: bool = True) -> Sequence[Department]:
        sql = _SELECT + (" WHERE d.is_active=1" if active_only else "") + " ORDER BY d.name"
        return [_to_department(r) for r in query_all(self._conn_factory, sql)]

    def get_by_id(self, department_id: str) -> Optional[Department]:
        r = query_one(
            self._conn_factory,
            _SELECT + " WHERE d.id=%s OR d.department_id=%s LIMIT 1",
            (department_id, department_id),
        )
        return _to_department(r) if r else None
