from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import decode_date
from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import optional_float, query_all, query_one
from .model import Employee
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.id, e.employee_id, e.first_name, e.last_name, e.email, e.role,
           e.department_id, d.name AS department_name,
           e.shift_id, s.name AS shift_name,
           e.monthly_salary, e.hourly_rate,
           e.overtime_eligible, e.overtime_multiplier, e.overtime_rate,
           e.joining_date, e.is_active
    FROM employees e
    LEFT JOIN departments d ON d.id = e.department_id
    LEFT JOIN shifts s ON s.id = e.shift_id
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        id=str(r["id"]),
        employee_id=r.get("employee_id") or "",
        first_name=r.get("first_name") or "",
        last_name=r.get("last_name") or "",
        email=r.get("email") or "",
        role=Role(r.get("role") or Role.EMPLOYEE.value),
        department_id=r.get("department_id"),
        department_name=r.get("department_name"),
        shift_id=r.get("shift_id"),
        shift_name=r.get("shift_name"),
        monthly_salary=optional_float(r.get("monthly_salary")) or 0.0,
        hourly_rate=optional_float(r.get("hourly_rate")),
        overtime_eligible=bool(r.get("overtime_eligible", False)),
        overtime_multiplier=optional_float(r.get("overtime_multiplier")),
        overtime_rate=optional_float(r.get("overtime_rate")),
        joining_date=decode_date(r.get("joining_date")),
        is_active=bool(r.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        r = query_one(self._conn_factory, _SELECT + " WHERE e.id=%s LIMIT 1", (user_id,))
        return _to_employee(r) if r else None

    def list_by_department(self, department_id: str, *, active_only: bool = True) -> Sequence[Employee]:
        sql = _SELECT + " WHERE e.department_id=%s"
        if active_only:
            sql += " AND e.is_active=1"
        rows = query_all(self._conn_factory, sql + " ORDER BY e.employee_id", (department_id,))
        return [_to_employee(r) for r in rows]
