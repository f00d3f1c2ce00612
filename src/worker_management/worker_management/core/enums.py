from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Closed set of account roles.

    Legacy spellings seen on the wire (``department_head``, ``superadmin``,
    mixed case) resolve to the same member through ``_missing_``.
    """

    SUPER_ADMIN = "super_admin"
    DEPT_HEAD = "dept_head"
    EMPLOYEE = "employee"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Role"]:
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        return _ROLE_ALIASES.get(key)


_ROLE_ALIASES = {
    "super_admin": Role.SUPER_ADMIN,
    "superadmin": Role.SUPER_ADMIN,
    "admin": Role.SUPER_ADMIN,
    "dept_head": Role.DEPT_HEAD,
    "department_head": Role.DEPT_HEAD,
    "depthead": Role.DEPT_HEAD,
    "employee": Role.EMPLOYEE,
    "staff": Role.EMPLOYEE,
}


class Capability(str, Enum):
    """What an authenticated account is allowed to do."""

    VIEW_OWN_SALARY = "view_own_salary"
    CALCULATE_EMPLOYEE_SALARY = "calculate_employee_salary"
    VIEW_DEPARTMENT_SALARIES = "view_department_salaries"
    VIEW_ALL_DEPARTMENTS = "view_all_departments"
    VIEW_SYSTEM_SALARIES = "view_system_salaries"
    VIEW_DEPARTMENT_ATTENDANCE = "view_department_attendance"
    CORRECT_ATTENDANCE = "correct_attendance"


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored by the attendance service."""

    PENDING = "pending"
    PRESENT = "present"
    ABSENT = "absent"

    @classmethod
    def _missing_(cls, value: object) -> Optional["AttendanceStatus"]:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        return None
