from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .payroll.service import SalaryReportService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    employees_repo: EmployeeRepository
    departments_repo: DepartmentRepository
    shifts_repo: ShiftRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    salary_service: SalaryReportService
    attendance_service: AttendanceService


def wire_container(
    *,
    users_repo: UserRepository,
    employees_repo: EmployeeRepository,
    departments_repo: DepartmentRepository,
    shifts_repo: ShiftRepository,
    attendance_repo: AttendanceRepository,
) -> Container:
    """Build services on top of any repository implementations (MySQL or in-memory)."""
    return Container(
        users_repo=users_repo,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(users_repo),
        salary_service=SalaryReportService(attendance_repo, employees_repo, shifts_repo, departments_repo),
        attendance_service=AttendanceService(attendance_repo),
    )


def build_container(*, db_config: Mapping[str, Any]) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))
    return wire_container(
        users_repo=MySQLUserRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
    )
