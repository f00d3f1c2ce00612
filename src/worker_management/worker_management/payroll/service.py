from __future__ import annotations

import logging
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.period import PayPeriod
from ..core.exceptions import NotFoundError
from ..departments.model import Department
from ..departments.repository import DepartmentRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from .calculator.base import WorkTimeCalculator
from .calculator.standard_calculator import StandardWorkTimeCalculator
from .engine import calculate_employee_salary
from .model import DepartmentSalaryReport, SalaryCalculation, SystemSalaryReport
from .rollup import calculate_department_report, calculate_system_report

logger = logging.getLogger(__name__)


class SalaryReportService:
    """Use case: load what the engine needs from the repositories, then compute."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        departments: DepartmentRepository,
        *,
        work_time: Optional[WorkTimeCalculator] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._shifts = shifts
        self._departments = departments
        self._work_time = work_time or StandardWorkTimeCalculator()

    def get_employee(self, user_id: str) -> Employee:
        employee = self._employees.get_by_id(user_id)
        if not employee:
            raise NotFoundError(f"Employee {user_id} not found")
        return employee

    def get_department(self, department_id: str) -> Department:
        department = self._departments.get_by_id(department_id)
        if not department:
            raise NotFoundError(f"Department {department_id} not found")
        return department

    def _shift_for(self, employee: Employee) -> Optional[Shift]:
        if not employee.shift_id:
            return None
        shift = self._shifts.get_by_id(employee.shift_id)
        if shift is None:
            logger.warning("Employee %s references missing shift %s", employee.id, employee.shift_id)
        return shift

    def _calculate(self, employee: Employee, period: PayPeriod) -> SalaryCalculation:
        records = list(self._attendance.get_for_employee_month(employee.id, period.year, period.month))
        return calculate_employee_salary(
            employee,
            self._shift_for(employee),
            records,
            period.year,
            period.month,
            work_time=self._work_time,
        )

    def calculate_for(self, employee: Employee, year: int, month: int) -> SalaryCalculation:
        period = PayPeriod(year, month)
        result = self._calculate(employee, period)
        logger.info("Calculated salary %s for employee %s", period.key, employee.employee_id or employee.id)
        return result

    def calculate_for_employee(self, user_id: str, year: int, month: int) -> SalaryCalculation:
        return self.calculate_for(self.get_employee(user_id), year, month)

    def _department_report(self, department: Department, period: PayPeriod) -> DepartmentSalaryReport:
        employees = self._employees.list_by_department(department.id, active_only=True)
        calculations = [self._calculate(e, period) for e in employees]
        return calculate_department_report(
            department.id,
            period.key,
            calculations,
            department_name=department.name,
        )

    def report_for(self, department: Department, year: int, month: int) -> DepartmentSalaryReport:
        period = PayPeriod(year, month)
        report = self._department_report(department, period)
        logger.info(
            "Department %s salary report %s: %d employees",
            department.id,
            period.key,
            report.employee_count,
        )
        return report

    def department_report(self, department_id: str, year: int, month: int) -> DepartmentSalaryReport:
        return self.report_for(self.get_department(department_id), year, month)

    def system_report(self, year: int, month: int) -> SystemSalaryReport:
        period = PayPeriod(year, month)
        reports = [self._department_report(d, period) for d in self._departments.list_all(active_only=True)]
        report = calculate_system_report(period.key, reports)
        logger.info(
            "System salary report %s: %d departments, %d employees",
            period.key,
            report.department_count,
            report.system_total.total_employees,
        )
        return report
