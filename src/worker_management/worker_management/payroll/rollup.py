from __future__ import annotations

from typing import Optional, Sequence

from ..common.period import PayPeriod
from ..core.exceptions import DataError
from .model import (
    DepartmentSalaryReport,
    DepartmentSalarySummary,
    SalaryCalculation,
    SystemSalaryReport,
    SystemSalaryTotal,
)
from .rates import safe_divide


def _month_key(month: str) -> str:
    # Normalizes "2025-1" style keys and rejects garbage early.
    return PayPeriod.from_key(month).key


def calculate_department_report(
    department_id: str,
    month: str,
    employee_calculations: Sequence[SalaryCalculation],
    *,
    department_name: Optional[str] = None,
) -> DepartmentSalaryReport:
    """Fold per-employee calculations of one department and month into a report."""

    key = _month_key(month)
    for calc in employee_calculations:
        if calc.month != key:
            raise DataError(f"Salary of {calc.employee_id or calc.user_id} is for {calc.month}, not {key}")
        if calc.department_id and calc.department_id != department_id:
            raise DataError(
                f"Salary of {calc.employee_id or calc.user_id} belongs to department {calc.department_id}, not {department_id}"
            )

    salaries = tuple(employee_calculations)
    summary = DepartmentSalarySummary(
        total_monthly_salary=sum(c.monthly_salary for c in salaries),
        total_calculated_salary=sum(c.calculated_salary for c in salaries),
        average_days_present=safe_divide(sum(c.days_present for c in salaries), len(salaries)),
    )
    return DepartmentSalaryReport(
        department_id=department_id,
        department_name=department_name,
        month=key,
        salaries=salaries,
        summary=summary,
    )


def calculate_system_report(month: str, department_reports: Sequence[DepartmentSalaryReport]) -> SystemSalaryReport:
    """Repeat the department fold one level up, across departments."""

    key = _month_key(month)
    for report in department_reports:
        if report.month != key:
            raise DataError(f"Department {report.department_id} report is for {report.month}, not {key}")

    departments = tuple(department_reports)
    total = SystemSalaryTotal(
        total_employees=sum(d.employee_count for d in departments),
        total_monthly_salary=sum(d.summary.total_monthly_salary for d in departments),
        total_calculated_salary=sum(d.summary.total_calculated_salary for d in departments),
    )
    return SystemSalaryReport(month=key, departments=departments, system_total=total)
