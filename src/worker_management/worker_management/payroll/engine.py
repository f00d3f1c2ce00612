"""Attendance-based salary calculation.

Pure functions: no I/O, no shared state. Callers load every record for the month
before calling in; identical inputs always give identical output.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..attendance.aggregator import aggregate_month, latest_per_day
from ..attendance.model import Attendance
from ..common.period import PayPeriod
from ..core.constants import MINUTES_PER_HOUR
from ..core.exceptions import DataError
from ..employees.model import Employee
from ..shifts.model import Shift
from .calculator.base import WorkTimeCalculator
from .calculator.standard_calculator import StandardWorkTimeCalculator
from .model import OvertimeBreakdown, SalaryCalculation
from .rates import resolve_pay_rates

logger = logging.getLogger(__name__)

_DEFAULT_WORK_TIME = StandardWorkTimeCalculator()


def overtime_applies(employee: Employee, shift: Optional[Shift]) -> bool:
    return bool(employee.overtime_eligible and shift is not None and shift.overtime_allowed)


def overtime_hours_from_attendance(
    records: Sequence[Attendance],
    shift: Shift,
    *,
    work_time: Optional[WorkTimeCalculator] = None,
) -> float:
    """Hours worked beyond the shift's standard duration, summed over present days."""

    work_time = work_time or _DEFAULT_WORK_TIME
    minutes = sum(work_time.overtime_minutes(r, shift) for r in latest_per_day(records).values())
    return minutes / MINUTES_PER_HOUR


def calculate_employee_salary(
    employee: Employee,
    shift: Optional[Shift],
    attendance_records: Sequence[Attendance],
    year: int,
    month: int,
    *,
    overtime_hours: Optional[float] = None,
    work_time: Optional[WorkTimeCalculator] = None,
) -> SalaryCalculation:
    """Salary for one employee and month.

    ``calculatedSalary = dailyRate * daysPresent (+ overtimePay)``. Overtime is paid
    only when the employee is eligible and the shift allows it; otherwise the
    overtime breakdown is left out. Pending days earn nothing, like absent days.
    When ``overtime_hours`` is omitted it is derived from the records.
    """

    period = PayPeriod(year, month)
    counts = aggregate_month(attendance_records, year, month, user_id=employee.id or None)
    rates = resolve_pay_rates(employee, shift, counts.days_in_month)

    base_salary = rates.daily_rate * counts.days_present
    calculated_salary = base_salary
    overtime = None

    if overtime_applies(employee, shift):
        if overtime_hours is None:
            overtime_hours = overtime_hours_from_attendance(attendance_records, shift, work_time=work_time)
        elif overtime_hours < 0:
            raise DataError(f"Overtime hours cannot be negative: {overtime_hours}")
        overtime_pay = overtime_hours * rates.overtime_rate
        overtime = OvertimeBreakdown(
            base_salary=base_salary,
            overtime_hours=float(overtime_hours),
            overtime_rate=rates.overtime_rate,
            overtime_pay=overtime_pay,
        )
        calculated_salary = base_salary + overtime_pay

    logger.debug(
        "Salary %s for %s: present=%d absent=%d pending=%d calculated=%.2f",
        period.key,
        employee.employee_id or employee.id,
        counts.days_present,
        counts.days_absent,
        counts.days_pending,
        calculated_salary,
    )

    return SalaryCalculation(
        user_id=employee.id,
        employee_id=employee.employee_id,
        employee_name=employee.full_name,
        department_id=employee.department_id,
        department_name=employee.department_name,
        month=period.key,
        year=period.year,
        month_number=period.month,
        monthly_salary=employee.monthly_salary,
        days_in_month=counts.days_in_month,
        days_present=counts.days_present,
        days_absent=counts.days_absent,
        days_pending=counts.days_pending,
        daily_rate=rates.daily_rate,
        calculated_salary=calculated_salary,
        overtime=overtime,
    )
