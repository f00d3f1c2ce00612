from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER
from ..core.exceptions import ConfigError
from ..employees.model import Employee
from ..shifts.model import Shift


@dataclass(frozen=True)
class PayRates:
    daily_rate: float
    hourly_rate: Optional[float] = None
    overtime_multiplier: Optional[float] = None
    overtime_rate: Optional[float] = None


def safe_divide(numerator: float, denominator: float) -> float:
    """Division where an empty denominator means "nothing to report", not an error."""
    if not denominator:
        return 0.0
    return numerator / denominator


def resolve_overtime_multiplier(employee: Employee, shift: Optional[Shift]) -> float:
    if employee.overtime_multiplier is not None:
        return employee.overtime_multiplier
    if shift is not None and shift.overtime_multiplier is not None:
        return shift.overtime_multiplier
    return DEFAULT_OVERTIME_MULTIPLIER


def resolve_pay_rates(employee: Employee, shift: Optional[Shift], days_in_month: int) -> PayRates:
    """Derive daily, hourly and overtime rates for one employee and month.

    Nothing is rounded here; rounding is a display concern.
    """

    daily_rate = safe_divide(employee.monthly_salary, days_in_month)

    hourly_rate = employee.hourly_rate
    if hourly_rate is None and shift is not None and shift.standard_hours > 0:
        hourly_rate = daily_rate / shift.standard_hours

    if not employee.overtime_eligible:
        return PayRates(daily_rate=daily_rate, hourly_rate=hourly_rate)

    who = employee.employee_id or employee.id
    if shift is None:
        raise ConfigError(f"Employee {who} is overtime eligible but has no shift assigned")

    multiplier = resolve_overtime_multiplier(employee, shift)
    if employee.overtime_rate is not None:
        overtime_rate = employee.overtime_rate
    elif hourly_rate is None:
        raise ConfigError(
            f"Employee {who}: cannot derive an hourly rate for overtime "
            f"(no hourly rate and shift {shift.shift_id or shift.id} has no working hours)"
        )
    else:
        overtime_rate = hourly_rate * multiplier

    return PayRates(
        daily_rate=daily_rate,
        hourly_rate=hourly_rate,
        overtime_multiplier=multiplier,
        overtime_rate=overtime_rate,
    )
