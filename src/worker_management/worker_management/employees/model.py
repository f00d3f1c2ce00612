from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import decode_date
from ..common.validators import as_bool, as_float
from ..common.wire import optional_str, pick, pick_id
from ..core.enums import Role
from ..core.exceptions import DataError


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee with pay configuration.

    ``overtime_multiplier`` and ``overtime_rate`` are optional; when absent the
    pay-rate resolver falls back to the shift's multiplier.
    """

    id: str
    employee_id: str
    first_name: str
    last_name: str
    monthly_salary: float = 0.0
    email: str = ""
    role: Role = Role.EMPLOYEE
    department_id: Optional[str] = None
    department_name: Optional[str] = None
    shift_id: Optional[str] = None
    shift_name: Optional[str] = None
    hourly_rate: Optional[float] = None
    overtime_eligible: bool = False
    overtime_multiplier: Optional[float] = None
    overtime_rate: Optional[float] = None
    joining_date: Optional[date] = None
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.monthly_salary < 0:
            raise DataError(f"Employee {self.employee_id or self.id}: monthly salary cannot be negative")
        if self.hourly_rate is not None and self.hourly_rate < 0:
            raise DataError(f"Employee {self.employee_id or self.id}: hourly rate cannot be negative")
        if self.overtime_eligible and self.overtime_multiplier is not None and self.overtime_multiplier <= 1.0:
            raise DataError(f"Employee {self.employee_id or self.id}: overtime multiplier must be greater than 1.0")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Employee":
        try:
            role = Role(pick(data, "role", Role.EMPLOYEE.value))
        except ValueError:
            raise DataError(f"Unknown role: {pick(data, 'role')!r}") from None

        return cls(
            id=pick_id(data),
            employee_id=str(pick(data, "employeeId", "")),
            first_name=str(pick(data, "firstName", "")),
            last_name=str(pick(data, "lastName", "")),
            email=str(pick(data, "email", "")),
            role=role,
            department_id=optional_str(pick(data, "departmentId")),
            department_name=optional_str(pick(data, "departmentName")),
            shift_id=optional_str(pick(data, "shiftId")),
            shift_name=optional_str(pick(data, "shiftName")),
            monthly_salary=as_float(pick(data, "monthlySalary"), "monthlySalary", default=0.0),
            hourly_rate=as_float(pick(data, "hourlyRate"), "hourlyRate"),
            overtime_eligible=as_bool(pick(data, "overtimeEligible"), default=False),
            overtime_multiplier=as_float(pick(data, "overtimeMultiplier"), "overtimeMultiplier"),
            overtime_rate=as_float(pick(data, "overtimeRate"), "overtimeRate"),
            joining_date=decode_date(pick(data, "joiningDate")),
            is_active=as_bool(pick(data, "isActive"), default=True),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "fullName": self.full_name,
            "email": self.email,
            "role": self.role.value,
            "departmentId": self.department_id,
            "departmentName": self.department_name,
            "shiftId": self.shift_id,
            "shiftName": self.shift_name,
            "monthlySalary": self.monthly_salary,
            "hourlyRate": self.hourly_rate,
            "overtimeEligible": self.overtime_eligible,
            "overtimeMultiplier": self.overtime_multiplier,
            "overtimeRate": self.overtime_rate,
            "joiningDate": self.joining_date.isoformat() if self.joining_date else None,
            "isActive": self.is_active,
        }
