from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.validators import as_float, as_int
from ..common.wire import optional_str, pick
from .rates import safe_divide


@dataclass(frozen=True)
class OvertimeBreakdown:
    base_salary: float
    overtime_hours: float
    overtime_rate: float
    overtime_pay: float


@dataclass(frozen=True)
class SalaryCalculation:
    """Salary of one employee for one month, derived from attendance.

    Computed on demand and never persisted.
    """

    user_id: str
    employee_id: str
    employee_name: str
    department_id: Optional[str]
    department_name: Optional[str]
    month: str
    year: int
    month_number: int
    monthly_salary: float
    days_in_month: int
    days_present: int
    days_absent: int
    days_pending: int
    daily_rate: float
    calculated_salary: float
    overtime: Optional[OvertimeBreakdown] = None

    @property
    def deduction_amount(self) -> float:
        return self.monthly_salary - self.calculated_salary

    @property
    def deduction_percentage(self) -> float:
        return safe_divide(self.deduction_amount, self.monthly_salary) * 100

    @property
    def attendance_percentage(self) -> float:
        return safe_divide(self.days_present, self.days_in_month) * 100

    def to_json(self) -> dict:
        data = {
            "userId": self.user_id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "departmentId": self.department_id,
            "departmentName": self.department_name,
            "month": self.month,
            "year": self.year,
            "monthNumber": self.month_number,
            "monthlySalary": self.monthly_salary,
            "daysInMonth": self.days_in_month,
            "daysPresent": self.days_present,
            "daysAbsent": self.days_absent,
            "daysPending": self.days_pending,
            "dailyRate": self.daily_rate,
            "calculatedSalary": self.calculated_salary,
            "deductionAmount": self.deduction_amount,
            "deductionPercentage": self.deduction_percentage,
            "attendancePercentage": self.attendance_percentage,
        }
        if self.overtime is not None:
            data.update(
                {
                    "baseSalary": self.overtime.base_salary,
                    "overtimeHours": self.overtime.overtime_hours,
                    "overtimeRate": self.overtime.overtime_rate,
                    "overtimePay": self.overtime.overtime_pay,
                }
            )
        return data

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "SalaryCalculation":
        overtime = None
        if pick(data, "overtimePay") is not None:
            overtime = OvertimeBreakdown(
                base_salary=as_float(pick(data, "baseSalary"), "baseSalary", default=0.0),
                overtime_hours=as_float(pick(data, "overtimeHours"), "overtimeHours", default=0.0),
                overtime_rate=as_float(pick(data, "overtimeRate"), "overtimeRate", default=0.0),
                overtime_pay=as_float(pick(data, "overtimePay"), "overtimePay", default=0.0),
            )
        return cls(
            user_id=str(pick(data, "userId", "")),
            employee_id=str(pick(data, "employeeId", "")),
            employee_name=str(pick(data, "employeeName", "")),
            department_id=optional_str(pick(data, "departmentId")),
            department_name=optional_str(pick(data, "departmentName")),
            month=str(pick(data, "month", "")),
            year=int(pick(data, "year", 0)),
            month_number=int(pick(data, "monthNumber", 0)),
            monthly_salary=as_float(pick(data, "monthlySalary"), "monthlySalary", default=0.0),
            days_in_month=int(pick(data, "daysInMonth", 0)),
            days_present=int(pick(data, "daysPresent", 0)),
            days_absent=int(pick(data, "daysAbsent", 0)),
            days_pending=int(pick(data, "daysPending", 0)),
            daily_rate=as_float(pick(data, "dailyRate"), "dailyRate", default=0.0),
            calculated_salary=as_float(pick(data, "calculatedSalary"), "calculatedSalary", default=0.0),
            overtime=overtime,
        )


@dataclass(frozen=True)
class DepartmentSalarySummary:
    total_monthly_salary: float = 0.0
    total_calculated_salary: float = 0.0
    average_days_present: float = 0.0

    @property
    def total_deduction(self) -> float:
        return self.total_monthly_salary - self.total_calculated_salary

    def to_json(self) -> dict:
        return {
            "totalMonthlySalary": self.total_monthly_salary,
            "totalCalculatedSalary": self.total_calculated_salary,
            "averageDaysPresent": self.average_days_present,
            "totalDeduction": self.total_deduction,
        }

    @classmethod
    def from_json(cls, data: Optional[Mapping[str, Any]]) -> "DepartmentSalarySummary":
        data = data or {}
        return cls(
            total_monthly_salary=as_float(pick(data, "totalMonthlySalary"), "totalMonthlySalary", default=0.0),
            total_calculated_salary=as_float(
                pick(data, "totalCalculatedSalary"), "totalCalculatedSalary", default=0.0
            ),
            average_days_present=as_float(pick(data, "averageDaysPresent"), "averageDaysPresent", default=0.0),
        )


@dataclass(frozen=True)
class DepartmentSalaryReport:
    department_id: str
    month: str
    salaries: tuple[SalaryCalculation, ...] = ()
    summary: DepartmentSalarySummary = field(default_factory=DepartmentSalarySummary)
    department_name: Optional[str] = None

    @property
    def employee_count(self) -> int:
        return len(self.salaries)

    def to_json(self) -> dict:
        return {
            "departmentId": self.department_id,
            "departmentName": self.department_name,
            "month": self.month,
            "employeeCount": self.employee_count,
            "salaries": [s.to_json() for s in self.salaries],
            "summary": self.summary.to_json(),
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "DepartmentSalaryReport":
        return cls(
            department_id=str(pick(data, "departmentId", "")),
            department_name=optional_str(pick(data, "departmentName")),
            month=str(pick(data, "month", "")),
            salaries=tuple(SalaryCalculation.from_json(s) for s in pick(data, "salaries", [])),
            summary=DepartmentSalarySummary.from_json(pick(data, "summary")),
        )


@dataclass(frozen=True)
class SystemSalaryTotal:
    total_employees: int = 0
    total_monthly_salary: float = 0.0
    total_calculated_salary: float = 0.0

    @property
    def total_deduction(self) -> float:
        return self.total_monthly_salary - self.total_calculated_salary

    @property
    def deduction_percentage(self) -> float:
        return safe_divide(self.total_deduction, self.total_monthly_salary) * 100

    def to_json(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "totalMonthlySalary": self.total_monthly_salary,
            "totalCalculatedSalary": self.total_calculated_salary,
            "totalDeduction": self.total_deduction,
            "deductionPercentage": self.deduction_percentage,
        }

    @classmethod
    def from_json(cls, data: Optional[Mapping[str, Any]]) -> "SystemSalaryTotal":
        data = data or {}
        return cls(
            total_employees=as_int(pick(data, "totalEmployees"), "totalEmployees", default=0),
            total_monthly_salary=as_float(pick(data, "totalMonthlySalary"), "totalMonthlySalary", default=0.0),
            total_calculated_salary=as_float(
                pick(data, "totalCalculatedSalary"), "totalCalculatedSalary", default=0.0
            ),
        )


@dataclass(frozen=True)
class SystemSalaryReport:
    month: str
    departments: tuple[DepartmentSalaryReport, ...] = ()
    system_total: SystemSalaryTotal = field(default_factory=SystemSalaryTotal)

    @property
    def department_count(self) -> int:
        return len(self.departments)

    def to_json(self) -> dict:
        return {
            "month": self.month,
            "departmentCount": self.department_count,
            "departments": [d.to_json() for d in self.departments],
            "systemTotal": self.system_total.to_json(),
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "SystemSalaryReport":
        return cls(
            month=str(pick(data, "month", "")),
            departments=tuple(DepartmentSalaryReport.from_json(d) for d in pick(data, "departments", [])),
            system_total=SystemSalaryTotal.from_json(pick(data, "systemTotal")),
        )
