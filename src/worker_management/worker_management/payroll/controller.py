from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request, session

from ..attendance.model import Attendance
from ..common.responses import error_response, ok, requested_period
from ..common.validators import require_int
from ..core.enums import Capability
from ..core.exceptions import AuthorizationError, DomainError, ValidationError
from ..container import Container
from ..employees.model import Employee
from ..shifts.model import Shift
from ..users.permissions import can_access_department, capability_required, session_role
from .engine import calculate_employee_salary

logger = logging.getLogger(__name__)


def _ensure_department_access(department_id: Optional[str]) -> None:
    if not can_access_department(session_role(), session.get("department_id"), department_id):
        raise AuthorizationError("You can only view salaries of your own department")


def register(app: Flask, container: Container) -> None:
    service = container.salary_service

    @app.route("/api/salary/calculate/<user_id>", endpoint="salary_calculate")
    @capability_required(Capability.CALCULATE_EMPLOYEE_SALARY)
    def salary_calculate(user_id: str):
        try:
            period = requested_period()
            employee = service.get_employee(user_id)
            _ensure_department_access(employee.department_id)
            result = service.calculate_for(employee, period.year, period.month)
            return ok(result.to_json())
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Failed to calculate salary for %s", user_id)
            return jsonify({"success": False, "message": "Failed to calculate salary"}), 500

    @app.route("/api/salary/calculate", methods=["POST"], endpoint="salary_calculate_payload")
    @capability_required(Capability.CALCULATE_EMPLOYEE_SALARY)
    def salary_calculate_payload():
        """Run the engine on caller-supplied records without touching the database."""
        payload = request.get_json(silent=True)
        try:
            if not isinstance(payload, dict) or not isinstance(payload.get("employee"), dict):
                raise ValidationError("Request body must contain an employee object")
            attendance_raw = payload.get("attendance") or []
            if not isinstance(attendance_raw, list):
                raise ValidationError("attendance must be a list")

            employee = Employee.from_json(payload["employee"])
            _ensure_department_access(employee.department_id)
            shift = Shift.from_json(payload["shift"]) if payload.get("shift") else None
            records = [Attendance.from_json(r) for r in attendance_raw]
            year = require_int(payload.get("year"), "year", minimum=1, maximum=9999)
            month = require_int(payload.get("month"), "month", minimum=1, maximum=12)
            overtime_hours = payload.get("overtimeHours")
            if overtime_hours is not None:
                try:
                    overtime_hours = float(overtime_hours)
                except (TypeError, ValueError):
                    raise ValidationError("overtimeHours must be a number") from None

            result = calculate_employee_salary(
                employee,
                shift,
                records,
                year,
                month,
                overtime_hours=overtime_hours,
            )
            return ok(result.to_json())
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Failed to calculate salary from payload")
            return jsonify({"success": False, "message": "Failed to calculate salary"}), 500

    @app.route("/api/salary/my", endpoint="salary_my")
    @capability_required(Capability.VIEW_OWN_SALARY)
    def salary_my():
        try:
            period = requested_period()
            result = service.calculate_for_employee(str(session["user_id"]), period.year, period.month)
            return ok(result.to_json())
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Failed to get salary for %s", session.get("user_id"))
            return jsonify({"success": False, "message": "Failed to get salary"}), 500

    @app.route("/api/salary/reports/department/<department_id>", endpoint="salary_department_report")
    @capability_required(Capability.VIEW_DEPARTMENT_SALARIES)
    def salary_department_report(department_id: str):
        try:
            period = requested_period()
            department = service.get_department(department_id)
            _ensure_department_access(department.id)
            report = service.report_for(department, period.year, period.month)
            return ok(report.to_json())
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Failed to get department report for %s", department_id)
            return jsonify({"success": False, "message": "Failed to get department report"}), 500

    @app.route("/api/salary/reports/system", endpoint="salary_system_report")
    @capability_required(Capability.VIEW_SYSTEM_SALARIES)
    def salary_system_report():
        try:
            period = requested_period()
            report = service.system_report(period.year, period.month)
            return ok(report.to_json())
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Failed to get system report")
            return jsonify({"success": False, "message": "Failed to get system report"}), 500
