from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import decode_timestamp
from ..common.responses import error_response, ok, requested_period
from ..container import Container
from ..core.enums import AttendanceStatus, Capability
from ..core.exceptions import AuthorizationError, DomainError, ValidationError
from ..users.permissions import (
    can_access_department,
    capability_required,
    has_capability,
    login_required,
    session_role,
)

logger = logging.getLogger(__name__)


def _parse_status(value: Optional[str]) -> Optional[AttendanceStatus]:
    if value is None or value == "":
        return None
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}") from None


def _listing_scope(user_id: Optional[str], department_id: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Narrow the requested filters to what the session may see."""
    role = session_role()
    if has_capability(role, Capability.VIEW_ALL_DEPARTMENTS):
        return user_id, department_id

    if has_capability(role, Capability.VIEW_DEPARTMENT_ATTENDANCE):
        own_department = session.get("department_id")
        if not own_department or (department_id and department_id != own_department):
            raise AuthorizationError("You can only view attendance of your own department")
        return user_id, own_department

    own_user = str(session["user_id"])
    if user_id and user_id != own_user:
        raise AuthorizationError("You can only view your own attendance")
    return own_user, department_id


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", endpoint="attendance_list")
    @login_required
    def attendance_list():
        try:
            period = requested_period()
            user_id, department_id = _listing_scope(request.args.get("userId"), request.args.get("departmentId"))
            records = service.list_month(
                period.year,
                period.month,
                user_id=user_id,
                department_id=department_id,
                status=_parse_status(request.args.get("status")),
            )
            return ok([r.to_json() for r in records])
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Failed to list attendance")
            return jsonify({"success": False, "message": "Failed to load attendance"}), 500

    @app.route("/api/attendance/<attendance_id>/correct", methods=["POST"], endpoint="attendance_correct")
    @capability_required(Capability.CORRECT_ATTENDANCE)
    def attendance_correct(attendance_id: str):
        payload = request.get_json(silent=True)
        try:
            if not isinstance(payload, dict):
                raise ValidationError("Request body must be a JSON object")
            reason = payload.get("reason")
            if not isinstance(reason, str):
                raise ValidationError("reason is required")

            record = service.get(attendance_id)
            if not can_access_department(session_role(), session.get("department_id"), record.department_id):
                raise AuthorizationError("You can only correct attendance of your own department")

            corrected = service.correct(
                record,
                reason=reason,
                corrected_by=str(session["user_id"]),
                entry_time=decode_timestamp(payload.get("entryTime")),
                exit_time=decode_timestamp(payload.get("exitTime")),
                status=_parse_status(payload.get("status")),
            )
            return ok(corrected.to_json(), "Attendance corrected")
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Failed to correct attendance %s", attendance_id)
            return jsonify({"success": False, "message": "Failed to correct attendance"}), 500
