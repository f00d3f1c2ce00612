from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, session

from ..core.enums import Capability, Role

# Single source of truth for what each role may do. Every Role must appear here.
ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.SUPER_ADMIN: frozenset(Capability),
    Role.DEPT_HEAD: frozenset(
        {
            Capability.VIEW_OWN_SALARY,
            Capability.CALCULATE_EMPLOYEE_SALARY,
            Capability.VIEW_DEPARTMENT_SALARIES,
            Capability.VIEW_DEPARTMENT_ATTENDANCE,
            Capability.CORRECT_ATTENDANCE,
        }
    ),
    Role.EMPLOYEE: frozenset({Capability.VIEW_OWN_SALARY}),
}


def capabilities_for(role: Role) -> frozenset[Capability]:
    return ROLE_CAPABILITIES[role]


def has_capability(role: Optional[Role], capability: Capability) -> bool:
    if role is None:
        return False
    return capability in ROLE_CAPABILITIES[role]


def can_access_department(role: Role, own_department_id: Optional[str], department_id: Optional[str]) -> bool:
    """Department heads only see their own department; super admins see all."""
    if has_capability(role, Capability.VIEW_ALL_DEPARTMENTS):
        return True
    return bool(department_id) and own_department_id == department_id


def session_role() -> Optional[Role]:
    value = session.get("role")
    if not value:
        return None
    try:
        return Role(value)
    except ValueError:
        return None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Authentication required"}), 401
        return view(*args, **kwargs)

    return wrapper


def capability_required(capability: Capability):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"success": False, "message": "Authentication required"}), 401
            if not has_capability(session_role(), capability):
                return jsonify({"success": False, "message": "You do not have permission for this action"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator
