from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from .permissions import capabilities_for, login_required, session_role

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        payload = request.get_json(silent=True) or {}
        try:
            s_user = container.auth_service.authenticate(payload.get("email", ""), payload.get("password", ""))
        except (AuthenticationError, ValidationError) as e:
            return jsonify({"success": False, "message": str(e)}), 401
        except Exception:
            logger.exception("Login failed")
            return jsonify({"success": False, "message": "System error during login"}), 500

        session.clear()
        session.permanent = bool(payload.get("rememberMe"))

        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value
        session["department_id"] = s_user.department_id

        return jsonify({"success": True, "data": s_user.to_json(), "message": "Login successful"})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True, "message": "Logged out"})

    @app.route("/api/auth/me", endpoint="me")
    @login_required
    def me():
        role = session_role()
        return jsonify(
            {
                "success": True,
                "data": {
                    "userId": session["user_id"],
                    "fullName": session.get("name"),
                    "role": role.value if role else None,
                    "departmentId": session.get("department_id"),
                    "capabilities": sorted(c.value for c in capabilities_for(role)) if role else [],
                },
            }
        )
