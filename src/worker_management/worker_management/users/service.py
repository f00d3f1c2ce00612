from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Capability, Role
from ..core.exceptions import AuthenticationError
from .permissions import capabilities_for
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    full_name: str
    role: Role
    department_id: Optional[str]

    @property
    def capabilities(self) -> frozenset[Capability]:
        return capabilities_for(self.role)

    def to_json(self) -> dict:
        return {
            "userId": self.user_id,
            "fullName": self.full_name,
            "role": self.role.value,
            "departmentId": self.department_id,
            "capabilities": sorted(c.value for c in self.capabilities),
        }


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = require_non_empty(email, "Email")
        user = self._users.get_by_email(email)
        if not user or not user.is_active:
            logger.info("Rejected login for %s", email)
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Rejected login for %s", email)
            raise AuthenticationError("Invalid email or password")

        return SessionUser(
            user_id=user.user_id,
            full_name=user.full_name,
            role=user.role,
            department_id=user.department_id,
        )
