from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_one
from .model import User
from .repository import UserRepository

_SELECT = """
    SELECT id, email, first_name, last_name, password_hash, role, department_id, is_active
    FROM employees
"""


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=str(row["id"]),
        email=row["email"],
        full_name=f"{row.get('first_name') or ''} {row.get('last_name') or ''}".strip(),
        password_hash=row.get("password_hash") or "",
        role=Role(row["role"]),
        department_id=row.get("department_id"),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        row = query_one(self._conn_factory, _SELECT + " WHERE id=%s LIMIT 1", (user_id,))
        return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        row = query_one(self._conn_factory, _SELECT + " WHERE LOWER(email)=LOWER(%s) LIMIT 1", (email,))
        return _to_user(row) if row else None
