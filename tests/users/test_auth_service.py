from __future__ import annotations

from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.worker_management.worker_management.core.enums import Capability, Role
from src.worker_management.worker_management.core.exceptions import AuthenticationError, ValidationError
from src.worker_management.worker_management.users.model import User
from src.worker_management.worker_management.users.service import AuthService


class InMemoryUsers:
    def __init__(self, *users: User):
        self._by_email = {u.email: u for u in users}

    def get_by_email(self, email: str) -> Optional[User]:
        return self._by_email.get(email)

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._by_email.values() if u.user_id == user_id), None)


HEAD = User("usr_head", "head@example.com", "Dana Head", generate_password_hash("head123"), Role.DEPT_HEAD, "dep_sec")


def test_authenticate_returns_session_user():
    s_user = AuthService(InMemoryUsers(HEAD)).authenticate("head@example.com", "head123")

    assert s_user.user_id == "usr_head"
    assert s_user.role == Role.DEPT_HEAD
    assert Capability.VIEW_DEPARTMENT_SALARIES in s_user.capabilities
    assert s_user.to_json()["departmentId"] == "dep_sec"


def test_wrong_password():
    with pytest.raises(AuthenticationError):
        AuthService(InMemoryUsers(HEAD)).authenticate("head@example.com", "bad")


def test_placeholder_hash_never_matches():
    user = User("usr_x", "x@example.com", "X", "CHANGE_ME", Role.EMPLOYEE)

    with pytest.raises(AuthenticationError):
        AuthService(InMemoryUsers(user)).authenticate("x@example.com", "CHANGE_ME")


def test_unknown_email():
    with pytest.raises(AuthenticationError):
        AuthService(InMemoryUsers()).authenticate("who@example.com", "x")


def test_blank_email():
    with pytest.raises(ValidationError):
        AuthService(InMemoryUsers()).authenticate("  ", "x")
