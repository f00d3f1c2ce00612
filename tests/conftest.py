from __future__ import annotations

from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.worker_management.worker_management.container import wire_container
from src.worker_management.worker_management.core.enums import Role
from src.worker_management.worker_management.departments.model import Department
from src.worker_management.worker_management.main import create_app
from src.worker_management.worker_management.users.model import User
from tests.factories import (
    CLEANER,
    DAY_SHIFT,
    GUARD,
    PORTER,
    InMemoryAttendance,
    InMemoryDepartments,
    InMemoryEmployees,
    InMemoryShifts,
    InMemoryUsers,
    absent,
    june,
    present,
)


@pytest.fixture
def june_records():
    """Guard present 28 days, porter present all 30, cleaner 10 days with one 12h day."""
    records = [present(GUARD.id, june(d), department_id="dep_sec") for d in range(1, 29)]
    records += [absent(GUARD.id, june(d), department_id="dep_sec") for d in (29, 30)]
    records += [present(PORTER.id, june(d), department_id="dep_sec") for d in range(1, 31)]
    records += [present(CLEANER.id, june(d), department_id="dep_cln") for d in range(1, 10)]
    records.append(present(CLEANER.id, june(10), hours=12, department_id="dep_cln"))
    return records


@pytest.fixture
def users():
    return [
        User("usr_admin", "admin@example.com", "System Admin", generate_password_hash("admin123"), Role.SUPER_ADMIN),
        User("usr_head", "head@example.com", "Dana Head", generate_password_hash("head123"), Role.DEPT_HEAD, "dep_sec"),
        User("usr_guard", "guard@example.com", "Sam Guard", generate_password_hash("guard123"), Role.EMPLOYEE, "dep_sec"),
        User(
            "usr_gone",
            "gone@example.com",
            "Former Staff",
            generate_password_hash("gone123"),
            Role.EMPLOYEE,
            "dep_sec",
            is_active=False,
        ),
    ]


@pytest.fixture
def container(june_records, users):
    return wire_container(
        users_repo=InMemoryUsers(users),
        employees_repo=InMemoryEmployees([GUARD, PORTER, CLEANER]),
        departments_repo=InMemoryDepartments(
            [
                Department(id="dep_sec", name="Security", department_id="DEPT_001"),
                Department(id="dep_cln", name="Cleaning", department_id="DEPT_002"),
                Department(id="dep_old", name="Closed", department_id="DEPT_003", is_active=False),
            ]
        ),
        shifts_repo=InMemoryShifts([DAY_SHIFT]),
        attendance_repo=InMemoryAttendance(june_records),
    )


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(client):
    def _login(user_id: str, role: Role, department_id: Optional[str] = None):
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
            sess["name"] = user_id
            sess["role"] = role.value
            sess["department_id"] = department_id
        return client

    return _login
