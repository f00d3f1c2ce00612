from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Read access to employees and their pay configuration."""

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_by_department(self, department_id: str, *, active_only: bool = True) -> Sequence[Employee]:
        raise NotImplementedError
