from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self, *, active_only: bool = True) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_id(self, department_id: str) -> Optional[Department]:
        raise NotImplementedError
