from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import as_bool
from ..common.wire import optional_str, pick, pick_id


@dataclass(frozen=True)
class Department:
    id: str
    name: str
    department_id: Optional[str] = None
    code: Optional[str] = None
    head_id: Optional[str] = None
    head_name: Optional[str] = None
    employee_count: int = 0
    is_active: bool = True

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Department":
        return cls(
            id=pick_id(data),
            name=str(pick(data, "name", "")),
            department_id=optional_str(pick(data, "departmentId")),
            code=optional_str(pick(data, "code")),
            head_id=optional_str(pick(data, "headId")),
            head_name=optional_str(pick(data, "headName")),
            employee_count=int(pick(data, "employeeCount", 0)),
            is_active=as_bool(pick(data, "isActive"), default=True),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "departmentId": self.department_id,
            "name": self.name,
            "code": self.code,
            "headId": self.head_id,
            "headName": self.head_name,
            "employeeCount": self.employee_count,
            "isActive": self.is_active,
        }
