from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Login account (a row of the employees table seen by the auth layer)."""

    user_id: str
    email: str
    full_name: str
    password_hash: str
    role: Role
    department_id: Optional[str] = None
    is_active: bool = True
