from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import Attendance


class AttendanceRepository(Protocol):
    def get_for_employee_month(self, user_id: str, year: int, month: int) -> Sequence[Attendance]:
        """All records of one employee whose date falls in the given month.

        Implementations return a fully materialized sequence; duplicates per date
        are returned as stored and resolved by the aggregator.
        """

        raise NotImplementedError

    def get_by_id(self, attendance_id: str) -> Optional[Attendance]:
        raise NotImplementedError

    def list_for_month(
        self,
        year: int,
        month: int,
        *,
        user_id: Optional[str] = None,
        department_id: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[Attendance]:
        """Records of the month ordered by date, narrowed by whichever filters are given."""

        raise NotImplementedError

    def save_correction(self, record: Attendance) -> bool:
        """Persist punches, status, duration and correction fields of ``record``.

        Returns False when no stored record has ``record.id``.
        """

        raise NotImplementedError
