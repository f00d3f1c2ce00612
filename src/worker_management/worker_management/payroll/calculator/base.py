from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import Attendance
from ...shifts.model import Shift


class WorkTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for counting worked time)."""

    @abstractmethod
    def worked_minutes(self, record: Attendance) -> int:
        raise NotImplementedError

    def overtime_minutes(self, record: Attendance, shift: Shift) -> int:
        """Minutes worked beyond the shift's standard duration (present days only)."""
        if not record.is_present:
            return 0
        return max(self.worked_minutes(record) - shift.standard_minutes, 0)
