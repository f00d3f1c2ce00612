from __future__ import annotations

from .base import WorkTimeCalculator
from ...attendance.model import Attendance


class StandardWorkTimeCalculator(WorkTimeCalculator):
    """Standard rule: recorded duration, else (exit - entry), not below 0."""

    def worked_minutes(self, record: Attendance) -> int:
        if record.work_duration_minutes is not None:
            return max(int(record.work_duration_minutes), 0)
        if not record.entry_time or not record.exit_time:
            return 0
        minutes = int((record.exit_time - record.entry_time).total_seconds() // 60)
        return max(minutes, 0)
