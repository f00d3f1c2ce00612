from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional, Sequence

from ..common.period import PayPeriod
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Attendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def worked_minutes(entry_time: Optional[datetime], exit_time: Optional[datetime]) -> Optional[int]:
    if entry_time is None or exit_time is None:
        return None
    return int((exit_time - entry_time).total_seconds() // 60)


class AttendanceService:
    """Month listings and admin corrections of daily attendance records."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get(self, attendance_id: str) -> Attendance:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError(f"Attendance record {attendance_id} not found")
        return record

    def list_month(
        self,
        year: int,
        month: int,
        *,
        user_id: Optional[str] = None,
        department_id: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[Attendance]:
        period = PayPeriod(year, month)
        return list(
            self._attendance.list_for_month(
                period.year,
                period.month,
                user_id=user_id,
                department_id=department_id,
                status=status,
            )
        )

    def correct(
        self,
        record: Attendance,
        *,
        reason: str,
        corrected_by: str,
        entry_time: Optional[datetime] = None,
        exit_time: Optional[datetime] = None,
        status: Optional[AttendanceStatus] = None,
        now: Optional[datetime] = None,
    ) -> Attendance:
        """Overwrite punches and/or status of ``record`` and mark it corrected.

        Fields left as None keep their stored value. The work duration is
        recomputed from the resulting punches.
        """

        reason = require_non_empty(reason, "reason")
        candidate = replace(
            record,
            entry_time=entry_time if entry_time is not None else record.entry_time,
            exit_time=exit_time if exit_time is not None else record.exit_time,
            status=status or record.status,
        )
        if candidate.entry_time and candidate.exit_time and candidate.exit_time < candidate.entry_time:
            raise ValidationError("Exit time cannot be earlier than entry time")

        corrected = replace(
            candidate,
            work_duration_minutes=worked_minutes(candidate.entry_time, candidate.exit_time),
            is_corrected=True,
            corrected_by=corrected_by,
            correction_reason=reason,
            updated_at=now or datetime.now(timezone.utc),
        )
        if not self._attendance.save_correction(corrected):
            raise NotFoundError(f"Attendance record {record.id} not found")

        logger.info(
            "Attendance %s of %s on %s corrected by %s",
            record.id,
            record.user_id,
            record.date.isoformat(),
            corrected_by,
        )
        return corrected
