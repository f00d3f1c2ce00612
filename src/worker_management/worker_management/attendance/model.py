from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import decode_date, decode_timestamp, isoformat_or_none
from ..common.validators import as_bool, as_int
from ..common.wire import optional_str, pick, pick_id
from ..core.constants import DATE_FORMAT
from ..core.enums import AttendanceStatus
from ..core.exceptions import DataError


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one employee's attendance for one calendar date."""

    id: str
    user_id: str
    date: date
    status: AttendanceStatus
    attendance_id: str = ""
    employee_id: str = ""
    employee_name: str = ""
    department_id: Optional[str] = None
    department_name: Optional[str] = None
    shift_id: Optional[str] = None
    shift_name: Optional[str] = None
    entry_time: Optional[datetime] = None
    exit_time: Optional[datetime] = None
    work_duration_minutes: Optional[int] = None
    is_corrected: bool = False
    corrected_by: Optional[str] = None
    correction_reason: Optional[str] = None
    marked_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        # All timestamps are timezone-aware (naive values taken as UTC).
        for name in ("entry_time", "exit_time", "created_at", "updated_at"):
            object.__setattr__(self, name, decode_timestamp(getattr(self, name)))

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT

    @property
    def is_absent(self) -> bool:
        return self.status == AttendanceStatus.ABSENT

    @property
    def is_pending(self) -> bool:
        return self.status == AttendanceStatus.PENDING

    @property
    def last_modified(self) -> Optional[datetime]:
        return self.updated_at or self.created_at

    @property
    def work_duration_formatted(self) -> str:
        if self.work_duration_minutes is None:
            return "--"
        return f"{self.work_duration_minutes // 60}h {self.work_duration_minutes % 60}m"

    def is_consistent(self) -> bool:
        """Present records need both punches unless an admin corrected them."""
        if not self.is_present:
            return True
        return self.is_corrected or (self.entry_time is not None and self.exit_time is not None)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Attendance":
        record_date = decode_date(pick(data, "date"))
        if record_date is None:
            raise DataError("Attendance record requires a date")
        raw_status = pick(data, "status", AttendanceStatus.PENDING.value)
        try:
            status = AttendanceStatus(raw_status)
        except ValueError:
            raise DataError(f"Unknown attendance status: {raw_status!r}") from None

        return cls(
            id=pick_id(data),
            attendance_id=str(pick(data, "attendanceId", "")),
            user_id=str(pick(data, "userId", "")),
            employee_id=str(pick(data, "employeeId", "")),
            employee_name=str(pick(data, "employeeName", "")),
            department_id=optional_str(pick(data, "departmentId")),
            department_name=optional_str(pick(data, "departmentName")),
            shift_id=optional_str(pick(data, "shiftId")),
            shift_name=optional_str(pick(data, "shiftName")),
            date=record_date,
            entry_time=decode_timestamp(pick(data, "entryTime")),
            exit_time=decode_timestamp(pick(data, "exitTime")),
            work_duration_minutes=as_int(pick(data, "workDurationMinutes"), "workDurationMinutes"),
            status=status,
            is_corrected=as_bool(pick(data, "isCorrected"), default=False),
            corrected_by=optional_str(pick(data, "correctedBy")),
            correction_reason=optional_str(pick(data, "correctionReason")),
            marked_by=optional_str(pick(data, "markedBy")),
            created_at=decode_timestamp(pick(data, "createdAt")),
            updated_at=decode_timestamp(pick(data, "updatedAt")),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "attendanceId": self.attendance_id,
            "userId": self.user_id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "departmentId": self.department_id,
            "departmentName": self.department_name,
            "shiftId": self.shift_id,
            "shiftName": self.shift_name,
            "date": self.date.strftime(DATE_FORMAT),
            "entryTime": isoformat_or_none(self.entry_time),
            "exitTime": isoformat_or_none(self.exit_time),
            "workDurationMinutes": self.work_duration_minutes,
            "status": self.status.value,
            "isCorrected": self.is_corrected,
            "correctedBy": self.corrected_by,
            "correctionReason": self.correction_reason,
            "markedBy": self.marked_by,
            "createdAt": isoformat_or_none(self.created_at),
            "updatedAt": isoformat_or_none(self.updated_at),
        }
