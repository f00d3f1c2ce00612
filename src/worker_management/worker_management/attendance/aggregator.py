from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional, Sequence

from ..common.period import PayPeriod
from ..core.enums import AttendanceStatus
from ..core.exceptions import DataError
from .model import Attendance

_NEVER = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class AttendanceCounts:
    """Per-month day counts for one employee."""

    days_in_month: int
    days_present: int
    days_absent: int
    days_pending: int

    def __post_init__(self) -> None:
        if self.days_present + self.days_absent + self.days_pending != self.days_in_month:
            raise DataError("Attendance day counts do not add up to the days in the month")


def _recency(record: Attendance) -> datetime:
    return record.last_modified or _NEVER


def latest_per_day(records: Sequence[Attendance]) -> dict[date, Attendance]:
    """Collapse duplicates so each date keeps its most recently updated record.

    Falls back to ``created_at`` when ``updated_at`` is missing; on a full tie the
    record that comes later in the input wins.
    """

    by_day: dict[date, Attendance] = {}
    for record in records:
        current = by_day.get(record.date)
        if current is None or _recency(record) >= _recency(current):
            by_day[record.date] = record
    return by_day


def aggregate_month(
    records: Sequence[Attendance],
    year: int,
    month: int,
    *,
    user_id: Optional[str] = None,
) -> AttendanceCounts:
    """Reduce one employee's records for a month into present/absent/pending counts.

    Days without a record count as pending.
    """

    if not isinstance(records, (list, tuple)):
        raise DataError("Attendance records must be fully loaded (list or tuple) before aggregation")

    period = PayPeriod(year, month)
    for record in records:
        if not period.contains(record.date):
            raise DataError(f"Attendance record {record.id or record.attendance_id} dated {record.date} is outside {period.key}")
        if user_id is not None and record.user_id and record.user_id != user_id:
            raise DataError(f"Attendance record {record.id or record.attendance_id} belongs to user {record.user_id}, not {user_id}")
        if not record.is_consistent():
            raise DataError(
                f"Attendance record {record.id or record.attendance_id} is marked present without entry/exit times"
            )

    by_day = latest_per_day(records)
    present = sum(1 for r in by_day.values() if r.status == AttendanceStatus.PRESENT)
    absent = sum(1 for r in by_day.values() if r.status == AttendanceStatus.ABSENT)

    return AttendanceCounts(
        days_in_month=period.days,
        days_present=present,
        days_absent=absent,
        days_pending=period.days - present - absent,
    )
