from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..common.datetime_utils import decode_date, decode_timestamp, month_bounds
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, query_all, query_one, to_mysql_datetime
from .model import Attendance
from .repository import AttendanceRepository


def _to_attendance(r: Dict[str, Any]) -> Attendance:
    duration = r.get("work_duration_minutes")
    return Attendance(
        id=str(r["id"]),
        attendance_id=r.get("attendance_id") or "",
        user_id=str(r["user_id"]),
        employee_id=r.get("employee_code") or "",
        employee_name=r.get("employee_name") or "",
        department_id=r.get("department_id"),
        department_name=r.get("department_name"),
        shift_id=r.get("shift_id"),
        shift_name=r.get("shift_name"),
        date=decode_date(r["work_date"]),
        entry_time=decode_timestamp(r.get("entry_time")),
        exit_time=decode_timestamp(r.get("exit_time")),
        work_duration_minutes=int(duration) if duration is not None else None,
        status=AttendanceStatus(r["status"]),
        is_corrected=bool(r.get("is_corrected", False)),
        corrected_by=r.get("corrected_by"),
        correction_reason=r.get("correction_reason"),
        marked_by=r.get("marked_by"),
        created_at=decode_timestamp(r.get("created_at")),
        updated_at=decode_timestamp(r.get("updated_at")),
    )


_SELECT = """
    SELECT a.id, a.attendance_id, a.user_id, e.employee_id AS employee_code,
           CONCAT(e.first_name, ' ', e.last_name) AS employee_name,
           a.department_id, d.name AS department_name,
           a.shift_id, s.name AS shift_name,
           a.work_date, a.entry_time, a.exit_time, a.work_duration_minutes, a.status,
           a.is_corrected, a.corrected_by, a.correction_reason, a.marked_by,
           a.created_at, a.updated_at
    FROM attendance a
    JOIN employees e ON e.id = a.user_id
    LEFT JOIN departments d ON d.id = a.department_id
    LEFT JOIN shifts s ON s.id = a.shift_id
"""

_ORDER = " ORDER BY a.work_date, a.updated_at"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_month(self, user_id: str, year: int, month: int) -> Sequence[Attendance]:
        return self.list_for_month(year, month, user_id=user_id)

    def get_by_id(self, attendance_id: str) -> Optional[Attendance]:
        r = query_one(self._conn_factory, _SELECT + " WHERE a.id=%s LIMIT 1", (attendance_id,))
        return _to_attendance(r) if r else None

    def list_for_month(
        self,
        year: int,
        month: int,
        *,
        user_id: Optional[str] = None,
        department_id: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[Attendance]:
        first_day, last_day = month_bounds(year, month)
        clauses = ["a.work_date BETWEEN %s AND %s"]
        params: List[Any] = [first_day, last_day]

        if user_id is not None:
            clauses.append("a.user_id=%s")
            params.append(user_id)
        if department_id is not None:
            clauses.append("a.department_id=%s")
            params.append(department_id)
        if status is not None:
            clauses.append("a.status=%s")
            params.append(status.value)

        sql = _SELECT + " WHERE " + " AND ".join(clauses) + _ORDER
        return [_to_attendance(r) for r in query_all(self._conn_factory, sql, params)]

    def save_correction(self, record: Attendance) -> bool:
        count = execute(
            self._conn_factory,
            """
            UPDATE attendance
            SET entry_time=%s, exit_time=%s, work_duration_minutes=%s, status=%s,
                is_corrected=%s, corrected_by=%s, correction_reason=%s, updated_at=%s
            WHERE id=%s
            """,
            (
                to_mysql_datetime(record.entry_time),
                to_mysql_datetime(record.exit_time),
                record.work_duration_minutes,
                record.status.value,
                int(record.is_corrected),
                record.corrected_by,
                record.correction_reason,
                to_mysql_datetime(record.updated_at),
                record.id,
            ),
        )
        return count > 0
