from datetime import date, datetime, timezone

import pytest

from src.worker_management.worker_management.attendance.model import Attendance
from src.worker_management.worker_management.core.enums import AttendanceStatus
from src.worker_management.worker_management.core.exceptions import DataError


def test_from_json_reads_camel_case_and_legacy_timestamps():
    record = Attendance.from_json(
        {
            "id": "att_1",
            "userId": "usr_1",
            "date": "2025-06-02",
            "status": "PRESENT",
            "entryTime": "2025-06-02T08:00:00Z",
            "exitTime": {"_seconds": 1748880000, "_nanoseconds": 0},
            "workDurationMinutes": 480,
            "updatedAt": "2025-06-02T16:05:00+00:00",
        }
    )

    assert record.date == date(2025, 6, 2)
    assert record.status == AttendanceStatus.PRESENT
    assert record.entry_time == datetime(2025, 6, 2, 8, 0, tzinfo=timezone.utc)
    assert record.exit_time == datetime(2025, 6, 2, 16, 0, tzinfo=timezone.utc)
    assert record.last_modified == datetime(2025, 6, 2, 16, 5, tzinfo=timezone.utc)
    assert record.work_duration_formatted == "8h 0m"
    assert record.is_consistent()


def test_from_json_accepts_snake_case_keys():
    record = Attendance.from_json({"_id": "a9", "user_id": "u", "date": "2025-06-03", "status": "absent"})

    assert record.id == "a9"
    assert record.is_absent


def test_missing_status_defaults_to_pending():
    assert Attendance.from_json({"date": "2025-06-03"}).is_pending


def test_unknown_status_is_a_data_error():
    with pytest.raises(DataError):
        Attendance.from_json({"date": "2025-06-03", "status": "late"})


def test_missing_date_is_a_data_error():
    with pytest.raises(DataError):
        Attendance.from_json({"status": "present"})


def test_to_json_uses_wire_names():
    record = Attendance(id="a1", user_id="u1", date=date(2025, 6, 1), status=AttendanceStatus.ABSENT)

    data = record.to_json()

    assert data["date"] == "2025-06-01"
    assert data["status"] == "absent"
    assert data["entryTime"] is None
    assert data["isCorrected"] is False


def test_naive_timestamps_are_taken_as_utc():
    record = Attendance(
        id="a1",
        user_id="u1",
        date=date(2025, 6, 1),
        status=AttendanceStatus.ABSENT,
        created_at=datetime(2025, 6, 1, 9, 0),
    )

    assert record.created_at == datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("duration", ["abc", 12.5, True])
def test_bad_work_duration_is_a_data_error(duration):
    with pytest.raises(DataError):
        Attendance.from_json({"date": "2025-06-03", "status": "absent", "workDurationMinutes": duration})


def test_numeric_string_work_duration_accepted():
    record = Attendance.from_json({"date": "2025-06-03", "status": "absent", "workDurationMinutes": "480"})

    assert record.work_duration_minutes == 480
