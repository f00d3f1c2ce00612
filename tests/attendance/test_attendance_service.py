from datetime import datetime, timezone

import pytest

from src.worker_management.worker_management.attendance.service import AttendanceService, worked_minutes
from src.worker_management.worker_management.core.enums import AttendanceStatus
from src.worker_management.worker_management.core.exceptions import DataError, NotFoundError, ValidationError
from tests.factories import CLEANER, GUARD, InMemoryAttendance, absent, june, present

NOW = datetime(2025, 7, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def repo():
    return InMemoryAttendance(
        [
            present(GUARD.id, june(2), department_id="dep_sec"),
            absent(GUARD.id, june(3), department_id="dep_sec"),
            present(CLEANER.id, june(2), department_id="dep_cln"),
            present(GUARD.id, datetime(2025, 7, 1).date(), department_id="dep_sec"),
        ]
    )


@pytest.fixture
def service(repo):
    return AttendanceService(repo)


def test_list_month_filters(service):
    assert len(service.list_month(2025, 6)) == 3
    assert [r.user_id for r in service.list_month(2025, 6, department_id="dep_cln")] == [CLEANER.id]
    assert [r.date for r in service.list_month(2025, 6, user_id=GUARD.id)] == [june(2), june(3)]
    assert [r.id for r in service.list_month(2025, 6, status=AttendanceStatus.ABSENT)] == [
        "att_usr_guard_2025-06-03_absent"
    ]


def test_list_month_rejects_bad_month(service):
    with pytest.raises(DataError):
        service.list_month(2025, 13)


def test_unknown_record_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.get("att_missing")


def test_correct_absent_day_to_present(service, repo):
    record = service.get("att_usr_guard_2025-06-03_absent")

    corrected = service.correct(
        record,
        reason="Badge reader was offline",
        corrected_by="usr_head",
        entry_time=datetime(2025, 6, 3, 8, 0),
        exit_time=datetime(2025, 6, 3, 16, 30, tzinfo=timezone.utc),
        status=AttendanceStatus.PRESENT,
        now=NOW,
    )

    assert corrected.is_present and corrected.is_corrected
    assert corrected.entry_time == datetime(2025, 6, 3, 8, 0, tzinfo=timezone.utc)
    assert corrected.work_duration_minutes == 510
    assert corrected.corrected_by == "usr_head"
    assert corrected.correction_reason == "Badge reader was offline"
    assert corrected.updated_at == NOW
    assert repo.get_by_id(record.id) == corrected


def test_correct_keeps_fields_not_supplied(service):
    record = service.get("att_usr_guard_2025-06-02")

    corrected = service.correct(
        record,
        reason="Left late",
        corrected_by="usr_admin",
        exit_time=datetime(2025, 6, 2, 18, 0, tzinfo=timezone.utc),
        now=NOW,
    )

    assert corrected.entry_time == record.entry_time
    assert corrected.status == AttendanceStatus.PRESENT
    assert corrected.work_duration_minutes == 600


def test_corrected_record_wins_the_day_in_salary_data(service, repo):
    record = service.get("att_usr_guard_2025-06-03_absent")
    service.correct(record, reason="Was on site", corrected_by="usr_head", status=AttendanceStatus.PRESENT, now=NOW)

    june_records = repo.get_for_employee_month(GUARD.id, 2025, 6)

    assert sum(r.is_present for r in june_records) == 2
    assert all(r.is_consistent() for r in june_records)


@pytest.mark.parametrize("reason", ["", "   "])
def test_correction_requires_reason(service, reason):
    record = service.get("att_usr_guard_2025-06-02")

    with pytest.raises(ValidationError):
        service.correct(record, reason=reason, corrected_by="usr_head")


def test_exit_before_entry_rejected(service, repo):
    record = service.get("att_usr_guard_2025-06-02")

    with pytest.raises(ValidationError):
        service.correct(
            record,
            reason="Typo",
            corrected_by="usr_head",
            exit_time=datetime(2025, 6, 2, 7, 0, tzinfo=timezone.utc),
        )
    assert repo.saved == []


def test_record_deleted_before_save_is_not_found(service, repo):
    record = service.get("att_usr_guard_2025-06-02")
    repo._records.clear()

    with pytest.raises(NotFoundError):
        service.correct(record, reason="Late badge", corrected_by="usr_head")


def test_worked_minutes_needs_both_punches():
    assert worked_minutes(None, NOW) is None
    assert worked_minutes(NOW, None) is None
