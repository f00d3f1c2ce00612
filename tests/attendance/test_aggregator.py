from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from src.worker_management.worker_management.attendance.aggregator import aggregate_month, latest_per_day
from src.worker_management.worker_management.attendance.model import Attendance
from src.worker_management.worker_management.core.enums import AttendanceStatus
from src.worker_management.worker_management.core.exceptions import DataError
from tests.factories import absent, june, present


def _ts(hour: int) -> datetime:
    return datetime(2025, 6, 5, hour, 0, tzinfo=timezone.utc)


def test_days_without_a_record_count_as_pending():
    records = [present("u1", june(1)), present("u1", june(2)), absent("u1", june(3))]

    counts = aggregate_month(records, 2025, 6, user_id="u1")

    assert counts.days_in_month == 30
    assert counts.days_present == 2
    assert counts.days_absent == 1
    assert counts.days_pending == 27


def test_empty_month_is_all_pending():
    counts = aggregate_month([], 2024, 2)

    assert counts.days_in_month == 29
    assert counts.days_pending == 29


def test_explicit_pending_record_counts_once():
    pending = Attendance(id="p1", user_id="u1", date=june(4), status=AttendanceStatus.PENDING)

    counts = aggregate_month([pending], 2025, 6)

    assert (counts.days_present, counts.days_absent, counts.days_pending) == (0, 0, 30)


def test_latest_update_wins_for_duplicate_day():
    first = present("u1", june(5), updated_at=_ts(9))
    corrected = absent("u1", june(5), updated_at=_ts(18))

    assert latest_per_day([corrected, first])[june(5)] is corrected
    counts = aggregate_month([corrected, first], 2025, 6)
    assert counts.days_present == 0
    assert counts.days_absent == 1


def test_created_at_is_used_when_never_updated():
    older = absent("u1", june(5))
    newer = replace(present("u1", june(5)), created_at=_ts(20))

    assert latest_per_day([newer, older])[june(5)] is newer


def test_full_tie_keeps_later_record_in_input_order():
    a = present("u1", june(5), updated_at=_ts(10))
    b = absent("u1", june(5), updated_at=_ts(10))

    assert latest_per_day([a, b])[june(5)] is b
    assert latest_per_day([b, a])[june(5)] is a


def test_record_outside_month_is_rejected():
    with pytest.raises(DataError):
        aggregate_month([present("u1", june(1))], 2025, 7)


def test_record_of_another_user_is_rejected():
    with pytest.raises(DataError):
        aggregate_month([present("u2", june(1))], 2025, 6, user_id="u1")


def test_record_without_user_id_is_accepted_for_any_user():
    record = Attendance(
        id="x",
        user_id="",
        date=june(1),
        status=AttendanceStatus.ABSENT,
    )

    assert aggregate_month([record], 2025, 6, user_id="u1").days_absent == 1


def test_present_without_punches_is_rejected_unless_corrected():
    bare = Attendance(id="a1", user_id="u1", date=june(1), status=AttendanceStatus.PRESENT)
    with pytest.raises(DataError):
        aggregate_month([bare], 2025, 6)

    corrected = Attendance(
        id="a1",
        user_id="u1",
        date=june(1),
        status=AttendanceStatus.PRESENT,
        is_corrected=True,
        corrected_by="usr_head",
    )
    assert aggregate_month([corrected], 2025, 6).days_present == 1


def test_lazy_input_is_rejected():
    records = (r for r in [present("u1", june(1))])

    with pytest.raises(DataError):
        aggregate_month(records, 2025, 6)


def test_naive_and_missing_timestamps_mix_on_same_day():
    never_updated = Attendance(id="a1", user_id="u1", date=june(1), status=AttendanceStatus.ABSENT)
    naive_update = Attendance(
        id="a2",
        user_id="u1",
        date=june(1),
        status=AttendanceStatus.ABSENT,
        updated_at=datetime(2025, 6, 2, 9, 0),
    )
    aware_update = replace(present("u1", june(1)), updated_at=datetime(2025, 6, 2, 8, 0, tzinfo=timezone.utc))

    assert latest_per_day([never_updated, naive_update, aware_update])[june(1)] is naive_update
    assert aggregate_month([aware_update, naive_update, never_updated], 2025, 6).days_absent == 1
