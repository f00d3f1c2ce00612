from dataclasses import replace
from datetime import date

from src.worker_management.worker_management.attendance.model import Attendance
from src.worker_management.worker_management.core.enums import AttendanceStatus
from src.worker_management.worker_management.payroll.calculator.standard_calculator import StandardWorkTimeCalculator
from tests.factories import DAY_SHIFT, present


def test_recorded_duration_is_used_first():
    record = replace(present("u", date(2025, 1, 1), hours=9), work_duration_minutes=400)

    assert StandardWorkTimeCalculator().worked_minutes(record) == 400


def test_falls_back_to_exit_minus_entry():
    record = replace(present("u", date(2025, 1, 1), hours=9), work_duration_minutes=None)

    assert StandardWorkTimeCalculator().worked_minutes(record) == 9 * 60


def test_missing_punches_count_as_zero():
    record = Attendance(id="a", user_id="u", date=date(2025, 1, 1), status=AttendanceStatus.ABSENT)

    assert StandardWorkTimeCalculator().worked_minutes(record) == 0


def test_overtime_minutes_beyond_standard_shift():
    calc = StandardWorkTimeCalculator()

    assert calc.overtime_minutes(present("u", date(2025, 1, 1), hours=10), DAY_SHIFT) == 120
    assert calc.overtime_minutes(present("u", date(2025, 1, 1), hours=7), DAY_SHIFT) == 0
