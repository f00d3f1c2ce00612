from datetime import time

import pytest

from src.worker_management.worker_management.core.exceptions import DataError
from src.worker_management.worker_management.shifts.model import Shift, span_minutes


@pytest.mark.parametrize(
    "start,end,expected",
    [
        (time(8, 0), time(16, 0), 480),
        (time(22, 0), time(6, 0), 480),
        (time(9, 30), time(9, 30), 24 * 60),
        (time(23, 45), time(0, 15), 30),
    ],
)
def test_span_wraps_past_midnight(start, end, expected):
    assert span_minutes(start, end) == expected


def test_explicit_duration_overrides_clock_span():
    shift = Shift(
        id="s",
        shift_id="S",
        name="Split",
        start_time=time(8, 0),
        end_time=time(18, 0),
        work_duration_hours=8,
    )

    assert shift.span_hours == 10
    assert shift.standard_hours == 8
    assert shift.standard_minutes == 480


def test_from_json_night_shift():
    shift = Shift.from_json(
        {
            "id": "shf_night",
            "shiftId": "SHIFT_002",
            "name": "Night",
            "jobRole": "guard",
            "startTime": "22:00",
            "endTime": "06:00:00",
            "overtime_multiplier": "2",
        }
    )

    assert shift.is_overnight
    assert shift.standard_hours == 8
    assert shift.overtime_multiplier == 2.0
    assert shift.overtime_allowed is True
    assert shift.display_name == "Night (guard)"
    assert shift.time_display == "22:00 - 06:00"
    assert shift.to_json()["workDurationHours"] == 8


@pytest.mark.parametrize(
    "data",
    [
        {"startTime": "08:00"},
        {"startTime": "8am", "endTime": "16:00"},
        {"startTime": "08:00", "endTime": "16:00", "workDurationHours": -1},
        {"startTime": "08:00", "endTime": "16:00", "overtimeMultiplier": 0},
    ],
)
def test_from_json_rejects_bad_shift(data):
    with pytest.raises(DataError):
        Shift.from_json(data)
