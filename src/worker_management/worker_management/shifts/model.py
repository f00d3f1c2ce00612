from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_hhmm, parse_hhmm
from ..common.validators import as_bool, as_float
from ..common.wire import optional_str, pick, pick_id
from ..core.constants import DEFAULT_OVERTIME_MULTIPLIER, MINUTES_PER_DAY
from ..core.exceptions import DataError


def span_minutes(start: time, end: time) -> int:
    """Minutes from start to end, wrapping past midnight.

    Equal start and end is a full 24h shift.
    """

    start_m = start.hour * 60 + start.minute
    end_m = end.hour * 60 + end.minute
    minutes = (end_m - start_m) % MINUTES_PER_DAY
    return minutes or MINUTES_PER_DAY


@dataclass(frozen=True)
class Shift:
    """Domain entity: a work shift with overtime configuration."""

    id: str
    shift_id: str
    name: str
    start_time: time
    end_time: time
    department_id: Optional[str] = None
    department_name: Optional[str] = None
    job_role: Optional[str] = None
    work_duration_hours: Optional[float] = None
    overtime_allowed: bool = True
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.work_duration_hours is not None and self.work_duration_hours < 0:
            raise DataError(f"Shift {self.shift_id or self.id}: work duration cannot be negative")
        if self.overtime_multiplier <= 0:
            raise DataError(f"Shift {self.shift_id or self.id}: overtime multiplier must be positive")

    @property
    def span_hours(self) -> float:
        return span_minutes(self.start_time, self.end_time) / 60

    @property
    def standard_hours(self) -> float:
        """Standard paid hours per day; explicit duration wins over the clock span."""
        if self.work_duration_hours is not None:
            return float(self.work_duration_hours)
        return self.span_hours

    @property
    def standard_minutes(self) -> int:
        return int(round(self.standard_hours * 60))

    @property
    def is_overnight(self) -> bool:
        return self.end_time <= self.start_time

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.job_role})" if self.job_role else self.name

    @property
    def time_display(self) -> str:
        return f"{format_hhmm(self.start_time)} - {format_hhmm(self.end_time)}"

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Shift":
        start_raw = pick(data, "startTime")
        end_raw = pick(data, "endTime")
        if start_raw is None or end_raw is None:
            raise DataError("Shift requires startTime and endTime")

        duration = as_float(pick(data, "workDurationHours"), "workDurationHours")
        return cls(
            id=pick_id(data),
            shift_id=str(pick(data, "shiftId", "")),
            name=str(pick(data, "name", "")),
            job_role=optional_str(pick(data, "jobRole")),
            department_id=optional_str(pick(data, "departmentId")),
            department_name=optional_str(pick(data, "departmentName")),
            start_time=parse_hhmm(start_raw),
            end_time=parse_hhmm(end_raw),
            work_duration_hours=duration,
            overtime_allowed=as_bool(pick(data, "overtimeAllowed"), default=True),
            overtime_multiplier=as_float(
                pick(data, "overtimeMultiplier"), "overtimeMultiplier", default=DEFAULT_OVERTIME_MULTIPLIER
            ),
            is_active=as_bool(pick(data, "isActive"), default=True),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "shiftId": self.shift_id,
            "name": self.name,
            "jobRole": self.job_role,
            "departmentId": self.department_id,
            "departmentName": self.department_name,
            "startTime": format_hhmm(self.start_time),
            "endTime": format_hhmm(self.end_time),
            "workDurationHours": self.standard_hours,
            "overtimeAllowed": self.overtime_allowed,
            "overtimeMultiplier": self.overtime_multiplier,
            "isActive": self.is_active,
        }
