from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.constants import MONTH_KEY_FORMAT
from ..core.exceptions import DataError
from .datetime_utils import month_bounds


@dataclass(frozen=True)
class PayPeriod:
    """One calendar month, the unit every salary figure is computed for."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise DataError(f"Month must be between 1 and 12, got {self.month}")
        if not 1 <= self.year <= 9999:
            raise DataError(f"Invalid year: {self.year}")

    @classmethod
    def from_key(cls, key: str) -> "PayPeriod":
        """Parse a ``YYYY-MM`` month key."""
        try:
            parsed = datetime.strptime(key.strip(), MONTH_KEY_FORMAT)
        except (AttributeError, ValueError):
            raise DataError(f"Invalid month key: {key!r} (expected YYYY-MM)") from None
        return cls(parsed.year, parsed.month)

    @classmethod
    def containing(cls, day: date) -> "PayPeriod":
        return cls(day.year, day.month)

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def first_day(self) -> date:
        return month_bounds(self.year, self.month)[0]

    @property
    def last_day(self) -> date:
        return month_bounds(self.year, self.month)[1]

    @property
    def days(self) -> int:
        return self.last_day.day

    def contains(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month

    def __str__(self) -> str:
        return self.key
