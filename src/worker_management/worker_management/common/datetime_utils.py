from __future__ import annotations

import calendar
from datetime import date, datetime, time, timezone
from typing import Any, Optional

from ..core.constants import DATE_FORMAT
from ..core.exceptions import DataError


def decode_timestamp(value: Any) -> Optional[datetime]:
    """Decode a timestamp coming from the API or the database.

    Accepted shapes:
    - ``None`` (returned as ``None``)
    - ``datetime`` / ``date``
    - ISO-8601 string, with or without offset (``Z`` suffix included)
    - legacy map ``{"_seconds": ..., "_nanoseconds": ...}`` (or ``seconds``/``nanoseconds``)

    Naive values are taken as UTC so every decoded timestamp is comparable.
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise DataError(f"Invalid timestamp: {value!r}") from None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    if isinstance(value, dict):
        seconds = value.get("_seconds", value.get("seconds"))
        if seconds is None:
            raise DataError(f"Invalid timestamp map: {value!r}")
        nanos = value.get("_nanoseconds", value.get("nanoseconds")) or 0
        try:
            return datetime.fromtimestamp(int(seconds) + int(nanos) / 1_000_000_000, tz=timezone.utc)
        except (TypeError, ValueError, OverflowError):
            raise DataError(f"Invalid timestamp map: {value!r}") from None

    raise DataError(f"Unsupported timestamp type: {type(value)!r}")


def decode_date(value: Any) -> Optional[date]:
    """Decode a calendar date (``YYYY-MM-DD`` or any shape ``decode_timestamp`` accepts)."""

    if value is None:
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, str) and len(value.strip()) == 10:
        return parse_iso_date(value.strip())
    decoded = decode_timestamp(value)
    return decoded.date() if decoded else None


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise DataError(f"Invalid date: {value!r}") from None


def parse_hhmm(value: Any) -> time:
    """Parse a shift clock time (``HH:MM`` or ``HH:MM:SS``)."""

    if isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise DataError(f"Invalid shift time: {value!r}")

    parts = value.strip().split(":")
    try:
        if len(parts) < 2:
            raise ValueError
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
        return time(hour=hours, minute=minutes, second=seconds)
    except ValueError:
        raise DataError(f"Invalid shift time: {value!r}") from None


def format_hhmm(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


def isoformat_or_none(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)
