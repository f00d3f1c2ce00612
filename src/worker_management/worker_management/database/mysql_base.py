from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, time, timedelta, timezone
from typing import Any, Dict, Iterator, List, Optional, Sequence

from ..common.datetime_utils import parse_hhmm
from ..core.exceptions import DataError
from .connection import DatabaseConnection

Row = Dict[str, Any]


@contextmanager
def read_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Dictionary cursor on a short-lived connection, without a transaction."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
        finally:
            cur.close()
    finally:
        conn.close()


def query_one(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
    with read_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return cur.fetchone() or None


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> List[Row]:
    with read_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return list(cur.fetchall() or [])


@contextmanager
def write_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Cursor whose statements are committed together, or rolled back on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        try:
            yield cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def execute(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> int:
    """Run one write statement and return the affected row count."""
    with write_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return cur.rowcount


def optional_float(value: Any) -> Optional[float]:
    """DECIMAL/FLOAT column to float, keeping NULL as None."""
    return None if value is None else float(value)


def normalize_mysql_time(value: Any) -> Optional[time]:
    """TIME column to ``datetime.time``.

    The pure-Python connector hands TIME back as ``timedelta``; other drivers
    return ``time`` or a string.
    """

    if value is None:
        return None
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return time(seconds // 3600, (seconds % 3600) // 60, seconds % 60)
    if isinstance(value, (time, str)):
        return parse_hhmm(value)
    raise DataError(f"Unsupported TIME value: {value!r}")


def to_mysql_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """Aware timestamp to the naive UTC value stored in DATETIME columns."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
