from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import DataError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_int(value: Any, field_name: str, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if minimum is not None and number < minimum:
        raise ValidationError(f"{field_name} must be >= {minimum}")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field_name} must be <= {maximum}")
    return number


def as_float(value: Any, field_name: str, *, default: Optional[float] = None) -> Optional[float]:
    """Coerce a numeric wire value (int, float or numeric string/Decimal)."""

    if value is None:
        return default
    if isinstance(value, bool):
        raise DataError(f"{field_name} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise DataError(f"{field_name} must be a number") from None


def as_bool(value: Any, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)


def as_int(value: Any, field_name: str, *, default: Optional[int] = None) -> Optional[int]:
    if value is None:
        return default
    if isinstance(value, bool):
        raise DataError(f"{field_name} must be an integer")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise DataError(f"{field_name} must be an integer") from None
    if not number.is_integer():
        raise DataError(f"{field_name} must be an integer")
    return int(number)
