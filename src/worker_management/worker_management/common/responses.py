from __future__ import annotations

from flask import jsonify, request

from .datetime_utils import now_local
from .period import PayPeriod
from .validators import require_int
from ..core.exceptions import (
    AuthorizationError,
    ConfigError,
    DataError,
    DomainError,
    NotFoundError,
    ValidationError,
)

STATUS_BY_ERROR = (
    (ValidationError, 400),
    (DataError, 400),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConfigError, 422),
)


def error_response(e: DomainError):
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(e, error_type):
            return jsonify({"success": False, "message": str(e)}), status
    return jsonify({"success": False, "message": str(e)}), 400


def ok(data, message: str = ""):
    body = {"success": True, "data": data}
    if message:
        body["message"] = message
    return jsonify(body)


def requested_period() -> PayPeriod:
    """``?year=&month=`` query args, defaulting to the current month."""
    today = now_local().date()
    year = require_int(request.args.get("year", today.year), "year", minimum=1, maximum=9999)
    month = require_int(request.args.get("month", today.month), "month", minimum=1, maximum=12)
    return PayPeriod(year, month)
