from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

import mysql.connector
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import NotFoundError, ValidationError
from .datetime_utils import parse_iso_date
from .validators import require_month

logger = logging.getLogger(__name__)


def ok(data=None, status: int = 200, **meta):
    payload = {"success": True, "data": data}
    if meta:
        payload["meta"] = meta
    return jsonify(payload), status


def fail(message: str = "Bad Request", status: int = 400):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), status=400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), status=404)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(mysql.connector.Error)
    def _store(e: mysql.connector.Error):
        logger.exception("Record store failure")
        return fail("Record store unavailable", status=503)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def required(data: dict, name: str) -> Any:
    if data.get(name) is None:
        raise ValidationError(f"Missing field: {name}")
    return data[name]


def date_field(data: dict, name: str) -> date:
    return parse_iso_date(required(data, name))


def month_args() -> tuple[int, int]:
    return require_month(request.args.get("month"), request.args.get("year"))


def optional_int_arg(name: str) -> Optional[int]:
    value = request.args.get(name)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def int_field(data: dict, name: str) -> int:
    value = required(data, name)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be an integer")


def bool_field(data: dict, name: str, default: bool = False) -> bool:
    value = data.get(name)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{name} must be true or false")
    return value


def list_field(data: dict, name: str) -> list:
    value = required(data, name)
    if not isinstance(value, list):
        raise ValidationError(f"{name} must be a list")
    return value


def entry_object(raw: Any) -> dict:
    """One element of a bulk body; must be a JSON object."""

    if not isinstance(raw, dict):
        raise ValidationError("Each entry must be a JSON object")
    return raw
