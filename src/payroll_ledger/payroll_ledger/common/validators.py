from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_non_negative(value: float, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{field_name} must be a finite number")
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_positive(value: float, field_name: str) -> float:
    number = require_non_negative(value, field_name)
    if number == 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return number


def require_at_most(value: float, field_name: str, maximum: float) -> float:
    if value > maximum:
        raise ValidationError(f"{field_name} must not exceed {maximum:g}")
    return value


def require_month(month: int, year: int) -> tuple[int, int]:
    try:
        month, year = int(month), int(year)
    except (TypeError, ValueError):
        raise ValidationError("Month and year must be integers")
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12")
    if year < 1:
        raise ValidationError("Year must be positive")
    return month, year


def require_non_negative_int(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ValidationError("Expected a text value")
    return (value or "").strip() or None
