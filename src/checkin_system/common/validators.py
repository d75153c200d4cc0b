from __future__ import annotations

from ..core.enums import ClassType
from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_class_type(value: str | None) -> ClassType:
    try:
        return ClassType((value or "").strip().lower())
    except ValueError:
        raise ValidationError("Valid class type is required (weekend, weekday, or both)")


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}")
    if number < 1:
        raise ValidationError(f"Invalid {field_name}")
    return number
