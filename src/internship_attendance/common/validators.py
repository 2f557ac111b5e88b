from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_int_in_range(value, field_name: str, low: int, high: int) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if number < low or number > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return number


def optional_text(value, field_name: str):
    """Stripped string, or None when missing or blank."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip() or None
