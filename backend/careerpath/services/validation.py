"""Input checks shared by the services. All failures raise ValidationError."""

import math

from careerpath.core.exceptions import ValidationError


def require_text(value: str | None, field: str, *, max_length: int, min_length: int = 1) -> str:
    """Return ``value`` stripped, or raise if it is blank or too long/short."""
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field} must not be empty")
    if len(text) < min_length:
        raise ValidationError(f"{field} must be at least {min_length} characters")
    if len(text) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return text


def optional_text(value: str | None, field: str, *, max_length: int) -> str | None:
    """Like require_text, but blank input becomes None."""
    if value is None or not value.strip():
        return None
    return require_text(value, field, max_length=max_length)


def require_range(
    value: float | None, field: str, *, minimum: float, maximum: float, integer: bool = False
) -> float:
    # bool is an int subclass; reject it explicitly
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required")
    if not math.isfinite(value):
        raise ValidationError(f"{field} must be a finite number")
    if integer and int(value) != value:
        raise ValidationError(f"{field} must be a whole number")
    if not minimum <= value <= maximum:
        raise ValidationError(f"{field} must be between {minimum} and {maximum}")
    return value
