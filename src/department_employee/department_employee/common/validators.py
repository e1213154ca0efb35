from __future__ import annotations

from typing import Any, Optional

from ..core.constants import NAME_MAX_LENGTH, NAME_MIN_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str, label: Optional[str] = None) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label or field_name} is required", {field_name: "is required"})
    return str(value).strip()


def require_length(value: str, field_name: str, min_len: int, max_len: int, label: Optional[str] = None) -> str:
    if len(value) < min_len or len(value) > max_len:
        message = f"must be between {min_len} and {max_len} characters"
        raise ValidationError(f"{label or field_name} {message}", {field_name: message})
    return value


def require_name(value: Any, field_name: str, label: Optional[str] = None) -> str:
    """Trimmed name of NAME_MIN_LENGTH..NAME_MAX_LENGTH characters."""
    name = require_non_empty(value, field_name, label)
    return require_length(name, field_name, NAME_MIN_LENGTH, NAME_MAX_LENGTH, label)


def require_id(value: Any, field_name: str, label: Optional[str] = None) -> int:
    label = label or field_name
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{label} must be selected", {field_name: "must be selected"})
    if isinstance(value, bool):
        raise ValidationError(f"{label} is invalid", {field_name: "is invalid"})
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} is invalid", {field_name: "is invalid"})
    if parsed <= 0:
        raise ValidationError(f"{label} is invalid", {field_name: "is invalid"})
    return parsed
