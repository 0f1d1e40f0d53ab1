from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_int(value: Optional[str], field_name: str, *, min_value: int = 1) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if number < min_value:
        raise ValidationError(f"{field_name} must be at least {min_value}")
    return number


def optional_int(value: Optional[str], field_name: str, *, min_value: int = 1) -> Optional[int]:
    if value is None or not str(value).strip():
        return None
    return require_int(value, field_name, min_value=min_value)


def date_or_default(value: Optional[str], field_name: str, default: date) -> date:
    if not value or not value.strip():
        return default
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD") from None
