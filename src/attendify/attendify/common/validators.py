from __future__ import annotations

import re

from ..core.enums import Weekday
from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def clean_text(value: str | None) -> str:
    return (value or "").strip()


def require_hhmm(value: str, field_name: str = "time") -> str:
    v = clean_text(value)
    if not _HHMM.match(v):
        raise ValidationError(f"{field_name} must be HH:MM (24-hour)")
    return v


def require_weekday(value: str, field_name: str = "day") -> Weekday:
    try:
        return Weekday(clean_text(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be one of {', '.join(d.value for d in Weekday)}")
