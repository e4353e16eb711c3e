from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer")


def require_int(value: Any, field_name: str) -> int:
    result = optional_int(value, field_name)
    if not result:
        raise ValidationError(f"{field_name} is required")
    return result


def require_month(value: Any) -> int:
    month = require_int(value, "month")
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    return month
