from __future__ import annotations

import math
from typing import Any


def is_number(value: Any) -> bool:
    """True when value is present and parses to a finite number.

    Numeric strings ("12.5") are accepted; booleans are not.
    """
    if value is None or isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number)


def ensure_number(value: Any) -> float:
    """Coerce a loosely typed field to float, 0 when missing or non-numeric."""
    if not is_number(value):
        return 0.0
    return float(value)
