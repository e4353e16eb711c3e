from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MonthlyStats:
    """Precomputed attendance totals for one employee and period."""

    employee_id: str
    employee_name: str
    year: int
    month: int
    attendance_total_times: Any = 0
    attendance_overtime: Any = 0
