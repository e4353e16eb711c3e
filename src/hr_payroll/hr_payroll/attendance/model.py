from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ShiftInfo:
    """Worked time recorded for one shift."""

    total_hour: Any = 0
    total_minutes: Any = 0


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row (employee, department, shift, day).

    Numeric fields are kept as read; consumers coerce them with ``ensure_number``.
    """

    employee_id: str
    employee_name: str
    department_name: str
    date: datetime
    shift_info: ShiftInfo = field(default_factory=ShiftInfo)
    total_km: Any = 0
