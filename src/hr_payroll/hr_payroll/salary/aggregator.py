from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..common.numbers import ensure_number
from ..core.constants import DRIVER_POSITION
from ..employees.model import Employee
from .model import DepartmentHours


@dataclass(frozen=True)
class AttendanceAggregate:
    total_km: float
    hour_normal: tuple[DepartmentHours, ...]


def aggregate_attendance(
    employee: Employee,
    rows: Iterable[AttendanceRecord],
    *,
    driver_position: str = DRIVER_POSITION,
) -> AttendanceAggregate:
    """Fold a month of attendance rows into distance and per-department hours.

    Distance only counts for departments where the employee holds the driver
    position. Departments keep the order of their first appearance.
    """
    total_km = 0.0
    totals: dict[str, list[float]] = {}

    for row in rows:
        if employee.has_position(row.department_name, driver_position):
            total_km += ensure_number(row.total_km)

        acc = totals.setdefault(row.department_name, [0.0, 0.0])
        acc[0] += ensure_number(row.shift_info.total_hour)
        acc[1] += ensure_number(row.shift_info.total_minutes)

    hour_normal = tuple(
        DepartmentHours(department_name=name, total_hour=hours, total_minutes=minutes)
        for name, (hours, minutes) in totals.items()
    )
    return AttendanceAggregate(total_km=total_km, hour_normal=hour_normal)
