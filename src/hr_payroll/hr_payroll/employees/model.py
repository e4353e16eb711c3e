from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class DepartmentMembership:
    """One department an employee belongs to, with the titles held there."""

    name: str
    positions: tuple[str, ...] = ()


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee master data used by payroll.

    Note: plain data object (no DB access code).
    """

    employee_id: str
    name: str
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    departments: tuple[DepartmentMembership, ...] = field(default_factory=tuple)
    total_time_per_month: float = 0.0
    house_rent_money: float = 0.0
    default_day_off: float = 0.0
    realistic_day_off: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.status != EmployeeStatus.INACTIVE

    @property
    def day_off_delta(self) -> float:
        return self.default_day_off - self.realistic_day_off

    def has_position(self, department_name: str, position: str) -> bool:
        # Any membership with a matching name qualifies, not only the first one.
        return any(dep.name == department_name and position in dep.positions for dep in self.departments)
