from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional


@dataclass(frozen=True)
class SalaryParameters:
    """Resolved rate parameters used by the salary formula."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    f: float = 0.0


@dataclass(frozen=True)
class DepartmentHours:
    department_name: str
    total_hour: float = 0.0
    total_minutes: float = 0.0


@dataclass(frozen=True)
class SalaryRecord:
    """Domain entity: computed salary for one employee and period.

    Logical key is (employee_id, employee_name, year, month).
    """

    employee_id: str
    employee_name: str
    year: int
    month: int
    total_salary: Decimal = Decimal("0.00")
    total_times: float = 0.0
    day_off: float = 0.0
    hour_normal: tuple[DepartmentHours, ...] = field(default_factory=tuple)
    total_hour_work: float = 0.0
    total_hour_overtime: float = 0.0
    total_km: float = 0.0
    a_parameter: Any = 0.0
    b_parameter: Any = 0.0
    c_parameter: Any = 0.0
    d_parameter: Any = 0.0
    f_parameter: Any = 0.0
    date_calculate: Optional[datetime] = None
    salary_id: Optional[int] = None

    @property
    def key(self) -> tuple[str, str, int, int]:
        return (self.employee_id, self.employee_name, self.year, self.month)

    @property
    def parameters(self) -> SalaryParameters:
        return SalaryParameters(
            a=self.a_parameter,
            b=self.b_parameter,
            c=self.c_parameter,
            d=self.d_parameter,
            f=self.f_parameter,
        )

    @classmethod
    def placeholder(cls, *, employee_id: str, employee_name: str, year: Optional[int], month: Optional[int]) -> "SalaryRecord":
        """Zero-filled record for an employee without a stored salary."""
        return cls(
            employee_id=employee_id,
            employee_name=employee_name,
            year=year or 0,
            month=month or 0,
        )

    def to_dict(self) -> dict:
        return {
            "_id": self.salary_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "year": self.year,
            "month": self.month,
            "date_calculate": self.date_calculate.isoformat() if self.date_calculate else None,
            "total_salary": self.total_salary,
            "total_times": self.total_times,
            "day_off": self.day_off,
            "hour_normal": [
                {
                    "department_name": h.department_name,
                    "total_hour": h.total_hour,
                    "total_minutes": h.total_minutes,
                }
                for h in self.hour_normal
            ],
            "total_hour_work": self.total_hour_work,
            "total_hour_overtime": self.total_hour_overtime,
            "total_km": self.total_km,
            "a_parameter": self.a_parameter,
            "b_parameter": self.b_parameter,
            "c_parameter": self.c_parameter,
            "d_parameter": self.d_parameter,
            "f_parameter": self.f_parameter,
        }
