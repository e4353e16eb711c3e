from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from src.hr_payroll.hr_payroll.attendance.model import AttendanceRecord
from src.hr_payroll.hr_payroll.employees.model import Employee
from src.hr_payroll.hr_payroll.salary.model import SalaryRecord
from src.hr_payroll.hr_payroll.stats.model import MonthlyStats


@dataclass
class InMemoryEmployees:
    employees: list[Employee] = field(default_factory=list)

    def get_by_identity(self, employee_id: str, name: str) -> Optional[Employee]:
        for e in self.employees:
            if e.employee_id == employee_id and e.name == name:
                return e
        return None

    def list_by_identity(self, employee_id: str, name: Optional[str] = None):
        return [e for e in self.employees if e.employee_id == employee_id and (name is None or e.name == name)]

    def list_by_department(self, department_name: str):
        return [e for e in self.employees if any(d.name == department_name for d in e.departments)]

    def list_all(self):
        return list(self.employees)


class InMemoryAttendance:
    def __init__(self, rows: Optional[list[AttendanceRecord]] = None):
        self.rows = list(rows or [])
        self.last_args = None

    def list_for_employee_between(self, *, employee_id, employee_name, start: datetime, end: datetime):
        self.last_args = {"employee_id": employee_id, "employee_name": employee_name, "start": start, "end": end}
        return [
            r
            for r in self.rows
            if r.employee_id == employee_id and r.employee_name == employee_name and start <= r.date <= end
        ]


@dataclass
class InMemoryStats:
    stats: list[MonthlyStats] = field(default_factory=list)

    def get_for_period(self, *, employee_id, employee_name, year, month):
        for s in self.stats:
            if (s.employee_id, s.employee_name, s.year, s.month) == (employee_id, employee_name, year, month):
                return s
        return None


class InMemorySalaries:
    def __init__(self, records: Optional[list[SalaryRecord]] = None):
        self._by_id: dict[int, SalaryRecord] = {}
        self._next_id = 1
        self.created = 0
        self.updated = 0
        for r in records or []:
            self._store(r)

    def _store(self, record: SalaryRecord) -> SalaryRecord:
        rid = self._next_id
        self._next_id += 1
        saved = replace(record, salary_id=rid)
        self._by_id[rid] = saved
        return saved

    def all(self) -> list[SalaryRecord]:
        return list(self._by_id.values())

    def get_for_period(self, *, employee_id, employee_name, year, month):
        return self.find_first(employee_id=employee_id, employee_name=employee_name, year=year, month=month)

    def find_first(self, *, employee_id, employee_name, year=None, month=None):
        for r in self._by_id.values():
            if r.employee_id != employee_id or r.employee_name != employee_name:
                continue
            if year is not None and r.year != year:
                continue
            if month is not None and r.month != month:
                continue
            return r
        return None

    def create(self, record: SalaryRecord) -> SalaryRecord:
        self.created += 1
        return self._store(record)

    def update(self, salary_id: int, record: SalaryRecord) -> SalaryRecord:
        self.updated += 1
        current = self._by_id[salary_id]
        saved = replace(
            record,
            salary_id=salary_id,
            employee_id=current.employee_id,
            employee_name=current.employee_name,
            year=current.year,
            month=current.month,
        )
        self._by_id[salary_id] = saved
        return saved
