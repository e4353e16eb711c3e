from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_range, now_local
from ..common.locks import KeyedLock
from ..common.numbers import ensure_number
from ..core.constants import DEFAULT_QUERY_WORKERS
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..stats.repository import StatsRepository
from .aggregator import aggregate_attendance
from .calculator.base import SalaryCalculator, SalaryInputs
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import SalaryRecord
from .parameters import resolve_parameters
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


class SalaryService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        stats: StatsRepository,
        salaries: SalaryRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
        locks: Optional[KeyedLock] = None,
        query_workers: int = DEFAULT_QUERY_WORKERS,
    ):
        self._employees = employees
        self._attendance = attendance
        self._stats = stats
        self._salaries = salaries
        self._calculator = calculator or StandardSalaryCalculator()
        self._locks = locks or KeyedLock()
        self._query_workers = max(int(query_workers), 1)

    def calculate(
        self,
        *,
        employee_id: str,
        employee_name: str,
        year: int,
        month: int,
        overrides: Optional[Mapping[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> SalaryRecord:
        """Compute and persist the salary of one employee for one period.

        Preconditions are checked in order: employee exists, employee is
        active, monthly stats exist. An existing record for the same key is
        updated in place, otherwise a new one is created.
        """
        employee = self._employees.get_by_identity(employee_id, employee_name)
        if not employee:
            logger.warning("Salary calculation for unknown employee %s/%s", employee_id, employee_name)
            raise NotFoundError("Employee not found!")
        if not employee.is_active:
            logger.warning("Salary calculation for inactive employee %s/%s", employee_id, employee_name)
            raise NotFoundError("Employee not active!")

        stats = self._stats.get_for_period(
            employee_id=employee_id, employee_name=employee_name, year=year, month=month
        )
        if not stats:
            logger.warning("No monthly stats for %s/%s %04d-%02d", employee_id, employee_name, year, month)
            raise NotFoundError("Stats not found!")

        key = (employee_id, employee_name, int(year), int(month))
        with self._locks.hold(key):
            existing = self._salaries.get_for_period(
                employee_id=employee_id, employee_name=employee_name, year=year, month=month
            )
            params = resolve_parameters(overrides, existing)

            start, end = month_range(year, month)
            rows = self._attendance.list_for_employee_between(
                employee_id=employee_id, employee_name=employee_name, start=start, end=end
            )
            aggregate = aggregate_attendance(employee, rows)

            total_hour_work = ensure_number(stats.attendance_total_times)
            total_hour_overtime = ensure_number(stats.attendance_overtime)
            total_times = total_hour_work + total_hour_overtime

            total_salary = self._calculator.calculate(
                SalaryInputs(
                    parameters=params,
                    total_times=total_times,
                    contracted_hours=employee.total_time_per_month,
                    house_rent_money=employee.house_rent_money,
                    day_off=employee.day_off_delta,
                    total_km=aggregate.total_km,
                )
            )

            record = SalaryRecord(
                employee_id=employee.employee_id,
                employee_name=employee.name,
                year=int(year),
                month=int(month),
                date_calculate=now or now_local(),
                total_salary=total_salary,
                total_times=total_times,
                day_off=employee.day_off_delta,
                hour_normal=aggregate.hour_normal,
                total_hour_work=total_hour_work,
                total_hour_overtime=total_hour_overtime,
                total_km=aggregate.total_km,
                a_parameter=params.a,
                b_parameter=params.b,
                c_parameter=params.c,
                d_parameter=params.d,
                f_parameter=params.f,
            )

            if existing and existing.salary_id is not None:
                saved = self._salaries.update(existing.salary_id, record)
                action = "updated"
            else:
                saved = self._salaries.create(record)
                action = "created"

        logger.info(
            "Salary %s for %s/%s %04d-%02d: total=%s (rows=%d)",
            action, employee_id, employee_name, year, month, saved.total_salary, len(rows),
        )
        return saved

    def _resolve_employees(
        self,
        *,
        employee_id: Optional[str],
        employee_name: Optional[str],
        department_name: Optional[str],
    ) -> Sequence[Employee]:
        if employee_id:
            return self._employees.list_by_identity(employee_id, employee_name)
        if department_name:
            return self._employees.list_by_department(department_name)
        return self._employees.list_all()

    def list_salaries(
        self,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        employee_id: Optional[str] = None,
        employee_name: Optional[str] = None,
        department_name: Optional[str] = None,
    ) -> list[SalaryRecord]:
        """Salary record per employee in scope, zero placeholder when none is stored."""
        employees = list(
            self._resolve_employees(
                employee_id=employee_id,
                employee_name=employee_name,
                department_name=department_name,
            )
        )
        if not employees:
            raise NotFoundError("No employees found.")

        def lookup(employee: Employee) -> SalaryRecord:
            record = self._salaries.find_first(
                employee_id=employee.employee_id,
                employee_name=employee.name,
                year=year,
                month=month,
            )
            if record:
                return record
            return SalaryRecord.placeholder(
                employee_id=employee.employee_id,
                employee_name=employee.name,
                year=year,
                month=month,
            )

        workers = min(self._query_workers, len(employees))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lookup, employees))
