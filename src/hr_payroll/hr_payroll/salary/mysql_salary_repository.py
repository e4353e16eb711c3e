from __future__ import annotations

import json
from decimal import Decimal
from typing import Optional

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, load_json
from .model import DepartmentHours, SalaryRecord
from .repository import SalaryRepository

_COLUMNS = """
    salary_id, employee_id, employee_name, year, month, date_calculate,
    total_salary, total_times, day_off, hour_normal,
    total_hour_work, total_hour_overtime, total_km,
    a_parameter, b_parameter, c_parameter, d_parameter, f_parameter
"""


def _row_to_record(r: dict) -> SalaryRecord:
    hour_normal = load_json(r.get("hour_normal"), default=[]) or []
    return SalaryRecord(
        salary_id=int(r["salary_id"]),
        employee_id=str(r["employee_id"]),
        employee_name=r["employee_name"],
        year=int(r["year"]),
        month=int(r["month"]),
        date_calculate=r.get("date_calculate"),
        total_salary=Decimal(str(r.get("total_salary") or 0)).quantize(Decimal("0.01")),
        total_times=float(r.get("total_times") or 0),
        day_off=float(r.get("day_off") or 0),
        hour_normal=tuple(
            DepartmentHours(
                department_name=h.get("department_name"),
                total_hour=h.get("total_hour", 0),
                total_minutes=h.get("total_minutes", 0),
            )
            for h in hour_normal
        ),
        total_hour_work=float(r.get("total_hour_work") or 0),
        total_hour_overtime=float(r.get("total_hour_overtime") or 0),
        total_km=float(r.get("total_km") or 0),
        a_parameter=r.get("a_parameter"),
        b_parameter=r.get("b_parameter"),
        c_parameter=r.get("c_parameter"),
        d_parameter=r.get("d_parameter"),
        f_parameter=r.get("f_parameter"),
    )


def _hour_normal_json(record: SalaryRecord) -> str:
    return json.dumps(
        [
            {
                "department_name": h.department_name,
                "total_hour": h.total_hour,
                "total_minutes": h.total_minutes,
            }
            for h in record.hour_normal
        ]
    )


def _computed_values(record: SalaryRecord) -> tuple:
    return (
        record.date_calculate,
        record.total_salary,
        record.total_times,
        record.day_off,
        _hour_normal_json(record),
        record.total_hour_work,
        record.total_hour_overtime,
        record.total_km,
        record.a_parameter,
        record.b_parameter,
        record.c_parameter,
        record.d_parameter,
        record.f_parameter,
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_period(self, *, employee_id: str, employee_name: str, year: int, month: int) -> Optional[SalaryRecord]:
        return self.find_first(employee_id=employee_id, employee_name=employee_name, year=year, month=month)

    def find_first(
        self,
        *,
        employee_id: str,
        employee_name: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> Optional[SalaryRecord]:
        clauses = ["employee_id=%s", "employee_name=%s"]
        params: list[object] = [employee_id, employee_name]

        if year is not None:
            clauses.append("year=%s")
            params.append(int(year))
        if month is not None:
            clauses.append("month=%s")
            params.append(int(month))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM salaries WHERE {where} ORDER BY salary_id ASC LIMIT 1",
                tuple(params),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def _select_by_key(self, cur, key: tuple[str, str, int, int]) -> SalaryRecord:
        employee_id, employee_name, year, month = key
        cur.execute(
            f"""
            SELECT {_COLUMNS} FROM salaries
            WHERE employee_id=%s AND employee_name=%s AND year=%s AND month=%s
            """,
            (employee_id, employee_name, int(year), int(month)),
        )
        r = fetchone(cur)
        if not r:
            raise NotFoundError(f"Salary record {key} disappeared during save")
        return _row_to_record(r)

    def create(self, record: SalaryRecord) -> SalaryRecord:
        # uq_salary_period turns a concurrent insert for the same key into an update.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salaries(
                    employee_id, employee_name, year, month, date_calculate,
                    total_salary, total_times, day_off, hour_normal,
                    total_hour_work, total_hour_overtime, total_km,
                    a_parameter, b_parameter, c_parameter, d_parameter, f_parameter
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    date_calculate=VALUES(date_calculate), total_salary=VALUES(total_salary),
                    total_times=VALUES(total_times), day_off=VALUES(day_off), hour_normal=VALUES(hour_normal),
                    total_hour_work=VALUES(total_hour_work), total_hour_overtime=VALUES(total_hour_overtime),
                    total_km=VALUES(total_km),
                    a_parameter=VALUES(a_parameter), b_parameter=VALUES(b_parameter), c_parameter=VALUES(c_parameter),
                    d_parameter=VALUES(d_parameter), f_parameter=VALUES(f_parameter)
                """,
                (record.employee_id, record.employee_name, int(record.year), int(record.month))
                + _computed_values(record),
            )
            return self._select_by_key(cur, record.key)

    def update(self, salary_id: int, record: SalaryRecord) -> SalaryRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salaries
                SET date_calculate=%s, total_salary=%s, total_times=%s, day_off=%s, hour_normal=%s,
                    total_hour_work=%s, total_hour_overtime=%s, total_km=%s,
                    a_parameter=%s, b_parameter=%s, c_parameter=%s, d_parameter=%s, f_parameter=%s
                WHERE salary_id=%s
                """,
                _computed_values(record) + (int(salary_id),),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM salaries WHERE salary_id=%s", (int(salary_id),))
            r = fetchone(cur)
            if not r:
                raise NotFoundError(f"Salary record {salary_id} disappeared during update")
            return _row_to_record(r)
