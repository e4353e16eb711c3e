from __future__ import annotations

from collections import OrderedDict
from typing import Optional, Sequence

from ..common.numbers import ensure_number
from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, load_json
from .model import DepartmentMembership, Employee
from .repository import EmployeeRepository

_SELECT_EMPLOYEES = """
    SELECT
        e.employee_id, e.name, e.status,
        e.total_time_per_month, e.house_rent_money,
        e.default_day_off, e.realistic_day_off,
        ed.membership_id, ed.dept_name, ed.positions
    FROM employees e
    LEFT JOIN employee_departments ed
        ON ed.employee_id = e.employee_id AND ed.employee_name = e.name
"""


def _build_employees(rows: Sequence[dict]) -> list[Employee]:
    grouped: "OrderedDict[tuple[str, str], dict]" = OrderedDict()
    for r in rows:
        key = (str(r["employee_id"]), r["name"])
        item = grouped.get(key)
        if item is None:
            item = {"row": r, "departments": []}
            grouped[key] = item
        if r.get("dept_name") is not None:
            positions = load_json(r.get("positions"), default=[]) or []
            item["departments"].append(
                DepartmentMembership(name=r["dept_name"], positions=tuple(str(p) for p in positions))
            )

    employees = []
    for (employee_id, name), item in grouped.items():
        r = item["row"]
        employees.append(
            Employee(
                employee_id=employee_id,
                name=name,
                status=EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value),
                departments=tuple(item["departments"]),
                total_time_per_month=ensure_number(r.get("total_time_per_month")),
                house_rent_money=ensure_number(r.get("house_rent_money")),
                default_day_off=ensure_number(r.get("default_day_off")),
                realistic_day_off=ensure_number(r.get("realistic_day_off")),
            )
        )
    return employees


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _query(self, where: str, params: tuple) -> list[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                {_SELECT_EMPLOYEES}
                {where}
                ORDER BY e.employee_id ASC, e.name ASC, ed.membership_id ASC
                """,
                params,
            )
            return _build_employees(fetchall(cur))

    def get_by_identity(self, employee_id: str, name: str) -> Optional[Employee]:
        found = self._query("WHERE e.employee_id=%s AND e.name=%s", (employee_id, name))
        return found[0] if found else None

    def list_by_identity(self, employee_id: str, name: Optional[str] = None) -> Sequence[Employee]:
        if name is None:
            return self._query("WHERE e.employee_id=%s", (employee_id,))
        return self._query("WHERE e.employee_id=%s AND e.name=%s", (employee_id, name))

    def list_by_department(self, department_name: str) -> Sequence[Employee]:
        # Filter on membership first so the employee keeps all of its departments.
        return self._query(
            """
            WHERE EXISTS (
                SELECT 1 FROM employee_departments m
                WHERE m.employee_id = e.employee_id AND m.employee_name = e.name AND m.dept_name=%s
            )
            """,
            (department_name,),
        )

    def list_all(self) -> Sequence[Employee]:
        return self._query("", ())
