from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal

import pytest

from src.hr_payroll.hr_payroll.core.exceptions import NotFoundError
from src.hr_payroll.hr_payroll.salary.model import DepartmentHours, SalaryRecord
from src.hr_payroll.hr_payroll.salary.mysql_salary_repository import MySQLSalaryRepository


class StubCursor:
    def __init__(self, rows):
        self._rows = list(rows)
        self.executed = []

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def close(self):
        pass


class StubConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class StubConnectionFactory:
    def __init__(self, *rows):
        self.cursor = StubCursor(rows)
        self.conn = StubConnection(self.cursor)

    def connect(self):
        return self.conn


def _stored_row(**overrides) -> dict:
    row = {
        "salary_id": 5,
        "employee_id": "E1",
        "employee_name": "Anna",
        "year": 2024,
        "month": 5,
        "date_calculate": datetime(2024, 6, 1, 12, 0),
        "total_salary": Decimal("2064.62"),
        "total_times": Decimal("220.00"),
        "day_off": Decimal("1.00"),
        "hour_normal": '[{"department_name": "Logistik", "total_hour": 12, "total_minutes": 30}]',
        "total_hour_work": Decimal("200.00"),
        "total_hour_overtime": Decimal("20.00"),
        "total_km": Decimal("40.33"),
        "a_parameter": 2000.0,
        "b_parameter": 100.0,
        "c_parameter": 50.0,
        "d_parameter": 0.25,
        "f_parameter": 15.0,
    }
    row.update(overrides)
    return row


def _record(**overrides) -> SalaryRecord:
    values = dict(
        employee_id="E1",
        employee_name="Anna",
        year=2024,
        month=5,
        date_calculate=datetime(2024, 6, 1, 12, 0),
        total_salary=Decimal("2064.62"),
        total_times=220.0,
        day_off=1.0,
        hour_normal=(DepartmentHours("Logistik", 12.0, 30.0),),
        total_hour_work=200.0,
        total_hour_overtime=20.0,
        total_km=40.333333,
        a_parameter=2000.0,
        b_parameter=100.0,
        c_parameter=50.0,
        d_parameter=0.25,
        f_parameter=15.0,
    )
    values.update(overrides)
    return SalaryRecord(**values)


def test_find_first_maps_row_and_forwards_filters():
    factory = StubConnectionFactory(_stored_row(total_salary=Decimal("12.5"), hour_normal=None))
    repo = MySQLSalaryRepository(factory)

    record = repo.find_first(employee_id="E1", employee_name="Anna", month=5)

    sql, params = factory.cursor.executed[0]
    assert "employee_id=%s AND employee_name=%s AND month=%s" in sql
    assert params == ("E1", "Anna", 5)
    assert record.salary_id == 5
    assert str(record.total_salary) == "12.50"
    assert record.total_km == pytest.approx(40.33)
    assert record.hour_normal == ()


def test_find_first_returns_none_without_rows():
    repo = MySQLSalaryRepository(StubConnectionFactory())

    assert repo.get_for_period(employee_id="E1", employee_name="Anna", year=2024, month=5) is None


def test_create_upserts_on_key_and_returns_stored_row():
    factory = StubConnectionFactory(_stored_row())
    repo = MySQLSalaryRepository(factory)

    saved = repo.create(_record())

    insert_sql, insert_params = factory.cursor.executed[0]
    select_sql, select_params = factory.cursor.executed[1]
    assert "ON DUPLICATE KEY UPDATE" in insert_sql
    assert insert_params[:4] == ("E1", "Anna", 2024, 5)
    assert json.loads(insert_params[8]) == [{"department_name": "Logistik", "total_hour": 12.0, "total_minutes": 30.0}]
    assert insert_params[11] == 40.333333
    assert select_params == ("E1", "Anna", 2024, 5)
    assert saved.salary_id == 5
    assert saved.total_km == pytest.approx(40.33)
    assert saved.hour_normal == (DepartmentHours("Logistik", 12, 30),)
    assert factory.conn.committed is True


def test_update_overwrites_computed_fields_only():
    factory = StubConnectionFactory(_stored_row(salary_id=9))
    repo = MySQLSalaryRepository(factory)

    saved = repo.update(9, _record(employee_name="Someone Else", year=1999))

    update_sql, update_params = factory.cursor.executed[0]
    set_clause = update_sql.split("WHERE")[0]
    assert "employee_id" not in set_clause
    assert "employee_name" not in set_clause
    assert "year" not in set_clause
    assert update_params[-1] == 9
    assert update_params[1] == Decimal("2064.62")
    assert (saved.salary_id, saved.employee_name, saved.year) == (9, "Anna", 2024)


def test_update_of_vanished_row_is_not_found_and_rolls_back():
    factory = StubConnectionFactory()
    repo = MySQLSalaryRepository(factory)

    with pytest.raises(NotFoundError):
        repo.update(9, _record())
    assert factory.conn.rolled_back is True
