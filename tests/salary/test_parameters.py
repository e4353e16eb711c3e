from __future__ import annotations

from src.hr_payroll.hr_payroll.salary.model import SalaryParameters, SalaryRecord
from src.hr_payroll.hr_payroll.salary.parameters import resolve_parameters


def _stored(**params) -> SalaryRecord:
    return SalaryRecord(employee_id="E1", employee_name="Anna", year=2024, month=5, salary_id=1, **params)


def test_no_overrides_and_no_previous_record_uses_defaults():
    params = resolve_parameters({}, None)

    assert params == SalaryParameters(a=0.0, b=0.0, c=0.0, d=0.25, f=0.0)


def test_no_overrides_reproduces_stored_parameters():
    previous = _stored(a_parameter=2000, b_parameter=100, c_parameter=50, d_parameter=0.4, f_parameter=15)

    params = resolve_parameters(None, previous)

    assert params == SalaryParameters(a=2000.0, b=100.0, c=50.0, d=0.4, f=15.0)


def test_stored_d_is_carried_over_instead_of_default():
    previous = _stored(a_parameter=1, d_parameter=None)

    params = resolve_parameters({}, previous)

    assert params.d == 0.0
    assert params.a == 1.0


def test_overrides_win_over_stored_values():
    previous = _stored(a_parameter=2000, b_parameter=100, c_parameter=50, d_parameter=0.4, f_parameter=15)

    params = resolve_parameters({"a_new": 2500, "d_new": "0.3", "f_new": 0}, previous)

    assert params.a == 2500.0
    assert params.d == 0.3
    assert params.f == 0.0
    assert params.b == 100.0
    assert params.c == 50.0


def test_invalid_overrides_fall_back():
    previous = _stored(a_parameter="abc", b_parameter=float("nan"), c_parameter=7)

    params = resolve_parameters({"a_new": "x", "b_new": None, "c_new": True}, previous)

    assert params.a == 0.0
    assert params.b == 0.0
    assert params.c == 7.0


def test_invalid_d_override_without_previous_record_defaults():
    params = resolve_parameters({"d_new": "not-a-number"}, None)

    assert params.d == 0.25
