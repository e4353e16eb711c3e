from decimal import Decimal

import pytest

from src.hr_payroll.hr_payroll.common.numbers import ensure_number, is_number
from src.hr_payroll.hr_payroll.common.validators import optional_int, require_int, require_month, require_non_empty
from src.hr_payroll.hr_payroll.core.exceptions import ValidationError


@pytest.mark.parametrize("value", [None, "", "abc", float("nan"), float("inf"), True, [], {}])
def test_invalid_values_coerce_to_zero(value):
    assert is_number(value) is False
    assert ensure_number(value) == 0.0


@pytest.mark.parametrize("value, expected", [(0, 0.0), (3, 3.0), ("2.5", 2.5), (Decimal("1.25"), 1.25), (-4, -4.0)])
def test_numeric_values_pass_through(value, expected):
    assert ensure_number(value) == expected


def test_require_non_empty_strips():
    assert require_non_empty("  Anna ", "employeeName") == "Anna"
    with pytest.raises(ValidationError):
        require_non_empty("   ", "employeeName")


def test_optional_int():
    assert optional_int(None, "year") is None
    assert optional_int("", "year") is None
    assert optional_int(" 2024 ", "year") == 2024
    with pytest.raises(ValidationError):
        optional_int("20x4", "year")


def test_require_int_rejects_missing_and_zero():
    with pytest.raises(ValidationError):
        require_int(None, "year")
    with pytest.raises(ValidationError):
        require_int("0", "year")


def test_require_month_range():
    assert require_month("12") == 12
    with pytest.raises(ValidationError):
        require_month("13")
