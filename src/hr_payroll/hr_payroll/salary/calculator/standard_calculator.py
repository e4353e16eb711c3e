from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import DAY_OFF_RATE_DENOMINATOR, DAY_OFF_RATE_NUMERATOR, SALARY_DECIMALS, SALARY_LIMIT
from ...core.exceptions import CalculationError
from .base import SalaryCalculator, SalaryInputs

_QUANTUM = Decimal(1).scaleb(-SALARY_DECIMALS)


def round_salary(value: float) -> Decimal:
    """Round half-up to the salary precision, keeping trailing zeros.

    Raises ``CalculationError`` for non-finite values and for values that do
    not fit the stored salary column.
    """
    if not math.isfinite(value) or abs(value) >= SALARY_LIMIT:
        raise CalculationError("Calculated salary is out of range")
    rounded = Decimal(repr(value)).quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    if abs(rounded) >= SALARY_LIMIT:
        raise CalculationError("Calculated salary is out of range")
    return rounded


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: pro-rata pay up to contracted hours, base + hourly overtime above.

    Both branches subtract b, c and the housing allowance and add day-off
    pay and distance pay. ``total_times == contracted_hours`` is pro-rata.
    """

    def day_off_pay(self, inputs: SalaryInputs) -> float:
        p = inputs.parameters
        return (p.b * DAY_OFF_RATE_NUMERATOR / DAY_OFF_RATE_DENOMINATOR) * inputs.day_off

    def base_pay(self, inputs: SalaryInputs) -> float:
        p = inputs.parameters
        if inputs.total_times > inputs.contracted_hours:
            return p.a + (inputs.total_times - inputs.contracted_hours) * p.f

        if inputs.contracted_hours == 0:
            raise CalculationError("Contracted monthly hours must be greater than 0")
        return (p.a / inputs.contracted_hours) * inputs.total_times

    def calculate(self, inputs: SalaryInputs) -> Decimal:
        p = inputs.parameters
        salary = (
            self.base_pay(inputs)
            - p.b
            - p.c
            + self.day_off_pay(inputs)
            - inputs.house_rent_money
            + inputs.total_km * p.d
        )
        return round_salary(salary)
