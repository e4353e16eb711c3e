from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from ..model import SalaryParameters


@dataclass(frozen=True)
class SalaryInputs:
    parameters: SalaryParameters
    total_times: float
    contracted_hours: float
    house_rent_money: float
    day_off: float
    total_km: float


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, inputs: SalaryInputs) -> Decimal:
        raise NotImplementedError
