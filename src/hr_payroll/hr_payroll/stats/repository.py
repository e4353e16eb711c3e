from __future__ import annotations

from typing import Optional, Protocol

from .model import MonthlyStats


class StatsRepository(Protocol):
    def get_for_period(self, *, employee_id: str, employee_name: str, year: int, month: int) -> Optional[MonthlyStats]:
        raise NotImplementedError
