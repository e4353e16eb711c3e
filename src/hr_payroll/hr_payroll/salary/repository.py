from __future__ import annotations

from typing import Optional, Protocol

from .model import SalaryRecord


class SalaryRepository(Protocol):
    def get_for_period(self, *, employee_id: str, employee_name: str, year: int, month: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def find_first(
        self,
        *,
        employee_id: str,
        employee_name: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> Optional[SalaryRecord]:
        """First stored record for the employee, narrowed by year/month when given."""

        raise NotImplementedError

    def create(self, record: SalaryRecord) -> SalaryRecord:
        """Insert a record; a row already stored under the same key is overwritten."""

        raise NotImplementedError

    def update(self, salary_id: int, record: SalaryRecord) -> SalaryRecord:
        """Overwrite computed fields of an existing row; identity fields are kept."""

        raise NotImplementedError
