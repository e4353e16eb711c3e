from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_employee_between(
        self,
        *,
        employee_id: str,
        employee_name: str,
        start: datetime,
        end: datetime,
    ) -> Sequence[AttendanceRecord]:
        """Rows with ``start <= date <= end``, oldest first."""

        raise NotImplementedError
