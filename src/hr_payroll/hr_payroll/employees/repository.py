from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Employee directory lookups needed by payroll.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_identity(self, employee_id: str, name: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_by_identity(self, employee_id: str, name: Optional[str] = None) -> Sequence[Employee]:
        """Employees with the id, narrowed by name when one is given."""

        raise NotImplementedError

    def list_by_department(self, department_name: str) -> Sequence[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError
