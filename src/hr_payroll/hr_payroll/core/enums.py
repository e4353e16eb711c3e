from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status as stored in the employee directory."""

    ACTIVE = "active"
    INACTIVE = "inactive"
