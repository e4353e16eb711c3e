"""Resolution of the salary rate parameters.

Each parameter is taken from the request override when it is numeric,
otherwise carried over from the previously stored record for the same
period, otherwise defaulted. ``d`` defaults to ``DEFAULT_DISTANCE_RATE``
instead of zero, but only when there is no previous record to carry over.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.numbers import ensure_number, is_number
from ..core.constants import DEFAULT_DISTANCE_RATE
from .model import SalaryParameters, SalaryRecord

OVERRIDE_KEYS = {
    "a": "a_new",
    "b": "b_new",
    "c": "c_new",
    "d": "d_new",
    "f": "f_new",
}


def _resolve_one(override: Any, previous_value: Any, *, has_previous: bool, default: float) -> float:
    if is_number(override):
        return float(override)
    if has_previous:
        return ensure_number(previous_value)
    return default


def resolve_parameters(overrides: Optional[Mapping[str, Any]], previous: Optional[SalaryRecord]) -> SalaryParameters:
    overrides = overrides or {}
    stored = previous.parameters if previous is not None else SalaryParameters()
    has_previous = previous is not None

    values = {}
    for name, key in OVERRIDE_KEYS.items():
        values[name] = _resolve_one(
            overrides.get(key),
            getattr(stored, name),
            has_previous=has_previous,
            default=DEFAULT_DISTANCE_RATE if name == "d" else 0.0,
        )
    return SalaryParameters(**values)
