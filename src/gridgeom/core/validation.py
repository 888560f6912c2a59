"""Argument validation for coordinates and rectangle dimensions."""

from __future__ import annotations

import numbers
from typing import Any

from .errors import ContractViolation
from .types import GRID_MAX, GRID_MIN


def validate_coordinate(value: Any, name: str) -> int:
    """Return value as a plain int inside the 32-bit grid domain."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}."
        )
    value = int(value)
    if not GRID_MIN <= value <= GRID_MAX:
        raise OverflowError(
            f"{name}={value} is outside the grid range [{GRID_MIN}, {GRID_MAX}]."
        )
    return value


def validate_dimension(value: Any, name: str) -> int:
    """Return a positive grid-domain dimension.

    A non-positive width or height breaks the Rectangle contract.
    """
    value = validate_coordinate(value, name)
    if value <= 0:
        raise ContractViolation(
            f"Rectangle {name} must be positive, got {value}."
        )
    return value


def validate_instance(value: Any, expected: type, name: str) -> Any:
    if not isinstance(value, expected):
        raise TypeError(
            f"{name} must be a {expected.__name__}, got {type(value).__name__}."
        )
    return value
