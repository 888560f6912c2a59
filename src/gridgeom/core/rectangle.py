"""Axis-aligned rectangles anchored at their lower-left corner."""

from __future__ import annotations

from dataclasses import dataclass

from .position import ORIGIN, Position, Vector
from .types import area_of
from .validation import validate_dimension, validate_instance


@dataclass(frozen=True)
class Rectangle:
    """A width x height box whose lower-left corner sits at ``lower_left``.

    Width and height must both be positive; a degenerate rectangle raises
    ContractViolation at construction.
    """

    width: int
    height: int
    lower_left: Position = ORIGIN

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", validate_dimension(self.width, "width"))
        object.__setattr__(self, "height", validate_dimension(self.height, "height"))
        validate_instance(self.lower_left, Position, "lower_left")

    def area(self) -> int:
        return area_of(self.width, self.height)

    def pos(self) -> Position:
        return self.lower_left

    def reflection(self) -> Rectangle:
        """Mirror across the diagonal y = x: dimensions and anchor swap."""
        return Rectangle(self.height, self.width, self.lower_left.reflection())

    def __add__(self, other: object) -> Rectangle:
        if isinstance(other, Vector):
            return Rectangle(self.width, self.height, self.lower_left + other)
        return NotImplemented

    def __radd__(self, other: object) -> Rectangle:
        return self.__add__(other)

    def to_dict(self) -> dict:
        return {**self.lower_left.to_dict(), "width": self.width, "height": self.height}
