"""Points and displacements on the integer grid.

Position is an absolute point, Vector a displacement. They share the
same (x, y) layout but never compare equal or substitute for each other;
crossing between them goes through the explicit conversions below.
"""

from __future__ import annotations

from dataclasses import dataclass

from .pair import pair_values, swapped
from .validation import validate_coordinate, validate_instance


@dataclass(frozen=True)
class Position:
    """A point (x, y) on the grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", validate_coordinate(self.x, "x"))
        object.__setattr__(self, "y", validate_coordinate(self.y, "y"))

    @classmethod
    def from_vector(cls, vector: Vector) -> Position:
        """Reinterpret a displacement as the point it reaches from the origin."""
        validate_instance(vector, Vector, "vector")
        return cls(*pair_values(vector))

    @staticmethod
    def origin() -> Position:
        return ORIGIN

    def reflection(self) -> Position:
        return Position(*swapped(self))

    def __add__(self, other: object) -> Position:
        if isinstance(other, Vector):
            return Position(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __radd__(self, other: object) -> Position:
        return self.__add__(other)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Vector:
    """A displacement (x, y) on the grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", validate_coordinate(self.x, "x"))
        object.__setattr__(self, "y", validate_coordinate(self.y, "y"))

    @classmethod
    def from_position(cls, position: Position) -> Vector:
        """Reinterpret a point as its displacement from the origin."""
        validate_instance(position, Position, "position")
        return cls(*pair_values(position))

    def reflection(self) -> Vector:
        return Vector(*swapped(self))

    def __add__(self, other: object) -> Vector:
        # Position, Rectangle and Rectangles handle vector + value via __radd__
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


ORIGIN = Position(0, 0)


def position_from_vector(vector: Vector) -> Position:
    return Position.from_vector(vector)


def vector_from_position(position: Position) -> Vector:
    return Vector.from_position(position)
