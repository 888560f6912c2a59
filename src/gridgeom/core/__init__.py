"""Value types: points, displacements, rectangles."""

from .errors import ContractViolation
from .pair import BasicPair
from .position import ORIGIN, Position, Vector, position_from_vector, vector_from_position
from .rectangle import Rectangle
from .rectangles import Rectangles
from .types import AREA_MAX, GRID_MAX, GRID_MIN

__all__ = [
    "ContractViolation",
    "BasicPair",
    "ORIGIN",
    "Position",
    "Vector",
    "position_from_vector",
    "vector_from_position",
    "Rectangle",
    "Rectangles",
    "AREA_MAX",
    "GRID_MAX",
    "GRID_MIN",
]
