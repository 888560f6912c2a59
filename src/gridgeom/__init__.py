"""gridgeom: integer grid points, vectors, rectangles and rectangle merging."""

from ._version import __version__
from .core import (
    ORIGIN,
    BasicPair,
    ContractViolation,
    Position,
    Rectangle,
    Rectangles,
    Vector,
    position_from_vector,
    vector_from_position,
)
from .merge import (
    can_merge_horizontally,
    can_merge_vertically,
    merge_all,
    merge_horizontally,
    merge_vertically,
)

__all__ = [
    "__version__",
    "ORIGIN",
    "BasicPair",
    "ContractViolation",
    "Position",
    "Vector",
    "Rectangle",
    "Rectangles",
    "position_from_vector",
    "vector_from_position",
    "can_merge_horizontally",
    "can_merge_vertically",
    "merge_all",
    "merge_horizontally",
    "merge_vertically",
]
