"""Rectangles: an ordered, exclusively owned collection of Rectangle."""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from .position import Vector
from .rectangle import Rectangle
from .types import GRID_DTYPE
from .validation import validate_instance


class Rectangles:
    """Ordered sequence of rectangles.

    Order is significant: translation keeps it and merge_all folds in it.
    Duplicates and overlaps are allowed. ``+=`` translates in place;
    ``+`` returns a translated copy.
    """

    __slots__ = ("_recs",)

    def __init__(self, rectangles: Iterable[Rectangle] = ()) -> None:
        self._recs = [
            validate_instance(r, Rectangle, f"rectangles[{i}]")
            for i, r in enumerate(rectangles)
        ]

    def size(self) -> int:
        return len(self._recs)

    def __len__(self) -> int:
        return len(self._recs)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(self._recs)

    def __getitem__(self, index: int) -> Rectangle:
        return self._recs[index]

    def __setitem__(self, index: int, rectangle: Rectangle) -> None:
        self._recs[index] = validate_instance(rectangle, Rectangle, "rectangle")

    def append(self, rectangle: Rectangle) -> None:
        self._recs.append(validate_instance(rectangle, Rectangle, "rectangle"))

    def copy(self) -> Rectangles:
        return Rectangles(self._recs)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangles):
            return NotImplemented
        return self._recs == other._recs

    __hash__ = None  # mutable

    def __iadd__(self, other: object) -> Rectangles:
        if not isinstance(other, Vector):
            return NotImplemented
        self._recs = [r + other for r in self._recs]
        return self

    def __add__(self, other: object) -> Rectangles:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __radd__(self, other: object) -> Rectangles:
        return self.__add__(other)

    def __repr__(self) -> str:
        return f"Rectangles({self._recs!r})"

    def to_list(self) -> list[dict]:
        return [r.to_dict() for r in self._recs]

    def to_array(self) -> np.ndarray:
        """Rows of (x, y, width, height) in sequence order."""
        arr = np.empty((len(self._recs), 4), dtype=GRID_DTYPE)
        for i, r in enumerate(self._recs):
            arr[i] = (r.lower_left.x, r.lower_left.y, r.width, r.height)
        return arr
