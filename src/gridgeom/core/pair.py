"""The (x, y) coordinate pair shared by Position and Vector."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BasicPair(Protocol):
    """Read-only storage of two grid coordinates.

    Position and Vector both satisfy this protocol but are distinct
    types: neither converts to the other implicitly.
    """

    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...


def pair_values(pair: BasicPair) -> tuple[int, int]:
    return pair.x, pair.y


def swapped(pair: BasicPair) -> tuple[int, int]:
    """Coordinates reflected across the diagonal y = x."""
    return pair.y, pair.x
