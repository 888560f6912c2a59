"""Exact-edge adjacency tests between two rectangles."""

from __future__ import annotations

from ..core.position import Vector
from ..core.rectangle import Rectangle


def can_merge_horizontally(r1: Rectangle, r2: Rectangle) -> bool:
    """True if r2 sits directly on top of r1 with the same width."""
    return (
        r1.width == r2.width
        and r1.pos() + Vector(0, r1.height) == r2.pos()
    )


def can_merge_vertically(r1: Rectangle, r2: Rectangle) -> bool:
    """True if r2 sits directly right of r1 with the same height."""
    return (
        r1.height == r2.height
        and r1.pos() + Vector(r1.width, 0) == r2.pos()
    )
