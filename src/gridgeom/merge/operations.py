"""Gluing adjacent rectangles into one.

Only exact-edge chains merge: this is not a general rectangle union.
Every failure is a ContractViolation; no best-guess result is returned.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.errors import ContractViolation
from ..core.rectangle import Rectangle
from .adjacency import can_merge_horizontally, can_merge_vertically

logger = logging.getLogger(__name__)


def merge_horizontally(r1: Rectangle, r2: Rectangle) -> Rectangle:
    """Stack r2 on top of r1 into one taller rectangle.

    Requires ``can_merge_horizontally(r1, r2)``. The result keeps r1's
    width and anchor; heights add up.
    """
    if not can_merge_horizontally(r1, r2):
        raise ContractViolation(
            f"Cannot merge horizontally: {r2!r} does not sit exactly on top of {r1!r}."
        )
    return Rectangle(r1.width, r1.height + r2.height, r1.pos())


def merge_vertically(r1: Rectangle, r2: Rectangle) -> Rectangle:
    """Join r2 to the right of r1 into one wider rectangle.

    Requires ``can_merge_vertically(r1, r2)``. The result keeps r1's
    height and anchor; widths add up.
    """
    if not can_merge_vertically(r1, r2):
        raise ContractViolation(
            f"Cannot merge vertically: {r2!r} does not sit exactly right of {r1!r}."
        )
    return Rectangle(r1.width + r2.width, r1.height, r1.pos())


def merge(r1: Rectangle, r2: Rectangle) -> Rectangle:
    """Merge in whichever direction is adjacent, vertical first."""
    if can_merge_vertically(r1, r2):
        logger.debug("merge vertically %r + %r", r1, r2)
        return merge_vertically(r1, r2)
    if can_merge_horizontally(r1, r2):
        logger.debug("merge horizontally %r + %r", r1, r2)
        return merge_horizontally(r1, r2)
    raise ContractViolation(f"Rectangles are not adjacent: {r1!r}, {r2!r}.")


def merge_all(rectangles: Sequence[Rectangle]) -> Rectangle:
    """Left-fold ``merge`` over the sequence in order.

    Each element must be adjacent to the running result of the elements
    before it. Accepts Rectangles or any sequence of Rectangle.
    """
    if len(rectangles) == 0:
        raise ContractViolation("merge_all requires at least one rectangle.")
    result = rectangles[0]
    for i in range(1, len(rectangles)):
        try:
            result = merge(result, rectangles[i])
        except ContractViolation as exc:
            raise ContractViolation(
                f"merge_all failed at index {i}: {exc}"
            ) from exc
    logger.debug("merge_all folded %d rectangles into %r", len(rectangles), result)
    return result
