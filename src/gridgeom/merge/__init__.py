"""Adjacency tests and merge operations."""

from .adjacency import can_merge_horizontally, can_merge_vertically
from .operations import merge, merge_all, merge_horizontally, merge_vertically

__all__ = [
    "can_merge_horizontally",
    "can_merge_vertically",
    "merge",
    "merge_all",
    "merge_horizontally",
    "merge_vertically",
]
