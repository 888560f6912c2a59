"""Coordinate and area domains shared by every geometry value."""

from __future__ import annotations

import numpy as np

GRID_DTYPE = np.dtype(np.int32)
AREA_DTYPE = np.dtype(np.uint64)

GRID_MIN = int(np.iinfo(GRID_DTYPE).min)
GRID_MAX = int(np.iinfo(GRID_DTYPE).max)
AREA_MAX = int(np.iinfo(AREA_DTYPE).max)


def area_of(width: int, height: int) -> int:
    """Product of two dimensions computed in the unsigned 64-bit area domain."""
    return int(np.uint64(width) * np.uint64(height))
