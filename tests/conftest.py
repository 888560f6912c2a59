"""Shared test fixtures for gridgeom."""

import pytest

from gridgeom import Position, Rectangle, Rectangles, Vector


@pytest.fixture
def stacked_column():
    """Three width-5 rectangles stacked bottom to top, heights 2, 3, 4."""
    return Rectangles([
        Rectangle(5, 2, Position(0, 0)),
        Rectangle(5, 3, Position(0, 2)),
        Rectangle(5, 4, Position(0, 5)),
    ])


@pytest.fixture
def side_by_side_row():
    """Three height-4 rectangles laid left to right, widths 2, 6, 1."""
    return Rectangles([
        Rectangle(2, 4, Position(0, 0)),
        Rectangle(6, 4, Position(2, 0)),
        Rectangle(1, 4, Position(8, 0)),
    ])


@pytest.fixture
def sample_vectors():
    return [Vector(3, -1), Vector(-7, 4), Vector(0, 0), Vector(12, 9)]
