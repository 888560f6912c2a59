"""Tests for merge operations."""

import logging

import pytest

from gridgeom import (
    ContractViolation,
    Position,
    Rectangle,
    Rectangles,
    Vector,
    merge_all,
    merge_horizontally,
    merge_vertically,
)
from gridgeom.merge.operations import merge


class TestMergeHorizontally:
    def test_stacks_into_taller(self):
        a = Rectangle(3, 2, Position(0, 0))
        b = Rectangle(3, 5, Position(0, 2))
        assert merge_horizontally(a, b) == Rectangle(3, 7, Position(0, 0))

    def test_keeps_first_anchor(self):
        a = Rectangle(1, 1, Position(-4, 6))
        b = Rectangle(1, 2, Position(-4, 7))
        assert merge_horizontally(a, b).pos() == Position(-4, 6)

    def test_rejects_side_by_side(self):
        a = Rectangle(2, 4, Position(0, 0))
        b = Rectangle(6, 4, Position(2, 0))
        with pytest.raises(ContractViolation, match="horizontally"):
            merge_horizontally(a, b)


class TestMergeVertically:
    def test_joins_into_wider(self):
        a = Rectangle(2, 4, Position(0, 0))
        b = Rectangle(6, 4, Position(2, 0))
        assert merge_vertically(a, b) == Rectangle(8, 4, Position(0, 0))

    def test_rejects_stacked(self):
        a = Rectangle(3, 2, Position(0, 0))
        b = Rectangle(3, 5, Position(0, 2))
        with pytest.raises(ContractViolation, match="vertically"):
            merge_vertically(a, b)

    def test_rejects_height_mismatch(self):
        with pytest.raises(ContractViolation):
            merge_vertically(Rectangle(2, 4), Rectangle(6, 5, Position(2, 0)))


class TestMerge:
    def test_picks_vertical(self):
        a = Rectangle(2, 4)
        b = Rectangle(6, 4, Position(2, 0))
        assert merge(a, b) == merge_vertically(a, b)

    def test_picks_horizontal(self):
        a = Rectangle(3, 2)
        b = Rectangle(3, 5, Position(0, 2))
        assert merge(a, b) == merge_horizontally(a, b)

    def test_rejects_non_adjacent(self):
        with pytest.raises(ContractViolation, match="not adjacent"):
            merge(Rectangle(1, 1), Rectangle(1, 1, Position(5, 5)))


class TestMergeAll:
    def test_vertical_stack(self, stacked_column):
        assert merge_all(stacked_column) == Rectangle(5, 9, Position(0, 0))

    def test_horizontal_row(self, side_by_side_row):
        assert merge_all(side_by_side_row) == Rectangle(9, 4, Position(0, 0))

    def test_single_element(self):
        r = Rectangle(2, 3, Position(1, 1))
        assert merge_all(Rectangles([r])) == r

    def test_accepts_plain_list(self):
        recs = [Rectangle(1, 1), Rectangle(1, 1, Position(1, 0))]
        assert merge_all(recs) == Rectangle(2, 1)

    def test_mixed_directions(self):
        # 2x1 + 2x1 to its right -> 4x1; then 4x3 on top -> 4x4
        recs = Rectangles([
            Rectangle(2, 1, Position(0, 0)),
            Rectangle(2, 1, Position(2, 0)),
            Rectangle(4, 3, Position(0, 1)),
        ])
        assert merge_all(recs) == Rectangle(4, 4, Position(0, 0))

    def test_after_translation(self, stacked_column):
        stacked_column += Vector(10, -3)
        assert merge_all(stacked_column) == Rectangle(5, 9, Position(10, -3))

    def test_empty_raises(self):
        with pytest.raises(ContractViolation, match="at least one"):
            merge_all(Rectangles())

    def test_order_is_significant(self, stacked_column):
        reordered = Rectangles([stacked_column[1], stacked_column[0], stacked_column[2]])
        with pytest.raises(ContractViolation, match="index 1"):
            merge_all(reordered)

    def test_gap_reports_index(self):
        recs = Rectangles([
            Rectangle(5, 2, Position(0, 0)),
            Rectangle(5, 3, Position(0, 2)),
            Rectangle(5, 4, Position(0, 6)),
        ])
        with pytest.raises(ContractViolation, match="index 2"):
            merge_all(recs)

    def test_does_not_modify_input(self, stacked_column):
        before = stacked_column.copy()
        merge_all(stacked_column)
        assert stacked_column == before

    def test_logs_fold_at_debug(self, stacked_column, caplog):
        with caplog.at_level(logging.DEBUG, logger="gridgeom.merge.operations"):
            merge_all(stacked_column)
        assert "merge horizontally" in caplog.text
        assert "folded 3 rectangles" in caplog.text
