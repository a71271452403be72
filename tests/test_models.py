# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for models module."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from wordsquares.models import (
    FILLER, NOT_FOUND, WILDCARD, Grid, matches_pattern, placeholder
)


class TestMatchesPattern(unittest.TestCase):
    """Tests for matches_pattern()."""

    def test_wildcard_matches_any_character(self):
        """Test wildcard positions accept letters and the filler."""
        self.assertTrue(matches_pattern("route", "r**t*"))
        self.assertTrue(matches_pattern("-cat-", "*cat*"))
        self.assertTrue(matches_pattern("abcde", "*****"))

    def test_literal_characters_must_be_equal(self):
        """Test non-wildcard positions require exact equality."""
        self.assertFalse(matches_pattern("route", "r**x*"))
        self.assertTrue(matches_pattern("-cat-", "-***-"))
        self.assertFalse(matches_pattern("acat-", "-***-"))

    def test_length_mismatch(self):
        """Test words of another length never match."""
        self.assertFalse(matches_pattern("rout", "r**t*"))

    def test_constants(self):
        """Test the special characters and lookup miss value."""
        self.assertEqual(FILLER, "-")
        self.assertEqual(WILDCARD, "*")
        self.assertEqual(NOT_FOUND, -1)
        self.assertEqual(placeholder(3), "***")


class TestGrid(unittest.TestCase):
    """Tests for Grid class."""

    def test_new_grid_is_empty(self):
        """Test a new grid holds 2N placeholder lines."""
        grid = Grid(size=3)

        self.assertEqual(grid.num_lines, 6)
        self.assertEqual(grid.words, ["***"] * 6)
        self.assertEqual(grid.assigned_count(), 0)
        self.assertEqual(grid.next_unassigned_line(), 0)
        self.assertTrue(grid.consistent())

    def test_row_and_column_indices(self):
        """Test rows come first, columns after."""
        grid = Grid(size=3)

        self.assertTrue(grid.is_row(2))
        self.assertFalse(grid.is_row(3))

    def test_assign_unassign_round_trip(self):
        """Test unassign restores the placeholder."""
        grid = Grid(size=2)
        grid.assign(1, "on")

        self.assertTrue(grid.is_assigned(1))
        self.assertEqual(grid.words[1], "on")

        grid.unassign(1)
        self.assertFalse(grid.is_assigned(1))
        self.assertEqual(grid.words[1], "**")

    def test_unassign_is_idempotent(self):
        """Test unassigning twice leaves the same state."""
        grid = Grid(size=2)
        grid.assign(0, "on")
        grid.unassign(0)
        before = grid.copy()
        grid.unassign(0)

        self.assertEqual(grid, before)

    def test_assign_then_unassign_restores_grid(self):
        """Test assign(i, w) then unassign(i) leaves a partly filled grid unchanged."""
        grid = Grid(size=3)
        grid.assign(0, "bat")
        grid.assign(4, "are")
        before = grid.copy()

        grid.assign(1, "tea")
        grid.unassign(1)

        self.assertEqual(grid, before)
        self.assertEqual(grid.words, ["bat", "***", "***", "***", "are", "***"])

    def test_consistent_shared_cells(self):
        """Test consistency compares row i position j with column j position i."""
        grid = Grid(size=2)
        grid.assign(0, "on")
        grid.assign(2, "on")
        self.assertTrue(grid.consistent())

        grid.assign(3, "on")
        # row 0 'n' at column 1, but column 1 starts with 'o'
        self.assertFalse(grid.consistent())

        grid.assign(3, "no")
        self.assertTrue(grid.consistent())

    def test_consistent_ignores_unassigned_lines(self):
        """Test only assigned pairs are compared."""
        grid = Grid(size=2)
        grid.assign(0, "on")
        grid.assign(1, "on")

        self.assertTrue(grid.consistent())

    def test_next_unassigned_line(self):
        """Test the lowest unassigned index is returned."""
        grid = Grid(size=2)
        grid.assign(0, "on")
        grid.assign(2, "on")

        self.assertEqual(grid.next_unassigned_line(), 1)

        grid.assign(1, "no")
        grid.assign(3, "no")
        self.assertEqual(grid.next_unassigned_line(), grid.complete_index)
        self.assertEqual(grid.complete_index, 4)
        self.assertTrue(grid.is_complete())

    def test_constraint_at_row(self):
        """Test a row's constraint is read from the assigned columns."""
        grid = Grid(size=3)
        grid.assign(3, "abc")
        grid.assign(5, "xyz")

        self.assertEqual(grid.constraint_at(1), "b*y")

    def test_constraint_at_column(self):
        """Test a column's constraint is read from the assigned rows."""
        grid = Grid(size=2)
        grid.assign(0, "on")

        self.assertEqual(grid.constraint_at(2), "o*")
        self.assertEqual(grid.constraint_at(3), "n*")

    def test_assigned_row_visible_in_column_constraints(self):
        """Test a new row's letters appear at once in every column constraint."""
        grid = Grid(size=5)
        grid.assign(3, "heart")

        for col in range(5):
            self.assertEqual(grid.constraint_at(5 + col)[3], "heart"[col])

    def test_constraint_of_empty_grid(self):
        """Test every constraint on an empty grid is all wildcards."""
        grid = Grid(size=4)

        for index in range(grid.num_lines):
            self.assertEqual(grid.constraint_at(index), "****")

    def test_placed_unassigns_after_block(self):
        """Test placed() unassigns on normal exit."""
        grid = Grid(size=2)
        with grid.placed(0, "on") as placed:
            self.assertIs(placed, grid)
            self.assertTrue(grid.is_assigned(0))

        self.assertFalse(grid.is_assigned(0))
        self.assertEqual(grid.words[0], "**")

    def test_placed_unassigns_on_exception(self):
        """Test placed() unassigns when the block raises."""
        grid = Grid(size=2)
        with self.assertRaises(RuntimeError):
            with grid.placed(0, "on"):
                raise RuntimeError("boom")

        self.assertFalse(grid.is_assigned(0))

    def test_copy_is_independent(self):
        """Test mutating a copy leaves the original unchanged."""
        grid = Grid(size=2)
        grid.assign(0, "on")
        copy = grid.copy()
        copy.assign(1, "no")

        self.assertFalse(grid.is_assigned(1))
        self.assertEqual(grid.words[1], "**")
        self.assertEqual(copy.rows(), ["on", "no"])

    def test_format_lines(self):
        """Test each line renders as '<index>: <word>'."""
        grid = Grid(size=2)
        for index, word in enumerate(["on", "no", "on", "no"]):
            grid.assign(index, word)

        self.assertEqual(grid.format_lines(), ["0: on", "1: no", "2: on", "3: no"])
        self.assertEqual(grid.columns(), ["on", "no"])

    def test_to_string(self):
        """Test the letter matrix rendering."""
        grid = Grid(size=2)
        grid.assign(0, "on")
        grid.assign(1, "no")

        self.assertEqual(grid.to_string(), "o n\nn o")


if __name__ == '__main__':
    unittest.main()
