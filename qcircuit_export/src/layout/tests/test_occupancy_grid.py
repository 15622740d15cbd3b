"""
Tests for layout/occupancy_grid.py - column storage and occupancy flags.
"""

import pytest

from qcircuit_export.src.layout.occupancy_grid import OccupancyGrid


class TestOccupancyGrid:
    """Tests for OccupancyGrid storage."""

    def test_initial_state(self):
        """Test a new grid has no columns and every row occupied."""
        grid = OccupancyGrid(2, 1)
        assert grid.total_nr_bits == 3
        assert grid.column_count == 0
        assert grid.last_column_index == -1
        assert grid.occupancy == (True, True, True)
        assert grid.last_column_busy()

    def test_append_column_clears_occupancy(self):
        grid = OccupancyGrid(2, 1)
        grid.append_column()
        assert grid.column_count == 1
        assert grid.occupancy == (False, False, False)
        assert grid.columns == ((None, None, None),)

    def test_write_cell_marks_row(self):
        grid = OccupancyGrid(2)
        grid.append_column()
        grid.write_cell(1, r"\gate{H}")
        assert grid.cell(0, 1) == r"\gate{H}"
        assert grid.is_occupied(1)
        assert not grid.is_occupied(0)

    def test_write_cell_without_column_opens_one(self):
        """Test writing into an empty grid opens the first column."""
        grid = OccupancyGrid(1)
        grid.write_cell(0, r"\gate{X}")
        assert grid.column_count == 1
        assert grid.cell(0, 0) == r"\gate{X}"

    def test_only_newest_column_written(self):
        grid = OccupancyGrid(1)
        grid.write_cell(0, "a")
        grid.append_column()
        grid.write_cell(0, "b")
        assert grid.columns == (("a",), ("b",))

    def test_columns_snapshot_is_immutable(self):
        grid = OccupancyGrid(1)
        grid.write_cell(0, "a")
        snapshot = grid.columns
        with pytest.raises(TypeError):
            snapshot[0][0] = "b"
        assert grid.cell(0, 0) == "a"

    def test_row_kinds(self):
        grid = OccupancyGrid(2, 2)
        assert grid.is_quantum_row(1)
        assert not grid.is_quantum_row(2)

    def test_merge_bits_offsets_classical(self):
        grid = OccupancyGrid(3, 2)
        assert grid.merge_bits([0, 2], [1]) == [0, 2, 4]
        assert grid.merge_bits([1]) == [1]
        assert grid.merge_bits([], [0]) == [3]
