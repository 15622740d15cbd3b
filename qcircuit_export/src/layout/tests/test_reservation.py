"""
Tests for the reservation policy of layout/occupancy_grid.py.
"""

from qcircuit_export.src.layout.occupancy_grid import OccupancyGrid


def _grid_with_column(nr_qbits, nr_cbits=0):
    grid = OccupancyGrid(nr_qbits, nr_cbits)
    grid.reserve_all()
    return grid


class TestReserve:
    """Tests for reserve()."""

    def test_first_reserve_opens_column(self):
        """Test the all-occupied start forces the first column open."""
        grid = OccupancyGrid(2)
        grid.reserve([0])
        assert grid.column_count == 1
        assert grid.occupancy == (False, False)

    def test_free_rows_reuse_column(self):
        grid = _grid_with_column(2)
        grid.write_cell(0, "a")
        grid.reserve([1])
        assert grid.column_count == 1

    def test_occupied_row_opens_column(self):
        grid = _grid_with_column(2)
        grid.write_cell(0, "a")
        grid.reserve([0, 1])
        assert grid.column_count == 2

    def test_reserve_classical_bits(self):
        grid = _grid_with_column(1, 2)
        grid.write_cell(2, "c")
        grid.reserve([], [0])
        assert grid.column_count == 1
        grid.reserve([], [1])
        assert grid.column_count == 2


class TestReserveRange:
    """Tests for reserve_range()."""

    def test_rows_between_are_checked(self):
        """Test an occupied row between the bits forces a new column."""
        grid = _grid_with_column(3)
        grid.write_cell(1, "a")
        grid.reserve([0, 2])
        assert grid.column_count == 1
        grid.reserve_range([0, 2])
        assert grid.column_count == 2

    def test_free_range_reuses_column(self):
        grid = _grid_with_column(4)
        grid.write_cell(0, "a")
        grid.reserve_range([1, 3])
        assert grid.column_count == 1

    def test_classical_only_range(self):
        grid = _grid_with_column(2, 2)
        grid.write_cell(3, "c")
        grid.reserve_range([], [0])
        assert grid.column_count == 1
        grid.reserve_range([], [0, 1])
        assert grid.column_count == 2

    def test_range_spanning_registers(self):
        grid = _grid_with_column(2, 1)
        grid.write_cell(1, "a")
        grid.reserve_range([0], [0])
        assert grid.column_count == 2

    def test_empty_range_is_noop(self):
        """Test an empty bit set reserves nothing, even on a fresh grid."""
        grid = OccupancyGrid(2)
        grid.reserve_range([], None)
        assert grid.column_count == 0
        grid.reserve_range([], [])
        assert grid.column_count == 0


class TestReserveAll:
    """Tests for reserve_all()."""

    def test_empty_column_kept(self):
        grid = _grid_with_column(2)
        grid.reserve_all()
        assert grid.column_count == 1

    def test_busy_column_replaced(self):
        grid = _grid_with_column(2)
        grid.write_cell(1, "a")
        grid.reserve_all()
        assert grid.column_count == 2
        assert not grid.last_column_busy()


class TestClaimRange:
    """Tests for claim_range()."""

    def test_claim_marks_range_without_writing(self):
        grid = _grid_with_column(2, 1)
        grid.claim_range([0], [0])
        assert grid.occupancy == (True, True, True)
        assert grid.columns == ((None, None, None),)

    def test_claim_blocks_later_reserve(self):
        grid = _grid_with_column(3)
        grid.claim_range([0, 1])
        grid.reserve([2])
        assert grid.column_count == 1
        grid.reserve([1])
        assert grid.column_count == 2

    def test_empty_claim_is_noop(self):
        grid = _grid_with_column(2)
        grid.claim_range([])
        assert grid.occupancy == (False, False)
