"""
Unit tests for the grid position calculator
"""
import pytest

from snakeline.config import LayoutConfig
from snakeline.layout.grid import calculate_grid, grid_position, row_of
from snakeline.tests.conftest import make_entries


@pytest.mark.unit
class TestRowAssignment:
    """Entries fill rows of three"""

    def test_rows_for_nine_entries(self):
        rows = [row_of(i) for i in range(9)]
        assert rows == [0, 0, 0, 1, 1, 1, 2, 2, 2]

    def test_positions_within_row(self):
        positions = calculate_grid(make_entries(7), LayoutConfig())
        assert [p.pos_in_row for p in positions] == [0, 1, 2, 0, 1, 2, 0]


@pytest.mark.unit
class TestGridCoordinates:
    """Rows alternate direction and stack upward"""

    def test_first_row_runs_left_to_right(self):
        positions = calculate_grid(make_entries(3), LayoutConfig())
        assert [p.x for p in positions] == [100, 200, 300]
        assert all(p.y == 300 for p in positions)

    def test_second_row_runs_right_to_left(self):
        positions = calculate_grid(make_entries(6), LayoutConfig())
        assert [p.x for p in positions[3:]] == [300, 200, 100]
        assert all(p.y == 220 for p in positions[3:])

    def test_third_row_runs_left_to_right_again(self):
        positions = calculate_grid(make_entries(9), LayoutConfig())
        xs = [p.x for p in positions[6:]]
        assert xs == sorted(xs)
        assert positions[6].y == 140

    def test_row_turns_above_previous_row_end(self):
        """The first entry of a row sits directly above the last of the previous row"""
        positions = calculate_grid(make_entries(9), LayoutConfig())
        assert positions[3].x == positions[2].x
        assert positions[6].x == positions[5].x

    def test_direction_property(self):
        positions = calculate_grid(make_entries(6), LayoutConfig())
        assert positions[0].direction == 1
        assert positions[4].direction == -1
        assert positions[4].flows_right is False

    def test_origin_shifts_grid(self):
        config = LayoutConfig()
        config.origin_x = 0.0
        config.origin_y = 0.0
        p = grid_position(4, config)
        assert (p.x, p.y) == (100, -80)

    def test_no_entries(self):
        assert calculate_grid([], LayoutConfig()) == []
