"""Tests for the grid model and the populate/border stages."""

import numpy as np
import pytest

from py_forestgen.core.alea_prng import AleaPRNG
from py_forestgen.core.border import expand_border, translate_point
from py_forestgen.core.grid import Cell, ForestGrid, Point
from py_forestgen.core.populate import populate_forest


class TestForestGrid:
    """Test grid basics."""

    def test_shape(self):
        grid = ForestGrid(7, 4)
        assert grid.cells.shape == (4, 7)
        assert grid.count(Cell.OPEN) == 28

    def test_set_get(self):
        grid = ForestGrid(5, 5)
        grid.set(3, 1, Cell.TREE)
        assert grid.get(3, 1) == Cell.TREE
        assert grid.cells[1, 3] == Cell.TREE
        assert grid.is_tree(3, 1)

    def test_in_bounds(self):
        grid = ForestGrid(5, 3)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 2)
        assert not grid.in_bounds(5, 0)
        assert not grid.in_bounds(0, 3)
        assert not grid.in_bounds(-1, 1)

    def test_clear_disc(self):
        """Radius 1 clears a plus shape."""
        grid = ForestGrid(5, 5, fill=Cell.TREE)
        grid.clear_disc(Point(2, 2), 1)

        assert grid.count(Cell.OPEN) == 5
        for x, y in [(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)]:
            assert grid.get(x, y) == Cell.OPEN
        assert grid.get(1, 1) == Cell.TREE

    def test_clear_disc_clipped(self):
        """Discs past the edge are clipped, not wrapped."""
        grid = ForestGrid(5, 5, fill=Cell.TREE)
        grid.clear_disc(Point(0, 0), 2)

        # dx*dx + dy*dy <= 4 within the first quadrant
        assert grid.count(Cell.OPEN) == 6
        assert grid.get(4, 4) == Cell.TREE

    def test_copy_independent(self):
        grid = ForestGrid(3, 3)
        copy = grid.copy()
        copy.set(1, 1, Cell.TREE)
        assert grid.get(1, 1) == Cell.OPEN


class TestPopulate:
    """Test initial forest fill."""

    def test_empty_fill(self):
        """fill_percent 0 leaves only the forced ring."""
        grid = ForestGrid(6, 5)
        populate_forest(grid, 0, AleaPRNG("fill"))

        assert np.all(grid.cells[0, :] == Cell.TREE)
        assert np.all(grid.cells[-1, :] == Cell.TREE)
        assert np.all(grid.cells[:, 0] == Cell.TREE)
        assert np.all(grid.cells[:, -1] == Cell.TREE)
        assert np.all(grid.cells[1:-1, 1:-1] == Cell.OPEN)

    def test_full_fill(self):
        grid = ForestGrid(6, 5)
        populate_forest(grid, 100, AleaPRNG("fill"))
        assert grid.count(Cell.TREE) == 30

    def test_one_draw_per_inner_cell(self):
        prng = AleaPRNG("draws")
        populate_forest(ForestGrid(10, 8), 45, prng)
        assert prng.call_count == 8 * 6

    def test_deterministic(self):
        grid1 = ForestGrid(20, 20)
        grid2 = ForestGrid(20, 20)
        populate_forest(grid1, 45, AleaPRNG("same"))
        populate_forest(grid2, 45, AleaPRNG("same"))
        np.testing.assert_array_equal(grid1.cells, grid2.cells)

    def test_fill_ratio(self):
        """Roughly fill_percent of inner cells become trees."""
        grid = ForestGrid(102, 102)
        populate_forest(grid, 30, AleaPRNG("ratio"))
        ratio = np.mean(grid.cells[1:-1, 1:-1] == Cell.TREE)
        assert 0.25 < ratio < 0.35


class TestBorder:
    """Test border expansion."""

    def test_expand(self):
        grid = ForestGrid(3, 2)
        bordered = expand_border(grid, 2)

        assert bordered.cells.shape == (6, 7)
        assert np.all(bordered.cells[2:4, 2:5] == Cell.OPEN)
        assert bordered.count(Cell.TREE) == 6 * 7 - 6

    def test_new_grid(self):
        """The source grid is copied, not shared."""
        grid = ForestGrid(3, 3)
        bordered = expand_border(grid, 1)
        bordered.set(1, 1, Cell.TREE)
        assert grid.get(0, 0) == Cell.OPEN

    def test_zero_border(self):
        grid = ForestGrid(4, 4)
        grid.set(1, 2, Cell.TREE)
        bordered = expand_border(grid, 0)
        np.testing.assert_array_equal(bordered.cells, grid.cells)

    @pytest.mark.parametrize("border_size", [1, 3])
    def test_translate_point(self, border_size):
        assert translate_point(Point(2, 5), border_size) == Point(2 + border_size, 5 + border_size)
