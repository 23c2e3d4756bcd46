"""Grid model for forest generation."""

from enum import IntEnum
from typing import NamedTuple

import numpy as np


class Cell(IntEnum):
    """Cell values. Working grids only hold OPEN and TREE."""

    OPEN = 0
    TREE = 1
    START = 2
    END = 3


class Point(NamedTuple):
    """Integer grid coordinate."""
    x: int
    y: int


class ForestGrid:
    """
    Mutable tree/open cell buffer.

    Cells are stored as a uint8 array of shape (height, width) and indexed
    ``cells[y, x]``.
    """

    def __init__(self, width: int, height: int, fill: Cell = Cell.OPEN):
        self.width = width
        self.height = height
        self.cells = np.full((height, width), int(fill), dtype=np.uint8)

    @classmethod
    def from_array(cls, cells: np.ndarray) -> "ForestGrid":
        """Wrap an existing (height, width) array without copying."""
        grid = cls.__new__(cls)
        grid.height, grid.width = cells.shape
        grid.cells = cells
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        return int(self.cells[y, x])

    def set(self, x: int, y: int, value: Cell) -> None:
        self.cells[y, x] = value

    def is_tree(self, x: int, y: int) -> bool:
        return self.cells[y, x] == Cell.TREE

    def is_edge(self, x: int, y: int) -> bool:
        """True for cells on the outermost ring."""
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def clear_disc(self, center: Point, radius: int) -> None:
        """Set every in-bounds cell within ``radius`` of ``center`` to OPEN."""
        radius_sq = radius * radius
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                x = center.x + dx
                y = center.y + dy
                if self.in_bounds(x, y) and dx * dx + dy * dy <= radius_sq:
                    self.cells[y, x] = Cell.OPEN

    def count(self, value: Cell) -> int:
        return int(np.count_nonzero(self.cells == value))

    def copy(self) -> "ForestGrid":
        return ForestGrid.from_array(self.cells.copy())

    def __repr__(self) -> str:
        return f"ForestGrid(width={self.width}, height={self.height})"
