"""
Grid Mapper
===========
Conversions between continuous playfield coordinates and lattice cells.

Rows are one diameter apart. Columns are spread so a full row spans the
playfield width, and odd rows are shifted right by one radius.
"""

import math
from typing import Tuple

from .config import GameConfig


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (unlike round())."""
    return math.floor(value + 0.5)


class GridMapper:
    """Maps between lattice cells and playfield coordinates."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.radius = config.bubble_radius
        self.row_spacing = config.diameter
        self.row_offset = config.bubble_radius
        self.col_spacing = (
            (config.width - config.grid_cols * config.diameter) / (config.grid_cols - 1)
            + config.diameter
            - config.bubble_gap
        )

    def column_x(self, col: int, staggered: bool) -> float:
        """x of a column center, shifted by one radius on staggered rows."""
        return self.radius + col * self.col_spacing + (self.row_offset if staggered else 0)

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        """Center of the cell at (row, col) relative to the grid start."""
        x = self.column_x(col, staggered=row % 2 == 1)
        y = row * self.row_spacing + self.config.grid_start_y
        return x, y

    def nearest_cell(self, x: float, y: float) -> Tuple[int, int]:
        """
        Nearest snap cell for a landing projectile.

        Rounds on a uniform one-diameter lattice anchored at the origin. The
        odd-row offset and the column spacing of the spawned grid are not
        inverted, so snapped bubbles do not line up with spawned ones.
        """
        col = round_half_up(x / self.config.diameter)
        row = round_half_up(y / self.config.diameter)
        return row, col

    def snap_point(self, row: int, col: int) -> Tuple[float, float]:
        """Position taken by a bubble snapped into a cell from nearest_cell()."""
        return col * self.config.diameter, row * self.config.diameter

    def row_index(self, y: float) -> int:
        """Row index of a y coordinate relative to the grid start."""
        return round_half_up((y - self.config.grid_start_y) / self.row_spacing)
