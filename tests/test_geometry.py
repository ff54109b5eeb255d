"""
Tests for the grid mapper and the game configuration.
"""

import math
import unittest

from bubble_shooter.config import BubbleColor, GameConfig
from bubble_shooter.geometry import GridMapper, round_half_up


class TestGameConfig(unittest.TestCase):
    """Defaults and validation of GameConfig."""

    def test_defaults_match_arcade_layout(self):
        config = GameConfig()
        self.assertEqual(config.width, 800)
        self.assertEqual(config.height, 600)
        self.assertEqual(config.diameter, 36)
        self.assertEqual(config.game_over_y, 564)
        self.assertAlmostEqual(config.adjacency_threshold, 37.8)
        self.assertEqual(config.cannon_position, (400, 550))
        self.assertEqual(config.palette, tuple(BubbleColor))

    def test_palette_is_stored_as_tuple(self):
        config = GameConfig(palette=[BubbleColor.NEON_BLUE, BubbleColor.SKY_BLUE])
        self.assertEqual(config.palette, (BubbleColor.NEON_BLUE, BubbleColor.SKY_BLUE))

    def test_invalid_values_rejected(self):
        """Each invalid setting raises ValueError."""
        invalid = [
            {'width': 0},
            {'height': -1},
            {'bubble_radius': 0},
            {'grid_cols': 1},
            {'initial_rows': -1},
            {'advance_interval_ms': 0},
            {'min_match_size': 0},
            {'palette': ()},
        ]
        for kwargs in invalid:
            with self.subTest(**{k: repr(v) for k, v in kwargs.items()}):
                with self.assertRaises(ValueError):
                    GameConfig(**kwargs)


class TestRounding(unittest.TestCase):

    def test_halves_round_up(self):
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(-0.5), 0)
        self.assertEqual(round_half_up(-1.5), -1)
        self.assertEqual(round_half_up(2.49), 2)


class TestGridMapper(unittest.TestCase):
    """Tests for lattice coordinate conversions."""

    def setUp(self):
        self.mapper = GridMapper(GameConfig())

    def test_spacing(self):
        self.assertAlmostEqual(self.mapper.col_spacing, 260 / 14 + 34)
        self.assertEqual(self.mapper.row_spacing, 36)
        self.assertEqual(self.mapper.row_offset, 18)

    def test_cell_center_even_row(self):
        x, y = self.mapper.cell_center(0, 0)
        self.assertAlmostEqual(x, 18)
        self.assertAlmostEqual(y, 30)

        x, y = self.mapper.cell_center(0, 14)
        self.assertAlmostEqual(x, 754)

    def test_cell_center_odd_row_is_staggered(self):
        """Odd rows are shifted right by one radius."""
        x_even, _ = self.mapper.cell_center(2, 3)
        x_odd, y_odd = self.mapper.cell_center(1, 3)
        self.assertAlmostEqual(x_odd - x_even, 18)
        self.assertAlmostEqual(y_odd, 66)

    def test_cell_center_negative_row(self):
        """Row -1 is the row injected above the grid start."""
        _, y = self.mapper.cell_center(-1, 0)
        self.assertAlmostEqual(y, -6)

    def test_column_x_explicit_stagger(self):
        self.assertAlmostEqual(self.mapper.column_x(0, staggered=False), 18)
        self.assertAlmostEqual(self.mapper.column_x(0, staggered=True), 36)

    def test_nearest_cell(self):
        self.assertEqual(self.mapper.nearest_cell(400, 95), (3, 11))
        self.assertEqual(self.mapper.nearest_cell(0, 0), (0, 0))
        # Halfway between two cells rounds up
        self.assertEqual(self.mapper.nearest_cell(18, 18), (1, 1))

    def test_nearest_cell_ignores_row_offset(self):
        """Snapping uses a uniform lattice, not the staggered grid."""
        x, y = self.mapper.cell_center(1, 0)
        row, col = self.mapper.nearest_cell(x, y)
        self.assertNotEqual(self.mapper.snap_point(row, col), (x, y))

    def test_snap_point(self):
        self.assertEqual(self.mapper.snap_point(3, 11), (396, 108))

    def test_row_index(self):
        self.assertEqual(self.mapper.row_index(30), 0)
        self.assertEqual(self.mapper.row_index(66), 1)
        self.assertEqual(self.mapper.row_index(-6), -1)

    def test_row_spacing_follows_radius(self):
        mapper = GridMapper(GameConfig(bubble_radius=10, grid_cols=4, width=100))
        self.assertEqual(mapper.row_spacing, 20)
        self.assertTrue(math.isclose(mapper.col_spacing, (100 - 80) / 3 + 20 - 2))


if __name__ == '__main__':
    unittest.main(verbosity=2)
