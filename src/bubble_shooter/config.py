"""
Configuration
=============
Playfield dimensions, physics constants and the bubble palette.

The module-level constants are the defaults of the original arcade layout.
`GameConfig` bundles the ones the simulation needs so tests and the command
line can run the engine on a different playfield.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

# =============================================================================
# PLAYFIELD
# =============================================================================

PLAYFIELD_WIDTH = 800
PLAYFIELD_HEIGHT = 600

# Grid settings
BUBBLE_RADIUS = 18
GRID_COLS = 15
INITIAL_ROWS = 2
GRID_START_Y = 30  # y of row 0 before any advancement
BUBBLE_GAP = 2

# Timing
ROW_ADVANCE_INTERVAL_MS = 8000
TARGET_FPS = 60

# Projectile
PROJECTILE_SPEED = 7.0  # pixels per tick

# Matching
ADJACENCY_FACTOR = 2.1  # looser than 2.0 to tolerate staggered-row error
MIN_MATCH_SIZE = 3
POINTS_PER_BUBBLE = 10

# Cannon
CANNON_BOTTOM_OFFSET = 50
CANNON_WIDTH = 40
CANNON_HEIGHT = 20
AIM_ANGLE_MIN = -math.pi
AIM_ANGLE_MAX = -0.1
AIM_ANGLE_DEFAULT = -math.pi / 2

# Aim preview
AIM_PREVIEW_DOTS = 30
AIM_PREVIEW_STEP = 15

# =============================================================================
# COLORS
# =============================================================================


class BubbleColor(Enum):
    """Bubble palette. Values are RGB tuples."""
    HOT_PINK = (255, 20, 147)
    NEON_PINK = (255, 0, 255)
    DEEP_PURPLE = (148, 0, 211)
    LIGHT_PURPLE = (218, 112, 214)
    NEON_BLUE = (0, 255, 255)
    ROYAL_BLUE = (65, 105, 225)
    NEON_GREEN = (57, 255, 20)
    BRIGHT_ORANGE = (255, 140, 0)
    SKY_BLUE = (135, 206, 235)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.value


# UI Colors
BG_COLOR = (10, 10, 10)
CANNON_COLOR = (51, 51, 51)
TEXT_COLOR = (240, 240, 240)
OVERLAY_COLOR = (0, 0, 0, 204)
GAME_OVER_COLOR = BubbleColor.HOT_PINK.value


# =============================================================================
# GAME CONFIG
# =============================================================================

@dataclass(frozen=True)
class GameConfig:
    """Simulation parameters. Defaults reproduce the arcade layout."""
    width: int = PLAYFIELD_WIDTH
    height: int = PLAYFIELD_HEIGHT
    bubble_radius: float = BUBBLE_RADIUS
    grid_cols: int = GRID_COLS
    initial_rows: int = INITIAL_ROWS
    grid_start_y: float = GRID_START_Y
    bubble_gap: float = BUBBLE_GAP
    advance_interval_ms: int = ROW_ADVANCE_INTERVAL_MS
    projectile_speed: float = PROJECTILE_SPEED
    adjacency_factor: float = ADJACENCY_FACTOR
    min_match_size: int = MIN_MATCH_SIZE
    points_per_bubble: int = POINTS_PER_BUBBLE
    palette: Tuple[BubbleColor, ...] = field(default_factory=lambda: tuple(BubbleColor))

    def __post_init__(self):
        # Accept any iterable of colors but store a tuple
        object.__setattr__(self, 'palette', tuple(self.palette))
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"playfield must have a positive size, got {self.width}x{self.height}")
        if self.bubble_radius <= 0:
            raise ValueError(f"bubble_radius must be positive, got {self.bubble_radius}")
        if self.grid_cols < 2:
            raise ValueError(f"grid_cols must be at least 2, got {self.grid_cols}")
        if self.initial_rows < 0:
            raise ValueError(f"initial_rows must not be negative, got {self.initial_rows}")
        if self.advance_interval_ms <= 0:
            raise ValueError(f"advance_interval_ms must be positive, got {self.advance_interval_ms}")
        if self.min_match_size < 1:
            raise ValueError(f"min_match_size must be at least 1, got {self.min_match_size}")
        if not self.palette:
            raise ValueError("palette must contain at least one color")

    @property
    def diameter(self) -> float:
        return self.bubble_radius * 2

    @property
    def adjacency_threshold(self) -> float:
        """Center distance below which two settled bubbles touch."""
        return self.bubble_radius * self.adjacency_factor

    @property
    def game_over_y(self) -> float:
        """A settled bubble whose y exceeds this ends the game."""
        return self.height - self.diameter

    @property
    def cannon_position(self) -> Tuple[float, float]:
        return self.width / 2, self.height - CANNON_BOTTOM_OFFSET
