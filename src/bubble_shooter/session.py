"""
Game Session
============
Per-session mutable state: the bubble store, the cannon, the score and the
game-over flag. Components receive the session explicitly.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from .bubbles import BubbleStore
from .config import (
    AIM_ANGLE_DEFAULT,
    AIM_ANGLE_MAX,
    AIM_ANGLE_MIN,
    CANNON_HEIGHT,
    CANNON_WIDTH,
    BubbleColor,
)

logger = logging.getLogger(__name__)


def clamp_aim_angle(angle: float) -> float:
    """Clamp an angle to the upward arc [AIM_ANGLE_MIN, AIM_ANGLE_MAX]."""
    if math.isnan(angle):
        return AIM_ANGLE_MAX
    return max(AIM_ANGLE_MIN, min(AIM_ANGLE_MAX, angle))


@dataclass
class Cannon:
    """The shooter at the bottom of the playfield."""
    x: float
    y: float
    loaded_color: BubbleColor
    angle: float = AIM_ANGLE_DEFAULT
    width: int = CANNON_WIDTH
    height: int = CANNON_HEIGHT

    def aim(self, raw_angle: float) -> None:
        self.angle = clamp_aim_angle(raw_angle)


@dataclass
class GameSession:
    """Everything that changes while a game is played."""
    cannon: Cannon
    store: BubbleStore = field(default_factory=BubbleStore)
    score: int = 0
    game_over: bool = False
    last_advancement: Optional[int] = None  # ms; None until the first tick

    def add_points(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"score can only grow, got {points} points")
        self.score += points

    def end(self, reason: str) -> None:
        """Set the game-over flag. Only a restart clears it."""
        if self.game_over:
            return
        self.game_over = True
        logger.info("Game over (%s), final score %d", reason, self.score)
