"""
Projectile Motion
=================
Moves the in-flight bubble, bounces it off the side walls and snaps it onto
the lattice when it reaches the ceiling or touches a settled bubble.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .bubbles import Bubble
from .config import AIM_PREVIEW_DOTS, AIM_PREVIEW_STEP, GameConfig
from .geometry import GridMapper
from .matching import MatchResolver, MatchResult
from .session import Cannon, GameSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapResult:
    """A projectile that just settled and what it matched."""
    bubble: Bubble
    cell: Tuple[int, int]
    match: MatchResult


def reflect_off_walls(x: float, angle: float, radius: float, width: float) -> float:
    """Mirror the angle horizontally if x is past either side wall."""
    if x < radius or x > width - radius:
        return math.pi - angle
    return angle


def aim_path(
    cannon: Cannon,
    config: GameConfig,
    dots: int = AIM_PREVIEW_DOTS,
    step: float = AIM_PREVIEW_STEP
) -> List[Tuple[float, float]]:
    """
    Preview points along the cannon's current aim.
    Replays the wall reflection without touching any state and stops before
    the first point above the ceiling.
    """
    points: List[Tuple[float, float]] = []
    x, y, angle = cannon.x, cannon.y, cannon.angle
    radius = config.bubble_radius

    for _ in range(dots):
        x += math.cos(angle) * step
        y += math.sin(angle) * step
        angle = reflect_off_walls(x, angle, radius, config.width)
        if y < radius:
            break
        points.append((x, y))

    return points


class ProjectileMotion:
    """Advances the projectile one tick at a time."""

    def __init__(self, config: GameConfig, mapper: GridMapper, resolver: MatchResolver):
        self.config = config
        self.mapper = mapper
        self.resolver = resolver

    def step(self, session: GameSession) -> Optional[SnapResult]:
        """
        Move the in-flight bubble by one tick.
        Returns the snap result if it landed this tick, None otherwise.
        """
        bubble = session.store.in_flight()
        if bubble is None:
            return None

        radius = self.config.bubble_radius
        speed = self.config.projectile_speed
        bubble.x += math.cos(bubble.angle) * speed
        bubble.y += math.sin(bubble.angle) * speed
        bubble.angle = reflect_off_walls(bubble.x, bubble.angle, radius, self.config.width)

        # Ceiling: forced landing even without a neighbor
        if bubble.y < radius:
            return self.snap(session, bubble)

        # First settled bubble in store order wins
        for other in session.store:
            if not other.is_settled:
                continue
            if bubble.distance_to(other) < radius * 2:
                return self.snap(session, bubble)

        return None

    def snap(self, session: GameSession, bubble: Bubble) -> SnapResult:
        """Settle the bubble on the nearest free cell and resolve matches."""
        row, col = self.mapper.nearest_cell(bubble.x, bubble.y)
        x, y = self.mapper.snap_point(row, col)
        # One bubble per cell: drop below an occupied cell
        while session.store.occupant_at(x, y) is not None:
            row += 1
            x, y = self.mapper.snap_point(row, col)

        bubble.settle_at(x, y)
        logger.debug("Snapped %s bubble to cell (%d, %d)", bubble.color.name, row, col)

        match = self.resolver.resolve(session, bubble)

        if y > self.config.game_over_y:
            session.end("bubble landed below the threshold")

        return SnapResult(bubble=bubble, cell=(row, col), match=match)
