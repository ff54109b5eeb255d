"""
Game
====
The shot state machine. Owns one session and the components that act on it,
and exposes the operations the input, render and tick layers call.
"""

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .bubbles import Bubble, BubbleStatus
from .config import BubbleColor, GameConfig
from .geometry import GridMapper
from .matching import MatchResolver
from .motion import ProjectileMotion, SnapResult, aim_path
from .scheduler import RowAdvancementScheduler
from .session import Cannon, GameSession

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game state enumeration."""
    READY = "ready"
    IN_FLIGHT = "in_flight"
    GAME_OVER = "game_over"


# =============================================================================
# RENDER SNAPSHOT
# =============================================================================

@dataclass(frozen=True)
class BubbleView:
    x: float
    y: float
    color: BubbleColor
    status: BubbleStatus


@dataclass(frozen=True)
class CannonView:
    x: float
    y: float
    angle: float
    loaded_color: BubbleColor
    width: int
    height: int


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of everything the renderer draws."""
    bubbles: Tuple[BubbleView, ...]
    cannon: CannonView
    score: int
    game_over: bool
    state: GameState
    aim_path: Tuple[Tuple[float, float], ...]


# =============================================================================
# GAME
# =============================================================================

class Game:
    """Main game controller."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        start_time: Optional[int] = None
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.mapper = GridMapper(self.config)
        self.resolver = MatchResolver(self.config)
        self.motion = ProjectileMotion(self.config, self.mapper, self.resolver)
        self.scheduler = RowAdvancementScheduler(self.config, self.mapper, self.rng)

        x, y = self.config.cannon_position
        self.session = GameSession(cannon=Cannon(x=x, y=y, loaded_color=self.random_color()))
        self._populate_grid()
        self.session.last_advancement = start_time

    @property
    def state(self) -> GameState:
        if self.session.game_over:
            return GameState.GAME_OVER
        if self.session.store.any_in_flight():
            return GameState.IN_FLIGHT
        return GameState.READY

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def cannon(self) -> Cannon:
        return self.session.cannon

    def random_color(self) -> BubbleColor:
        """Uniform draw from the full palette."""
        return self.rng.choice(self.config.palette)

    def _populate_grid(self) -> None:
        """Fill the starting rows with random colors."""
        for row in range(self.config.initial_rows):
            for col in range(self.config.grid_cols):
                x, y = self.mapper.cell_center(row, col)
                self.session.store.add(
                    Bubble(x=x, y=y, color=self.random_color(), status=BubbleStatus.SETTLED)
                )

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def set_aim_angle(self, raw_angle: float) -> None:
        """Aim the cannon. Out-of-range angles are clamped."""
        self.session.cannon.aim(raw_angle)

    def aim_at(self, x: float, y: float) -> None:
        """Aim the cannon toward a pointer position."""
        cannon = self.session.cannon
        self.set_aim_angle(math.atan2(y - cannon.y, x - cannon.x))

    def request_fire(self) -> bool:
        """
        Fire the loaded color along the current aim.
        Ignored unless the game is READY. Returns True if a bubble was fired.
        """
        if self.state is not GameState.READY:
            return False

        cannon = self.session.cannon
        projectile = Bubble(
            x=cannon.x,
            y=cannon.y,
            color=cannon.loaded_color,
            status=BubbleStatus.IN_FLIGHT,
            angle=cannon.angle
        )
        self.session.store.add(projectile)
        cannon.loaded_color = self.random_color()
        logger.debug("Fired %s at %.3f rad", projectile.color.name, projectile.angle)
        return True

    def request_restart(self, now: Optional[int] = None) -> bool:
        """
        Start a new game. Ignored unless the game is over.
        Without now, the advancement timer starts on the next tick.
        Returns True if the game was restarted.
        """
        if self.state is not GameState.GAME_OVER:
            return False

        session = self.session
        session.score = 0
        session.store.clear()
        session.game_over = False
        session.last_advancement = now
        session.cannon.loaded_color = self.random_color()
        self._populate_grid()
        logger.info("Game restarted")
        return True

    # -------------------------------------------------------------------------
    # Tick
    # -------------------------------------------------------------------------

    def advance(self, now: int) -> Optional[SnapResult]:
        """
        Run one tick: row advancement, then projectile motion.
        Does nothing once the game is over.
        Returns the snap result if the projectile landed this tick.
        """
        if self.session.game_over:
            return None

        self.scheduler.tick(self.session, now)
        if self.session.game_over:
            return None

        return self.motion.step(self.session)

    # -------------------------------------------------------------------------
    # Render
    # -------------------------------------------------------------------------

    def aim_path(self) -> List[Tuple[float, float]]:
        return aim_path(self.session.cannon, self.config)

    def snapshot(self) -> GameSnapshot:
        """Immutable view of the session for the renderer."""
        session = self.session
        cannon = session.cannon
        return GameSnapshot(
            bubbles=tuple(
                BubbleView(x=b.x, y=b.y, color=b.color, status=b.status)
                for b in session.store
            ),
            cannon=CannonView(
                x=cannon.x,
                y=cannon.y,
                angle=cannon.angle,
                loaded_color=cannon.loaded_color,
                width=cannon.width,
                height=cannon.height
            ),
            score=session.score,
            game_over=session.game_over,
            state=self.state,
            aim_path=tuple(self.aim_path()) if not session.game_over else ()
        )
