"""
Row Advancement
===============
Time-driven descent of the settled grid.
"""

import logging
import random
from typing import List, Sequence

from .bubbles import Bubble, BubbleStatus
from .config import BubbleColor, GameConfig
from .geometry import GridMapper
from .session import GameSession

logger = logging.getLogger(__name__)


class RowAdvancementScheduler:
    """Shifts the grid down one row and adds a new top row every interval."""

    def __init__(self, config: GameConfig, mapper: GridMapper, rng: random.Random):
        self.config = config
        self.mapper = mapper
        self.rng = rng

    def is_due(self, session: GameSession, now: int) -> bool:
        if session.last_advancement is None:
            return False
        return now - session.last_advancement >= self.config.advance_interval_ms

    def tick(self, session: GameSession, now: int) -> bool:
        """
        Advance the grid if the interval has elapsed.
        The first tick of a session only starts the timer.
        Returns True if the grid moved.
        """
        if session.last_advancement is None:
            session.last_advancement = now
            return False
        if not self.is_due(session, now):
            return False

        self.advance(session)
        session.last_advancement = now
        return True

    def advance(self, session: GameSession) -> List[Bubble]:
        """Shift every settled bubble down one row and add a new top row."""
        step = self.mapper.row_spacing
        for bubble in session.store.settled():
            bubble.y += step
            if bubble.y > self.config.game_over_y:
                session.end("grid reached the bottom")

        new_row = self.build_top_row(session)
        logger.debug("Grid advanced, %d bubbles on the board", len(session.store))
        return new_row

    def build_top_row(self, session: GameSession) -> List[Bubble]:
        """Add a full row just above the grid start, continuing the stagger."""
        colors = self.row_colors(session)
        row_count = max(
            [0] + [self.mapper.row_index(b.y) + 1 for b in session.store.settled()]
        )
        staggered = row_count % 2 == 1
        y = self.config.grid_start_y - self.mapper.row_spacing

        new_row = []
        for col in range(self.config.grid_cols):
            bubble = Bubble(
                x=self.mapper.column_x(col, staggered),
                y=y,
                color=self.rng.choice(colors),
                status=BubbleStatus.SETTLED
            )
            session.store.add(bubble)
            new_row.append(bubble)
        return new_row

    def row_colors(self, session: GameSession) -> Sequence[BubbleColor]:
        """Colors still on the board, or the full palette if it is empty."""
        present = session.store.settled_colors_present()
        if not present:
            return self.config.palette
        # Palette order keeps seeded draws reproducible
        return [c for c in self.config.palette if c in present] or sorted(present, key=lambda c: c.name)
