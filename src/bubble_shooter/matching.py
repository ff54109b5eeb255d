"""
Match Resolver
==============
Connected-component search over settled bubbles of the same color.
"""

import logging
from dataclasses import dataclass
from typing import List, Set, Tuple

from .bubbles import Bubble, BubbleStore
from .config import GameConfig
from .session import GameSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one resolution pass."""
    component: Tuple[Bubble, ...]
    removed: bool
    points: int = 0

    @property
    def size(self) -> int:
        return len(self.component)


class MatchResolver:
    """Finds and clears groups of touching same-colored bubbles."""

    def __init__(self, config: GameConfig):
        self.config = config

    @staticmethod
    def find_component(
        store: BubbleStore,
        seed: Bubble,
        threshold: float
    ) -> List[Bubble]:
        """
        Find the settled bubbles connected to seed through same-colored
        neighbors closer than threshold.
        Uses depth-first search with an explicit stack. The visited set lives
        only for this call, bubbles themselves are not marked.
        Returns the component in visiting order, seed first.
        """
        component: List[Bubble] = []
        visited: Set[Bubble] = set()
        stack = [seed]

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            component.append(current)

            for neighbor in store.neighbors_within(current, threshold):
                if neighbor in visited:
                    continue
                if neighbor.color is not current.color:
                    continue
                stack.append(neighbor)

        return component

    def resolve(self, session: GameSession, seed: Bubble) -> MatchResult:
        """
        Clear the seed's component if it is large enough.
        Members are collected first and removed once the search is done.
        Returns the match result (points are 0 when nothing was removed).
        """
        component = self.find_component(
            session.store, seed, self.config.adjacency_threshold
        )

        if len(component) < self.config.min_match_size:
            return MatchResult(component=tuple(component), removed=False)

        for bubble in component:
            session.store.remove(bubble)

        points = len(component) * self.config.points_per_bubble
        session.add_points(points)
        logger.debug(
            "Cleared %d %s bubbles for %d points",
            len(component), seed.color.name, points
        )
        return MatchResult(component=tuple(component), removed=True, points=points)
