"""
Bubbles
=======
The bubble entity and the store that owns every bubble in a session.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Set

from .config import AIM_ANGLE_DEFAULT, BubbleColor


class BubbleStatus(Enum):
    """Lifecycle status of a bubble."""
    IN_FLIGHT = "in_flight"
    SETTLED = "settled"


@dataclass(eq=False)
class Bubble:
    """A colored disc on the playfield. Compared by identity."""
    x: float
    y: float
    color: BubbleColor
    status: BubbleStatus = BubbleStatus.SETTLED
    angle: float = AIM_ANGLE_DEFAULT  # Travel direction while in flight

    @property
    def is_settled(self) -> bool:
        return self.status is BubbleStatus.SETTLED

    @property
    def is_in_flight(self) -> bool:
        return self.status is BubbleStatus.IN_FLIGHT

    def distance_to(self, other: 'Bubble') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def settle_at(self, x: float, y: float) -> None:
        """Move to (x, y) and stop moving."""
        self.x = x
        self.y = y
        self.status = BubbleStatus.SETTLED


class BubbleStore:
    """
    Insertion-ordered collection of bubbles.

    Backed by a dict used as an ordered set, so add and remove are O(1) and
    iteration order is insertion order. Iterating yields from a snapshot, so
    bubbles may be removed while a scan is in progress.
    """

    def __init__(self):
        self._bubbles: Dict[Bubble, None] = {}

    def __len__(self) -> int:
        return len(self._bubbles)

    def __contains__(self, bubble: Bubble) -> bool:
        return bubble in self._bubbles

    def __iter__(self) -> Iterator[Bubble]:
        return iter(list(self._bubbles))

    def add(self, bubble: Bubble) -> None:
        self._bubbles[bubble] = None

    def remove(self, bubble: Bubble) -> bool:
        """Remove a bubble. Returns False if it was already gone."""
        if bubble not in self._bubbles:
            return False
        del self._bubbles[bubble]
        return True

    def clear(self) -> None:
        self._bubbles.clear()

    def settled(self) -> List[Bubble]:
        return [b for b in self._bubbles if b.is_settled]

    def in_flight(self) -> Optional[Bubble]:
        """The bubble currently in flight, if any."""
        for bubble in self._bubbles:
            if bubble.is_in_flight:
                return bubble
        return None

    def any_in_flight(self) -> bool:
        return self.in_flight() is not None

    def settled_colors_present(self) -> Set[BubbleColor]:
        """Colors of the settled bubbles currently on the board."""
        return {b.color for b in self._bubbles if b.is_settled}

    def neighbors_within(self, bubble: Bubble, threshold: float) -> List[Bubble]:
        """Other settled bubbles whose centers are closer than threshold."""
        return [
            other for other in self._bubbles
            if other is not bubble
            and other.is_settled
            and bubble.distance_to(other) < threshold
        ]

    def occupant_at(self, x: float, y: float, tolerance: float = 1e-6) -> Optional[Bubble]:
        """The settled bubble centered at (x, y), if any."""
        for other in self._bubbles:
            if other.is_settled and abs(other.x - x) <= tolerance and abs(other.y - y) <= tolerance:
                return other
        return None
