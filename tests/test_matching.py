"""
Tests for the match resolver: component search, threshold and scoring.
"""

import unittest

from bubble_shooter.bubbles import Bubble, BubbleStatus
from bubble_shooter.config import BubbleColor, GameConfig
from bubble_shooter.matching import MatchResolver
from bubble_shooter.session import Cannon, GameSession

PINK = BubbleColor.HOT_PINK
BLUE = BubbleColor.ROYAL_BLUE


def make_session() -> GameSession:
    return GameSession(cannon=Cannon(x=400, y=550, loaded_color=PINK))


def place(session: GameSession, x: float, y: float, color: BubbleColor) -> Bubble:
    bubble = Bubble(x=x, y=y, color=color, status=BubbleStatus.SETTLED)
    session.store.add(bubble)
    return bubble


class TestFindComponent(unittest.TestCase):
    """Tests for the connected-component search."""

    def setUp(self):
        self.session = make_session()
        self.threshold = GameConfig().adjacency_threshold

    def test_transitive_chain(self):
        """Bubbles join through intermediate neighbors."""
        chain = [place(self.session, 36 * i, 72, PINK) for i in range(5)]
        component = MatchResolver.find_component(self.session.store, chain[0], self.threshold)
        self.assertEqual(set(component), set(chain))
        self.assertIs(component[0], chain[0])

    def test_other_colors_block(self):
        a = place(self.session, 0, 72, PINK)
        place(self.session, 36, 72, BLUE)
        place(self.session, 72, 72, PINK)
        component = MatchResolver.find_component(self.session.store, a, self.threshold)
        self.assertEqual(component, [a])

    def test_distance_outside_threshold(self):
        """Staggered neighbors one radius apart horizontally do not touch."""
        a = place(self.session, 18, 30, PINK)
        place(self.session, 36, 66, PINK)
        component = MatchResolver.find_component(self.session.store, a, self.threshold)
        self.assertEqual(component, [a])

    def test_in_flight_bubbles_ignored(self):
        a = place(self.session, 0, 72, PINK)
        self.session.store.add(
            Bubble(x=36, y=72, color=PINK, status=BubbleStatus.IN_FLIGHT)
        )
        component = MatchResolver.find_component(self.session.store, a, self.threshold)
        self.assertEqual(component, [a])

    def test_cycle_visits_each_once(self):
        """A closed loop of bubbles does not duplicate members."""
        square = [
            place(self.session, 0, 0, PINK),
            place(self.session, 36, 0, PINK),
            place(self.session, 0, 36, PINK),
            place(self.session, 36, 36, PINK),
        ]
        component = MatchResolver.find_component(self.session.store, square[0], self.threshold)
        self.assertEqual(len(component), 4)
        self.assertEqual(set(component), set(square))


class TestResolve(unittest.TestCase):
    """Tests for removal and scoring."""

    def setUp(self):
        self.session = make_session()
        self.resolver = MatchResolver(GameConfig())

    def test_pair_is_kept(self):
        """A group of exactly 2 is never removed."""
        a = place(self.session, 0, 72, PINK)
        b = place(self.session, 36, 72, PINK)
        result = self.resolver.resolve(self.session, a)

        self.assertFalse(result.removed)
        self.assertEqual(result.size, 2)
        self.assertEqual(result.points, 0)
        self.assertIn(a, self.session.store)
        self.assertIn(b, self.session.store)
        self.assertEqual(self.session.score, 0)

    def test_three_are_removed(self):
        group = [place(self.session, 36 * i, 72, PINK) for i in range(3)]
        bystander = place(self.session, 36 * 3, 72, BLUE)
        result = self.resolver.resolve(self.session, group[1])

        self.assertTrue(result.removed)
        self.assertEqual(result.points, 30)
        self.assertEqual(self.session.score, 30)
        for bubble in group:
            self.assertNotIn(bubble, self.session.store)
        self.assertIn(bystander, self.session.store)

    def test_score_is_ten_per_bubble(self):
        """Score grows by exactly 10 x component size."""
        for size in (3, 4, 7):
            with self.subTest(size=size):
                session = make_session()
                session.score = 100
                group = [place(session, 36 * i, 144, PINK) for i in range(size)]
                self.resolver.resolve(session, group[-1])
                self.assertEqual(session.score, 100 + 10 * size)
                self.assertEqual(len(session.store), 0)

    def test_custom_scoring(self):
        resolver = MatchResolver(GameConfig(min_match_size=2, points_per_bubble=5))
        a = place(self.session, 0, 72, PINK)
        place(self.session, 36, 72, PINK)
        result = resolver.resolve(self.session, a)
        self.assertTrue(result.removed)
        self.assertEqual(self.session.score, 10)


if __name__ == '__main__':
    unittest.main(verbosity=2)
