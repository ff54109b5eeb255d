"""
Bubble Shooter
==============
pygame front end: draws the game snapshot, turns mouse and keyboard events
into game input and drives the tick loop.

Requirements:
    pip install pygame

Run:
    python -m bubble_shooter

Controls:
    - Move the mouse to aim
    - Click to fire (or to restart after game over)
    - Press 'R' to restart after game over
    - Press 'Q' to quit
"""

import argparse
import logging
import math
import random
from typing import Dict, List, Optional, Tuple

import pygame

from .config import (
    BG_COLOR,
    CANNON_COLOR,
    GAME_OVER_COLOR,
    OVERLAY_COLOR,
    TARGET_FPS,
    TEXT_COLOR,
    GameConfig,
)
from .game import Game, GameSnapshot, GameState

logger = logging.getLogger(__name__)

AIM_DOT_RADIUS = 4
AIM_DOT_ALPHA = 128
BARREL_LENGTH = 40
BARREL_WIDTH = 8
INDICATOR_RADIUS = 15
PREVIEW_DISTANCE = 60


# =============================================================================
# RENDERER
# =============================================================================

class Renderer:
    """Handles all game rendering."""

    def __init__(self, screen: pygame.Surface, config: GameConfig):
        self.screen = screen
        self.config = config
        self.fonts = self._load_fonts()

    def _load_fonts(self) -> Dict[str, pygame.font.Font]:
        """Load fonts for rendering."""
        pygame.font.init()
        return {
            'title': pygame.font.Font(None, 64),
            'medium': pygame.font.Font(None, 32),
        }

    def _draw_ball(
        self,
        center: Tuple[float, float],
        color: Tuple[int, int, int],
        radius: int
    ) -> None:
        """Draw a shaded ball with a small highlight."""
        cx, cy = int(center[0]), int(center[1])

        # Lighten toward the middle for a simple 3D effect
        for i in range(radius, 0, -1):
            ratio = i / radius
            r = min(255, int(color[0] + (255 - color[0]) * (1 - ratio) * 0.5))
            g = min(255, int(color[1] + (255 - color[1]) * (1 - ratio) * 0.5))
            b = min(255, int(color[2] + (255 - color[2]) * (1 - ratio) * 0.5))
            pygame.draw.circle(self.screen, (r, g, b), (cx, cy), i)

        highlight_offset = radius // 3
        highlight_radius = max(1, radius // 6)
        pygame.draw.circle(
            self.screen,
            (255, 255, 255),
            (cx - highlight_offset, cy - highlight_offset),
            highlight_radius
        )

    def draw_bubbles(self, snapshot: GameSnapshot) -> None:
        radius = int(self.config.bubble_radius)
        for bubble in snapshot.bubbles:
            self._draw_ball((bubble.x, bubble.y), bubble.color.rgb, radius)

    def draw_aim_path(self, snapshot: GameSnapshot) -> None:
        """Draw the translucent aiming dots."""
        if not snapshot.aim_path:
            return
        color = snapshot.cannon.loaded_color.rgb
        size = AIM_DOT_RADIUS * 2
        dot = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(dot, (*color, AIM_DOT_ALPHA), (AIM_DOT_RADIUS, AIM_DOT_RADIUS), AIM_DOT_RADIUS)
        for x, y in snapshot.aim_path:
            self.screen.blit(dot, (int(x) - AIM_DOT_RADIUS, int(y) - AIM_DOT_RADIUS))

    def draw_cannon(self, snapshot: GameSnapshot) -> None:
        """Draw the cannon base, the barrel and the loaded color."""
        cannon = snapshot.cannon
        color = cannon.loaded_color.rgb

        base = pygame.Rect(0, 0, cannon.width, cannon.height)
        base.center = (int(cannon.x), int(cannon.y))
        pygame.draw.rect(self.screen, CANNON_COLOR, base)

        barrel_end = (
            cannon.x + math.cos(cannon.angle) * BARREL_LENGTH,
            cannon.y + math.sin(cannon.angle) * BARREL_LENGTH
        )
        pygame.draw.line(self.screen, color, (cannon.x, cannon.y), barrel_end, BARREL_WIDTH)

        # Loaded color below the cannon and at the end of the aim
        self._draw_ball((cannon.x, cannon.y + 30), color, INDICATOR_RADIUS)
        self._draw_ball(
            (
                cannon.x + math.cos(cannon.angle) * PREVIEW_DISTANCE,
                cannon.y + math.sin(cannon.angle) * PREVIEW_DISTANCE
            ),
            color,
            INDICATOR_RADIUS
        )

    def draw_score(self, score: int) -> None:
        label = self.fonts['medium'].render(f"Score: {score}", True, TEXT_COLOR)
        self.screen.blit(label, (10, self.config.height - 35))

    def draw_game_over(self, score: int) -> None:
        """Draw the game over overlay."""
        width, height = self.config.width, self.config.height
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        self.screen.blit(overlay, (0, 0))

        lines = [
            (self.fonts['title'], "GAME OVER", 0),
            (self.fonts['medium'], f"Final Score: {score}", 45),
            (self.fonts['medium'], "Click to restart", 85),
        ]
        for font, text, offset in lines:
            surface = font.render(text, True, GAME_OVER_COLOR)
            rect = surface.get_rect(center=(width // 2, height // 2 + offset))
            self.screen.blit(surface, rect)

    def draw(self, snapshot: GameSnapshot) -> None:
        """Render the current game state."""
        self.screen.fill(BG_COLOR)
        if snapshot.game_over:
            self.draw_game_over(snapshot.score)
            return
        self.draw_bubbles(snapshot)
        self.draw_aim_path(snapshot)
        self.draw_cannon(snapshot)
        self.draw_score(snapshot.score)


# =============================================================================
# INPUT HANDLER
# =============================================================================

class InputHandler:
    """Translates pygame events into game input. Returns False on quit."""

    def __init__(self, game: Game):
        self.game = game

    def handle(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_q:
                return False
            if event.key == pygame.K_r:
                self.game.request_restart(pygame.time.get_ticks())

        elif event.type == pygame.MOUSEMOTION:
            if self.game.state is not GameState.GAME_OVER:
                self.game.aim_at(*event.pos)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not self.game.request_restart(pygame.time.get_ticks()):
                self.game.request_fire()

        return True


# =============================================================================
# APP
# =============================================================================

class App:
    """Owns the window and runs the frame loop."""

    def __init__(self, game: Game, fps: int = TARGET_FPS):
        pygame.init()
        pygame.display.set_caption("Bubble Shooter")

        self.game = game
        self.fps = fps
        self.screen = pygame.display.set_mode((game.config.width, game.config.height))
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen, game.config)
        self.input_handler = InputHandler(game)
        self.running = True

    def handle_events(self) -> None:
        """Process all pending events."""
        for event in pygame.event.get():
            if not self.input_handler.handle(event):
                self.running = False

    def run(self) -> None:
        """Main game loop."""
        while self.running:
            self.handle_events()
            self.game.advance(pygame.time.get_ticks())
            self.renderer.draw(self.game.snapshot())
            pygame.display.flip()
            self.clock.tick(self.fps)

        pygame.quit()


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bubble shooter arcade game")
    parser.add_argument('--seed', type=int, default=None, help='Seed for bubble colors')
    parser.add_argument('--fps', type=int, default=TARGET_FPS, help='Frames per second')
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity'
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s"
    )

    print("="*50)
    print("BUBBLE SHOOTER")
    print("="*50)
    print("\nControls:")
    print("  - Move the mouse to aim")
    print("  - Click to fire")
    print("  - Press 'R' or click to restart after game over")
    print("  - Press 'Q' to quit")
    print("\nGoal: Connect 3+ bubbles of the same color to clear them!")
    print("="*50)

    game = Game(rng=random.Random(args.seed))
    logger.info("Starting game (seed=%s)", args.seed)
    App(game, fps=args.fps).run()


if __name__ == "__main__":
    main()
