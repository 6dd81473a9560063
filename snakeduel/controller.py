"""
controller.py — Keyboard and clock glue for the duel.

Turns pygame key presses into GameModel commands (steer, pause, restart,
quit) and hands the model each frame's elapsed wall-clock time. Rules live
in the model, drawing in GameView; this module only routes between them.
"""

import logging
import random
import sys
from typing import Optional

import pygame

from .config import WIDTH, HEIGHT, FPS
from .entities import Direction
from .model import GameModel
from .view import GameView

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_a:     Direction.LEFT,
    pygame.K_d:     Direction.RIGHT,
    pygame.K_w:     Direction.UP,
    pygame.K_s:     Direction.DOWN,
}


class GameController:
    """Owns the window and the frame loop for one GameModel."""

    def __init__(self, seed: Optional[int] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Snake Duel — Player vs AI")
        self.clock = pygame.time.Clock()
        self.model = GameModel(rng=random.Random(seed))
        self.view  = GameView(self.screen)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        while True:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self.model.update(dt)
            self.view.render(self.model.snapshot())

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def handle_key(self, key: int) -> None:
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self._quit()

        if self.model.running:
            self._handle_playing_keys(key)
        else:
            self._handle_over_keys(key)

    # ── Per-state key handlers ────────────────────────────────────
    def _handle_playing_keys(self, key: int) -> None:
        if key in DIRECTION_KEYS and not self.model.paused:
            self.model.set_player_direction(DIRECTION_KEYS[key])
        elif key == pygame.K_p:
            self.model.toggle_pause()
        elif key == pygame.K_r:
            self.model.reset()

    def _handle_over_keys(self, key: int) -> None:
        if key in (pygame.K_r, pygame.K_SPACE, pygame.K_RETURN):
            self.model.reset()

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        logger.info("quitting")
        pygame.quit()
        sys.exit()
