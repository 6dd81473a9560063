"""
state.py — The single owned SimulationState.

Every transition function in the package takes this object explicitly;
there is no module-level game state anywhere.
"""

import logging
import random
from typing import Optional

from .config import (
    PLAYER, AI, PLAYER_START, AI_START,
    BASE_SPEED, MAX_SPEED, SPEED_INCREMENT, SPEED_SCORE_STEP,
    NOTICE_TICKS,
)
from .entities import Snake, PowerUp, Hazard, TransientNotice
from .grid import Cell, random_free_cell, free_cells
from .scheduler import EventQueue

logger = logging.getLogger(__name__)


class SimulationState:
    """Everything one game needs: snakes, pickups, clock, timers, rng."""

    def __init__(self, rng: Optional[random.Random] = None, high_score: int = 0):
        self.rng = rng if rng is not None else random.Random()
        self.player = Snake(PLAYER, *PLAYER_START)
        self.ai = Snake(AI, *AI_START)
        self.power_up: Optional[PowerUp] = None
        self.hazard: Optional[Hazard] = None
        self.events = EventQueue()
        self.now_ms: float = 0.0
        self.tick_count: int = 0
        self.speed: float = BASE_SPEED
        self.speed_level: int = 0
        self.high_score: int = high_score
        self.notices: list[TransientNotice] = []
        self.flash: float = 0.0
        self.running: bool = True
        self.winner: Optional[str] = None
        self.food: Cell = (0, 0)
        self.respawn_food()

    # ── Lookups ──────────────────────────────────────────────────
    def snake(self, agent: str) -> Snake:
        return self.player if agent == PLAYER else self.ai

    def opponent(self, snake: Snake) -> Snake:
        return self.ai if snake is self.player else self.player

    @property
    def period_ms(self) -> float:
        return 1000.0 / self.speed

    @property
    def combined_score(self) -> int:
        return self.player.score + self.ai.score

    def occupied_cells(self, food: bool = True, power_up: bool = True,
                       hazard: bool = True) -> set[Cell]:
        cells = set(self.player.body) | set(self.ai.body)
        if food:
            cells.add(self.food)
        if power_up and self.power_up is not None:
            cells.add(self.power_up.cell)
        if hazard and self.hazard is not None:
            cells.add(self.hazard.cell)
        return cells

    # ── Mutations shared by several subsystems ───────────────────
    def respawn_food(self) -> None:
        occupied = self.occupied_cells(food=False)
        cell = random_free_cell(self.rng, occupied)
        if cell is None:
            remaining = free_cells(occupied)
            if not remaining:
                logger.debug("board full, food stays at %s", self.food)
                return
            cell = self.rng.choice(remaining)
        self.food = cell

    def award_points(self, snake: Snake, points: int) -> None:
        """Add to a snake's score, then update high score and speed."""
        snake.score += points
        if snake.score > self.high_score:
            self.high_score = snake.score

        level = self.combined_score // SPEED_SCORE_STEP
        if level > self.speed_level:
            steps = level - self.speed_level
            self.speed = min(MAX_SPEED, self.speed + SPEED_INCREMENT * steps)
            self.speed_level = level
            logger.debug("speed now %.1f", self.speed)

    def post_notice(self, agent: str, text: str, ticks: int = NOTICE_TICKS) -> None:
        # One indicator per agent; the newest replaces the old one.
        self.notices = [n for n in self.notices if n.agent != agent]
        self.notices.append(TransientNotice(agent, text, ticks))
