"""
model.py — Model layer.

Owns the simulation loop. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    EffectView, PowerUpView, HazardView, Snapshot — read-only state for the view
    GameResult  — final outcome of a game
    GameModel   — top-level model; owns one SimulationState and ticks it

Per tick, in order:
    AI decision -> movement -> magnet pull -> collisions
    -> hazard contact -> power-up collection -> effect countdown
    -> clock advance and due timers
A boosted player's extra cells each get their own collision and pickup
pass before the final move.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from .ai_brain import compute_direction
from .collisions import check_collisions
from .config import (
    FOOD_POINTS, FLASH_DECAY,
    POWERUP_LIFETIME_MS, POWERUP_BLINK_MS,
)
from .entities import Direction, Snake
from .grid import Cell
from .hazard import check_hazard_contact, start_hazard_timer
from .powerups import (
    ai_frozen, apply_magnet, collect_power_up, player_blinded,
    start_spawn_timer, tick_effects,
)
from .state import SimulationState

logger = logging.getLogger(__name__)


# ─────────────────────────── Snapshot ────────────────────────────
@dataclass(frozen=True)
class EffectView:
    kind: str
    seconds_remaining: float


@dataclass(frozen=True)
class PowerUpView:
    cell: Cell
    kind: str
    fade: float        # 1.0 fresh, 0.0 about to vanish
    blinking: bool


@dataclass(frozen=True)
class HazardView:
    cell: Cell
    active: bool


@dataclass(frozen=True)
class Snapshot:
    player: tuple[Cell, ...]
    ai: tuple[Cell, ...]
    player_dir: Direction
    ai_dir: Direction
    food: Cell
    power_up: Optional[PowerUpView]
    hazard: Optional[HazardView]
    player_effect: Optional[EffectView]
    ai_effect: Optional[EffectView]
    player_blinded: bool
    player_boosted: bool
    flash: float
    notices: tuple[tuple[str, str], ...]
    player_score: int
    ai_score: int
    high_score: int
    speed: float
    tick: int
    running: bool
    paused: bool
    winner: Optional[str]


@dataclass(frozen=True)
class GameResult:
    winner: Optional[str]
    player_score: int
    ai_score: int
    high_score: int


# ─────────────────────────── Movement ────────────────────────────
def move_snake(state: SimulationState, snake: Snake) -> bool:
    """
    Advance one cell. Eating keeps the tail (net growth), anything else
    translates the snake. Returns True if the snake ate.
    """
    new_head = snake.step()
    if new_head is None:
        return False

    if new_head == state.food:
        state.award_points(snake, FOOD_POINTS)
        state.respawn_food()
        return True

    snake.pop_tail()
    return False


def player_steps(state: SimulationState) -> int:
    """Bump the player's move counter and return how many cells it owes."""
    player = state.player
    player.move_counter += 1
    steps = 0
    while player.move_counter >= player.move_threshold:
        player.move_counter -= player.move_threshold
        steps += 1
    return steps


def advance_player(state: SimulationState) -> int:
    """Rate-gated player movement. Returns how many cells it moved."""
    steps = player_steps(state)
    for _ in range(steps):
        move_snake(state, state.player)
    return steps


def _effect_view(snake: Snake) -> Optional[EffectView]:
    if snake.effect is None:
        return None
    return EffectView(snake.effect.kind.value, snake.effect.seconds_remaining)


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model. Owns all game state.
    The controller calls update() once per frame; update() calls tick()
    once per period of 1000 / speed ms.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        request_next_tick: Optional[Callable[[float], None]] = None,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.request_next_tick = request_next_tick
        self.paused: bool = False
        self.step_timer: float = 0.0
        self.state: SimulationState = None
        self.reset()

    # ── Public API ───────────────────────────────────────────────
    @property
    def player(self) -> Snake:
        return self.state.player

    @property
    def ai(self) -> Snake:
        return self.state.ai

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def high_score(self) -> int:
        return self.state.high_score

    def reset(self) -> None:
        """Start a fresh game; only the high score carries over."""
        high_score = self.state.high_score if self.state is not None else 0
        if self.state is not None:
            self.state.events.clear()
        self.state = SimulationState(self.rng, high_score)
        start_spawn_timer(self.state)
        start_hazard_timer(self.state)
        self.paused = False
        self.step_timer = 0.0
        logger.info("new game, high score %d", high_score)
        if self.request_next_tick is not None:
            self.request_next_tick(self.state.period_ms)

    def set_player_direction(self, direction: Direction) -> bool:
        if not self.state.running:
            return False
        return self.state.player.request_direction(direction)

    def toggle_pause(self) -> None:
        if self.state.running:
            self.paused = not self.paused

    def update(self, dt: float) -> None:
        """Advance game logic by dt wall-clock seconds."""
        if self.paused or not self.state.running:
            return
        self.step_timer += dt
        while self.state.running and self.step_timer >= self.state.period_ms / 1000.0:
            self.step_timer -= self.state.period_ms / 1000.0
            self.tick()

    def tick(self) -> Optional[GameResult]:
        """
        Run one discrete simulation step.
        Returns the GameResult if this tick ended the game.
        """
        s = self.state
        if not s.running:
            return None
        period = s.period_ms

        ai_is_frozen = ai_frozen(s)
        if s.ai.alive and not ai_is_frozen:
            choice = compute_direction(s)
            if choice is not None:
                s.ai.request_direction(choice)

        # Every cell of a boosted move but the last gets its own contact pass.
        steps = player_steps(s)
        for _ in range(steps - 1):
            move_snake(s, s.player)
            result = self._resolve_contacts()
            if result is not None:
                return result

        if steps:
            move_snake(s, s.player)
        if not ai_is_frozen:
            move_snake(s, s.ai)

        apply_magnet(s)

        result = self._resolve_contacts()
        if result is not None:
            return result

        tick_effects(s, period)
        self._decay_indicators()

        s.now_ms += period
        s.events.run_due(s.now_ms)

        if s.power_up is not None and s.food == s.power_up.cell:
            s.respawn_food()

        s.tick_count += 1
        if self.request_next_tick is not None:
            self.request_next_tick(s.period_ms)
        return None

    def result(self) -> GameResult:
        s = self.state
        return GameResult(s.winner, s.player.score, s.ai.score, s.high_score)

    def snapshot(self) -> Snapshot:
        s = self.state
        power_up = None
        if s.power_up is not None:
            left = POWERUP_LIFETIME_MS - s.power_up.age_ms(s.now_ms)
            power_up = PowerUpView(
                s.power_up.cell,
                s.power_up.kind.value,
                max(0.0, min(1.0, left / POWERUP_LIFETIME_MS)),
                left <= POWERUP_BLINK_MS,
            )
        hazard = None
        if s.hazard is not None:
            hazard = HazardView(s.hazard.cell, s.hazard.active)

        return Snapshot(
            player=tuple(s.player.body),
            ai=tuple(s.ai.body),
            player_dir=s.player.dir,
            ai_dir=s.ai.dir,
            food=s.food,
            power_up=power_up,
            hazard=hazard,
            player_effect=_effect_view(s.player),
            ai_effect=_effect_view(s.ai),
            player_blinded=player_blinded(s),
            player_boosted=s.player.speed_boost,
            flash=s.flash,
            notices=tuple((n.agent, n.text) for n in s.notices),
            player_score=s.player.score,
            ai_score=s.ai.score,
            high_score=s.high_score,
            speed=s.speed,
            tick=s.tick_count,
            running=s.running,
            paused=self.paused,
            winner=s.winner,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _decay_indicators(self) -> None:
        s = self.state
        for notice in s.notices:
            notice.remaining_ticks -= 1
        s.notices = [n for n in s.notices if n.remaining_ticks > 0]
        s.flash = max(0.0, s.flash - FLASH_DECAY)

    def _resolve_contacts(self) -> Optional[GameResult]:
        """Collisions first; survivors then touch the hazard and the power-up."""
        s = self.state
        winner = check_collisions(s)
        if winner is not None:
            return self._game_over(winner)
        check_hazard_contact(s)
        collect_power_up(s)
        return None

    def _game_over(self, winner: str) -> GameResult:
        s = self.state
        s.running = False
        s.winner = winner
        s.events.clear()
        self.paused = False
        logger.info("game over: %s wins (%d vs %d)", winner, s.player.score, s.ai.score)
        return self.result()
