"""
powerups.py — Power-up lifecycle and effects.

    absent -> spawning -> active -> {collected | expired} -> absent

Spawning and expiry run off ScheduledEvents in the state's queue. Effects
live in each snake's single effect slot and count down by the tick period.
What an effect does depends on who collected it, see apply_effect().
"""

import logging
from typing import Callable, Optional

from .config import (
    PLAYER, AI,
    POWERUP_LIFETIME_MS, POWERUP_SPAWN_INTERVAL_MS, POWERUP_RESPAWN_DELAY_MS,
    EFFECT_DURATIONS_MS, NORMAL_MOVE_THRESHOLD, SPEED_MOVE_THRESHOLD,
    FREEZE_COUNTER_OFFSET, SHRINK_MIN_LENGTH, SHRINK_ATTACK_THRESHOLD,
    SHRINK_ATTACK_AMOUNT, GROWTH_SEGMENTS, GROWTH_BONUS,
)
from .entities import ActiveEffect, PowerUp, PowerUpKind, Snake, SPAWNABLE_KINDS
from .grid import Cell, clamp, random_free_cell
from .state import SimulationState

logger = logging.getLogger(__name__)


# ── Queries ───────────────────────────────────────────────────────
def has_effect(snake: Snake, kind: PowerUpKind) -> bool:
    return snake.effect is not None and snake.effect.kind is kind


def ai_frozen(state: SimulationState) -> bool:
    return has_effect(state.player, PowerUpKind.FREEZE)


def player_blinded(state: SimulationState) -> bool:
    return has_effect(state.ai, PowerUpKind.BLACKOUT)


# ── Spawning ──────────────────────────────────────────────────────
def start_spawn_timer(state: SimulationState) -> None:
    """Begin the periodic spawn attempts."""
    due = state.now_ms + POWERUP_SPAWN_INTERVAL_MS
    state.events.schedule(due, "powerup_spawn", _periodic_spawn, state, due)


def _periodic_spawn(state: SimulationState, due_ms: float) -> None:
    if state.power_up is None:
        spawn_power_up(state)
    due = due_ms + POWERUP_SPAWN_INTERVAL_MS
    state.events.schedule(due, "powerup_spawn", _periodic_spawn, state, due)


def spawn_power_up(state: SimulationState,
                   kind: Optional[PowerUpKind] = None) -> Optional[PowerUp]:
    """
    Place a power-up on a free cell if none is active.
    Gives up quietly when rejection sampling runs out of attempts.
    """
    if state.power_up is not None:
        return None
    cell = random_free_cell(state.rng, state.occupied_cells())
    if cell is None:
        logger.debug("power-up spawn skipped, no free cell found")
        return None
    if kind is None:
        kind = state.rng.choice(SPAWNABLE_KINDS)
    return place_power_up(state, cell, kind)


def place_power_up(state: SimulationState, cell: Cell, kind: PowerUpKind) -> PowerUp:
    """Put a power-up at `cell`, replacing any current one."""
    power_up = PowerUp(cell, kind, state.now_ms)
    state.power_up = power_up
    state.events.schedule(
        state.now_ms + POWERUP_LIFETIME_MS, "powerup_expire",
        expire_power_up, state, power_up,
    )
    logger.debug("spawned %s at %s", kind.value, cell)
    return power_up


def expire_power_up(state: SimulationState, power_up: PowerUp) -> None:
    if state.power_up is not power_up:
        return
    logger.debug("%s expired", power_up.kind.value)
    state.power_up = None
    schedule_respawn(state)


def schedule_respawn(state: SimulationState) -> None:
    state.events.schedule(
        state.now_ms + POWERUP_RESPAWN_DELAY_MS, "powerup_respawn",
        spawn_power_up, state,
    )


# ── Collection ────────────────────────────────────────────────────
def collect_power_up(state: SimulationState) -> Optional[str]:
    """
    Let a head on the power-up cell collect it, player first.
    Returns the collector's name, or None.
    """
    power_up = state.power_up
    if power_up is None:
        return None
    for snake in (state.player, state.ai):
        if snake.head_at(power_up.cell):
            state.power_up = None
            logger.info("%s collected %s", snake.name, power_up.kind.value)
            apply_effect(power_up.kind, snake.name, state)
            state.post_notice(snake.name, f"{power_up.kind.value.upper()}!")
            schedule_respawn(state)
            return snake.name
    return None


# ── Effects ───────────────────────────────────────────────────────
def _start(snake: Snake, kind: PowerUpKind) -> None:
    duration = EFFECT_DURATIONS_MS[kind.value]
    snake.effect = ActiveEffect(kind, duration, duration)


def _player_speed(state: SimulationState, snake: Snake) -> None:
    _start(snake, PowerUpKind.SPEED)
    snake.move_threshold = SPEED_MOVE_THRESHOLD
    snake.speed_boost = True


def _ai_speed(state: SimulationState, snake: Snake) -> None:
    # The AI already moves every tick; this only shows up on the HUD.
    _start(snake, PowerUpKind.SPEED)


def _player_freeze(state: SimulationState, snake: Snake) -> None:
    _start(snake, PowerUpKind.FREEZE)


def _ai_freeze(state: SimulationState, snake: Snake) -> None:
    _start(snake, PowerUpKind.FREEZE)
    state.player.move_counter -= FREEZE_COUNTER_OFFSET


def _player_magnet(state: SimulationState, snake: Snake) -> None:
    _start(snake, PowerUpKind.MAGNET)


def _ai_magnet(state: SimulationState, snake: Snake) -> None:
    _start(snake, PowerUpKind.MAGNET)
    fx, fy = state.food
    hx, hy = snake.head
    _move_food(state, ((fx + hx) // 2, (fy + hy) // 2))


def _player_shrink(state: SimulationState, snake: Snake) -> None:
    snake.truncate(max(len(snake) // 2, SHRINK_MIN_LENGTH))


def _ai_shrink(state: SimulationState, snake: Snake) -> None:
    victim = state.player
    if len(victim) > SHRINK_ATTACK_THRESHOLD:
        victim.truncate(max(SHRINK_ATTACK_THRESHOLD, len(victim) - SHRINK_ATTACK_AMOUNT))


def _player_blackout(state: SimulationState, snake: Snake) -> None:
    state.flash = 1.0


def _ai_blackout(state: SimulationState, snake: Snake) -> None:
    _start(snake, PowerUpKind.BLACKOUT)


def _growth(state: SimulationState, snake: Snake) -> None:
    snake.grow(GROWTH_SEGMENTS)
    state.award_points(snake, GROWTH_BONUS)


_Handler = Callable[[SimulationState, Snake], None]

_HANDLERS: dict[tuple[PowerUpKind, str], _Handler] = {
    (PowerUpKind.SPEED, PLAYER):    _player_speed,
    (PowerUpKind.SPEED, AI):        _ai_speed,
    (PowerUpKind.FREEZE, PLAYER):   _player_freeze,
    (PowerUpKind.FREEZE, AI):       _ai_freeze,
    (PowerUpKind.MAGNET, PLAYER):   _player_magnet,
    (PowerUpKind.MAGNET, AI):       _ai_magnet,
    (PowerUpKind.SHRINK, PLAYER):   _player_shrink,
    (PowerUpKind.SHRINK, AI):       _ai_shrink,
    (PowerUpKind.BLACKOUT, PLAYER): _player_blackout,
    (PowerUpKind.BLACKOUT, AI):     _ai_blackout,
    (PowerUpKind.GROWTH, PLAYER):   _growth,
    (PowerUpKind.GROWTH, AI):       _growth,
}


def apply_effect(kind: PowerUpKind, collector: str, state: SimulationState) -> bool:
    """
    Activate `kind` for `collector` ("player" or "ai").
    Any effect the collector already holds is expired first.
    Unknown kinds are logged and ignored. Returns True if applied.
    """
    handler = _HANDLERS.get((kind, collector))
    if handler is None:
        logger.warning("ignoring unknown power-up %r for %r", kind, collector)
        return False
    snake = state.snake(collector)
    clear_effect(state, snake)
    handler(state, snake)
    return True


def clear_effect(state: SimulationState, snake: Snake) -> None:
    """Drop the snake's effect and undo whatever it set."""
    effect = snake.effect
    if effect is None:
        return
    snake.effect = None
    if effect.kind is PowerUpKind.SPEED:
        snake.move_threshold = NORMAL_MOVE_THRESHOLD
        snake.speed_boost = False
    elif effect.kind is PowerUpKind.FREEZE and snake is state.ai:
        state.player.move_counter = max(state.player.move_counter, 0.0)


def tick_effects(state: SimulationState, period_ms: float) -> None:
    for snake in (state.player, state.ai):
        effect = snake.effect
        if effect is None:
            continue
        effect.remaining_ms -= period_ms
        if effect.remaining_ms <= 0:
            logger.debug("%s effect %s wore off", snake.name, effect.kind.value)
            clear_effect(state, snake)


# ── Magnet ────────────────────────────────────────────────────────
def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _move_food(state: SimulationState, cell: Cell) -> bool:
    """Move the food to `cell` unless something else is there."""
    if cell == state.food or cell in state.occupied_cells(food=False):
        return False
    state.food = cell
    return True


def apply_magnet(state: SimulationState) -> None:
    """Pull the food one cell toward the player's head while its magnet is on."""
    player = state.player
    if not player.alive or not has_effect(player, PowerUpKind.MAGNET):
        return
    fx, fy = state.food
    hx, hy = player.head
    dx, dy = hx - fx, hy - fy
    if dx == 0 and dy == 0:
        return
    if abs(dx) >= abs(dy):
        target = (clamp(fx + _sign(dx)), fy)
    else:
        target = (fx, clamp(fy + _sign(dy)))
    _move_food(state, target)
