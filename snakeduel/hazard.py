"""
hazard.py — The roaming bonus target.

Runs on its own schedule, separate from the power-up cycle: spawn attempts
at random intervals, a fixed drift cadence, and a lifetime. A head touching
it turns it into a growth power-up on the spot.
"""

import logging
from typing import Optional

from .config import (
    HAZARD_FIRST_SPAWN_MS, HAZARD_MIN_INTERVAL_MS, HAZARD_MAX_INTERVAL_MS,
    HAZARD_SPAWN_CHANCE, HAZARD_LIFETIME_MS, HAZARD_DRIFT_MS,
    HAZARD_REVERSE_CHANCE,
)
from .entities import Hazard, PowerUpKind
from .grid import clamp, random_free_cell
from .powerups import place_power_up
from .state import SimulationState

logger = logging.getLogger(__name__)


def start_hazard_timer(state: SimulationState) -> None:
    due = state.now_ms + HAZARD_FIRST_SPAWN_MS
    state.events.schedule(due, "hazard_attempt", _spawn_attempt, state, due)


def _spawn_attempt(state: SimulationState, due_ms: float) -> None:
    if state.hazard is None and state.rng.random() < HAZARD_SPAWN_CHANCE:
        spawn_hazard(state)
    due = due_ms + state.rng.uniform(HAZARD_MIN_INTERVAL_MS, HAZARD_MAX_INTERVAL_MS)
    state.events.schedule(due, "hazard_attempt", _spawn_attempt, state, due)


def spawn_hazard(state: SimulationState) -> Optional[Hazard]:
    if state.hazard is not None:
        return None
    cell = random_free_cell(state.rng, state.occupied_cells())
    if cell is None:
        logger.debug("hazard spawn skipped, no free cell found")
        return None

    hazard = Hazard(cell, state.rng.choice((-1, 1)), state.now_ms)
    state.hazard = hazard
    drift_due = state.now_ms + HAZARD_DRIFT_MS
    state.events.schedule(drift_due, "hazard_drift", drift_hazard, state, hazard, drift_due)
    state.events.schedule(state.now_ms + HAZARD_LIFETIME_MS, "hazard_expire",
                          expire_hazard, state, hazard)
    logger.debug("hazard appeared at %s", cell)
    return hazard


def drift_hazard(state: SimulationState, hazard: Hazard, due_ms: float) -> None:
    """Shift one cell sideways, bouncing off the board edges."""
    if state.hazard is not hazard:
        return
    if state.rng.random() < HAZARD_REVERSE_CHANCE:
        hazard.dx = -hazard.dx
    x, y = hazard.cell
    nx = x + hazard.dx
    if nx != clamp(nx):
        hazard.dx = -hazard.dx
        nx = clamp(nx)
    hazard.cell = (nx, y)

    due = due_ms + HAZARD_DRIFT_MS
    state.events.schedule(due, "hazard_drift", drift_hazard, state, hazard, due)


def expire_hazard(state: SimulationState, hazard: Hazard) -> None:
    if state.hazard is not hazard:
        return
    hazard.active = False
    state.hazard = None
    logger.debug("hazard left the board")


def check_hazard_contact(state: SimulationState) -> Optional[str]:
    """
    If a head is on the hazard, destroy it and drop a growth power-up there.
    Player heads are checked first. Returns the agent that touched it.
    """
    hazard = state.hazard
    if hazard is None:
        return None
    for snake in (state.player, state.ai):
        if snake.head_at(hazard.cell):
            hazard.active = False
            state.hazard = None
            place_power_up(state, hazard.cell, PowerUpKind.GROWTH)
            state.post_notice(snake.name, "BONUS!")
            state.flash = 1.0
            logger.info("%s caught the hazard", snake.name)
            return snake.name
    return None
