"""
ai_brain.py — AI steering module.

Completely isolated from rendering and input.
Reads the simulation state and returns a Direction; never mutates anything
except by drawing from the state's rng.

Strategy:
  - Targets: the food (priority 1) and the active power-up (priority 2).
  - Score every legal move against every target as distance / priority.
  - The best-scoring pair picks the target; the closest legal move to that
    target wins, first in LEFT, RIGHT, UP, DOWN order on ties.
  - With probability AI_MISTAKE_CHANCE: pick a random legal move instead.
  - No legal move: return None and keep going straight.
"""

from typing import NamedTuple, Optional

from .config import AI_MISTAKE_CHANCE, FOOD_PRIORITY, POWERUP_PRIORITY
from .entities import ALL_DIRS, Direction, Snake
from .grid import Cell, manhattan_wrap_distance, wrap_cell
from .state import SimulationState


class Target(NamedTuple):
    cell: Cell
    priority: int
    label: str


def compute_direction(
    state: SimulationState,
    mistake_chance: float = AI_MISTAKE_CHANCE,
) -> Optional[Direction]:
    """
    Return the Direction the AI should move this tick, or None if every
    move is blocked.
    """
    ai = state.ai
    if not ai.alive:
        return None

    legal = legal_dirs(ai, state.player)
    if not legal:
        return None

    if state.rng.random() < mistake_chance:
        return state.rng.choice(legal)

    return best_move(ai, legal, targets(state))


def targets(state: SimulationState) -> list[Target]:
    found = [Target(state.food, FOOD_PRIORITY, "food")]
    if state.power_up is not None:
        found.append(Target(state.power_up.cell, POWERUP_PRIORITY, "power_up"))
    return found


# ── Internal helpers ──────────────────────────────────────────────

def _next_head(snake: Snake, d: Direction) -> Cell:
    hx, hy = snake.head
    return wrap_cell((hx + d.x, hy + d.y))


def legal_dirs(snake: Snake, other: Snake) -> list[Direction]:
    """Non-reversing directions whose next cell is clear of both snakes."""
    legal = []
    for d in ALL_DIRS:
        if d.is_opposite(snake.dir):
            continue
        cell = _next_head(snake, d)
        if snake.occupies(cell) or other.occupies(cell):
            continue
        legal.append(d)
    return legal


def best_move(snake: Snake, legal: list[Direction],
              goals: list[Target]) -> Direction:
    # Higher priority first so equal scores favour the power-up.
    ranked = sorted(goals, key=lambda t: -t.priority)

    best_target = None
    best_score = None
    for d in legal:
        cell = _next_head(snake, d)
        for target in ranked:
            score = manhattan_wrap_distance(cell, target.cell) / target.priority
            if best_score is None or score < best_score:
                best_score = score
                best_target = target
            elif score == best_score and target.priority > best_target.priority:
                best_target = target

    return min(
        legal,
        key=lambda d: manhattan_wrap_distance(_next_head(snake, d), best_target.cell),
    )
