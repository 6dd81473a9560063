"""Tests for ai_brain.py - priority-weighted steering."""

import random

from snakeduel.ai_brain import compute_direction, legal_dirs, targets
from snakeduel.config import TILE_COUNT
from snakeduel.entities import ALL_DIRS, Direction, PowerUp, PowerUpKind
from snakeduel.grid import manhattan_wrap_distance, wrap_cell
from snakeduel.state import SimulationState

from conftest import FixedRng, place


class TestLegalMoves:
    """Reversal and body filtering."""

    def test_reversal_is_excluded(self, state):
        place(state.player, [(2, 2)])
        place(state.ai, [(10, 10), (9, 10)], Direction.RIGHT)
        assert Direction.LEFT not in legal_dirs(state.ai, state.player)

    def test_cells_of_either_snake_are_excluded(self, state):
        place(state.player, [(10, 9), (10, 8)])
        place(state.ai, [(10, 10)], Direction.RIGHT)
        assert legal_dirs(state.ai, state.player) == [Direction.RIGHT, Direction.DOWN]

    def test_not_moving_yet_allows_all_four(self, state):
        place(state.player, [(2, 2)])
        place(state.ai, [(10, 10)])
        assert legal_dirs(state.ai, state.player) == ALL_DIRS

    def test_wrapped_cells_are_checked(self, state):
        place(state.player, [(0, 5)])
        place(state.ai, [(TILE_COUNT - 1, 5)], Direction.UP)
        assert Direction.RIGHT not in legal_dirs(state.ai, state.player)


class TestTargetSelection:
    """Scoring is distance / priority; the power-up is worth twice the food."""

    def test_goes_for_food_without_power_up(self, state):
        place(state.player, [(2, 2)])
        place(state.ai, [(10, 10)], Direction.UP)
        state.food = (13, 10)
        assert compute_direction(state) == Direction.RIGHT

    def test_equidistant_power_up_beats_food(self, state):
        place(state.player, [(2, 2)])
        place(state.ai, [(10, 10)])
        state.food = (13, 10)
        state.power_up = PowerUp((7, 10), PowerUpKind.SPEED, 0)
        assert compute_direction(state) == Direction.LEFT

    def test_farther_power_up_can_still_win(self, state):
        place(state.player, [(2, 2)])
        place(state.ai, [(10, 10)], Direction.UP)
        state.food = (13, 10)      # 2 away after moving right
        state.power_up = PowerUp((10, 6), PowerUpKind.FREEZE, 0)   # 3 away after moving up
        assert compute_direction(state) == Direction.UP

    def test_ties_follow_enumeration_order(self, state):
        place(state.player, [(2, 2)])
        place(state.ai, [(10, 10)])
        state.food = (12, 12)      # RIGHT and DOWN both leave distance 3
        assert compute_direction(state) == Direction.RIGHT

    def test_targets_list(self, state):
        state.food = (1, 1)
        assert [t.label for t in targets(state)] == ["food"]
        state.power_up = PowerUp((3, 3), PowerUpKind.MAGNET, 0)
        assert [(t.label, t.priority) for t in targets(state)] == [("food", 1), ("power_up", 2)]


class TestFallbacks:
    """Mistakes and dead ends."""

    def test_no_legal_move_returns_none(self, state):
        place(state.player, [(11, 10), (10, 9), (10, 11)])
        place(state.ai, [(10, 10), (9, 10)], Direction.RIGHT)
        assert compute_direction(state) is None

    def test_mistake_still_picks_a_legal_move(self):
        for seed in range(20):
            s = SimulationState(FixedRng(value=0.0, seed=seed))
            place(s.player, [(10, 9)])
            place(s.ai, [(10, 10)], Direction.RIGHT)
            choice = compute_direction(s)
            assert choice in legal_dirs(s.ai, s.player)

    def test_dead_ai_returns_none(self, state):
        state.ai.kill()
        assert compute_direction(state) is None


class TestChoiceProperty:
    """Without mistakes the move minimises distance to the best target."""

    def test_random_positions(self):
        layout = random.Random(99)
        for seed in range(200):
            s = SimulationState(FixedRng(seed=seed))
            head = (layout.randrange(TILE_COUNT), layout.randrange(TILE_COUNT))
            place(s.player, [(head[0], (head[1] + 5) % TILE_COUNT)])
            place(s.ai, [head], layout.choice(ALL_DIRS))
            s.food = (layout.randrange(TILE_COUNT), layout.randrange(TILE_COUNT))
            if layout.random() < 0.5:
                s.power_up = PowerUp(
                    (layout.randrange(TILE_COUNT), layout.randrange(TILE_COUNT)),
                    PowerUpKind.SPEED, 0,
                )

            legal = legal_dirs(s.ai, s.player)
            choice = compute_direction(s)
            assert choice in legal

            def nxt(d):
                return wrap_cell((head[0] + d.x, head[1] + d.y))

            goals = targets(s)
            best = min(
                (manhattan_wrap_distance(nxt(d), t.cell) / t.priority, -t.priority, t.cell)
                for d in legal for t in goals
            )
            best_cell = best[2]
            chosen = manhattan_wrap_distance(nxt(choice), best_cell)
            assert chosen == min(manhattan_wrap_distance(nxt(d), best_cell) for d in legal)
