"""Tests for entities.py - Direction and Snake."""

from snakeduel.config import TILE_COUNT
from snakeduel.entities import Direction, Snake, ActiveEffect, PowerUpKind

from conftest import place


class TestDirection:
    """Direction value object."""

    def test_opposites(self):
        assert Direction.LEFT.is_opposite(Direction.RIGHT)
        assert Direction.UP.is_opposite(Direction.DOWN)
        assert not Direction.UP.is_opposite(Direction.LEFT)

    def test_none_is_never_opposite(self):
        assert not Direction.NONE.is_opposite(Direction.LEFT)
        assert not Direction.LEFT.is_opposite(Direction.NONE)

    def test_equality_and_hash(self):
        assert Direction(1, 0) == Direction.RIGHT
        assert len({Direction(1, 0), Direction.RIGHT}) == 1


class TestSnake:
    """Snake body and direction handling."""

    def test_new_snake_is_alive_and_not_moving(self):
        snake = Snake("player", 5, 10)
        assert snake.alive
        assert snake.head == (5, 10)
        assert snake.dir.is_none
        assert snake.step() is None
        assert list(snake.body) == [(5, 10)]

    def test_reversal_is_rejected(self):
        snake = Snake("player", 5, 5)
        place(snake, [(5, 5), (4, 5)], Direction.RIGHT)
        assert snake.request_direction(Direction.LEFT) is False
        assert snake.next_dir == Direction.RIGHT

    def test_reversal_checked_against_committed_direction(self):
        snake = Snake("player", 5, 5)
        place(snake, [(5, 5)], Direction.RIGHT)
        assert snake.request_direction(Direction.UP)
        assert not snake.request_direction(Direction.LEFT)
        snake.step()
        assert snake.head == (5, 4)

    def test_step_wraps(self):
        snake = Snake("player", TILE_COUNT - 1, 3)
        place(snake, [(TILE_COUNT - 1, 3)], Direction.RIGHT)
        assert snake.step() == (0, 3)

    def test_pop_tail_consumes_pending_growth_first(self):
        snake = Snake("ai", 5, 5)
        place(snake, [(5, 5)], Direction.DOWN)
        snake.grow(2)
        for _ in range(3):
            snake.step()
            snake.pop_tail()
        assert len(snake) == 3
        assert snake.grow_pending == 0

    def test_truncate_clears_pending_growth(self):
        snake = Snake("ai", 0, 0)
        place(snake, [(i, 0) for i in range(8)])
        snake.grow(3)
        snake.truncate(4)
        assert list(snake.body) == [(0, 0), (1, 0), (2, 0), (3, 0)]
        assert snake.grow_pending == 0

    def test_kill_empties_the_body(self):
        snake = Snake("ai", 1, 1)
        snake.kill()
        assert not snake.alive
        assert len(snake) == 0
        assert not snake.head_at((1, 1))


class TestActiveEffect:
    def test_seconds_remaining_never_negative(self):
        effect = ActiveEffect(PowerUpKind.SPEED, 5000, -100)
        assert effect.seconds_remaining == 0.0
        effect.remaining_ms = 2500
        assert effect.seconds_remaining == 2.5
