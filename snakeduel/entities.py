"""
entities.py — Pure game data, no rules that need the whole board.

Classes:
    Direction        — immutable (dx, dy) value object
    Snake            — body, direction, score, movement rate, effect slot
    PowerUpKind      — the six power-up discriminators
    PowerUp          — the single pickup currently on the board
    Hazard           — roaming bonus target that drops a growth power-up
    ActiveEffect     — timed modifier held by one snake
    TransientNotice  — indicator text that disappears after a few ticks
"""

import enum
from collections import deque
from dataclasses import dataclass
from typing import Optional

from .config import NORMAL_MOVE_THRESHOLD
from .grid import Cell, wrap_cell


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None
    NONE  = None

    def __init__(self, x: int, y: int, name: str = ""):
        self.x = x
        self.y = y
        self.name = name

    def is_opposite(self, other: "Direction") -> bool:
        if self.is_none or other.is_none:
            return False
        return self.x == -other.x and self.y == -other.y

    @property
    def is_none(self) -> bool:
        return self.x == 0 and self.y == 0

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction.{self.name}" if self.name else f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0, "LEFT")
Direction.RIGHT = Direction( 1,  0, "RIGHT")
Direction.UP    = Direction( 0, -1, "UP")
Direction.DOWN  = Direction( 0,  1, "DOWN")
Direction.NONE  = Direction( 0,  0, "NONE")
ALL_DIRS = [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]


# ─────────────────────────── Power-ups ───────────────────────────
class PowerUpKind(enum.Enum):
    SPEED    = "speed"
    FREEZE   = "freeze"
    MAGNET   = "magnet"
    SHRINK   = "shrink"
    BLACKOUT = "blackout"
    GROWTH   = "growth"


# Regular spawns; growth only ever comes from a hazard drop.
SPAWNABLE_KINDS = [
    PowerUpKind.SPEED,
    PowerUpKind.FREEZE,
    PowerUpKind.MAGNET,
    PowerUpKind.SHRINK,
    PowerUpKind.BLACKOUT,
]


@dataclass(eq=False)
class PowerUp:
    cell: Cell
    kind: PowerUpKind
    spawn_time_ms: float

    def age_ms(self, now_ms: float) -> float:
        return now_ms - self.spawn_time_ms


@dataclass(eq=False)
class Hazard:
    cell: Cell
    dx: int
    spawn_time_ms: float
    active: bool = True


@dataclass
class ActiveEffect:
    kind: PowerUpKind
    duration_ms: float
    remaining_ms: float

    @property
    def seconds_remaining(self) -> float:
        return max(0.0, self.remaining_ms / 1000.0)


@dataclass
class TransientNotice:
    agent: str
    text: str
    remaining_ticks: int


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Pure game data for one snake (player or AI).
    An empty body means the snake is dead.
    """

    def __init__(self, name: str, start_x: int, start_y: int,
                 start_dir: Direction = Direction.NONE):
        self.name = name
        self.body: deque[Cell] = deque([(start_x, start_y)])
        self.dir: Direction = start_dir
        self._next_dir: Direction = start_dir
        self.score: int = 0
        self.grow_pending: int = 0
        self.move_counter: float = 0.0
        self.move_threshold: float = NORMAL_MOVE_THRESHOLD
        self.speed_boost: bool = False
        self.effect: Optional[ActiveEffect] = None

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def alive(self) -> bool:
        return len(self.body) > 0

    @property
    def next_dir(self) -> Direction:
        return self._next_dir

    def __len__(self) -> int:
        return len(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir: Direction) -> bool:
        """Queue a direction change; exact reversals of `dir` are ignored."""
        if new_dir.is_none or new_dir.is_opposite(self.dir):
            return False
        self._next_dir = new_dir
        return True

    def step(self) -> Optional[Cell]:
        """
        Commit the queued direction and push a new head.
        The tail is left alone; callers decide with pop_tail().
        Returns the new head, or None when the snake did not move.
        """
        if not self.body:
            return None
        self.dir = self._next_dir
        if self.dir.is_none:
            return None
        hx, hy = self.head
        new_head = wrap_cell((hx + self.dir.x, hy + self.dir.y))
        self.body.appendleft(new_head)
        return new_head

    def pop_tail(self) -> None:
        if self.grow_pending > 0:
            self.grow_pending -= 1
        elif self.body:
            self.body.pop()

    def grow(self, segments: int) -> None:
        self.grow_pending += segments

    def truncate(self, length: int) -> None:
        while len(self.body) > length:
            self.body.pop()
        self.grow_pending = 0

    def kill(self) -> None:
        self.body.clear()

    # ── Queries ──────────────────────────────────────────────────
    def occupies(self, cell: Cell) -> bool:
        return cell in self.body

    def head_at(self, cell: Cell) -> bool:
        return bool(self.body) and self.body[0] == cell
