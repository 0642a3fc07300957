# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple
import logging
import random

from .config import GRID_W, GRID_H, START_SNAKE, START_FOOD
from .geometry import Direction, Position, in_bounds

log = logging.getLogger(__name__)


# ---------- Helpers ----------
def spawn_food(snake: Sequence[Position], width: int, height: int,
               rng: random.Random) -> Position:
    """Draw random cells until one is free.

    Never returns if the snake covers the whole grid.
    """
    while True:
        cell = Position(rng.randrange(width), rng.randrange(height))
        if cell not in snake:
            return cell


# ---------- State ----------
class GameState(Enum):
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to renderers."""
    width: int
    height: int
    snake: Tuple[Position, ...]    # tail first, head last
    food: Position
    score: int
    state: GameState

    @property
    def head(self) -> Position:
        return self.snake[-1]


# ---------- Engine ----------
class Engine:
    """
    Owns the snake, its direction, the food, the score and the run state.

    The only ways to change a game are change_direction(), update() and
    restart(); everything else reads a Snapshot.
    """

    def __init__(
        self,
        width: int = GRID_W,
        height: int = GRID_H,
        start_snake: Sequence[Tuple[int, int]] = START_SNAKE,
        start_direction: Direction = Direction.RIGHT,
        start_food: Optional[Tuple[int, int]] = START_FOOD,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        layout = [Position(*p) for p in start_snake]
        if len(layout) < 2:
            raise ValueError("snake needs at least two segments")
        if len(set(layout)) != len(layout):
            raise ValueError("snake segments must not overlap")
        for p in layout:
            if not in_bounds(p, width, height):
                raise ValueError(f"snake segment {tuple(p)} is outside the grid")

        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random(seed)
        self._start_snake = tuple(layout)
        self._start_direction = start_direction
        self._start_food = Position(*start_food) if start_food is not None else None

        self._snake: List[Position] = []
        self._direction = start_direction
        self._food = Position(0, 0)
        self._score = 0
        self._state = GameState.RUNNING
        self._reset()

    def _reset(self) -> None:
        self._snake = list(self._start_snake)
        self._direction = self._start_direction
        self._score = 0
        self._state = GameState.RUNNING
        food = self._start_food
        if food is None or not in_bounds(food, self.width, self.height) or food in self._snake:
            food = spawn_food(self._snake, self.width, self.height, self.rng)
        self._food = food

    # ----- Queries -----
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state is GameState.OVER

    @property
    def score(self) -> int:
        return self._score

    @property
    def direction(self) -> Direction:
        return self._direction

    def snapshot(self) -> Snapshot:
        return Snapshot(
            width=self.width,
            height=self.height,
            snake=tuple(self._snake),
            food=self._food,
            score=self._score,
            state=self._state,
        )

    # ----- Operations -----
    def change_direction(self, requested: Direction) -> None:
        """Turn the snake; 180° turns and turns after game over are ignored."""
        if self.is_over or requested.is_opposite(self._direction):
            return
        self._direction = requested

    def update(self) -> None:
        """Advance one tick: grow, shift, or end the game."""
        if self.is_over:
            return

        new_head = self._snake[-1].step(self._direction)
        self._snake.append(new_head)

        if new_head == self._food:
            self._score += 1
            self._food = spawn_food(self._snake, self.width, self.height, self.rng)
            log.debug("food eaten at %s, score %d, next food %s",
                      tuple(new_head), self._score, tuple(self._food))
        elif new_head in self._snake[:-1] or not in_bounds(new_head, self.width, self.height):
            # The invalid head stays on the snake for the final frame.
            self._state = GameState.OVER
            log.info("game over at %s with score %d", tuple(new_head), self._score)
        else:
            self._snake.pop(0)

    def restart(self) -> None:
        """Start a fresh round. Only honoured once the game is over."""
        if not self.is_over:
            return
        self._reset()
