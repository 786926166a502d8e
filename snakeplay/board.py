"""Game board: the snake, its food and the rules of movement."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass(frozen=True)
class Segment:
    """One cell of the grid, in board coordinates."""

    x: int
    y: int


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def opposite(self) -> Direction:
        return Direction((self + 2) % 4)

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Corner(Enum):
    UP_LEFT = "up_left"
    UP_RIGHT = "up_right"
    DOWN_LEFT = "down_left"
    DOWN_RIGHT = "down_right"


_CORNERS = {
    (Direction.UP, Direction.RIGHT): Corner.UP_RIGHT,
    (Direction.LEFT, Direction.DOWN): Corner.UP_RIGHT,
    (Direction.UP, Direction.LEFT): Corner.UP_LEFT,
    (Direction.RIGHT, Direction.DOWN): Corner.UP_LEFT,
    (Direction.DOWN, Direction.RIGHT): Corner.DOWN_RIGHT,
    (Direction.LEFT, Direction.UP): Corner.DOWN_RIGHT,
    (Direction.DOWN, Direction.LEFT): Corner.DOWN_LEFT,
    (Direction.RIGHT, Direction.UP): Corner.DOWN_LEFT,
}


class Board:
    """A grid of ``cols`` by ``rows`` cells holding a snake and one piece of food."""

    def __init__(self, cols: int = 40, rows: int = 30, rng: random.Random | None = None):
        _check_size(cols, rows)
        self.cols = cols
        self.rows = rows
        self.rng = rng if rng is not None else random.Random()
        self.snake: list[Segment] = []
        self.direction = Direction.RIGHT
        self.direction_changed = False
        self.score = 0
        self.food = Segment(0, 0)
        self.reset()

    @property
    def head(self) -> Segment:
        return self.snake[0]

    def reset(self) -> None:
        """Put a one-cell snake in the middle, heading right, and place food."""
        self.snake = [Segment(self.cols // 2, self.rows // 2)]
        self.direction = Direction.RIGHT
        self.direction_changed = False
        self.score = 0
        self.spawn_food()

    def turn(self, direction: Direction) -> bool:
        """Change heading; refused when reversing or already turned this step."""
        direction = Direction(direction)
        if self.direction_changed or direction == self.direction.opposite():
            return False
        self.direction = direction
        self.direction_changed = True
        return True

    def step(self) -> bool:
        """Move the snake one cell. Returns True when it ate the food."""
        self.direction_changed = False
        dx, dy = self.direction.delta
        head = Segment(self.head.x + dx, self.head.y + dy)
        self.snake.insert(0, head)
        if head == self.food:
            self.score += 1
            self.spawn_food()
            return True
        self.snake.pop()
        return False

    def check_collision(self) -> bool:
        """Whether the head is off the board or on the snake's own body."""
        head = self.head
        if not (0 <= head.x < self.cols and 0 <= head.y < self.rows):
            return True
        return head in self.snake[1:]

    def spawn_food(self) -> Segment:
        """Place food on a random cell not covered by the snake."""
        occupied = set(self.snake)
        if all(
            Segment(x, y) in occupied for x in range(self.cols) for y in range(self.rows)
        ):
            raise ValueError("no free cell left for food")
        while True:
            cell = Segment(self.rng.randrange(self.cols), self.rng.randrange(self.rows))
            if cell not in occupied:
                self.food = cell
                return cell

    def resize(self, cols: int, rows: int) -> None:
        """Change the board size and start a new game on it."""
        _check_size(cols, rows)
        self.cols = cols
        self.rows = rows
        self.reset()

    def segment_direction(self, index: int) -> Direction | None:
        """Heading of a segment; the head takes the current heading."""
        if index < 0 or index >= len(self.snake):
            return None
        if index == 0:
            return self.direction
        current = self.snake[index]
        previous = self.snake[index - 1]
        if previous.x < current.x:
            return Direction.RIGHT
        if previous.x > current.x:
            return Direction.LEFT
        if previous.y < current.y:
            return Direction.DOWN
        if previous.y > current.y:
            return Direction.UP
        return None

    def corner_at(self, index: int) -> Corner | None:
        """Kind of bend at a body segment, or None where the body runs straight."""
        if index <= 0 or index >= len(self.snake) - 1:
            return None
        before = self.segment_direction(index - 1)
        after = self.segment_direction(index + 1)
        if before is None or after is None or before == after:
            return None
        return _CORNERS.get((before, after))


def _check_size(cols: int, rows: int) -> None:
    if cols < 1 or rows < 1:
        raise ValueError(f"board must be at least 1x1, got {cols}x{rows}")