"""Snake body tracking: movement, growth, and self-overlap logic."""

from __future__ import annotations

import enum
import logging
from collections import deque
from itertools import islice
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from snake_tracker.draw import Colour, Painter

logger = logging.getLogger(__name__)

SNAKE_COLOUR: tuple[float, float, float, float] = (0.4, 0.8, 0.2, 1.0)

INITIAL_LENGTH = 3


class Cell(NamedTuple):
    """One grid square. The origin is top-left and ``y`` grows downward."""

    x: int
    y: int


class Direction(enum.Enum):
    """Cardinal headings."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        """Return the heading that would reverse onto the body."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Up decreases y: screen rows count downward from the top edge.
_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Snake:
    """A snake represented as an ordered deque of body cells.

    The head is ``body[0]``; the tail segment is ``body[-1]``. The cell
    dropped by the most recent :meth:`advance` is held in :attr:`tail`
    so that :meth:`grow_tail` can put it back. Both are read-only; only
    :meth:`advance` and :meth:`grow_tail` change the body.
    """

    def __init__(self, x: int, y: int) -> None:
        self._body: deque[Cell] = deque(
            Cell(x + i, y) for i in reversed(range(INITIAL_LENGTH))
        )
        self._direction = Direction.RIGHT
        self._tail: Cell | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Snake:
        """Restore a snake serialized by :meth:`to_dict`.

        Raises ``ValueError`` if the body is empty or not contiguous.
        """
        body = [Cell(*cell) for cell in data["body"]]
        if not body:
            raise ValueError("Snake body must have at least 1 cell.")
        for (ax, ay), (bx, by) in zip(body, body[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ValueError(
                    f"Body cells ({ax}, {ay}) and ({bx}, {by}) are not adjacent.",
                )
        snake = cls.__new__(cls)
        snake._body = deque(body)
        snake._direction = Direction(data["direction"])
        tail = data.get("tail")
        snake._tail = Cell(*tail) if tail is not None else None
        return snake

    @property
    def body(self) -> tuple[Cell, ...]:
        """Snapshot of the body cells, head first."""
        return tuple(self._body)

    @property
    def tail(self) -> Cell | None:
        """Cell vacated by the last advance, if not yet grown back."""
        return self._tail

    def __len__(self) -> int:
        return len(self._body)

    def length(self) -> int:
        """Return the number of occupied cells."""
        return len(self._body)

    def head_position(self) -> Cell:
        """Return the head cell."""
        return self._body[0]

    def head_direction(self) -> Direction:
        """Return the heading used by the last advance."""
        return self._direction

    def _resolve(self, candidate: Direction | None) -> Direction:
        if candidate is None:
            return self._direction
        if candidate is self._direction.opposite:
            logger.debug(
                "Ignoring reversal from %s to %s.",
                self._direction.value, candidate.value,
            )
            return self._direction
        return candidate

    def next_head(self, candidate: Direction | None = None) -> Cell:
        """Compute where the head would land on ``advance(candidate)``.

        Does not mutate the snake. A reversing *candidate* is ignored in
        the same way :meth:`advance` ignores it.
        """
        dx, dy = _STEPS[self._resolve(candidate)]
        x, y = self.head_position()
        return Cell(x + dx, y + dy)

    def advance(self, candidate: Direction | None = None) -> None:
        """Move one cell forward, optionally turning first.

        A *candidate* opposite to the current heading is ignored and the
        snake keeps going straight. Overlaps and board edges are not
        checked here.
        """
        self._direction = self._resolve(candidate)
        dx, dy = _STEPS[self._direction]
        x, y = self.head_position()
        self._body.appendleft(Cell(x + dx, y + dy))
        self._tail = self._body.pop()

    def grow_tail(self) -> None:
        """Re-attach the cell vacated by the last advance.

        No-op when nothing is retained, i.e. before the first advance or
        after a previous grow already used it.
        """
        if self._tail is None:
            logger.debug("No retained tail to grow from.")
            return
        self._body.append(self._tail)
        self._tail = None

    def is_overlapping(self, x: int, y: int) -> bool:
        """Check whether ``(x, y)`` hits the body, skipping the tail segment.

        The tail segment moves away on the next advance, so a head may
        follow it into its current cell.
        """
        for cell in islice(self._body, len(self._body) - 1):
            if cell.x == x and cell.y == y:
                return True
        return False

    def draw(self, painter: Painter, colour: Colour = SNAKE_COLOUR) -> None:
        """Paint every body cell, head first."""
        for cell in self._body:
            painter.paint_cell(colour, cell.x, cell.y)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(cell) for cell in self._body],
            "direction": self._direction.value,
            "tail": list(self._tail) if self._tail is not None else None,
        }
