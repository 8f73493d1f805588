"""Snake Tracker: grid snake movement and self-collision core."""

from snake_tracker.config import RenderConfig
from snake_tracker.draw import BLOCK_SIZE, Canvas, Painter, to_coord, to_coord_u32
from snake_tracker.snake import SNAKE_COLOUR, Cell, Direction, Snake

__all__ = [
    "BLOCK_SIZE",
    "SNAKE_COLOUR",
    "Canvas",
    "Cell",
    "Direction",
    "Painter",
    "RenderConfig",
    "Snake",
    "to_coord",
    "to_coord_u32",
]
