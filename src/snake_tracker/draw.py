"""Cell-to-pixel helpers and a headless NumPy painter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from snake_tracker.config import RenderConfig

logger = logging.getLogger(__name__)

BLOCK_SIZE = 25.0

Colour = tuple[float, float, float, float]


def to_coord(game_coord: int, block_size: float = BLOCK_SIZE) -> float:
    """Convert a grid coordinate to a pixel offset."""
    return game_coord * block_size


def to_coord_u32(game_coord: int, block_size: float = BLOCK_SIZE) -> int:
    """Pixel offset truncated to an unsigned integer; negatives become 0."""
    return max(0, int(to_coord(game_coord, block_size)))


class Painter(Protocol):
    """Anything that can paint one fixed-size grid square."""

    def paint_cell(self, colour: Colour, x: int, y: int) -> None: ...


class Canvas:
    """RGBA pixel buffer that paints grid cells as solid squares.

    ``pixels`` has shape ``(height * block, width * block, 4)`` where
    ``width`` and ``height`` are measured in cells. Anything painted
    outside the buffer is clipped.
    """

    def __init__(
        self,
        width: int = 30,
        height: int = 30,
        block_size: float = BLOCK_SIZE,
        background: Colour = (0.0, 0.0, 0.0, 1.0),
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Canvas dimensions must be at least 1×1 cells.")
        if block_size < 1:
            raise ValueError("Block size must be at least one pixel.")
        self.width = width
        self.height = height
        self.block_size = block_size
        self.background = _check_colour(background)
        self.pixels = np.empty(
            (to_coord_u32(height, block_size), to_coord_u32(width, block_size), 4),
            dtype=np.float32,
        )
        self.clear()

    @classmethod
    def from_config(cls, config: RenderConfig) -> Canvas:
        """Build a canvas sized and coloured from *config*."""
        return cls(
            width=config.board_width,
            height=config.board_height,
            block_size=config.block_size,
            background=config.background,
        )

    def clear(self) -> None:
        """Fill the whole buffer with the background colour."""
        self.pixels[:] = self.background

    def paint_cell(self, colour: Colour, x: int, y: int) -> None:
        """Paint the square for cell ``(x, y)``."""
        self.paint_rect(colour, x, y, 1, 1)

    def paint_rect(
        self, colour: Colour, x: int, y: int, width: int, height: int,
    ) -> None:
        """Paint a rectangle of *width* × *height* cells from ``(x, y)``."""
        rgba = _check_colour(colour)
        left = to_coord_u32(x, self.block_size)
        top = to_coord_u32(y, self.block_size)
        right = to_coord_u32(x + width, self.block_size)
        bottom = to_coord_u32(y + height, self.block_size)
        rows, cols = self.pixels.shape[:2]
        if right <= left or bottom <= top or left >= cols or top >= rows:
            logger.debug("Paint at cell (%d, %d) is off-canvas.", x, y)
            return
        self.pixels[top:bottom, left:right] = rgba

    def colour_at(self, x: int, y: int) -> Colour:
        """Return the colour at the top-left pixel of cell ``(x, y)``.

        Cells outside the canvas read as the background colour.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return tuple(float(c) for c in self.background)
        px = self.pixels[
            to_coord_u32(y, self.block_size), to_coord_u32(x, self.block_size)
        ]
        return tuple(float(c) for c in px)


def _check_colour(colour: Colour) -> np.ndarray:
    rgba = np.asarray(colour, dtype=np.float32)
    if rgba.shape != (4,):
        raise ValueError(f"Colour must have 4 RGBA components, got {colour!r}.")
    return rgba
