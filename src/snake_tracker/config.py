"""Render configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from snake_tracker.draw import BLOCK_SIZE
from snake_tracker.snake import SNAKE_COLOUR

logger = logging.getLogger(__name__)

_COLOUR_KEYS = ("snake_colour", "background")


@dataclass(frozen=True)
class RenderConfig:
    """Board size, cell scale, and colours used when drawing a snake.

    Round-trips through JSON with :meth:`save` and :meth:`load`.
    """

    block_size: float = BLOCK_SIZE
    board_width: int = 30
    board_height: int = 30
    snake_colour: tuple[float, float, float, float] = SNAKE_COLOUR
    background: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    def to_dict(self) -> dict:
        """Serialize to a plain dict with colours as lists."""
        data = asdict(self)
        for key in _COLOUR_KEYS:
            data[key] = list(data[key])
        return data

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file, creating parent directories."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Render config written to %s", target)

    @classmethod
    def from_dict(cls, data: dict) -> RenderConfig:
        """Build a config from a dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown render config keys: {unknown}. "
                f"Expected a subset of {sorted(known)}.",
            )
        values = dict(data)
        for key in _COLOUR_KEYS:
            if key in values:
                values[key] = tuple(values[key])
        return cls(**values)

    @classmethod
    def load(cls, path: str | Path) -> RenderConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
