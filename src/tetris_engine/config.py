"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

# Drop loop timing in milliseconds.  Higher is slower.
INITIAL_SPEED = 800
SPEED_DECREASE = 50
MIN_SPEED = 100

# Points for 0, 1, 2, 3 and 4 lines cleared at once, before the level
# multiplier is applied.
POINTS_PER_LINE: Tuple[int, ...] = (0, 100, 300, 500, 800)
LINES_PER_LEVEL = 10


@dataclass(frozen=True)
class GameConfig:
    """Tunable parameters for a game session.

    All values are validated on construction; a malformed configuration is
    the only failure the engine reports with an exception.

    Raises:
        ValueError: If any dimension, speed or table entry is out of range.
    """

    width: int = WIDTH
    height: int = HEIGHT
    initial_speed: int = INITIAL_SPEED
    speed_decrease: int = SPEED_DECREASE
    min_speed: int = MIN_SPEED
    points_per_line: Tuple[int, ...] = POINTS_PER_LINE
    lines_per_level: int = LINES_PER_LEVEL

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.min_speed <= 0 or self.initial_speed <= 0:
            raise ValueError("Drop speeds must be positive")
        if self.min_speed > self.initial_speed:
            raise ValueError("min_speed cannot exceed initial_speed")
        if self.speed_decrease < 0:
            raise ValueError("speed_decrease cannot be negative")
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        if not self.points_per_line or self.points_per_line[0] != 0:
            raise ValueError("points_per_line must start with 0 for no cleared lines")
        if any(points < 0 for points in self.points_per_line):
            raise ValueError("points_per_line entries cannot be negative")
        # Normalise lists passed in from callers such as argparse.
        object.__setattr__(self, "points_per_line", tuple(self.points_per_line))
