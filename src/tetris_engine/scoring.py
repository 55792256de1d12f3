"""Line clearing, scoring and level progression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence

from .board import Board
from .config import LINES_PER_LEVEL, POINTS_PER_LINE


class ClearResult(NamedTuple):
    removed_count: int
    board: Board


def clear_lines(board: Board) -> ClearResult:
    """Remove every full row of ``board`` at once.

    The board is compacted in place; the returned result carries the number
    of rows removed alongside the cleared board.
    """

    return ClearResult(board.clear_full_rows(), board)


def points_for(
    removed: int, level: int, points_per_line: Sequence[int] = POINTS_PER_LINE
) -> int:
    """Return the score awarded for clearing ``removed`` rows at ``level``."""

    if 0 <= removed < len(points_per_line):
        return points_per_line[removed] * level
    return 0


def level_for_lines(lines_cleared: int, lines_per_level: int = LINES_PER_LEVEL) -> int:
    """Return the level reached after ``lines_cleared`` total lines."""

    return lines_cleared // lines_per_level + 1


@dataclass
class GameStats:
    """Score, level and line counters for a session."""

    score: int = 0
    level: int = 1
    lines_cleared: int = 0

    def reset(self) -> None:
        self.score = 0
        self.level = 1
        self.lines_cleared = 0

    def record_clear(
        self,
        removed: int,
        points_per_line: Sequence[int] = POINTS_PER_LINE,
        lines_per_level: int = LINES_PER_LEVEL,
    ) -> int:
        """Apply a clear of ``removed`` rows and return the points awarded.

        Points use the level in effect before the clear; the level is then
        recomputed from the new line total.
        """

        if removed <= 0:
            return 0
        awarded = points_for(removed, self.level, points_per_line)
        self.score += awarded
        self.lines_cleared += removed
        self.level = level_for_lines(self.lines_cleared, lines_per_level)
        return awarded
