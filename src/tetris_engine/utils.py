"""Utility helpers for the Tetris engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board
from .config import INITIAL_SPEED, MIN_SPEED, SPEED_DECREASE
from .tetromino import ActivePiece, Position, shape_cells


def drop_interval_ms(
    level: int,
    initial_speed: int = INITIAL_SPEED,
    speed_decrease: int = SPEED_DECREASE,
    min_speed: int = MIN_SPEED,
) -> int:
    """Return the automatic drop period in milliseconds for ``level``.

    The period shrinks linearly by ``speed_decrease`` per level above the
    first and never goes below ``min_speed``.
    """

    return max(min_speed, initial_speed - (level - 1) * speed_decrease)


def has_collision(piece: ActivePiece, position: Position, board: Board) -> bool:
    """Return ``True`` if ``piece`` cannot legally occupy ``position``.

    Each filled cell of the piece's shape is translated by ``position``.  A
    cell collides when it leaves the board horizontally, reaches the floor
    or lands on a settled block.  Cells above the board never collide since
    there is nothing stored there.  The check does not look at
    ``piece.position`` so candidate positions can be tested without moving
    the piece.
    """

    px, py = position
    for dx, dy in shape_cells(piece.shape):
        x = px + dx
        y = py + dy
        if x < 0 or x >= board.width or y >= board.height:
            return True
        if y >= 0 and board.is_cell_occupied(x, y):
            return True
    return False


def render_grid(board: Board, active: Optional[ActivePiece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state (i.e. without locking the
    piece). Cells occupied by the active piece receive the piece's type id;
    cells above the visible area are skipped.
    """

    grid = board.grid.tolist()
    if active is not None:
        for x, y in active.blocks():
            if 0 <= y < board.height and 0 <= x < board.width:
                grid[y][x] = int(active.type_id)
    return grid
