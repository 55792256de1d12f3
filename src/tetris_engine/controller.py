"""Lifecycle of the falling piece: spawn, translate, rotate and hard drop.

None of these functions touch the board.  A blocked downward move is only
reported; locking the piece into the board is the engine's job.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Tuple

from .board import Board
from .tetromino import (
    ActivePiece,
    Position,
    Shape,
    TETROMINO_SHAPES,
    TetrominoType,
    first_filled_row,
    rotate_clockwise,
)
from .utils import has_collision


# Horizontal offsets tried, in order, when a rotation collides in place.
KICK_OFFSETS: Tuple[int, ...] = (0, 1, -1, 2, -2)


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


class MoveResult(NamedTuple):
    moved: bool
    blocked_down: bool


def spawn_position(shape: Shape, board: Board) -> Position:
    """Return the spawn position of ``shape`` on ``board``.

    The matrix is centred horizontally and lifted so that its first filled
    row sits on board row ``0``; empty leading rows end up above the board.
    """

    x = board.width // 2 - len(shape[0]) // 2
    return Position(x, -first_filled_row(shape))


def spawn(t_type: TetrominoType, board: Board) -> Optional[ActivePiece]:
    """Create a piece of ``t_type`` at its spawn position.

    Returns ``None`` when settled blocks already occupy the spawn area,
    which ends the game.
    """

    shape = TETROMINO_SHAPES[TetrominoType(t_type)]
    piece = ActivePiece(TetrominoType(t_type), shape, spawn_position(shape, board))
    if has_collision(piece, piece.position, board):
        return None
    return piece


def move(direction: Direction, piece: ActivePiece, board: Board) -> MoveResult:
    """Translate ``piece`` one cell in ``direction`` if the target is free."""

    dx, dy = _DELTAS[Direction(direction)]
    x, y = piece.position
    target = Position(x + dx, y + dy)
    if has_collision(piece, target, board):
        return MoveResult(moved=False, blocked_down=Direction(direction) is Direction.DOWN)
    piece.position = target
    return MoveResult(moved=True, blocked_down=False)


def rotate(piece: ActivePiece, board: Board) -> bool:
    """Rotate ``piece`` clockwise, kicking it sideways when needed.

    The rotated shape is tried at each of ``KICK_OFFSETS`` from the current
    position and the first collision-free candidate is committed.  The O
    piece never rotates.  Returns ``True`` if the piece changed.
    """

    if piece.type_id == TetrominoType.O:
        return False
    candidate = ActivePiece(piece.type_id, rotate_clockwise(piece.shape), piece.position)
    x, y = piece.position
    for offset in KICK_OFFSETS:
        target = Position(x + offset, y)
        if not has_collision(candidate, target, board):
            piece.shape = candidate.shape
            piece.position = target
            return True
    return False


def hard_drop(piece: ActivePiece, board: Board) -> Position:
    """Return the lowest position ``piece`` can fall to from where it is.

    The piece itself is left untouched.
    """

    x, y = piece.position
    while not has_collision(piece, Position(x, y + 1), board):
        y += 1
    return Position(x, y)
