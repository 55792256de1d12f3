"""Tetromino catalogue and the active piece record.

Every shape is stored as an ``N x N`` matrix whose non-zero cells hold the
piece's type id, which is the same value written into the board when the
piece settles.  Pieces are plain data; all behaviour lives in pure functions
operating on ``(type_id, shape)`` so no per-piece classes are needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from typing import Dict, List, NamedTuple, Tuple

Shape = Tuple[Tuple[int, ...], ...]


class TetrominoType(IntEnum):
    """The seven standard tetrominoes, valued by the id stored on the board."""

    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


class Position(NamedTuple):
    """Top-left corner of a shape matrix in board coordinates."""

    x: int
    y: int


# Spawn orientation of every piece with ``1`` marking filled cells.  The
# I piece keeps an empty leading row so it spawns on the second matrix row.
_BASE_SHAPES: Dict[TetrominoType, List[List[int]]] = {
    TetrominoType.I: [
        [0, 0, 0, 0],
        [1, 1, 1, 1],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ],
    TetrominoType.J: [
        [1, 0, 0],
        [1, 1, 1],
        [0, 0, 0],
    ],
    TetrominoType.L: [
        [0, 0, 1],
        [1, 1, 1],
        [0, 0, 0],
    ],
    TetrominoType.O: [
        [1, 1],
        [1, 1],
    ],
    TetrominoType.S: [
        [0, 1, 1],
        [1, 1, 0],
        [0, 0, 0],
    ],
    TetrominoType.T: [
        [0, 1, 0],
        [1, 1, 1],
        [0, 0, 0],
    ],
    TetrominoType.Z: [
        [1, 1, 0],
        [0, 1, 1],
        [0, 0, 0],
    ],
}


def _paint(rows: List[List[int]], t_type: TetrominoType) -> Shape:
    return tuple(tuple(int(t_type) if cell else 0 for cell in row) for row in rows)


TETROMINO_SHAPES: Dict[TetrominoType, Shape] = {
    t_type: _paint(rows, t_type) for t_type, rows in _BASE_SHAPES.items()
}

# Display attribute only; the engine never reads it.
SHAPE_COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#00FFFF",
    TetrominoType.J: "#0000FF",
    TetrominoType.L: "#FFA500",
    TetrominoType.O: "#FFFF00",
    TetrominoType.S: "#00FF00",
    TetrominoType.T: "#800080",
    TetrominoType.Z: "#FF0000",
}


def rotate_clockwise(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    Cell ``(y, x)`` of the source matrix moves to ``(x, N - 1 - y)`` of the
    result, so the matrix size and the bounding box origin are preserved.
    """

    n = len(shape)
    rotated = [[0] * n for _ in range(n)]
    for y in range(n):
        for x in range(n):
            rotated[x][n - 1 - y] = shape[y][x]
    return tuple(tuple(row) for row in rotated)


@lru_cache(maxsize=None)
def shape_cells(shape: Shape) -> Tuple[Tuple[int, int], ...]:
    """Return the ``(x, y)`` offsets of the filled cells of ``shape``."""

    return tuple(
        (x, y) for y, row in enumerate(shape) for x, cell in enumerate(row) if cell
    )


def first_filled_row(shape: Shape) -> int:
    """Return the index of the first matrix row containing a filled cell."""

    for index, row in enumerate(shape):
        if any(row):
            return index
    return 0


@dataclass
class ActivePiece:
    """The falling piece controlled by the player."""

    type_id: TetrominoType
    shape: Shape
    position: Position = Position(0, 0)

    @classmethod
    def of(cls, t_type: TetrominoType, position: Position = Position(0, 0)) -> "ActivePiece":
        """Create a piece of ``t_type`` in its spawn orientation."""

        t_type = TetrominoType(t_type)
        return cls(t_type, TETROMINO_SHAPES[t_type], Position(*position))

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the global ``(x, y)`` coordinates covered by this piece."""

        px, py = self.position
        return [(px + dx, py + dy) for dx, dy in shape_cells(self.shape)]
