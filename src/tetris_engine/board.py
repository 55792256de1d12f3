"""Board representation for the Tetris playfield.

Cells live in a flat ``uint8`` arena of length ``width * height`` indexed as
``y * width + x``.  Row-oriented operations work on a 2D view of the same
buffer, so no nested lists are ever aliased.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .config import HEIGHT, WIDTH
from .tetromino import ActivePiece


Arena = NDArray[np.uint8]


def create_empty_arena(width: int = WIDTH, height: int = HEIGHT) -> Arena:
    """Return a new empty flat arena filled with zeros.

    Raises:
        ValueError: If ``width`` or ``height`` is not positive.
    """

    if width <= 0 or height <= 0:
        raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
    return np.zeros(width * height, dtype=np.uint8)


class Board:
    """Tetris board holding the settled cells."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.cells: Arena = create_empty_arena(width, height)
        self.width = width
        self.height = height

    @property
    def grid(self) -> NDArray[np.uint8]:
        """Read-only ``(height, width)`` view of the arena."""

        view = self.cells.reshape(self.height, self.width)
        view.flags.writeable = False
        return view

    def _index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError("Cell out of bounds")

    def get_cell(self, x: int, y: int) -> int:
        """Safely return the value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        return int(self.cells[self._index(x, y)])

    def set_cell(self, x: int, y: int, value: int) -> None:
        """Safely set the value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        self.cells[self._index(x, y)] = np.uint8(value)

    def is_cell_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` blocks a piece.

        Columns outside the board and rows at or below the floor count as
        occupied so walls and floor reject pieces automatically.  Rows above
        the board (``y < 0``) are always free: pieces spawn partly there.
        """

        if x < 0 or x >= self.width or y >= self.height:
            return True
        if y < 0:
            return False
        return bool(self.cells[y * self.width + x] != 0)

    def merge(self, piece: ActivePiece) -> bool:
        """Write ``piece`` into the board and report whether it topped out.

        Cells at ``y >= 0`` receive the piece's type id.  Cells above the
        board cannot be stored; if there are any the return value is
        ``True`` and the game is over.
        """

        top_out = False
        value = np.uint8(piece.type_id)
        for x, y in piece.blocks():
            if y < 0:
                top_out = True
                continue
            self.cells[self._index(x, y)] = value
        return top_out

    def full_rows(self) -> NDArray[np.bool_]:
        """Return a mask of the rows whose every cell is occupied."""

        return np.all(self.cells.reshape(self.height, self.width) != 0, axis=1)

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        All full rows are found in a single pass and dropped together; the
        same number of empty rows is inserted at the top.
        """

        rows = self.cells.reshape(self.height, self.width)
        full = self.full_rows()
        cleared = int(np.count_nonzero(full))
        if cleared:
            remaining = rows[~full]
            new_rows = np.zeros((cleared, self.width), dtype=self.cells.dtype)
            self.cells[:] = np.vstack((new_rows, remaining)).ravel()
        return cleared

    def reset(self) -> None:
        """Empty every cell in place."""

        self.cells.fill(0)
