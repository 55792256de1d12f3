"""Game phases and the read-only view handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .tetromino import ActivePiece, Position, Shape, TetrominoType


class GameState(str, Enum):
    """Lifecycle phase of a game session."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class PieceSnapshot:
    type_id: TetrominoType
    shape: Shape
    position: Position

    @classmethod
    def of(cls, piece: ActivePiece) -> "PieceSnapshot":
        return cls(piece.type_id, piece.shape, piece.position)


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Immutable copy of everything a renderer needs after a mutation."""

    board: NDArray[np.uint8]
    active_piece: Optional[PieceSnapshot]
    next_piece: Optional[TetrominoType]
    score: int
    level: int
    lines_cleared: int
    state: GameState
