"""Falling-block puzzle engine with a pluggable timer and piece source."""

from .board import Board
from .config import GameConfig
from .controller import Direction, MoveResult, hard_drop, move, rotate, spawn
from .engine import TetrisEngine
from .game_loop import GameLoop
from .game_state import GameState, PieceSnapshot, Snapshot
from .pickers import PiecePicker, RandomPicker, SequencePicker
from .scheduler import AsyncioScheduler, FrameScheduler, Scheduler
from .scoring import ClearResult, GameStats, clear_lines
from .tetromino import ActivePiece, Position, TetrominoType, rotate_clockwise
from .utils import drop_interval_ms, has_collision, render_grid

__all__ = [
    "ActivePiece",
    "AsyncioScheduler",
    "Board",
    "ClearResult",
    "Direction",
    "FrameScheduler",
    "GameConfig",
    "GameLoop",
    "GameState",
    "GameStats",
    "MoveResult",
    "PiecePicker",
    "PieceSnapshot",
    "Position",
    "RandomPicker",
    "Scheduler",
    "SequencePicker",
    "Snapshot",
    "TetrisEngine",
    "TetrominoType",
    "clear_lines",
    "drop_interval_ms",
    "hard_drop",
    "has_collision",
    "move",
    "render_grid",
    "rotate",
    "rotate_clockwise",
    "spawn",
]
