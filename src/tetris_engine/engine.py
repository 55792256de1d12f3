"""Game state machine tying the board, the active piece and the drop loop.

:class:`TetrisEngine` owns all mutable game data.  Callers drive it through
command methods and read it back through :meth:`TetrisEngine.snapshot`.
Commands that make no sense in the current phase are ignored; the only
exception raised is a ``ValueError`` for a malformed :class:`GameConfig`.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

from . import controller
from .board import Board
from .config import GameConfig
from .controller import Direction
from .game_loop import GameLoop
from .game_state import GameState, PieceSnapshot, Snapshot
from .pickers import PiecePicker, RandomPicker
from .scheduler import FrameScheduler, Scheduler
from .scoring import GameStats, clear_lines
from .tetromino import ActivePiece, TetrominoType
from .utils import render_grid


LOGGER = logging.getLogger(__name__)

Listener = Callable[[Snapshot], None]


class TetrisEngine:
    """Coordinate a single game session.

    Parameters
    ----------
    config:
        Board size, timing and scoring parameters.
    picker:
        Source of tetromino types.  Defaults to a uniform :class:`RandomPicker`.
    scheduler:
        Timer backend for the drop loop.  Defaults to a
        :class:`FrameScheduler` that the host must advance.
    on_change:
        Optional callable receiving a :class:`Snapshot` after every accepted
        command or tick.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        picker: Optional[PiecePicker] = None,
        scheduler: Optional[Scheduler] = None,
        on_change: Optional[Listener] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.picker = picker or RandomPicker()
        self.scheduler = scheduler or FrameScheduler()
        self.board = Board(self.config.width, self.config.height)
        self.stats = GameStats()
        self.active: Optional[ActivePiece] = None
        self.next_type: Optional[TetrominoType] = None
        self.state = GameState.IDLE
        self._lock = threading.RLock()
        self.loop = GameLoop(self.scheduler, self._on_tick, self.config, lock=self._lock)
        self._on_change = on_change

    # Read side --------------------------------------------------------
    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the current game."""

        with self._lock:
            board = self.board.grid.copy()
            board.flags.writeable = False
            return Snapshot(
                board=board,
                active_piece=PieceSnapshot.of(self.active) if self.active else None,
                next_piece=self.next_type,
                score=self.stats.score,
                level=self.stats.level,
                lines_cleared=self.stats.lines_cleared,
                state=self.state,
            )

    def render(self) -> List[List[int]]:
        """Return the board with the active piece drawn in."""

        with self._lock:
            return render_grid(self.board, self.active)

    # Lifecycle commands -----------------------------------------------
    def start(self) -> bool:
        """Begin a fresh game from any state."""

        with self._lock:
            self.loop.stop()
            self.board.reset()
            self.stats.reset()
            self.active = None
            self.next_type = self.picker.pick()
            self.state = GameState.RUNNING
            LOGGER.info("Game started")
            if self._spawn_next():
                self.loop.start(self.stats.level)
            self._changed()
            return True

    def restart(self) -> bool:
        """Abandon the current game and start a new one."""

        return self.start()

    def pause(self) -> bool:
        with self._lock:
            if self.state is not GameState.RUNNING:
                LOGGER.debug("Pause ignored: game is %s", self.state.value)
                return False
            self.loop.stop()
            self.state = GameState.PAUSED
            LOGGER.info("Paused")
            self._changed()
            return True

    def resume(self) -> bool:
        with self._lock:
            if self.state is not GameState.PAUSED:
                LOGGER.debug("Resume ignored: game is %s", self.state.value)
                return False
            self.state = GameState.RUNNING
            self.loop.start(self.stats.level)
            LOGGER.info("Resumed")
            self._changed()
            return True

    def toggle_pause(self) -> bool:
        with self._lock:
            if self.state is GameState.PAUSED:
                return self.resume()
            return self.pause()

    def shutdown(self) -> None:
        """Stop the drop loop for teardown without touching game data."""

        with self._lock:
            self.loop.stop()

    # Piece commands ---------------------------------------------------
    def move_left(self) -> bool:
        return self._shift(Direction.LEFT)

    def move_right(self) -> bool:
        return self._shift(Direction.RIGHT)

    def soft_drop(self) -> bool:
        """Move the piece down one row, locking it if it cannot fall.

        Returns ``True`` only when the piece actually moved.
        """

        with self._lock:
            if not self._accepting():
                return False
            moved = self._step_down()
            self._changed()
            return moved

    def rotate(self) -> bool:
        with self._lock:
            if not self._accepting():
                return False
            rotated = controller.rotate(self.active, self.board)
            if rotated:
                self._changed()
            return rotated

    def hard_drop(self) -> bool:
        """Drop the piece to its resting row and lock it."""

        with self._lock:
            if not self._accepting():
                return False
            self.active.position = controller.hard_drop(self.active, self.board)
            self._lock_piece()
            self._changed()
            return True

    # Internals --------------------------------------------------------
    def _accepting(self) -> bool:
        if self.state is not GameState.RUNNING or self.active is None:
            LOGGER.debug("Command ignored: game is %s", self.state.value)
            return False
        return True

    def _shift(self, direction: Direction) -> bool:
        with self._lock:
            if not self._accepting():
                return False
            result = controller.move(direction, self.active, self.board)
            if result.moved:
                self._changed()
            return result.moved

    def _on_tick(self) -> None:
        with self._lock:
            if not self._accepting():
                return
            self._step_down()
            self._changed()

    def _step_down(self) -> bool:
        result = controller.move(Direction.DOWN, self.active, self.board)
        if result.blocked_down:
            self._lock_piece()
        return result.moved

    def _lock_piece(self) -> None:
        """Merge the active piece, clear rows and bring in the next piece."""

        piece = self.active
        if self.board.merge(piece):
            self._game_over("piece locked above the board")
            return

        removed, _ = clear_lines(self.board)
        if removed:
            level_before = self.stats.level
            awarded = self.stats.record_clear(
                removed, self.config.points_per_line, self.config.lines_per_level
            )
            LOGGER.debug(
                "Cleared %d row(s) for %d points. Score: %d",
                removed,
                awarded,
                self.stats.score,
            )
            if self.stats.level != level_before:
                LOGGER.debug("Level up: %d", self.stats.level)
                self.loop.start(self.stats.level)

        self._spawn_next()

    def _spawn_next(self) -> bool:
        t_type = self.next_type if self.next_type is not None else self.picker.pick()
        piece = controller.spawn(t_type, self.board)
        if piece is None:
            self._game_over(f"{t_type.name} piece cannot spawn")
            return False
        self.active = piece
        self.next_type = self.picker.pick()
        return True

    def _game_over(self, reason: str) -> None:
        self.loop.stop()
        self.active = None
        self.state = GameState.GAME_OVER
        LOGGER.info("Game over (%s). Final score: %d", reason, self.stats.score)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot())
