"""Simple pygame front-end for the Tetris engine.

This module provides a playable window on top of :class:`TetrisEngine`.  It
only translates key presses into engine commands and draws snapshots; all
game rules live in the engine.  The drop loop runs on a
:class:`FrameScheduler` advanced by the frame clock.

Keys: Arrows/WASD move, Up/W rotate, Space hard drop, P pause, Enter start,
R restart.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Dict, Optional, Tuple

import pygame

from .config import GameConfig
from .engine import TetrisEngine
from .game_state import GameState, Snapshot
from .pickers import RandomPicker
from .scheduler import FrameScheduler
from .tetromino import SHAPE_COLORS, TETROMINO_SHAPES, shape_cells

# Size of a single board cell in pixels
CELL_SIZE = 30
# Width of the score / next piece panel in pixels
SIDEBAR = 6 * CELL_SIZE
# Frames per second to run the game loop at
FPS = 60

LOGGER = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def _hex_to_rgb(value: str) -> Color:
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


# Mapping from the integer stored in the board grid to a colour
CELL_COLORS: Dict[int, Color] = {0: (0, 0, 0)}
for shape, color in SHAPE_COLORS.items():
    CELL_COLORS[int(shape)] = _hex_to_rgb(color)

KEY_COMMANDS: Dict[int, str] = {
    pygame.K_LEFT: "move_left",
    pygame.K_a: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_d: "move_right",
    pygame.K_DOWN: "soft_drop",
    pygame.K_s: "soft_drop",
    pygame.K_UP: "rotate",
    pygame.K_w: "rotate",
    pygame.K_SPACE: "hard_drop",
    pygame.K_p: "toggle_pause",
    pygame.K_RETURN: "start",
    pygame.K_r: "restart",
}


def handle_key(event: pygame.event.Event, engine: TetrisEngine) -> bool:
    """Dispatch a key press to the matching engine command.

    Returns ``True`` if the key is bound, whether or not the engine accepted
    the command.
    """

    command = KEY_COMMANDS.get(event.key)
    if command is None:
        return False
    getattr(engine, command)()
    return True


def _draw_cell(screen: pygame.Surface, x: int, y: int, color: Color, origin=(0, 0)) -> None:
    rect = pygame.Rect(origin[0] + x * CELL_SIZE, origin[1] + y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, (50, 50, 50), rect, 1)


def draw_board(screen: pygame.Surface, engine: TetrisEngine) -> None:
    """Render the settled cells with the active piece overlaid."""

    for y, row in enumerate(engine.render()):
        for x, value in enumerate(row):
            _draw_cell(screen, x, y, CELL_COLORS[value])


def draw_sidebar(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Render score, level, lines and the next piece preview."""

    left = snap.board.shape[1] * CELL_SIZE + 10
    lines = [
        f"Score: {snap.score}",
        f"Level: {snap.level}",
        f"Lines: {snap.lines_cleared}",
        "Next",
    ]
    for i, text in enumerate(lines):
        screen.blit(font.render(text, True, (255, 255, 255)), (left, 10 + i * 24))
    if snap.next_piece is not None:
        color = CELL_COLORS[int(snap.next_piece)]
        for x, y in shape_cells(TETROMINO_SHAPES[snap.next_piece]):
            _draw_cell(screen, x, y, color, origin=(left, 10 + len(lines) * 24))
    status = {
        GameState.IDLE: "Enter to start",
        GameState.PAUSED: "Paused",
        GameState.GAME_OVER: "Game over - R",
    }.get(snap.state)
    if status:
        screen.blit(font.render(status, True, (255, 200, 0)), (left, 10 + (len(lines) + 5) * 24))


class GameRunner:
    """Own the pygame window and feed frames to the engine."""

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
        self._config = config or GameConfig()
        self._running = False
        self._task: asyncio.Task | None = None
        self._scheduler = FrameScheduler()
        self.engine = TetrisEngine(
            self._config, picker=RandomPicker(seed), scheduler=self._scheduler
        )

    @property
    def running(self) -> bool:
        return self._running

    async def _run_loop(self) -> None:
        # Ensure SDL/pygame binds to the visible canvas in the page when running on Web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        screen = pygame.display.set_mode(
            (self._config.width * CELL_SIZE + SIDEBAR, self._config.height * CELL_SIZE)
        )
        pygame.display.set_caption("Tetris")
        font = pygame.font.SysFont(None, 24)
        clock = pygame.time.Clock()

        self.engine.start()
        self._running = True
        while self._running:
            dt = clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(event, self.engine)

            self._scheduler.advance(dt)

            snap = self.engine.snapshot()
            screen.fill((0, 0, 0))
            draw_board(screen, self.engine)
            draw_sidebar(screen, font, snap)
            pygame.display.set_caption(
                f"Tetris - {'Paused - ' if snap.state is GameState.PAUSED else ''}Score: {snap.score}"
            )
            pygame.display.flip()

            # Yield to the browser/host event loop to keep UI responsive
            await asyncio.sleep(0)

        self.engine.shutdown()
        pygame.quit()
        LOGGER.info("Window closed")

    def start(self) -> None:
        if self._task and not self._task.done():
            LOGGER.info("Game already running")
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop (e.g., plain Python); run synchronously
            asyncio.run(self._run_loop())
        else:
            self._task = loop.create_task(self._run_loop())

    def stop(self) -> None:
        self._running = False


def main(config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
    """Open the window and block until it is closed."""

    GameRunner(config, seed).start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
