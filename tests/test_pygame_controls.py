from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from tetris_engine.game_state import GameState
from tetris_engine.run_pygame import CELL_COLORS, KEY_COMMANDS, handle_key
from tetris_engine.tetromino import Position, TetrominoType


def _key(key: int):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_arrow_and_wasd_keys_share_commands():
    assert KEY_COMMANDS[pygame.K_LEFT] == KEY_COMMANDS[pygame.K_a] == "move_left"
    assert KEY_COMMANDS[pygame.K_RIGHT] == KEY_COMMANDS[pygame.K_d] == "move_right"
    assert KEY_COMMANDS[pygame.K_DOWN] == KEY_COMMANDS[pygame.K_s] == "soft_drop"
    assert KEY_COMMANDS[pygame.K_UP] == KEY_COMMANDS[pygame.K_w] == "rotate"


def test_keys_drive_engine(make_engine):
    engine = make_engine(TetrominoType.T)
    assert handle_key(_key(pygame.K_RETURN), engine)
    assert engine.state is GameState.RUNNING

    handle_key(_key(pygame.K_LEFT), engine)
    assert engine.active.position == Position(3, 0)
    handle_key(_key(pygame.K_p), engine)
    assert engine.state is GameState.PAUSED
    handle_key(_key(pygame.K_p), engine)
    assert engine.state is GameState.RUNNING

    handle_key(_key(pygame.K_SPACE), engine)
    assert engine.board.get_cell(3, 19) == int(TetrominoType.T)


def test_unbound_key_is_ignored(make_engine):
    engine = make_engine()
    assert handle_key(_key(pygame.K_F1), engine) is False
    assert engine.state is GameState.IDLE


def test_every_board_value_has_a_colour():
    assert set(CELL_COLORS) == {0} | {int(t) for t in TetrominoType}
    assert CELL_COLORS[int(TetrominoType.I)] == (0, 255, 255)
