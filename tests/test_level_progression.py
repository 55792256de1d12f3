from __future__ import annotations

from tetris_engine.config import GameConfig
from tetris_engine.game_state import GameState
from tetris_engine.tetromino import TetrominoType


def _prepare_single_line(engine):
    """Fill the bottom row except where the spawned I piece will land."""

    for x in range(engine.board.width):
        if x not in (3, 4, 5, 6):
            engine.board.set_cell(x, engine.board.height - 1, 2)


def test_tenth_line_raises_level_and_speeds_up_loop(make_engine, scheduler):
    engine = make_engine(TetrominoType.I)
    engine.start()
    engine.stats.lines_cleared = 9
    _prepare_single_line(engine)

    engine.hard_drop()

    assert engine.stats.lines_cleared == 10
    assert engine.stats.level == 2
    assert engine.stats.score == 100
    assert engine.loop.period == 750
    assert scheduler.active_timers == 1

    y_before = engine.active.position.y
    scheduler.advance(749)
    assert engine.active.position.y == y_before
    scheduler.advance(1)
    assert engine.active.position.y == y_before + 1


def test_clear_at_level_two_doubles_points(make_engine):
    engine = make_engine(TetrominoType.I)
    engine.start()
    engine.stats.lines_cleared = 10
    engine.stats.level = 2
    _prepare_single_line(engine)
    engine.hard_drop()
    assert engine.stats.score == 200
    assert engine.stats.level == 2


def test_twentieth_line_reaches_level_three(make_engine):
    engine = make_engine(TetrominoType.I)
    engine.start()
    engine.stats.lines_cleared = 19
    engine.stats.level = 2
    _prepare_single_line(engine)
    engine.hard_drop()
    assert engine.stats.level == 3
    assert engine.loop.period == 700


def test_restart_resets_counters(make_engine):
    engine = make_engine(TetrominoType.I)
    engine.start()
    _prepare_single_line(engine)
    engine.hard_drop()
    assert engine.stats.score == 100
    engine.restart()
    assert (engine.stats.score, engine.stats.level, engine.stats.lines_cleared) == (0, 1, 0)
    assert engine.loop.period == 800
    assert engine.state is GameState.RUNNING


def test_custom_scoring_config(make_engine):
    config = GameConfig(points_per_line=(0, 40, 100, 300, 1200), lines_per_level=1)
    engine = make_engine(TetrominoType.I, config=config)
    engine.start()
    _prepare_single_line(engine)
    engine.hard_drop()
    assert engine.stats.score == 40
    assert engine.stats.level == 2
