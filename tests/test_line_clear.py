from __future__ import annotations

import pytest

from tetris_engine.board import Board
from tetris_engine.scoring import GameStats, clear_lines, level_for_lines, points_for


def _fill_row(board: Board, y: int, value: int = 1):
    for x in range(board.width):
        board.set_cell(x, y, value)


def test_two_full_rows_removed_in_one_pass():
    board = Board(10, 20)
    _fill_row(board, 3)
    _fill_row(board, 4)
    board.set_cell(0, 0, 2)
    board.set_cell(1, 2, 3)
    board.set_cell(2, 5, 4)
    board.set_cell(9, 19, 5)

    result = clear_lines(board)

    assert result.removed_count == 2
    assert result.board is board
    assert board.grid.shape == (20, 10)
    assert not board.grid[0].any()
    assert not board.grid[1].any()
    assert board.get_cell(0, 2) == 2
    assert board.get_cell(1, 4) == 3
    assert board.get_cell(2, 5) == 4
    assert board.get_cell(9, 19) == 5
    assert not board.full_rows().any()


def test_non_adjacent_full_rows_cleared_together():
    board = Board(4, 6)
    _fill_row(board, 1)
    _fill_row(board, 3)
    _fill_row(board, 5)
    board.set_cell(0, 2, 7)
    board.set_cell(3, 4, 6)

    assert clear_lines(board).removed_count == 3
    assert board.grid.tolist() == [
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [7, 0, 0, 0],
        [0, 0, 0, 6],
    ]


def test_no_full_rows_leaves_board_untouched():
    board = Board()
    for x in range(board.width - 1):
        board.set_cell(x, 19, 1)
    before = board.cells.copy()
    assert clear_lines(board).removed_count == 0
    assert (board.cells == before).all()


@pytest.mark.parametrize("removed, points", [(0, 0), (1, 100), (2, 300), (3, 500), (4, 800)])
def test_points_table(removed: int, points: int):
    assert points_for(removed, 1) == points
    assert points_for(removed, 2) == 2 * points


def test_points_outside_table_are_zero():
    assert points_for(5, 3) == 0


def test_level_thresholds():
    assert level_for_lines(0) == 1
    assert level_for_lines(9) == 1
    assert level_for_lines(10) == 2
    assert level_for_lines(19) == 2
    assert level_for_lines(20) == 3


def test_record_clear_uses_level_before_the_clear():
    stats = GameStats()
    assert stats.record_clear(4) == 800
    assert stats.record_clear(4) == 800
    assert stats.level == 1
    assert stats.record_clear(2) == 300
    assert stats.lines_cleared == 10
    assert stats.level == 2
    assert stats.record_clear(1) == 200
    assert stats.score == 800 + 800 + 300 + 200


def test_level_three_at_twenty_lines():
    stats = GameStats()
    for _ in range(5):
        stats.record_clear(4)
    assert stats.lines_cleared == 20
    assert stats.level == 3


def test_zero_rows_change_nothing():
    stats = GameStats(score=50, level=2, lines_cleared=12)
    assert stats.record_clear(0) == 0
    assert (stats.score, stats.level, stats.lines_cleared) == (50, 2, 12)
