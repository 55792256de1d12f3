from __future__ import annotations

import pytest

from tetris_engine.engine import TetrisEngine
from tetris_engine.pickers import SequencePicker
from tetris_engine.scheduler import FrameScheduler
from tetris_engine.tetromino import TetrominoType


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def make_engine(scheduler):
    """Build an engine whose pieces follow ``sequence``."""

    def _make(*sequence, **kwargs):
        types = sequence or (TetrominoType.I,)
        return TetrisEngine(picker=SequencePicker(types), scheduler=scheduler, **kwargs)

    return _make
