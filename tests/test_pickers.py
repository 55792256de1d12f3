from __future__ import annotations

import random

import pytest

from tetris_engine.pickers import RandomPicker, SequencePicker
from tetris_engine.tetromino import TetrominoType


def test_sequence_picker_cycles():
    picker = SequencePicker([TetrominoType.I, TetrominoType.O])
    assert [picker.pick() for _ in range(5)] == [
        TetrominoType.I,
        TetrominoType.O,
        TetrominoType.I,
        TetrominoType.O,
        TetrominoType.I,
    ]


def test_sequence_picker_accepts_raw_ids():
    assert SequencePicker([6]).pick() is TetrominoType.T


def test_sequence_picker_requires_types():
    with pytest.raises(ValueError):
        SequencePicker([])


def test_random_picker_is_reproducible_with_seed():
    a = RandomPicker(seed=11)
    b = RandomPicker(rng=random.Random(11))
    assert [a.pick() for _ in range(50)] == [b.pick() for _ in range(50)]


def test_random_picker_covers_all_types():
    picker = RandomPicker(seed=0)
    assert {picker.pick() for _ in range(500)} == set(TetrominoType)
