"""Sources of the next tetromino type."""

from __future__ import annotations

import itertools
import random
from typing import Iterable, Optional, Protocol

from .tetromino import TetrominoType


class PiecePicker(Protocol):
    def pick(self) -> TetrominoType:
        ...


class RandomPicker:
    """Uniform independent choice among the seven tetrominoes."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random(seed)
        self._types = list(TetrominoType)

    def pick(self) -> TetrominoType:
        return self._rng.choice(self._types)


class SequencePicker:
    """Repeat a fixed sequence of types, for deterministic games."""

    def __init__(self, types: Iterable[TetrominoType]) -> None:
        sequence = [TetrominoType(t) for t in types]
        if not sequence:
            raise ValueError("SequencePicker needs at least one type")
        self._cycle = itertools.cycle(sequence)

    def pick(self) -> TetrominoType:
        return next(self._cycle)
