"""Command line entry point for the Tetris engine.

Run with: `python -m tetris_engine`

By default this starts a game headlessly, lets the drop loop run for
``--ticks`` periods and prints the resulting frame, which is a quick smoke
test that the engine spawns, falls and locks pieces.  ``--pygame`` opens the
interactive window instead.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .config import GameConfig
from .engine import TetrisEngine
from .pickers import RandomPicker
from .scheduler import FrameScheduler


LOGGER = logging.getLogger(__name__)


def _print_grid(grid: List[List[int]]) -> None:
    for row in grid:
        print("".join("#" if cell else "." for cell in row))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Falling-block puzzle engine")
    parser.add_argument("--width", type=int, default=GameConfig.width)
    parser.add_argument("--height", type=int, default=GameConfig.height)
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection")
    parser.add_argument(
        "--ticks",
        type=int,
        default=0,
        help="Number of drop loop periods to simulate before printing",
    )
    parser.add_argument("--pygame", action="store_true", help="Open the pygame window")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def run_headless(config: GameConfig, seed: Optional[int], ticks: int) -> TetrisEngine:
    """Play ``ticks`` drop periods without a window and return the engine."""

    scheduler = FrameScheduler()
    engine = TetrisEngine(config, picker=RandomPicker(seed), scheduler=scheduler)
    engine.start()
    for _ in range(max(0, ticks)):
        if engine.loop.period is None:
            break
        scheduler.advance(engine.loop.period)
    engine.shutdown()
    return engine


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    config = GameConfig(width=args.width, height=args.height)

    if args.pygame:
        from .run_pygame import main as run_window

        run_window(config, args.seed)
        return

    engine = run_headless(config, args.seed, args.ticks)
    snap = engine.snapshot()
    _print_grid(engine.render())
    print(
        f"state={snap.state.value} score={snap.score} "
        f"level={snap.level} lines={snap.lines_cleared}"
    )


if __name__ == "__main__":
    main()
