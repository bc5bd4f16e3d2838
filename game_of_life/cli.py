"""Terminal host loop for the universe.

Constructs a universe once, then ticks it on a fixed cadence and prints
the text projection after every generation.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional, TextIO

from .core.errors import InvalidDimensions
from .core.universe import DEFAULT_HEIGHT, DEFAULT_WIDTH, Universe
from .patterns import PATTERNS, default_seed, get_pattern

logger = logging.getLogger(__name__)

PATTERN_CHOICES = ['default'] + sorted(PATTERNS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Toroidal Conway's Game of Life")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Universe width (columns)")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Universe height (rows)")
    parser.add_argument("--generations", type=int, default=100, help="Number of ticks to run")
    parser.add_argument("--interval", type=float, default=0.1, help="Seconds between ticks")
    parser.add_argument("--pattern", choices=PATTERN_CHOICES, default="default",
                        help="Initial pattern (default: index divisible by 2 or 7)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def build_universe(width: int, height: int, pattern: str = "default") -> Universe:
    """Create the starting universe for a named pattern.

    Named patterns are stamped near the middle of an otherwise dead universe.

    Raises:
        InvalidDimensions: If width or height is not positive
        ValueError: If the pattern name is unknown
    """
    if pattern == "default":
        return Universe(width, height, default_seed)

    shape = get_pattern(pattern)
    row = max(0, (height - shape.shape[0]) // 2) if height > 0 else 0
    column = max(0, (width - shape.shape[1]) // 2) if width > 0 else 0
    return Universe.from_pattern(shape, width, height, row, column)


def run(universe: Universe, generations: int, interval: float = 0.0,
        out: Optional[TextIO] = None) -> Universe:
    """Tick the universe and write its text projection after every generation.

    Args:
        universe: Universe to advance (modified in place)
        generations: Number of ticks
        interval: Seconds to sleep between ticks
        out: Stream receiving the rendered frames (stdout if None)

    Returns:
        The same universe, for chaining
    """
    out = out if out is not None else sys.stdout
    out.write(universe.render())
    for _ in range(generations):
        if interval > 0:
            time.sleep(interval)
        universe.tick()
        out.write("\n")
        out.write(universe.render())
        out.flush()
    return universe


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    if args.generations < 0:
        logger.error(f"Generations must be non-negative, got {args.generations}")
        return 1

    try:
        universe = build_universe(args.width, args.height, args.pattern)
    except InvalidDimensions as e:
        logger.error(f"Cannot create universe: {e}")
        return 1

    logger.info(f"Running {universe!r} for {args.generations} generations")
    initial_live = universe.live_count()
    run(universe, args.generations, args.interval)
    logger.info(f"Finished at generation {universe.generation}: "
                f"{initial_live} -> {universe.live_count()} live cells")
    return 0


if __name__ == "__main__":
    sys.exit(main())
