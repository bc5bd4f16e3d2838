"""Seeding functions mapping a linear cell index to an initial state.

A seed is any callable ``seed(i) -> Cell`` for ``0 <= i < width * height``.
"""

from typing import Callable, Iterable, Tuple

from ..core.cell import Cell
from ..core.errors import InvalidDimensions

Seed = Callable[[int], Cell]


def default_seed(index: int) -> Cell:
    """Alive when the index is divisible by 2 or by 7."""
    if index % 2 == 0 or index % 7 == 0:
        return Cell.ALIVE
    return Cell.DEAD


def dead_seed(index: int) -> Cell:
    """Every cell starts dead."""
    return Cell.DEAD


def seed_from_cells(width: int, height: int, alive: Iterable[Tuple[int, int]]) -> Seed:
    """Build a seed whose live set is the given (row, column) pairs.

    Coordinates are wrapped onto the torus, so (-1, 0) is the last row.

    Args:
        width: Universe width the seed is meant for
        height: Universe height the seed is meant for
        alive: (row, column) pairs to mark alive

    Returns:
        Seed callable over linear indices

    Raises:
        InvalidDimensions: If width or height is less than 1
    """
    if width < 1 or height < 1:
        raise InvalidDimensions(width, height)

    live_indices = frozenset(
        (row % height) * width + (column % width) for row, column in alive
    )

    def seed(index: int) -> Cell:
        return Cell.ALIVE if index in live_indices else Cell.DEAD

    return seed
