"""Toroidal universe for Conway's Game of Life.

The universe owns a fixed-size, row-major buffer of cell states and
advances it one generation per tick. Edges wrap in both directions, so
the row above row 0 is the last row and the column left of column 0 is
the last column.
"""

import logging
from typing import Iterable, Optional, Set, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidDimensions
from .rules import next_state
from ..patterns.seeds import Seed, dead_seed, default_seed, seed_from_cells

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 64


def _is_positive_int(value) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, np.integer)) and value > 0


class Universe:
    """Fixed-size toroidal grid of cells.

    Attributes:
        width: Number of columns
        height: Number of rows
        cells: Read-only uint8 view of the buffer, length width * height,
            where (row, column) lives at row * width + column
        generation: Number of ticks applied since construction
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 seed: Optional[Seed] = None):
        """Create a universe and seed every cell.

        Args:
            width: Number of columns (> 0)
            height: Number of rows (> 0)
            seed: Callable mapping linear index to initial Cell
                (default_seed if None)

        Raises:
            InvalidDimensions: If width or height is not a positive integer
        """
        if not (_is_positive_int(width) and _is_positive_int(height)):
            raise InvalidDimensions(width, height)

        self._width = int(width)
        self._height = int(height)
        self.generation = 0

        seed = seed if seed is not None else default_seed
        self._cells = np.fromiter(
            (Cell.coerce(seed(i)) for i in range(self._width * self._height)),
            dtype=np.uint8,
            count=self._width * self._height,
        )

        logger.debug(f"Created universe {self._width}x{self._height} with {self.live_count()} live cells")

    @classmethod
    def new(cls) -> 'Universe':
        """Create the default 64x64 universe with the default seed."""
        return cls(DEFAULT_WIDTH, DEFAULT_HEIGHT, default_seed)

    @classmethod
    def from_cells(cls, width: int, height: int,
                   alive: Iterable[Tuple[int, int]]) -> 'Universe':
        """Create a universe whose only live cells are the given (row, column) pairs."""
        if not (_is_positive_int(width) and _is_positive_int(height)):
            raise InvalidDimensions(width, height)
        return cls(width, height, seed_from_cells(width, height, alive))

    @classmethod
    def from_pattern(cls, pattern: np.ndarray, width: int, height: int,
                     row: int = 0, column: int = 0) -> 'Universe':
        """Create a dead universe with a pattern stamped at (row, column).

        Args:
            pattern: 2D boolean array (rows x columns)
            width: Universe width
            height: Universe height
            row: Row of the pattern's top-left cell
            column: Column of the pattern's top-left cell

        Returns:
            Universe: New universe containing the pattern, wrapped at the edges
        """
        pattern = np.asarray(pattern, dtype=bool)
        if pattern.ndim != 2:
            raise ValueError(f"Pattern must be 2D, got shape {pattern.shape}")

        pattern_rows, pattern_cols = np.nonzero(pattern)
        alive = [(row + int(pr), column + int(pc)) for pr, pc in zip(pattern_rows, pattern_cols)]
        return cls.from_cells(width, height, alive)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current generation buffer."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def index_of(self, row: int, column: int) -> int:
        """Map (row, column) to a linear buffer index.

        Callers must pass 0 <= row < height and 0 <= column < width;
        nothing is wrapped or validated here.
        """
        return row * self._width + column

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count live cells among the 8 toroidal neighbors of (row, column).

        Offsets of height - 1 and width - 1 stand in for -1: adding
        dim - 1 and reducing modulo dim moves one step back with
        wraparound and never produces a negative coordinate.

        On grids narrower or shorter than 3 cells some offsets land on
        the same cell (or on the cell itself) and are counted each time.

        Returns:
            Number of live neighbors (0-8)
        """
        count = 0

        for delta_row in (self._height - 1, 0, 1):
            for delta_col in (self._width - 1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue

                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (column + delta_col) % self._width
                count += int(self._cells[self.index_of(neighbor_row, neighbor_col)])

        return count

    def tick(self) -> None:
        """Advance the universe one generation.

        Every cell is evaluated against the current buffer only; results go
        to a separate next-generation buffer which replaces the current one
        once the whole grid has been computed.
        """
        next_cells = self._cells.copy()

        for row in range(self._height):
            for col in range(self._width):
                index = self.index_of(row, col)
                cell = Cell(int(self._cells[index]))
                live_neighbors = self.live_neighbor_count(row, col)

                next_cells[index] = next_state(cell, live_neighbors)

        self._cells = next_cells
        self.generation += 1

        logger.debug(f"Generation {self.generation}: {self.live_count()} live cells")

    def step(self, generations: int = 1) -> int:
        """Tick several generations.

        Args:
            generations: Number of ticks to apply (>= 0)

        Returns:
            Number of live cells after the last tick

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.tick()

        return self.live_count()

    def render(self) -> str:
        """Text snapshot: one glyph per cell, one line per row, each line newline-terminated."""
        lines = []
        for row in range(self._height):
            start = self.index_of(row, 0)
            line = ''.join(Cell(int(value)).glyph for value in self._cells[start:start + self._width])
            lines.append(line + '\n')
        return ''.join(lines)

    def cell(self, row: int, column: int) -> Cell:
        """Get the state at (row, column).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(f"Coordinates ({row}, {column}) out of bounds for {self._width}x{self._height} universe")
        return Cell(int(self._cells[self.index_of(row, column)]))

    def live_count(self) -> int:
        """Count total number of live cells."""
        return int(np.count_nonzero(self._cells))

    def live_cells(self) -> Set[Tuple[int, int]]:
        """Get the set of (row, column) coordinates of live cells."""
        return {divmod(int(index), self._width) for index in np.flatnonzero(self._cells)}

    def to_array(self) -> np.ndarray:
        """Get a 2D (height, width) boolean copy of the current generation."""
        return self._cells.reshape(self._height, self._width).astype(bool)

    def __str__(self) -> str:
        return self.render()

    # Mutable, so not hashable
    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Universe):
            return NotImplemented
        return (self._width == other._width and
                self._height == other._height and
                np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return (f"Universe({self._width}x{self._height}, generation={self.generation}, "
                f"alive={self.live_count()})")


def dead_universe(width: int, height: int) -> Universe:
    """Factory for an all-dead universe."""
    return Universe(width, height, dead_seed)
