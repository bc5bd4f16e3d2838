"""Toroidal Conway's Game of Life.

A fixed-size wraparound grid of cells advanced one generation at a time
by the standard Life rule (B3/S23).
"""

from .core.cell import Cell
from .core.errors import InvalidDimensions
from .core.universe import Universe

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'InvalidDimensions',
    'Universe',
]
