"""Bitmap projections of a universe."""

from .canvas import (
    ALIVE_COLOUR, CELL_SIZE, DEAD_COLOUR, GRID_COLOUR,
    canvas_shape, draw_canvas, parse_colour
)

__all__ = [
    'ALIVE_COLOUR',
    'CELL_SIZE',
    'DEAD_COLOUR',
    'GRID_COLOUR',
    'canvas_shape',
    'draw_canvas',
    'parse_colour',
]
