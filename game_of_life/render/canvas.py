"""Raster canvas projection of a universe.

Draws the grid as an RGB image: square cells of ``cell_size`` pixels
separated by 1 pixel grid lines, with a 1 pixel border. Reads only
``width``, ``height`` and the cell buffer, never mutates the universe.
"""

import logging
from typing import Tuple

import numpy as np

from ..core.cell import Cell
from ..core.universe import Universe

logger = logging.getLogger(__name__)

CELL_SIZE = 5  # px
GRID_COLOUR = "#CCCCCC"
DEAD_COLOUR = "#FFFFFF"
ALIVE_COLOUR = "#000000"

RGB = Tuple[int, int, int]


def parse_colour(colour: str) -> RGB:
    """Convert a '#RRGGBB' string to an (r, g, b) tuple.

    Raises:
        ValueError: If the string is not a 6-digit hex colour
    """
    if not (isinstance(colour, str) and len(colour) == 7 and colour.startswith('#')):
        raise ValueError(f"Colour must look like '#RRGGBB', got {colour!r}")
    try:
        return tuple(int(colour[i:i + 2], 16) for i in (1, 3, 5))
    except ValueError:
        raise ValueError(f"Colour must look like '#RRGGBB', got {colour!r}") from None


def canvas_shape(universe: Universe, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    """Get (pixel_height, pixel_width) of the canvas for a universe."""
    pitch = cell_size + 1
    return (pitch * universe.height + 1, pitch * universe.width + 1)


def draw_canvas(universe: Universe, cell_size: int = CELL_SIZE,
                grid_colour: str = GRID_COLOUR,
                dead_colour: str = DEAD_COLOUR,
                alive_colour: str = ALIVE_COLOUR) -> np.ndarray:
    """Render the universe to an RGB image.

    Args:
        universe: Universe to draw
        cell_size: Side of each cell in pixels (>= 1)
        grid_colour: Colour of the separating grid lines
        dead_colour: Fill of dead cells
        alive_colour: Fill of live cells

    Returns:
        uint8 array of shape (pixel_height, pixel_width, 3)
    """
    if cell_size < 1:
        raise ValueError(f"Cell size must be at least 1 pixel, got {cell_size}")

    pitch = cell_size + 1
    pixel_height, pixel_width = canvas_shape(universe, cell_size)

    image = np.empty((pixel_height, pixel_width, 3), dtype=np.uint8)
    image[:, :] = parse_colour(grid_colour)

    fills = {
        Cell.DEAD: np.array(parse_colour(dead_colour), dtype=np.uint8),
        Cell.ALIVE: np.array(parse_colour(alive_colour), dtype=np.uint8),
    }

    cells = universe.cells
    for row in range(universe.height):
        for col in range(universe.width):
            state = Cell(int(cells[universe.index_of(row, col)]))
            top = row * pitch + 1
            left = col * pitch + 1
            image[top:top + cell_size, left:left + cell_size] = fills[state]

    logger.debug(f"Drew {pixel_width}x{pixel_height} canvas for generation {universe.generation}")
    return image
