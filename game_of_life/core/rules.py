"""
Standard Life Transition Rules

The B3/S23 rule written out as an explicit case table over
(cell state, live neighbor count). No alternative rule sets.
"""

from typing import Dict, Tuple

from .cell import Cell

MAX_NEIGHBORS = 8


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply the Life rule to a single cell.

    Cases are checked in this order, first match wins:

    1. Alive with fewer than 2 live neighbors dies (underpopulation).
    2. Alive with 2 or 3 live neighbors lives on (survival).
    3. Alive with more than 3 live neighbors dies (overpopulation).
    4. Dead with exactly 3 live neighbors becomes alive (reproduction).
    5. Anything else keeps its state.

    Plain 0/1 or bool states are accepted and treated as Cell values.

    Args:
        cell: Current cell state (Cell, bool or 0/1)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Cell state in the next generation

    Raises:
        ValueError: If live_neighbors is outside 0-8
    """
    if not 0 <= live_neighbors <= MAX_NEIGHBORS:
        raise ValueError(f"Neighbor count must be in [0, {MAX_NEIGHBORS}], got {live_neighbors}")

    cell = Cell.coerce(cell)

    if cell is Cell.ALIVE and live_neighbors < 2:
        return Cell.DEAD
    if cell is Cell.ALIVE and live_neighbors in (2, 3):
        return Cell.ALIVE
    if cell is Cell.ALIVE and live_neighbors > 3:
        return Cell.DEAD
    if cell is Cell.DEAD and live_neighbors == 3:
        return Cell.ALIVE
    return cell


def rule_table() -> Dict[Tuple[Cell, int], Cell]:
    """Get the complete rule table for every (state, neighbor count) pair.

    Returns:
        Dictionary of 18 entries mapping (cell, live_neighbors) to next state
    """
    rules = {}

    for cell in Cell:
        for neighbors in range(MAX_NEIGHBORS + 1):
            rules[(cell, neighbors)] = next_state(cell, neighbors)

    return rules
