"""Classic Life patterns as 2D boolean arrays (rows x columns)."""

from typing import Dict

import numpy as np

# Still life: unchanged by any number of ticks
BLOCK = np.array([
    [True, True],
    [True, True]
], dtype=bool)

# Period 2 oscillator, horizontal phase
BLINKER = np.array([[True, True, True]], dtype=bool)

# Moves one cell diagonally (down and right) every 4 ticks
GLIDER = np.array([
    [False, True, False],
    [False, False, True],
    [True, True, True]
], dtype=bool)

PATTERNS: Dict[str, np.ndarray] = {
    'block': BLOCK,
    'blinker': BLINKER,
    'glider': GLIDER,
}


def get_pattern(name: str) -> np.ndarray:
    """Get a copy of a named pattern.

    Args:
        name: One of 'block', 'blinker', 'glider'

    Returns:
        2D boolean numpy array

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return PATTERNS[name.lower()].copy()
    except KeyError:
        raise ValueError(f"Unknown pattern: {name}") from None
