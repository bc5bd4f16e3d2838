"""Seed functions and named starting patterns."""

from .library import BLINKER, BLOCK, GLIDER, PATTERNS, get_pattern
from .seeds import dead_seed, default_seed, seed_from_cells

__all__ = [
    'BLINKER',
    'BLOCK',
    'GLIDER',
    'PATTERNS',
    'get_pattern',
    'dead_seed',
    'default_seed',
    'seed_from_cells',
]
