"""Universe state, neighbor arithmetic and the Life transition table."""

from .cell import Cell
from .errors import InvalidDimensions
from .rules import next_state, rule_table
from .universe import Universe

__all__ = [
    'Cell',
    'InvalidDimensions',
    'Universe',
    'next_state',
    'rule_table',
]
