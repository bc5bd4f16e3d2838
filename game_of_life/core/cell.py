"""Cell state tag for the universe buffer."""

from enum import IntEnum


class Cell(IntEnum):
    """Two-valued cell state.

    Values are 0 and 1 so a whole generation can live in a uint8 array
    and a live-neighbor count is a plain sum of states.
    """
    DEAD = 0
    ALIVE = 1

    @classmethod
    def coerce(cls, value) -> 'Cell':
        """Convert a Cell, bool or 0/1 int into a Cell."""
        if isinstance(value, cls):
            return value
        return cls.ALIVE if value else cls.DEAD

    @property
    def glyph(self) -> str:
        """Text symbol used by Universe.render()."""
        return ALIVE_GLYPH if self is Cell.ALIVE else DEAD_GLYPH


DEAD_GLYPH = '\u25fb'   # ◻
ALIVE_GLYPH = '\u25fc'  # ◼
