"""Tests for the Life transition table.

Enumerates every (state, neighbor count) pair and checks each of the
five rule cases explicitly.
"""

import pytest
from game_of_life.core.cell import Cell
from game_of_life.core.rules import MAX_NEIGHBORS, next_state, rule_table


def expected_next(cell: Cell, neighbors: int) -> Cell:
    """B3/S23 written as survival/birth sets."""
    if cell is Cell.ALIVE:
        return Cell.ALIVE if neighbors in {2, 3} else Cell.DEAD
    return Cell.ALIVE if neighbors == 3 else Cell.DEAD


class TestRuleCases:
    """Each numbered rule case in isolation."""

    @pytest.mark.parametrize("neighbors", [0, 1])
    def test_underpopulation(self, neighbors):
        """Live cell with fewer than 2 neighbors dies."""
        assert next_state(Cell.ALIVE, neighbors) is Cell.DEAD

    @pytest.mark.parametrize("neighbors", [2, 3])
    def test_survival(self, neighbors):
        """Live cell with 2 or 3 neighbors survives."""
        assert next_state(Cell.ALIVE, neighbors) is Cell.ALIVE

    @pytest.mark.parametrize("neighbors", [4, 5, 6, 7, 8])
    def test_overpopulation(self, neighbors):
        """Live cell with more than 3 neighbors dies."""
        assert next_state(Cell.ALIVE, neighbors) is Cell.DEAD

    def test_reproduction(self):
        """Dead cell with exactly 3 neighbors becomes alive."""
        assert next_state(Cell.DEAD, 3) is Cell.ALIVE

    @pytest.mark.parametrize("neighbors", [0, 1, 2, 4, 5, 6, 7, 8])
    def test_dead_stays_dead(self, neighbors):
        """Dead cell without exactly 3 neighbors is unchanged."""
        assert next_state(Cell.DEAD, neighbors) is Cell.DEAD


class TestRuleTable:
    """The full 2 x 9 table."""

    def test_table_has_all_18_combinations(self):
        """Both states times neighbor counts 0-8."""
        table = rule_table()
        assert len(table) == 18
        assert set(table) == {(cell, n) for cell in Cell for n in range(MAX_NEIGHBORS + 1)}

    @pytest.mark.parametrize("cell", list(Cell))
    @pytest.mark.parametrize("neighbors", range(9))
    def test_every_combination(self, cell, neighbors):
        """Table agrees with survival {2,3} / birth {3} for every pair."""
        assert rule_table()[(cell, neighbors)] is expected_next(cell, neighbors)
        assert next_state(cell, neighbors) is expected_next(cell, neighbors)

    def test_live_outcomes(self):
        """Only (ALIVE, 2), (ALIVE, 3) and (DEAD, 3) produce live cells."""
        alive = {key for key, value in rule_table().items() if value is Cell.ALIVE}
        assert alive == {(Cell.ALIVE, 2), (Cell.ALIVE, 3), (Cell.DEAD, 3)}


class TestInvalidCounts:
    """Neighbor counts outside 0-8 are rejected."""

    @pytest.mark.parametrize("neighbors", [-1, 9, 100])
    def test_out_of_range(self, neighbors):
        with pytest.raises(ValueError, match="Neighbor count"):
            next_state(Cell.ALIVE, neighbors)


class TestPlainStateValues:
    """0/1 and bool states follow the same table as Cell values."""

    @pytest.mark.parametrize("raw,cell", [
        (0, Cell.DEAD), (1, Cell.ALIVE), (False, Cell.DEAD), (True, Cell.ALIVE),
    ])
    @pytest.mark.parametrize("neighbors", range(9))
    def test_plain_values_match_table(self, raw, cell, neighbors):
        """Result is a Cell equal to the table entry for the matching tag."""
        result = next_state(raw, neighbors)
        assert result is expected_next(cell, neighbors)

    def test_overpopulation_and_birth_with_ints(self):
        assert next_state(1, 5) is Cell.DEAD
        assert next_state(True, 1) is Cell.DEAD
        assert next_state(0, 3) is Cell.ALIVE
