"""Tests for the set-based B3/S2,3 rule functions.

Verifies neighborhood enumeration, dead-neighbor candidates, birth and
survival selection, and that next_generation never mutates its input.
"""

import pytest

from sparse_life.core.coordinate import Coordinate
from sparse_life.core.rules import (
    BIRTH_SET, NEIGHBOR_OFFSETS, SURVIVAL_SET, births, count_live_neighbors,
    dead_neighbors, get_rule_table, moore_neighborhood, next_generation,
    survivors, update_cell
)


def cells(*pairs):
    return frozenset(Coordinate(x, y) for x, y in pairs)


class TestRuleConstants:
    """Test rule constants and the per-cell rule."""

    def test_standard_sets(self):
        """Rule sets are B3/S2,3."""
        assert SURVIVAL_SET == {2, 3}
        assert BIRTH_SET == {3}

    def test_offsets_exclude_center(self):
        """Offsets are the 8 Moore offsets, no (0, 0)."""
        assert len(NEIGHBOR_OFFSETS) == 8
        assert len(set(NEIGHBOR_OFFSETS)) == 8
        assert (0, 0) not in NEIGHBOR_OFFSETS

    @pytest.mark.parametrize("neighbors, expected", [
        (0, False), (1, False), (2, True), (3, True), (4, False), (8, False)
    ])
    def test_live_cell(self, neighbors, expected):
        """Live cell survives only with 2 or 3 neighbors."""
        assert update_cell(True, neighbors) is expected

    @pytest.mark.parametrize("neighbors", range(9))
    def test_dead_cell(self, neighbors):
        """Dead cell is born only with exactly 3 neighbors."""
        assert update_cell(False, neighbors) is (neighbors == 3)

    def test_rule_table_complete(self):
        """Rule table covers both states and counts 0-8."""
        table = get_rule_table()
        assert len(table) == 18
        assert [n for (alive, n), nxt in table.items() if nxt and not alive] == [3]
        assert sorted(n for (alive, n), nxt in table.items() if nxt and alive) == [2, 3]


class TestNeighborhood:
    """Test neighborhood enumeration and counting."""

    def test_moore_neighborhood(self):
        """The 8 adjacent coordinates, excluding the cell itself."""
        expected = cells((-1, -1), (-1, 0), (-1, 1), (0, -1),
                         (0, 1), (1, -1), (1, 0), (1, 1))
        assert moore_neighborhood(Coordinate(0, 0)) == expected

    def test_neighborhood_translates(self):
        """Neighborhood of a shifted cell is the shifted neighborhood."""
        shifted = {c.translate(10, -5) for c in moore_neighborhood(Coordinate(0, 0))}
        assert moore_neighborhood(Coordinate(10, -5)) == shifted

    def test_cell_not_its_own_neighbor(self):
        """Center cell is not counted as a neighbor."""
        assert count_live_neighbors(Coordinate(0, 0), cells((0, 0))) == 0

    def test_count_all_around(self):
        """Count all 8 neighbors correctly."""
        live = moore_neighborhood(Coordinate(0, 0)) | cells((0, 0))
        assert count_live_neighbors(Coordinate(0, 0), live) == 8

    def test_count_ignores_distant_cells(self):
        """Cells two steps away are not neighbors."""
        assert count_live_neighbors(Coordinate(0, 0), cells((2, 0), (0, -2), (2, 2))) == 0


class TestCandidates:
    """Test dead-neighbor candidate selection."""

    def test_empty(self):
        """No live cells means no candidates."""
        assert dead_neighbors(frozenset()) == frozenset()

    def test_single_cell(self):
        """A lone cell's candidates are its 8 neighbors."""
        assert dead_neighbors(cells((0, 0))) == moore_neighborhood(Coordinate(0, 0))

    def test_excludes_live_cells(self):
        """Live cells are never candidates."""
        live = cells((0, 0), (1, 0))
        candidates = dead_neighbors(live)
        assert not (candidates & live)
        assert len(candidates) == 10


class TestGenerationStep:
    """Test births, survivors and the combined step."""

    def test_birth_with_three(self):
        """Dead cell with exactly 3 live neighbors is born."""
        assert Coordinate(0, 0) in births(cells((1, 0), (-1, 0), (0, 1)))

    def test_no_birth_with_two(self):
        """Two live neighbors are not enough for birth."""
        assert births(cells((1, 0), (-1, 0))) == frozenset()

    def test_survivors_of_block(self):
        """Every block cell has 3 neighbors and survives."""
        block = cells((0, 0), (0, 1), (1, 0), (1, 1))
        assert survivors(block) == block
        assert births(block) == frozenset()

    def test_overcrowded_center_dies(self):
        """Center with 4 diagonal neighbors dies."""
        live = cells((0, 0), (1, 1), (1, -1), (-1, 1), (-1, -1))
        assert Coordinate(0, 0) not in survivors(live)

    def test_input_not_mutated(self):
        """next_generation returns a new set and leaves its input alone."""
        live = {Coordinate(0, 0), Coordinate(1, 0), Coordinate(-1, 0)}
        before = set(live)
        result = next_generation(live)
        assert live == before
        assert isinstance(result, frozenset)
        assert result == cells((0, -1), (0, 0), (0, 1))

    def test_far_apart_groups_independent(self):
        """Distant groups evolve as if alone."""
        blinker = cells((0, 0), (1, 0), (-1, 0))
        far = frozenset(c.translate(1000, 1000) for c in blinker)
        combined = next_generation(blinker | far)
        assert combined == next_generation(blinker) | next_generation(far)
