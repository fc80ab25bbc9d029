"""
Sparse Conway's Game of Life Rules (B3/S2,3)

Set-based evaluation of the classic rules. Only live cells and the dead
cells touching them are ever examined, so the cost of a generation scales
with population instead of area. Every function here is pure: the live-cell
set passed in is never modified.
"""

from typing import AbstractSet, Dict, FrozenSet, Set, Tuple

from .coordinate import Coordinate


# Standard Conway rules - unmodified
SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors

# Moore neighborhood offsets in lexicographic order
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    else:
        return live_neighbors in BIRTH_SET


def get_rule_table() -> Dict[Tuple[bool, int], bool]:
    """Get the rule outcome for every (current_state, neighbor_count) pair.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    return {
        (alive, neighbors): update_cell(alive, neighbors)
        for alive in (False, True)
        for neighbors in range(9)
    }


def moore_neighborhood(cell: Coordinate) -> FrozenSet[Coordinate]:
    """The 8 coordinates horizontally, vertically or diagonally adjacent to cell."""
    return frozenset(cell.translate(dx, dy) for dx, dy in NEIGHBOR_OFFSETS)


def count_live_neighbors(cell: Coordinate, live_cells: AbstractSet[Coordinate]) -> int:
    """Count live neighbors of cell as the size of neighborhood ∩ live_cells.

    Returns:
        Number of live neighbors (0-8)
    """
    return len(moore_neighborhood(cell) & live_cells)


def dead_neighbors(live_cells: AbstractSet[Coordinate]) -> FrozenSet[Coordinate]:
    """Dead cells adjacent to at least one live cell.

    These are the only dead cells that can be born next generation; a dead
    cell with no live neighbor can never reach the birth count.
    """
    candidates: Set[Coordinate] = set()
    for cell in live_cells:
        candidates |= moore_neighborhood(cell)
    return frozenset(candidates.difference(live_cells))


def births(live_cells: AbstractSet[Coordinate]) -> FrozenSet[Coordinate]:
    """Dead cells that come alive next generation."""
    return frozenset(
        cell for cell in dead_neighbors(live_cells)
        if update_cell(False, count_live_neighbors(cell, live_cells))
    )


def survivors(live_cells: AbstractSet[Coordinate]) -> FrozenSet[Coordinate]:
    """Live cells that stay alive next generation."""
    return frozenset(
        cell for cell in live_cells
        if update_cell(True, count_live_neighbors(cell, live_cells))
    )


def next_generation(live_cells: AbstractSet[Coordinate]) -> FrozenSet[Coordinate]:
    """Compute the live-cell set one generation ahead.

    Births and survivors are disjoint (a cell is either dead or alive now),
    so their union needs no precedence rule.

    Args:
        live_cells: Live cells of the current generation (not modified)

    Returns:
        New frozenset of live cells for the next generation
    """
    return births(live_cells) | survivors(live_cells)
