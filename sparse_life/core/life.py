"""Sparse Conway's Game of Life engine.

Tracks only the coordinates of live cells on an unbounded plane together
with a generation counter. Each advance computes the next live-cell set with
the pure functions in :mod:`sparse_life.core.rules` and then swaps it in, so
callers never observe a half-built generation.
"""

import logging
import numbers
from typing import Any, FrozenSet, Iterable, List, Optional, Tuple

import numpy as np

from .coordinate import Coordinate, bounds
from .rules import next_generation

logger = logging.getLogger(__name__)


class LifeEngine:
    """Game of Life simulation over a sparse set of live coordinates.

    Attributes:
        generation: Current generation counter (read-only, starts at 0)
    """

    def __init__(self, initial_live_cells: Iterable[Any] = ()):
        """Initialize engine at generation 0.

        Args:
            initial_live_cells: Coordinates or (x, y) pairs; duplicates collapse

        Raises:
            ValueError: If an entry is not an (x, y) pair
            TypeError: If a component is not an integer
        """
        self._live_cells: FrozenSet[Coordinate] = frozenset(
            Coordinate.of(cell) for cell in initial_live_cells
        )
        self._generation = 0

        logger.debug(f"Created Life engine with {len(self._live_cells)} live cells")

    @property
    def generation(self) -> int:
        return self._generation

    def advance_one(self) -> int:
        """Advance the simulation by exactly one generation.

        Returns:
            Number of live cells after the advance
        """
        self._live_cells = next_generation(self._live_cells)
        self._generation += 1

        logger.debug(f"Generation {self._generation}: {len(self._live_cells)} live cells")
        return len(self._live_cells)

    def advance_to(self, target_generation: int) -> int:
        """Advance until generation equals target_generation.

        Forward only: a target at or behind the current generation is a
        no-op.

        Returns:
            Number of generations advanced

        Raises:
            TypeError: If target_generation is not an integer
        """
        if isinstance(target_generation, bool) or not isinstance(target_generation, numbers.Integral):
            raise TypeError(f"target_generation must be an integer, got {type(target_generation).__name__}")

        advanced = 0
        while self._generation < target_generation:
            self.advance_one()
            advanced += 1
        return advanced

    def step_multiple(self, steps: int, log_interval: Optional[int] = None) -> List[int]:
        """Advance multiple generations.

        Args:
            steps: Number of generations to advance
            log_interval: If provided, only record live counts at these intervals

        Returns:
            List of live cell counts (either all steps or at intervals)

        Raises:
            ValueError: If steps is negative or log_interval is not positive
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        if log_interval is not None and log_interval < 1:
            raise ValueError(f"log_interval must be positive, got {log_interval}")

        live_counts = []
        for step_num in range(steps):
            live_count = self.advance_one()
            if log_interval is None or step_num % log_interval == 0:
                live_counts.append(live_count)

        return live_counts

    def live_cell_count(self) -> int:
        """Get total number of live cells."""
        return len(self._live_cells)

    def live_cells_snapshot(self) -> Tuple[Coordinate, ...]:
        """Current live cells in lexicographic order (a copy)."""
        return tuple(sorted(self._live_cells))

    def live_cells(self) -> FrozenSet[Coordinate]:
        """Current live cells as an immutable set."""
        return self._live_cells

    def is_alive(self, cell: Any) -> bool:
        return Coordinate.of(cell) in self._live_cells

    def is_empty(self) -> bool:
        return not self._live_cells

    def bounds(self) -> Optional[Tuple[Coordinate, Coordinate]]:
        """Bounding box of live cells as (min corner, max corner), None if empty."""
        return bounds(self._live_cells)

    def get_center_of_mass(self) -> Tuple[float, float]:
        """Calculate center of mass of live cells.

        Returns:
            (x, y) coordinates of live cell centroid, (0.0, 0.0) when empty
        """
        if not self._live_cells:
            return (0.0, 0.0)

        points = np.array([cell.as_tuple() for cell in self._live_cells], dtype=float)
        center_x, center_y = points.mean(axis=0)
        return (float(center_x), float(center_y))

    def copy(self) -> 'LifeEngine':
        """Create an independent engine with the same generation and cells."""
        clone = LifeEngine.__new__(LifeEngine)
        clone._live_cells = self._live_cells
        clone._generation = self._generation

        logger.debug(f"Copied Life engine at generation {self._generation} "
                     f"with {len(self._live_cells)} live cells")
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LifeEngine):
            return NotImplemented
        return (self._generation == other._generation and
                self._live_cells == other._live_cells)

    __hash__ = None

    def __repr__(self) -> str:
        return f"LifeEngine(generation={self._generation}, live={len(self._live_cells)})"
