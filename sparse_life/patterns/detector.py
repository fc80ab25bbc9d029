"""Evolution classification for sparse Life populations.

Runs a copy of an engine forward and watches for the first repeated shape.
A repeated normalized shape fixes the period, and the shift of its bounding
box origin tells oscillators apart from spaceships.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from ..core.coordinate import Coordinate
from ..core.life import LifeEngine
from .library import normalize

logger = logging.getLogger(__name__)

DEFAULT_MAX_GENERATIONS = 256


class EvolutionKind(Enum):
    """Long-run behavior of a population."""
    EXTINCT = "extinct"
    STILL_LIFE = "still_life"
    OSCILLATOR = "oscillator"
    SPACESHIP = "spaceship"
    UNRESOLVED = "unresolved"


@dataclass
class EvolutionReport:
    """Result of classifying an engine's evolution."""
    kind: EvolutionKind
    period: Optional[int]                  # Generations between repeats
    displacement: Tuple[int, int]          # Shift per period
    first_generation: Optional[int]        # Generation where the cycle begins
    generations_observed: int


class PatternDetector:
    """Detect still lifes, oscillators, spaceships and extinction."""

    def __init__(self, max_generations: int = DEFAULT_MAX_GENERATIONS):
        """Initialize detector.

        Args:
            max_generations: Generations to simulate before giving up

        Raises:
            ValueError: If max_generations is less than 1
        """
        if max_generations < 1:
            raise ValueError(f"max_generations must be at least 1, got {max_generations}")
        self.max_generations = max_generations

    def classify(self, engine: LifeEngine) -> EvolutionReport:
        """Classify how the engine's population evolves.

        The engine itself is left untouched; a copy is advanced instead.
        """
        probe = engine.copy()
        seen: Dict[FrozenSet[Coordinate], Tuple[int, Coordinate]] = {}
        start = probe.generation

        while True:
            shape, origin = normalize(probe.live_cells())
            if shape in seen:
                first_generation, first_origin = seen[shape]
                report = self._build_report(
                    shape, probe.generation - first_generation,
                    (origin.x - first_origin.x, origin.y - first_origin.y),
                    first_generation, probe.generation - start,
                )
                logger.info(f"Classified population as {report.kind.value} "
                            f"(period={report.period}, displacement={report.displacement})")
                return report

            seen[shape] = (probe.generation, origin)
            if probe.generation - start >= self.max_generations:
                break
            probe.advance_one()

        logger.info(f"No repeat found within {self.max_generations} generations")
        return EvolutionReport(
            kind=EvolutionKind.UNRESOLVED,
            period=None,
            displacement=(0, 0),
            first_generation=None,
            generations_observed=probe.generation - start,
        )

    def _build_report(self, shape: FrozenSet[Coordinate], period: int,
                      displacement: Tuple[int, int], first_generation: int,
                      observed: int) -> EvolutionReport:
        if not shape:
            kind = EvolutionKind.EXTINCT
        elif displacement != (0, 0):
            kind = EvolutionKind.SPACESHIP
        elif period == 1:
            kind = EvolutionKind.STILL_LIFE
        else:
            kind = EvolutionKind.OSCILLATOR

        return EvolutionReport(
            kind=kind,
            period=period,
            displacement=displacement,
            first_generation=first_generation,
            generations_observed=observed,
        )
