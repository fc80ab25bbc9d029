"""
Demonstration Scenarios

Small seeds that each show one rule acting on the origin cell, plus the
blinker oscillator. Run them from the command line with
``sparse-life-scenarios`` or ``scripts/run_scenarios.py``.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .core.life import LifeEngine
from .display import DEFAULT_WIDTH, centre, describe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    """A seed, how far to run it, and what it demonstrates."""
    seed: Tuple[Tuple[int, int], ...]
    generations: int
    description: str


SCENARIOS: Dict[int, Scenario] = {
    0: Scenario((), 1, "Empty game stays empty"),
    1: Scenario(((0, 0), (1, 1)), 1,
                "(0,0) has one live neighbour and dies of underpopulation"),
    2: Scenario(((0, 0), (1, 1), (1, -1), (-1, 1), (-1, -1)), 1,
                "(0,0) has four live neighbours and dies of overcrowding"),
    3: Scenario(((0, 0), (1, 1), (1, 0)), 1,
                "(0,0) has two live neighbours and survives"),
    4: Scenario(((1, 0), (-1, 0), (0, 1)), 1,
                "dead (0,0) has three live neighbours and is born"),
    6: Scenario(((0, 0), (1, 0), (-1, 0)), 2,
                "Blinker flips between horizontal and vertical"),
}

# Scenario numbers kept in the sequence but not run
OMITTED: Dict[int, str] = {
    5: "Omitted - similar to scenario 0.",
}


def run_scenario(number: int) -> str:
    """Run one scenario and return its rendered generations.

    Raises:
        KeyError: If the scenario number is unknown
    """
    if number in OMITTED:
        return OMITTED[number]
    try:
        scenario = SCENARIOS[number]
    except KeyError:
        raise KeyError(f"Unknown scenario {number}; known scenarios: {all_scenario_numbers()}") from None

    logger.debug(f"Scenario {number}: {scenario.description}")
    engine = LifeEngine(scenario.seed)
    frames = [describe(engine)]
    for _ in range(scenario.generations):
        engine.advance_one()
        frames.append(describe(engine))
    return "\n".join(frames)


def all_scenario_numbers() -> List[int]:
    return sorted(set(SCENARIOS) | set(OMITTED))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the sparse Game of Life demonstration scenarios"
    )
    parser.add_argument("--scenario", "-s", type=int, action="append", dest="scenarios",
                        help="Scenario number to run (repeatable; default: all)")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help="Width of the centred scenario headers")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    numbers = args.scenarios or all_scenario_numbers()
    blocks = []
    try:
        for number in numbers:
            header = centre(f"SCENARIO_{number}", args.width)
            blocks.append(f"{header}\n{run_scenario(number)}")
    except (KeyError, ValueError) as e:
        parser.error(str(e.args[0]) if e.args else str(e))

    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())
