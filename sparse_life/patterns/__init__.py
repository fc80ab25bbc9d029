"""Seed patterns and evolution classification."""

from .detector import EvolutionKind, EvolutionReport, PatternDetector
from .library import PATTERNS, cells_from_array, cells_to_array, get_pattern, normalize

__all__ = [
    'EvolutionKind',
    'EvolutionReport',
    'PATTERNS',
    'PatternDetector',
    'cells_from_array',
    'cells_to_array',
    'get_pattern',
    'normalize',
]
