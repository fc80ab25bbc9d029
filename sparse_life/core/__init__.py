"""Coordinate model, B3/S2,3 rules and the sparse Life engine."""

from .coordinate import ORIGIN, Coordinate, bounds
from .life import LifeEngine
from .rules import BIRTH_SET, SURVIVAL_SET, next_generation

__all__ = [
    'BIRTH_SET',
    'Coordinate',
    'LifeEngine',
    'ORIGIN',
    'SURVIVAL_SET',
    'bounds',
    'next_generation',
]
