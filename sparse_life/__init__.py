"""
Sparse Life: Conway's Game of Life on an unbounded plane.

Only the coordinates of live cells are stored, so each generation costs time
proportional to the population rather than to any grid area.
"""

from .core import BIRTH_SET, SURVIVAL_SET, Coordinate, LifeEngine, next_generation

__version__ = "0.1.0"

__all__ = [
    'BIRTH_SET',
    'Coordinate',
    'LifeEngine',
    'SURVIVAL_SET',
    'next_generation',
]
