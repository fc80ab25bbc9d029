"""Integer coordinates on the unbounded Life plane.

A Coordinate is an immutable (x, y) value. Equality, hashing and the
lexicographic ordering (x first, then y) all derive from the field tuple,
so coordinates can key sets and dicts and sort deterministically.
"""

import numbers
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple


@dataclass(frozen=True, order=True)
class Coordinate:
    """Immutable integer position on the Life plane.

    Attributes:
        x: Horizontal component (signed, unbounded)
        y: Vertical component (signed, unbounded)
    """
    x: int = 0
    y: int = 0

    def __post_init__(self):
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"Coordinate {name} must be an integer, got {type(value).__name__}")
            # numpy integer scalars are normalised to plain int
            object.__setattr__(self, name, int(value))

    @classmethod
    def of(cls, value: Any) -> 'Coordinate':
        """Build a Coordinate from a Coordinate or an (x, y) pair.

        Raises:
            ValueError: If value does not unpack into exactly two components
            TypeError: If a component is not an integer
        """
        if isinstance(value, cls):
            return value
        try:
            x, y = value
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot interpret {value!r} as an (x, y) coordinate") from e
        return cls(x, y)

    def equals(self, other: 'Coordinate') -> bool:
        """True iff both components match."""
        return self == other

    def compare(self, other: 'Coordinate') -> int:
        """Lexicographic three-way comparison.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        if self < other:
            return -1
        if other < self:
            return 1
        return 0

    def translate(self, dx: int, dy: int) -> 'Coordinate':
        """Return the coordinate shifted by (dx, dy)."""
        return Coordinate(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def format(self) -> str:
        """Render as "(x,y)"."""
        return f"({self.x},{self.y})"

    def __str__(self) -> str:
        return self.format()


ORIGIN = Coordinate(0, 0)


def bounds(cells: Iterable[Coordinate]) -> Optional[Tuple[Coordinate, Coordinate]]:
    """Bounding box (min corner, max corner) of cells, None if empty."""
    cells = list(cells)
    if not cells:
        return None
    return (Coordinate(min(c.x for c in cells), min(c.y for c in cells)),
            Coordinate(max(c.x for c in cells), max(c.y for c in cells)))
