"""Classic seed patterns and coordinate-set helpers.

Patterns are written as small numpy boolean stamps (rows top to bottom,
columns left to right) and converted to coordinate sets before they reach
the engine. Row index maps to y and column index maps to x.
"""

from typing import Dict, FrozenSet, Iterable, Tuple

import numpy as np

from ..core.coordinate import Coordinate, bounds


def cells_from_array(pattern: np.ndarray, x: int = 0, y: int = 0) -> FrozenSet[Coordinate]:
    """Convert a 2D boolean stamp into live coordinates.

    Args:
        pattern: 2D array, truthy entries are live cells
        x: X offset applied to column indices
        y: Y offset applied to row indices

    Returns:
        Frozenset of live coordinates

    Raises:
        ValueError: If pattern is not 2D
    """
    pattern = np.asarray(pattern)
    if pattern.ndim != 2:
        raise ValueError(f"Pattern must be 2D, got {pattern.ndim}D")

    rows, cols = np.nonzero(pattern.astype(bool))
    return frozenset(Coordinate(x + int(col), y + int(row)) for row, col in zip(rows, cols))


def cells_to_array(cells: Iterable[Coordinate]) -> Tuple[np.ndarray, Coordinate]:
    """Render live coordinates into their bounding-box boolean array.

    Returns:
        (array, origin) where array[row, col] is the cell at
        (origin.x + col, origin.y + row); an empty input gives a (0, 0) array
        at the origin
    """
    cells = frozenset(cells)
    box = bounds(cells)
    if box is None:
        return np.zeros((0, 0), dtype=bool), Coordinate()

    low, high = box
    array = np.zeros((high.y - low.y + 1, high.x - low.x + 1), dtype=bool)
    for cell in cells:
        array[cell.y - low.y, cell.x - low.x] = True
    return array, low


def translate_cells(cells: Iterable[Coordinate], dx: int, dy: int) -> FrozenSet[Coordinate]:
    return frozenset(cell.translate(dx, dy) for cell in cells)


def normalize(cells: Iterable[Coordinate]) -> Tuple[FrozenSet[Coordinate], Coordinate]:
    """Shift cells so the minimum x and minimum y are both 0.

    Returns:
        (normalized cells, offset) where offset is the original min corner
    """
    cells = frozenset(cells)
    box = bounds(cells)
    if box is None:
        return cells, Coordinate()
    low = box[0]
    return translate_cells(cells, -low.x, -low.y), low


# Classic Conway test patterns
BLOCK = np.array([
    [True, True],
    [True, True]
], dtype=bool)

BLINKER = np.array([[True, True, True]], dtype=bool)

GLIDER = np.array([
    [False, True, False],
    [False, False, True],
    [True, True, True]
], dtype=bool)

BEEHIVE = np.array([
    [False, True, True, False],
    [True, False, False, True],
    [False, True, True, False]
], dtype=bool)

TOAD = np.array([
    [False, True, True, True],
    [True, True, True, False]
], dtype=bool)

PATTERNS: Dict[str, np.ndarray] = {
    "block": BLOCK,
    "blinker": BLINKER,
    "glider": GLIDER,
    "beehive": BEEHIVE,
    "toad": TOAD,
}


def get_pattern(name: str, x: int = 0, y: int = 0) -> FrozenSet[Coordinate]:
    """Get a named pattern as live coordinates with its top-left at (x, y).

    Raises:
        KeyError: If the pattern name is unknown
    """
    try:
        stamp = PATTERNS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown pattern {name!r}; known patterns: {sorted(PATTERNS)}") from None
    return cells_from_array(stamp, x, y)
