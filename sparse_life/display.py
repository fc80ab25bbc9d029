"""Plain-text rendering of engine state for the command line."""

from typing import Iterable

from .core.coordinate import Coordinate
from .core.life import LifeEngine

DEFAULT_WIDTH = 50


def format_live_cells(cells: Iterable[Coordinate]) -> str:
    """Render cells as "{(x1,y1),(x2,y2),...}" in lexicographic order, "{}" if empty."""
    return "{" + ",".join(cell.format() for cell in sorted(cells)) + "}"


def centre(text: str, width: int = DEFAULT_WIDTH, fill: str = "*") -> str:
    """Centre text between equal runs of fill characters.

    Each side gets (width - len(text)) // 2 fill characters, so an odd
    remainder leaves the result one character short of width.

    Raises:
        ValueError: If width is smaller than the text or fill is not one character
    """
    if len(fill) != 1:
        raise ValueError(f"fill must be a single character, got {fill!r}")
    if width < len(text):
        raise ValueError(f"width {width} is smaller than text length {len(text)}")

    pad = fill * ((width - len(text)) // 2)
    return pad + text + pad


def describe(engine: LifeEngine) -> str:
    """Header line plus live cells for the engine's current generation."""
    return f"Game at generation {engine.generation}:\n{format_live_cells(engine.live_cells_snapshot())}"
