"""
Per-entity state read and written by the map core.

The core only ever touches the player's Position and Viewshed, fetched
through World.player_view().
"""

from dataclasses import dataclass, field
from typing import Set, Tuple

from .config import VIEW_RADIUS

RGB = Tuple[int, int, int]


@dataclass
class Position:
    x: int
    y: int

    def as_point(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass
class Viewshed:
    """
    What an entity can see.

    dirty marks that visible_cells is stale and must be recomputed before
    the next render. It starts True so the first tick computes a view.
    """

    radius: int = VIEW_RADIUS
    visible_cells: Set[Tuple[int, int]] = field(default_factory=set)
    dirty: bool = True

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"view radius must be >= 0, got {self.radius}")


@dataclass
class Renderable:
    """Glyph and colours used to draw an entity on top of the map."""

    glyph: str
    fg: RGB
    bg: RGB


@dataclass
class Player:
    """Marker for the player-controlled entity."""
