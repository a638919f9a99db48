"""
Tile grid storage.

The map is a flat row-major array of tiles plus two boolean layers that
track what the player has seen:

    revealed - sticky; set the first time a cell is seen and never cleared
    visible  - volatile; replaced wholesale on every visibility refresh

A cell is addressed by index(x, y) = y * width + x. Coordinates outside the
grid are a programming error and raise IndexError; nothing in this package
catches it.
"""

from enum import IntEnum
from typing import Iterator, List, Tuple

import numpy as np

from .errors import NoRoomsError
from .rect import Rect


class TileKind(IntEnum):
    """Every cell is exactly one of these."""

    WALL = 0
    FLOOR = 1
    DOOR = 2


Point = Tuple[int, int]


class TileGrid:
    def __init__(self, width: int, height: int, fill: TileKind = TileKind.WALL) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")

        self.width: int = width
        self.height: int = height

        size = width * height
        self.tiles: np.ndarray = np.full(size, int(fill), dtype=np.int8)
        self.revealed: np.ndarray = np.zeros(size, dtype=bool)
        self.visible: np.ndarray = np.zeros(size, dtype=bool)

        # Accepted rooms, in acceptance order. Corridors chain along this order.
        self.rooms: List[Rect] = []

    def __len__(self) -> int:
        return self.width * self.height

    # --- Addressing ---

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Returns the flat index of cell (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the {self.width}x{self.height} grid")
        return y * self.width + x

    def xy(self, idx: int) -> Point:
        """Inverse of index(): returns (x, y) for a flat index."""
        self.check_index(idx)
        return (idx % self.width, idx // self.width)

    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def check_index(self, idx: int) -> None:
        """Raises IndexError unless idx is a flat index into this grid."""
        # numpy would silently wrap negative indices
        if not 0 <= idx < len(self):
            raise IndexError(f"index {idx} is outside a grid of {len(self)} cells")

    # --- Queries used by field-of-view ---

    def is_opaque(self, idx: int) -> bool:
        """True if the cell at idx blocks line of sight (only walls do)."""
        self.check_index(idx)
        return self.tiles[idx] == TileKind.WALL

    def blocks_sight(self, x: int, y: int) -> bool:
        """Coordinate form of is_opaque()."""
        return self.is_opaque(self.index(x, y))

    # --- Tile access ---

    def tile_at(self, x: int, y: int) -> TileKind:
        return TileKind(int(self.tiles[self.index(x, y)]))

    def set_tile(self, x: int, y: int, kind: TileKind) -> None:
        self.tiles[self.index(x, y)] = int(kind)

    def is_walkable(self, x: int, y: int) -> bool:
        """Check if (x, y) is inside the map and not a wall."""
        return self.in_bounds(x, y) and self.tile_at(x, y) != TileKind.WALL

    def cells_of_kind(self, kind: TileKind) -> Iterator[Point]:
        """Yields (x, y) of every cell of the given kind, in index order."""
        for idx in np.flatnonzero(self.tiles == int(kind)):
            yield self.xy(int(idx))

    # --- Carving ---

    def fill_rect(self, rect: Rect, kind: TileKind) -> None:
        """Set every cell of rect's footprint, edges included."""
        for y in range(rect.y1, rect.y2 + 1):
            for x in range(rect.x1, rect.x2 + 1):
                self.set_tile(x, y, kind)

    def carve_room(self, room: Rect) -> None:
        """Turn the room's interior (its footprint minus the outer ring) into floor."""
        self.fill_rect(room.interior(), TileKind.FLOOR)

    def carve_horizontal_tunnel(self, x1: int, x2: int, y: int) -> None:
        """Floor every cell from x1 to x2 on row y. Cells off the map are skipped."""
        for x in range(min(x1, x2), max(x1, x2) + 1):
            if self.in_bounds(x, y):
                self.set_tile(x, y, TileKind.FLOOR)

    def carve_vertical_tunnel(self, y1: int, y2: int, x: int) -> None:
        """Floor every cell from y1 to y2 on column x. Cells off the map are skipped."""
        for y in range(min(y1, y2), max(y1, y2) + 1):
            if self.in_bounds(x, y):
                self.set_tile(x, y, TileKind.FLOOR)

    # --- Visibility layers ---

    def clear_visible(self) -> None:
        self.visible[:] = False

    def mark_visible(self, x: int, y: int) -> None:
        """Mark a cell as currently seen. Seeing a cell always reveals it."""
        idx = self.index(x, y)
        self.visible[idx] = True
        self.revealed[idx] = True

    def reveal_all(self) -> None:
        """Reveal every cell without touching the visible layer."""
        self.revealed[:] = True

    # --- Rooms ---

    def spawn_point(self) -> Point:
        """
        Returns the center of the first accepted room.

        Raises:
            NoRoomsError: If generation placed no rooms at all.
        """
        if not self.rooms:
            raise NoRoomsError("map has no rooms to spawn in")
        return self.rooms[0].center()
