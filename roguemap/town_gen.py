"""
Town generation.

A town is open ground with houses dropped onto it. Houses are placed with
the same rejection sampling as dungeon rooms, but instead of carving a room
out of rock each one is stamped as a hollow building: a ring of wall with a
floor inside and a single door at the middle of one wall. There are no
corridors; every door opens straight onto the surrounding floor.

Houses keep at least HOUSE_SPACING cells of open ground between each other
(and sampling keeps them off the map's edge), so whichever wall the door
lands in, the cell outside it is walkable floor.
"""

from enum import IntEnum
from typing import Optional

from .config import GeneratorSettings
from .dungeon_gen import place_rooms
from .event_system import Event, EventBus
from .map import Point, TileGrid, TileKind
from .rect import Rect
from .rng import RandomNumberGenerator, Rng

HOUSE_SPACING = 1


class Wall(IntEnum):
    """House walls, numbered to match a d4 roll."""

    TOP = 1
    RIGHT = 2
    BOTTOM = 3
    LEFT = 4


def door_position(room: Rect, wall: Wall) -> Point:
    """Returns the (x, y) of the integer midpoint of one of room's walls."""
    mid_x = (room.x1 + room.x2) // 2
    mid_y = (room.y1 + room.y2) // 2
    positions = {
        Wall.TOP: (mid_x, room.y1),
        Wall.RIGHT: (room.x2, mid_y),
        Wall.BOTTOM: (mid_x, room.y2),
        Wall.LEFT: (room.x1, mid_y),
    }
    return positions[wall]


def stamp_house(grid: TileGrid, room: Rect, wall: Wall) -> None:
    """Draw a hollow building over room's footprint with a door in wall."""
    grid.fill_rect(room, TileKind.WALL)
    grid.fill_rect(room.interior(), TileKind.FLOOR)
    door_x, door_y = door_position(room, wall)
    grid.set_tile(door_x, door_y, TileKind.DOOR)


def _build_house(grid: TileGrid, room: Rect, rng: Rng) -> None:
    stamp_house(grid, room, Wall(rng.dice(1, 4)))


def generate_town(
    width: int,
    height: int,
    rng: Optional[Rng] = None,
    settings: Optional[GeneratorSettings] = None,
    bus: Optional[EventBus] = None,
) -> TileGrid:
    """
    Generate open ground scattered with walled, single-door houses.

    Rooms are still recorded in acceptance order so callers can use their
    centers (e.g. to spawn the player inside the first house).
    """
    rng = rng or RandomNumberGenerator()
    settings = settings or GeneratorSettings()

    grid = TileGrid(width, height, fill=TileKind.FLOOR)
    place_rooms(grid, rng, settings, _build_house, bus, spacing=HOUSE_SPACING)

    if bus:
        bus.emit(
            Event.GENERATION_COMPLETE,
            kind="town",
            rooms=len(grid.rooms),
            attempts=settings.max_rooms,
        )
    return grid
