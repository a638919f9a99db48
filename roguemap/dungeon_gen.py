"""
Dungeon Generation Algorithm
============================

Rooms are placed by rejection sampling and chained together with corridors.

1. Start with a map that is solid wall.
2. Make a fixed number of placement attempts (MAX_ROOMS):
   a. Pick a random width and height in [ROOM_MIN_SIZE, ROOM_MAX_SIZE]
   b. Pick a random top-left corner that keeps the room off the map's
      outermost ring of cells
   c. If the room touches or overlaps any room placed so far, drop it
3. For each accepted room:
   a. Carve its interior (the room minus its outer ring) to floor
   b. If it isn't the first room, carve an L-shaped corridor from the
      previous room's center to this room's center. A coin flip picks
      whether the corridor runs horizontally or vertically first.
   c. Append it to the room list. That order is the corridor chain, so the
      whole dungeon is connected from the first room onward.

Rejected attempts leave no trace. There are exactly MAX_ROOMS attempts,
so a crowded map can end up with fewer rooms than MAX_ROOMS (even zero).
"""

from typing import Callable, Optional

from .config import GeneratorSettings
from .event_system import Event, EventBus
from .map import Point, TileGrid, TileKind
from .rect import Rect
from .rng import RandomNumberGenerator, Rng

# Called with (grid, room, rng) once a room has been accepted, before it is
# appended to grid.rooms.
RoomBuilder = Callable[[TileGrid, Rect, Rng], None]


def sample_room(grid: TileGrid, rng: Rng, settings: GeneratorSettings) -> Optional[Rect]:
    """
    Pick a random room footprint inside grid.

    The footprint never touches the outermost ring of the map. Returns None
    if the map is too small to hold a room of the sampled size.
    """
    w = rng.uniform_integer(settings.min_size, settings.max_size)
    h = rng.uniform_integer(settings.min_size, settings.max_size)

    # x in [1, width - w - 2] keeps x1 >= 1 and x2 = x + w <= width - 2
    x_choices = grid.width - w - 2
    y_choices = grid.height - h - 2
    if x_choices < 1 or y_choices < 1:
        return None

    x = rng.dice(1, x_choices)
    y = rng.dice(1, y_choices)
    return Rect.new(x, y, w, h)


def place_rooms(
    grid: TileGrid,
    rng: Rng,
    settings: GeneratorSettings,
    build_room: RoomBuilder,
    bus: Optional[EventBus] = None,
    spacing: int = 0,
) -> TileGrid:
    """
    Run the rejection-sampling loop shared by every generator.

    build_room stamps each accepted room onto the grid; the room is then
    appended to grid.rooms so build_room can still see the previous room as
    grid.rooms[-1].

    spacing is the number of clear cells that must separate a new room from
    every accepted one. With 0, rooms may sit side by side but never share
    a cell.
    """
    for _attempt in range(settings.max_rooms):
        new_room = sample_room(grid, rng, settings)
        if new_room is None:
            continue

        footprint = new_room.grow(spacing)
        if any(footprint.intersect(other) for other in grid.rooms):
            if bus:
                bus.emit(Event.ROOM_REJECTED, room=new_room)
            continue

        build_room(grid, new_room, rng)
        grid.rooms.append(new_room)
        if bus:
            bus.emit(Event.ROOM_ACCEPTED, room=new_room, room_index=len(grid.rooms) - 1)

    return grid


def carve_corridor(grid: TileGrid, start: Point, end: Point, horizontal_first: bool) -> None:
    """
    Carve an L-shaped floor path between two points.

    horizontal_first=True runs along start's row to end's column, then down
    end's column. Otherwise it runs along start's column to end's row, then
    across end's row.
    """
    start_x, start_y = start
    end_x, end_y = end
    if horizontal_first:
        grid.carve_horizontal_tunnel(start_x, end_x, start_y)
        grid.carve_vertical_tunnel(start_y, end_y, end_x)
    else:
        grid.carve_vertical_tunnel(start_y, end_y, start_x)
        grid.carve_horizontal_tunnel(start_x, end_x, end_y)


def _build_dungeon_room(grid: TileGrid, room: Rect, rng: Rng) -> None:
    grid.carve_room(room)

    if grid.rooms:
        previous = grid.rooms[-1]
        horizontal_first = rng.uniform_integer(0, 1) == 1
        carve_corridor(grid, previous.center(), room.center(), horizontal_first)


def generate_dungeon(
    width: int,
    height: int,
    rng: Optional[Rng] = None,
    settings: Optional[GeneratorSettings] = None,
    bus: Optional[EventBus] = None,
) -> TileGrid:
    """
    Generate a rooms-and-corridors dungeon.

    Parameters:
        width, height: Map size in cells
        rng: Source of randomness (a fresh unseeded generator if None)
        settings: Room placement parameters (defaults from config if None)
        bus: Receives ROOM_ACCEPTED / ROOM_REJECTED / GENERATION_COMPLETE

    Returns:
        A TileGrid whose rooms are listed in corridor-chain order.
    """
    rng = rng or RandomNumberGenerator()
    settings = settings or GeneratorSettings()

    grid = TileGrid(width, height, fill=TileKind.WALL)
    place_rooms(grid, rng, settings, _build_dungeon_room, bus)

    if bus:
        bus.emit(
            Event.GENERATION_COMPLETE,
            kind="dungeon",
            rooms=len(grid.rooms),
            attempts=settings.max_rooms,
        )
    return grid
