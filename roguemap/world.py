"""
The world/session state: the current map plus the player entity.

A World exclusively owns its TileGrid. Starting a new level replaces the
grid wholesale; nothing else keeps a reference to the old one.
"""

from typing import Optional, Tuple

from .components import Player, Position, Renderable, Viewshed
from .config import VIEW_RADIUS
from .event_system import Event, EventBus
from .map import TileGrid

PLAYER_RENDERABLE = Renderable(glyph="@", fg=(255, 255, 0), bg=(0, 106, 107))


class World:
    def __init__(
        self,
        grid: TileGrid,
        player_position: Position,
        view_radius: int = VIEW_RADIUS,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.grid: TileGrid = grid
        self.bus: EventBus = bus or EventBus()

        # The player entity's components
        self.player: Player = Player()
        self.player_position: Position = player_position
        self.player_viewshed: Viewshed = Viewshed(radius=view_radius)
        self.player_renderable: Renderable = PLAYER_RENDERABLE

    @classmethod
    def from_grid(
        cls,
        grid: TileGrid,
        view_radius: int = VIEW_RADIUS,
        bus: Optional[EventBus] = None,
    ) -> "World":
        """
        Create a world with the player standing at the center of the first room.

        Raises:
            NoRoomsError: If the grid has no rooms.
        """
        x, y = grid.spawn_point()
        world = cls(grid, Position(x, y), view_radius=view_radius, bus=bus)
        world.bus.emit(Event.LEVEL_START, width=grid.width, height=grid.height, rooms=len(grid.rooms))
        return world

    def player_view(self) -> Tuple[Position, Viewshed]:
        """Returns the player's position and viewshed (both mutable)."""
        return self.player_position, self.player_viewshed

    def new_level(self, grid: TileGrid) -> None:
        """
        Replace the current map and move the player to its spawn point.

        The spawn point is checked before anything changes, so a grid
        without rooms leaves the world untouched.

        Raises:
            NoRoomsError: If the new grid has no rooms.
        """
        x, y = grid.spawn_point()
        self.grid = grid
        self.player_position.x = x
        self.player_position.y = y
        self.player_viewshed.visible_cells.clear()
        self.player_viewshed.dirty = True
        self.bus.emit(Event.LEVEL_START, width=grid.width, height=grid.height, rooms=len(grid.rooms))
