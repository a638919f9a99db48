"""
The per-tick update loop.

Each tick runs, in this order and never concurrently:

    1. apply the player's action (a successful move dirties the view)
    2. refresh visibility if the view is dirty
    3. hand the map to the renderer
"""

from typing import Callable, Optional

from .config import GeneratorSettings, MAP_HEIGHT, MAP_WIDTH, VIEW_RADIUS
from .dungeon_gen import generate_dungeon
from .event_system import EventBus
from .fov import FovFunction, field_of_view
from .map import TileGrid
from .player import Action, apply_action
from .rng import Rng
from .town_gen import generate_town
from .visibility import VisibilityTracker
from .world import World

GENERATORS = {
    "dungeon": generate_dungeon,
    "town": generate_town,
}

Renderer = Callable[[World], None]


def build_level(
    kind: str = "dungeon",
    width: int = MAP_WIDTH,
    height: int = MAP_HEIGHT,
    rng: Optional[Rng] = None,
    settings: Optional[GeneratorSettings] = None,
    bus: Optional[EventBus] = None,
) -> TileGrid:
    """Generate a map with the named generator ("dungeon" or "town")."""
    if kind not in GENERATORS:
        raise ValueError(f"unknown level kind {kind!r}, expected one of {sorted(GENERATORS)}")
    return GENERATORS[kind](width, height, rng=rng, settings=settings, bus=bus)


class Game:
    def __init__(
        self,
        world: World,
        fov: FovFunction = field_of_view,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.world = world
        self.tracker = VisibilityTracker(fov, bus=world.bus)
        self.renderer = renderer
        self.ticks = 0

    @classmethod
    def new(
        cls,
        kind: str = "dungeon",
        width: int = MAP_WIDTH,
        height: int = MAP_HEIGHT,
        view_radius: int = VIEW_RADIUS,
        rng: Optional[Rng] = None,
        settings: Optional[GeneratorSettings] = None,
        fov: FovFunction = field_of_view,
        renderer: Optional[Renderer] = None,
        bus: Optional[EventBus] = None,
    ) -> "Game":
        """
        Generate a level and put the player in its first room.

        Raises:
            NoRoomsError: If the generator could not place a single room.
        """
        bus = bus or EventBus()
        grid = build_level(kind, width, height, rng=rng, settings=settings, bus=bus)
        world = World.from_grid(grid, view_radius=view_radius, bus=bus)
        return cls(world, fov=fov, renderer=renderer)

    def refresh_visibility(self) -> bool:
        position, viewshed = self.world.player_view()
        return self.tracker.update(self.world.grid, position, viewshed)

    def tick(self, action: Optional[Action] = None) -> None:
        apply_action(self.world, action)
        self.refresh_visibility()
        if self.renderer is not None:
            self.renderer(self.world)
        self.ticks += 1
