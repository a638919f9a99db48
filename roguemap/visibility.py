"""
Folding field-of-view results into the map's visibility layers.
"""

from typing import Optional, Set

from .components import Position, Viewshed
from .event_system import Event, EventBus
from .fov import FovFunction, Point, field_of_view
from .map import TileGrid


class VisibilityTracker:
    """
    Keeps TileGrid.visible / TileGrid.revealed in step with a viewshed.

    Recomputing FOV is the expensive part of a tick, so update() only does
    work when the viewshed is dirty (the observer moved, or its radius
    changed).
    """

    def __init__(self, fov: FovFunction = field_of_view, bus: Optional[EventBus] = None) -> None:
        self.fov = fov
        self.bus = bus

    def update(self, grid: TileGrid, position: Position, viewshed: Viewshed) -> bool:
        """
        Refresh visibility if viewshed is dirty.

        Returns:
            True if visibility was recomputed, False if it was already fresh.
        """
        if not viewshed.dirty:
            return False

        origin = position.as_point()
        seen: Set[Point] = {
            (x, y)
            for x, y in self.fov(origin, viewshed.radius, grid.blocks_sight, grid.in_bounds)
            if grid.in_bounds(x, y)
        }
        # The observer always sees its own cell, whatever the FOV returns
        if grid.in_bounds(*origin):
            seen.add(origin)

        viewshed.visible_cells.clear()
        viewshed.visible_cells.update(seen)

        grid.clear_visible()
        for x, y in seen:
            grid.mark_visible(x, y)

        viewshed.dirty = False

        if self.bus:
            self.bus.emit(Event.VIEW_REFRESHED, visible_count=len(seen))
        return True
