"""
Player actions: the input decoder's output, applied to the world.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .event_system import Event
from .world import World


class ActionType(Enum):
    NONE = auto()
    MOVE = auto()
    REVEAL_ALL = auto()  # debug: reveal the whole map


@dataclass(frozen=True)
class Action:
    kind: ActionType
    dx: int = 0
    dy: int = 0

    @classmethod
    def move(cls, dx: int, dy: int) -> "Action":
        return cls(ActionType.MOVE, dx, dy)


NO_ACTION = Action(ActionType.NONE)
REVEAL_ALL = Action(ActionType.REVEAL_ALL)
MOVE_LEFT = Action.move(-1, 0)
MOVE_RIGHT = Action.move(1, 0)
MOVE_UP = Action.move(0, -1)
MOVE_DOWN = Action.move(0, 1)


def try_move_player(world: World, delta_x: int, delta_y: int) -> bool:
    """
    Move the player by (delta_x, delta_y) if the destination is walkable.

    A blocked move (wall or off the map) is not an error: the position and
    the viewshed's dirty flag are left exactly as they were.

    Returns:
        True if the player moved.
    """
    position, viewshed = world.player_view()
    dest_x = position.x + delta_x
    dest_y = position.y + delta_y

    if not world.grid.is_walkable(dest_x, dest_y):
        world.bus.emit(Event.MOVE_BLOCKED, x=dest_x, y=dest_y)
        return False

    position.x = dest_x
    position.y = dest_y
    viewshed.dirty = True
    world.bus.emit(Event.PLAYER_MOVED, x=dest_x, y=dest_y)
    return True


def cheat_reveal_map(world: World) -> None:
    """Mark every cell revealed. The visible layer is left alone."""
    world.grid.reveal_all()
    world.bus.emit(Event.MAP_REVEALED)


def apply_action(world: World, action: Optional[Action]) -> bool:
    """
    Apply one decoded input action.

    Returns:
        True if the player moved (and so the view needs recomputing).
    """
    if action is None or action.kind == ActionType.NONE:
        return False
    if action.kind == ActionType.MOVE:
        return try_move_player(world, action.dx, action.dy)
    if action.kind == ActionType.REVEAL_ALL:
        cheat_reveal_map(world)
        return False
    raise ValueError(f"unknown action {action.kind}")
