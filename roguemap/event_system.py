"""
Event bus for map and player events.

Generators, the world and the visibility tracker emit events here so that
tools (and tests) can observe generation and play without the core knowing
who is listening. In debug mode every emitted event is printed to stderr.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional


class Event(Enum):
    """Things that can happen while building or playing a level."""

    # Level lifecycle
    LEVEL_START = auto()  # kwargs: width, height, rooms

    # Generation
    ROOM_ACCEPTED = auto()  # kwargs: room, room_index
    ROOM_REJECTED = auto()  # kwargs: room
    GENERATION_COMPLETE = auto()  # kwargs: kind, rooms, attempts

    # Player
    PLAYER_MOVED = auto()  # kwargs: x, y
    MOVE_BLOCKED = auto()  # kwargs: x, y

    # Visibility
    VIEW_REFRESHED = auto()  # kwargs: visible_count
    MAP_REVEALED = auto()


@dataclass
class EventData:
    """Container for event data passed to handlers."""

    event: Event
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        if self.kwargs:
            kwargs_str = ", ".join(f"{k}={v}" for k, v in self.kwargs.items())
            return f"EventData({self.event.name}, {kwargs_str})"
        return f"EventData({self.event.name})"


EventHandler = Callable[[EventData], None]


class EventBus:
    """Publish/subscribe hub. One bus per World."""

    def __init__(self, debug: bool = False) -> None:
        self._handlers: Dict[Event, List[EventHandler]] = {}
        self._debug: bool = debug

    def set_debug(self, debug: bool) -> None:
        """Enable or disable printing every event to stderr."""
        self._debug = debug

    def subscribe(self, event: Event, handler: EventHandler) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def unsubscribe(self, event: Event, handler: EventHandler) -> None:
        """
        Remove a handler.

        Raises:
            ValueError: If handler was not subscribed to this event
        """
        handlers = self._handlers.get(event)
        if not handlers or handler not in handlers:
            raise ValueError(f"Handler not subscribed to event {event}")
        handlers.remove(handler)

    def emit(self, event: Event, **kwargs: Any) -> None:
        """
        Call every handler subscribed to event.

        A failing handler is reported on stderr and the remaining handlers
        still run. In debug mode the failure is re-raised instead.
        """
        event_data = EventData(event=event, kwargs=kwargs)

        if self._debug:
            print(f"[EventBus] {event_data}", file=sys.stderr)

        for handler in list(self._handlers.get(event, [])):
            try:
                handler(event_data)
            except Exception as e:
                print(f"[EventBus] Handler error for {event.name}: {e}", file=sys.stderr)
                if self._debug:
                    raise

    def clear(self) -> None:
        self._handlers.clear()

    def handler_count(self, event: Optional[Event] = None) -> int:
        """Number of handlers for one event, or across all events if None."""
        if event is not None:
            return len(self._handlers.get(event, []))
        return sum(len(handlers) for handlers in self._handlers.values())
