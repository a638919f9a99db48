"""
Tunable constants for map generation, visibility and rendering.
"""

from dataclasses import dataclass

# Map dimensions in cells
MAP_WIDTH: int = 80
MAP_HEIGHT: int = 50

# Room placement attempts and size range (inclusive)
MAX_ROOMS: int = 30
ROOM_MIN_SIZE: int = 6
ROOM_MAX_SIZE: int = 10

# Player view radius in cells
VIEW_RADIUS: int = 8

# Pixels per cell in the image renderer
TILE_SIZE: int = 16

WINDOW_TITLE: str = "Wedge of Life"


@dataclass(frozen=True)
class GeneratorSettings:
    """Room placement parameters shared by the dungeon and town generators."""

    max_rooms: int = MAX_ROOMS
    min_size: int = ROOM_MIN_SIZE
    max_size: int = ROOM_MAX_SIZE

    def __post_init__(self) -> None:
        if self.max_rooms < 0:
            raise ValueError(f"max_rooms must be >= 0, got {self.max_rooms}")
        # Rooms need at least one interior cell inside their wall ring
        if self.min_size < 2:
            raise ValueError(f"min_size must be >= 2, got {self.min_size}")
        if self.min_size > self.max_size:
            raise ValueError(
                f"min_size ({self.min_size}) is larger than max_size ({self.max_size})"
            )
