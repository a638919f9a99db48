"""
Axis-aligned rectangles used as room footprints.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """
    An axis-aligned rectangle with inclusive integer corners.

    x2/y2 are the far edge, so a Rect built with width w spans w + 1 columns
    of cells (x1..x2 inclusive). Rooms use the outer ring as their wall.
    """

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def new(cls, x: int, y: int, w: int, h: int) -> "Rect":
        """Build a Rect from its top-left corner and a width/height."""
        return cls(x1=x, y1=y, x2=x + w, y2=y + h)

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    def intersect(self, other: "Rect") -> bool:
        """Returns True if this rectangle overlaps another. Touching edges count."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def center(self) -> Tuple[int, int]:
        """Returns the (x, y) midpoint, truncated toward the top-left."""
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def interior(self) -> "Rect":
        """The rectangle shrunk by one cell on every side."""
        return Rect(x1=self.x1 + 1, y1=self.y1 + 1, x2=self.x2 - 1, y2=self.y2 - 1)

    def grow(self, margin: int) -> "Rect":
        """The rectangle pushed out by margin cells on every side."""
        return Rect(x1=self.x1 - margin, y1=self.y1 - margin, x2=self.x2 + margin, y2=self.y2 + margin)

    def contains(self, x: int, y: int) -> bool:
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2
