"""
Field-of-view capability.

The map core never runs a visibility sweep itself; it hands an FOV
function the observer's origin and radius plus two queries on the map:

    blocks_sight(x, y) -> bool   True for cells that stop line of sight
    in_bounds(x, y) -> bool      True for cells that exist

blocks_sight is TileGrid.is_opaque taken by (x, y) instead of a flat index.

Any callable with the FovFunction signature can be used. field_of_view()
below is the default: it casts Bresenham rays from the origin to every
cell on the edge of a square of the given radius and keeps the cells that
fall inside the circle. A ray stops at the first blocking cell, which is
itself visible (so walls bounding a room are drawn).
"""

from typing import Callable, Iterable, Iterator, Set, Tuple

Point = Tuple[int, int]
SightQuery = Callable[[int, int], bool]
BoundsQuery = Callable[[int, int], bool]
FovFunction = Callable[[Point, int, SightQuery, BoundsQuery], Iterable[Point]]


def _line(start: Point, end: Point) -> Iterator[Point]:
    """Yields every cell on the Bresenham line from start to end, inclusive."""
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        yield (x0, y0)
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _square_edge(origin: Point, radius: int) -> Iterator[Point]:
    ox, oy = origin
    for d in range(-radius, radius + 1):
        yield (ox + d, oy - radius)
        yield (ox + d, oy + radius)
        yield (ox - radius, oy + d)
        yield (ox + radius, oy + d)


def field_of_view(
    origin: Point,
    radius: int,
    blocks_sight: SightQuery,
    in_bounds: BoundsQuery,
) -> Set[Point]:
    """
    Compute the set of cells visible from origin.

    Returns:
        Set of (x, y) cells, always including origin if it is in bounds.
    """
    visible: Set[Point] = set()
    ox, oy = origin
    if not in_bounds(ox, oy):
        return visible
    visible.add(origin)

    # Compare squared distances; the +radius softens the circle's edge so
    # radius 1 still sees all eight neighbours.
    limit = radius * radius + radius

    for target in _square_edge(origin, radius):
        for x, y in _line(origin, target):
            if (x, y) == origin:
                continue
            if not in_bounds(x, y):
                break
            if (x - ox) ** 2 + (y - oy) ** 2 > limit:
                break
            visible.add((x, y))
            if blocks_sight(x, y):
                break

    return visible
