"""
What a renderer is allowed to know about the map, and how to draw it.

Per cell the renderer gets the tile kind and the two visibility flags:

    not revealed           -> HIDDEN: draw nothing at all
    revealed, not visible  -> REMEMBERED: dimmed, greyscale version of the tile
    visible                -> LIT: full colour

Visible always implies revealed (VisibilityTracker guarantees it), so there
is no "visible but unrevealed" case to handle.

The glyph/colour table below is cosmetic; any renderer may use its own.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterator, Optional, Tuple

from .components import RGB, Position, Renderable
from .map import TileGrid, TileKind


class RenderMode(Enum):
    HIDDEN = auto()
    REMEMBERED = auto()
    LIT = auto()


@dataclass(frozen=True)
class CellView:
    """Read-only snapshot of one cell."""

    kind: TileKind
    revealed: bool
    visible: bool

    @property
    def mode(self) -> RenderMode:
        if self.visible:
            return RenderMode.LIT
        if self.revealed:
            return RenderMode.REMEMBERED
        return RenderMode.HIDDEN


def cell_view(grid: TileGrid, idx: int) -> CellView:
    """Returns the render-facing view of the cell at flat index idx."""
    grid.check_index(idx)
    return CellView(
        kind=TileKind(int(grid.tiles[idx])),
        revealed=bool(grid.revealed[idx]),
        visible=bool(grid.visible[idx]),
    )


def iter_cells(grid: TileGrid) -> Iterator[Tuple[int, int, CellView]]:
    """Yields (x, y, CellView) for every cell in row-major order."""
    for idx in range(len(grid)):
        x, y = grid.xy(idx)
        yield x, y, cell_view(grid, idx)


# --- Cosmetic mapping ---

TILE_STYLES: Dict[TileKind, Renderable] = {
    TileKind.FLOOR: Renderable(glyph='"', fg=(2, 219, 158), bg=(2, 168, 129)),
    TileKind.WALL: Renderable(glyph="#", fg=(120, 135, 211), bg=(62, 60, 137)),
    TileKind.DOOR: Renderable(glyph="O", fg=(255, 100, 100), bg=(100, 50, 255)),
}

# ASCII output has no colour, so remembered cells use a different glyph set
ASCII_LIT: Dict[TileKind, str] = {
    TileKind.FLOOR: ".",
    TileKind.WALL: "#",
    TileKind.DOOR: "+",
}
ASCII_REMEMBERED: Dict[TileKind, str] = {
    TileKind.FLOOR: ",",
    TileKind.WALL: "%",
    TileKind.DOOR: "'",
}


def dim(color: RGB) -> RGB:
    """Greyscale the colour and halve its brightness."""
    r, g, b = color
    luminance = 0.2126 * r + 0.7152 * g + 0.0722 * b
    grey = int(luminance * 0.5)
    return (grey, grey, grey)


def style_for(cell: CellView) -> Optional[Renderable]:
    """Glyph and colours for a cell, or None if it must not be drawn."""
    mode = cell.mode
    if mode == RenderMode.HIDDEN:
        return None
    style = TILE_STYLES[cell.kind]
    if mode == RenderMode.REMEMBERED:
        return Renderable(glyph=style.glyph, fg=dim(style.fg), bg=dim(style.bg))
    return style


def render_ascii(
    grid: TileGrid,
    player: Optional[Position] = None,
    player_glyph: str = "@",
) -> str:
    """
    Draw the map as text, one line per row. Hidden cells are spaces.
    """
    lines = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            if player is not None and (x, y) == (player.x, player.y):
                row.append(player_glyph)
                continue
            cell = cell_view(grid, grid.index(x, y))
            mode = cell.mode
            if mode == RenderMode.HIDDEN:
                row.append(" ")
            elif mode == RenderMode.REMEMBERED:
                row.append(ASCII_REMEMBERED[cell.kind])
            else:
                row.append(ASCII_LIT[cell.kind])
        lines.append("".join(row))
    return "\n".join(lines)
