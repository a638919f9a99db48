"""
Rasterise a map to a BGR image with OpenCV.

Each cell becomes a TILE_SIZE x TILE_SIZE block filled with its background
colour and stamped with its glyph in the foreground colour.
"""

from typing import Optional

import cv2
import numpy as np

from .components import RGB, Position, Renderable
from .config import TILE_SIZE
from .map import TileGrid
from .render import iter_cells, style_for

# Type Definition
Image = np.ndarray

FONT = cv2.FONT_HERSHEY_PLAIN


def _bgr(color: RGB) -> tuple:
    r, g, b = color
    return (b, g, r)


def draw_cell(image: Image, x: int, y: int, style: Renderable, tile_size: int = TILE_SIZE) -> None:
    """Paint one cell's background and glyph onto image."""
    left = x * tile_size
    top = y * tile_size
    image[top : top + tile_size, left : left + tile_size] = _bgr(style.bg)

    scale = tile_size / 16.0
    (text_w, text_h), _baseline = cv2.getTextSize(style.glyph, FONT, scale, 1)
    origin = (left + (tile_size - text_w) // 2, top + (tile_size + text_h) // 2)
    cv2.putText(image, style.glyph, origin, FONT, scale, _bgr(style.fg), 1, cv2.LINE_AA)


def render_image(
    grid: TileGrid,
    player: Optional[Position] = None,
    player_style: Optional[Renderable] = None,
    tile_size: int = TILE_SIZE,
) -> Image:
    """
    Draw the whole map. Hidden cells stay black.

    Returns:
        A (height * tile_size, width * tile_size, 3) uint8 BGR image.
    """
    image: Image = np.zeros((grid.height * tile_size, grid.width * tile_size, 3), np.uint8)

    for x, y, cell in iter_cells(grid):
        style = style_for(cell)
        if style is not None:
            draw_cell(image, x, y, style, tile_size)

    if player is not None and player_style is not None:
        draw_cell(image, player.x, player.y, player_style, tile_size)

    return image
