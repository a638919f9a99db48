#!/usr/bin/env python3
"""
Render a generated map to an image file for visual inspection.

Useful for:
- Checking room placement and corridor shapes
- Seeing how remembered (dimmed) cells look next to lit ones

Usage:
    python tools/render_map_image.py                      # dungeon, random seed
    python tools/render_map_image.py --kind town          # town map
    python tools/render_map_image.py --seed 42            # reproducible map
    python tools/render_map_image.py --walk 20            # walk 20 random steps, then render the fog of war
    python tools/render_map_image.py --output my.png      # custom output path
"""

import argparse
import random
import sys
from pathlib import Path

import cv2

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from roguemap.config import MAP_HEIGHT, MAP_WIDTH, TILE_SIZE, VIEW_RADIUS
from roguemap.errors import NoRoomsError
from roguemap.game import GENERATORS, Game
from roguemap.player import MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, MOVE_UP
from roguemap.render_image import render_image
from roguemap.rng import RandomNumberGenerator


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render a map to an image file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--kind", "-k", choices=sorted(GENERATORS), default="dungeon")
    parser.add_argument("--width", type=int, default=MAP_WIDTH, help=f"Map width (default: {MAP_WIDTH})")
    parser.add_argument("--height", type=int, default=MAP_HEIGHT, help=f"Map height (default: {MAP_HEIGHT})")
    parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed for reproducible maps")
    parser.add_argument("--radius", type=int, default=VIEW_RADIUS, help="Player view radius")
    parser.add_argument(
        "--walk",
        type=int,
        default=0,
        help="Random steps to take before rendering. 0 renders the fully revealed map.",
    )
    parser.add_argument("--tile-size", type=int, default=TILE_SIZE, help="Pixels per cell")
    parser.add_argument(
        "--output", "-o",
        type=str,
        default="map_render.png",
        help="Output image path (default: map_render.png)",
    )
    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)
        print(f"Using random seed: {args.seed}")

    print(f"Generating {args.kind} map ({args.width}x{args.height})...")
    try:
        game = Game.new(
            kind=args.kind,
            width=args.width,
            height=args.height,
            view_radius=args.radius,
            rng=RandomNumberGenerator(args.seed),
        )
    except (ValueError, NoRoomsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    world = game.world
    if args.walk > 0:
        moves = [MOVE_LEFT, MOVE_RIGHT, MOVE_UP, MOVE_DOWN]
        game.tick()
        for _ in range(args.walk):
            game.tick(random.choice(moves))
        print(f"Walked {args.walk} steps, player at ({world.player_position.x}, {world.player_position.y})")
    else:
        world.grid.reveal_all()
        world.grid.visible[:] = True

    image = render_image(world.grid, world.player_position, world.player_renderable, args.tile_size)

    output_path = Path(args.output)
    cv2.imwrite(str(output_path), image)
    print(f"Saved to: {output_path.absolute()}")

    print(f"\nRooms ({len(world.grid.rooms)}):")
    for i, room in enumerate(world.grid.rooms):
        print(f"  Room {i}: ({room.x1}, {room.y1}) size {room.width}x{room.height}")


if __name__ == "__main__":
    main()
