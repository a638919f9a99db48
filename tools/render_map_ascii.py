#!/usr/bin/env python3
"""
Render a generated map as ASCII art for debugging.

Usage:
    python tools/render_map_ascii.py [--kind dungeon|town] [--seed S] [--width N] [--height N]
    python tools/render_map_ascii.py --from-player   # only what the player sees from the spawn point
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path so we can import roguemap
sys.path.insert(0, str(Path(__file__).parent.parent))

from roguemap.config import MAP_HEIGHT, MAP_WIDTH, VIEW_RADIUS
from roguemap.errors import NoRoomsError
from roguemap.game import GENERATORS, Game
from roguemap.render import render_ascii
from roguemap.rng import RandomNumberGenerator


def log(message: str) -> None:
    print(message, file=sys.stderr)


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a map as ASCII art")
    parser.add_argument("--kind", choices=sorted(GENERATORS), default="dungeon", help="Map generator")
    parser.add_argument("--width", type=int, default=MAP_WIDTH, help="Map width in cells")
    parser.add_argument("--height", type=int, default=MAP_HEIGHT, help="Map height in cells")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible generation")
    parser.add_argument("--radius", type=int, default=VIEW_RADIUS, help="Player view radius")
    parser.add_argument(
        "--from-player",
        action="store_true",
        help="Draw only what the player has seen instead of the whole map",
    )
    args = parser.parse_args()

    if args.seed is not None:
        log(f"Using random seed: {args.seed}")

    try:
        game = Game.new(
            kind=args.kind,
            width=args.width,
            height=args.height,
            view_radius=args.radius,
            rng=RandomNumberGenerator(args.seed),
        )
    except (ValueError, NoRoomsError) as e:
        log(f"Error: {e}")
        sys.exit(1)

    grid = game.world.grid
    if args.from_player:
        game.tick()
    else:
        grid.reveal_all()
        grid.visible[:] = True

    print(render_ascii(grid, game.world.player_position))

    print("\n--- Debug Info ---")
    print(f"Map size: {grid.width}x{grid.height} cells")
    print(f"Rooms generated: {len(grid.rooms)}")
    for i, room in enumerate(grid.rooms):
        print(f"  Room {i}: ({room.x1}, {room.y1})-({room.x2}, {room.y2}), center {room.center()}")


if __name__ == "__main__":
    main()
