"""
Play the map in a terminal, one command per line.

Keys:
    h / 4   move left        l / 6   move right
    k / 8   move up          j / 2   move down
    a       reveal the whole map (cheat)
    q       quit
"""

import argparse
import sys
from typing import Optional

from roguemap.config import MAP_HEIGHT, MAP_WIDTH, VIEW_RADIUS, WINDOW_TITLE
from roguemap.errors import NoRoomsError
from roguemap.event_system import EventBus
from roguemap.game import GENERATORS, Game
from roguemap.player import (
    MOVE_DOWN,
    MOVE_LEFT,
    MOVE_RIGHT,
    MOVE_UP,
    NO_ACTION,
    REVEAL_ALL,
    Action,
)
from roguemap.render import render_ascii
from roguemap.rng import RandomNumberGenerator
from roguemap.world import World

KEY_ACTIONS = {
    "h": MOVE_LEFT,
    "4": MOVE_LEFT,
    "l": MOVE_RIGHT,
    "6": MOVE_RIGHT,
    "k": MOVE_UP,
    "8": MOVE_UP,
    "j": MOVE_DOWN,
    "2": MOVE_DOWN,
    "a": REVEAL_ALL,
}


def log(message: str) -> None:
    """Log to stderr so stdout only carries the map."""
    print(message, file=sys.stderr)


def decode_key(key: str) -> Action:
    """Translate one typed key into an action. Unknown keys do nothing."""
    return KEY_ACTIONS.get(key.strip().lower()[:1], NO_ACTION)


def draw(world: World) -> None:
    print(render_ascii(world.grid, world.player_position, world.player_renderable.glyph))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=WINDOW_TITLE)
    parser.add_argument("--kind", choices=sorted(GENERATORS), default="dungeon")
    parser.add_argument("--width", type=int, default=MAP_WIDTH)
    parser.add_argument("--height", type=int, default=MAP_HEIGHT)
    parser.add_argument("--radius", type=int, default=VIEW_RADIUS)
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--debug", action="store_true", help="Print every game event to stderr")
    return parser


def new_game(args: argparse.Namespace) -> Game:
    """Build the level. The bus exists first so --debug also sees generation events."""
    bus = EventBus(debug=args.debug)
    return Game.new(
        kind=args.kind,
        width=args.width,
        height=args.height,
        view_radius=args.radius,
        rng=RandomNumberGenerator(args.seed),
        renderer=draw,
        bus=bus,
    )


def main() -> None:
    args = build_parser().parse_args()

    try:
        game = new_game(args)
    except (ValueError, NoRoomsError) as e:
        log(f"Error: {e}")
        sys.exit(1)

    log(f"{WINDOW_TITLE}: {len(game.world.grid.rooms)} rooms. h/j/k/l to move, a to reveal, q to quit.")

    action: Optional[Action] = None
    while True:
        game.tick(action)
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip().lower() == "q":
            break
        action = decode_key(line)


if __name__ == "__main__":
    main()
