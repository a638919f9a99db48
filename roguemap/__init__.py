"""Tile map generation and visibility tracking for a grid roguelike."""

from roguemap.rect import Rect
from roguemap.map import TileGrid, TileKind
from roguemap.config import GeneratorSettings
from roguemap.rng import Rng, RandomNumberGenerator
from roguemap.dungeon_gen import generate_dungeon, carve_corridor
from roguemap.town_gen import generate_town
from roguemap.components import Position, Viewshed, Renderable, Player
from roguemap.world import World
from roguemap.player import Action, ActionType, try_move_player, cheat_reveal_map
from roguemap.fov import field_of_view
from roguemap.visibility import VisibilityTracker
from roguemap.render import CellView, RenderMode, cell_view, render_ascii
from roguemap.event_system import EventBus, Event, EventData
from roguemap.errors import RoguemapError, NoRoomsError
from roguemap.game import Game, build_level
