"""Unit tests for the town (houses on open ground) generator."""

from collections import deque
from typing import List, Tuple

import numpy as np
import pytest

from roguemap.config import GeneratorSettings
from roguemap.dungeon_gen import place_rooms
from roguemap.map import TileGrid, TileKind
from roguemap.rect import Rect
from roguemap.rng import RandomNumberGenerator
from roguemap.town_gen import HOUSE_SPACING, Wall, door_position, generate_town, stamp_house


class ScriptedRng:
    def __init__(self, uniform: List[int], dice: List[int]) -> None:
        self.uniform = deque(uniform)
        self.dice_rolls = deque(dice)

    def uniform_integer(self, low: int, high: int) -> int:
        return self.uniform.popleft()

    def dice(self, count: int, sides: int) -> int:
        value = self.dice_rolls.popleft()
        assert count <= value <= count * sides
        return value


def perimeter(room: Rect) -> List[Tuple[int, int]]:
    cells = []
    for y in range(room.y1, room.y2 + 1):
        for x in range(room.x1, room.x2 + 1):
            if x in (room.x1, room.x2) or y in (room.y1, room.y2):
                cells.append((x, y))
    return cells


def assert_is_house(grid: TileGrid, room: Rect) -> None:
    """One door on the perimeter, wall everywhere else on it, floor inside."""
    ring = [grid.tile_at(x, y) for x, y in perimeter(room)]
    assert ring.count(TileKind.DOOR) == 1, f"{room} has {ring.count(TileKind.DOOR)} doors"
    assert ring.count(TileKind.WALL) == len(ring) - 1

    inner = room.interior()
    for y in range(inner.y1, inner.y2 + 1):
        for x in range(inner.x1, inner.x2 + 1):
            assert grid.tile_at(x, y) == TileKind.FLOOR


class TestDoorPosition:
    room = Rect(x1=10, y1=20, x2=17, y2=26)

    @pytest.mark.parametrize(
        "wall,expected",
        [
            (Wall.TOP, (13, 20)),
            (Wall.RIGHT, (17, 23)),
            (Wall.BOTTOM, (13, 26)),
            (Wall.LEFT, (10, 23)),
        ],
    )
    def test_door_at_integer_midpoint(self, wall, expected):
        assert door_position(self.room, wall) == expected

    def test_walls_match_d4_faces(self):
        assert [Wall(n) for n in range(1, 5)] == [Wall.TOP, Wall.RIGHT, Wall.BOTTOM, Wall.LEFT]


class TestStampHouse:
    @pytest.mark.parametrize("wall", list(Wall))
    def test_house_shape(self, wall):
        grid = TileGrid(30, 30, fill=TileKind.FLOOR)
        room = Rect.new(5, 5, 8, 6)
        stamp_house(grid, room, wall)

        assert_is_house(grid, room)
        assert grid.tile_at(*door_position(room, wall)) == TileKind.DOOR

    def test_ground_outside_untouched(self):
        grid = TileGrid(30, 30, fill=TileKind.FLOOR)
        stamp_house(grid, Rect.new(5, 5, 8, 6), Wall.TOP)
        assert grid.tile_at(4, 5) == TileKind.FLOOR
        assert grid.tile_at(14, 12) == TileKind.FLOOR


class TestGenerateTown:
    @pytest.mark.parametrize("seed", range(20))
    def test_houses_never_overlap(self, seed: int):
        grid = generate_town(80, 50, rng=RandomNumberGenerator(seed))
        for i, a in enumerate(grid.rooms):
            for b in grid.rooms[i + 1 :]:
                assert not a.intersect(b)

    @pytest.mark.parametrize("seed", range(20))
    def test_every_house_has_one_door_and_solid_walls(self, seed: int):
        grid = generate_town(80, 50, rng=RandomNumberGenerator(seed))
        for room in grid.rooms:
            assert_is_house(grid, room)

    @pytest.mark.parametrize("seed", range(5))
    def test_door_count_matches_house_count(self, seed: int):
        grid = generate_town(80, 50, rng=RandomNumberGenerator(seed))
        assert int(np.count_nonzero(grid.tiles == TileKind.DOOR)) == len(grid.rooms)

    def test_ground_outside_houses_is_floor(self):
        grid = generate_town(80, 50, rng=RandomNumberGenerator(11))
        for x, y in grid.cells_of_kind(TileKind.WALL):
            assert any(room.contains(x, y) for room in grid.rooms)

    def test_empty_town_is_open_ground(self):
        grid = generate_town(20, 20, rng=RandomNumberGenerator(0), settings=GeneratorSettings(max_rooms=0))
        assert grid.rooms == []
        assert np.all(grid.tiles == TileKind.FLOOR)

    def test_scripted_town(self):
        """Wall choice comes from a d4 rolled after the origin."""
        rng = ScriptedRng(uniform=[6, 6, 8, 8], dice=[2, 2, 3, 20, 20, 1])
        grid = generate_town(40, 40, rng=rng, settings=GeneratorSettings(max_rooms=2))

        assert grid.rooms == [Rect.new(2, 2, 6, 6), Rect.new(20, 20, 8, 8)]
        assert grid.tile_at(5, 8) == TileKind.DOOR  # bottom wall of the first house
        assert grid.tile_at(24, 20) == TileKind.DOOR  # top wall of the second

    def test_houses_keep_a_gap(self):
        """A house right next to an accepted one is rejected; one cell of ground is enough."""
        adjacent = ScriptedRng(uniform=[6, 6, 6, 6], dice=[2, 2, 3, 9, 2])
        grid = generate_town(40, 40, rng=adjacent, settings=GeneratorSettings(max_rooms=2))
        assert grid.rooms == [Rect.new(2, 2, 6, 6)]

        gap = ScriptedRng(uniform=[6, 6, 6, 6], dice=[2, 2, 3, 10, 2, 4])
        grid = generate_town(40, 40, rng=gap, settings=GeneratorSettings(max_rooms=2))
        assert grid.rooms == [Rect.new(2, 2, 6, 6), Rect.new(10, 2, 6, 6)]
        assert grid.tile_at(9, 5) == TileKind.FLOOR

    def test_side_by_side_rooms_allowed_without_spacing(self):
        rng = ScriptedRng(uniform=[6, 6, 6, 6], dice=[2, 2, 9, 2])
        grid = TileGrid(40, 40, fill=TileKind.FLOOR)
        place_rooms(grid, rng, GeneratorSettings(max_rooms=2), lambda g, room, r: None)
        assert grid.rooms == [Rect.new(2, 2, 6, 6), Rect.new(9, 2, 6, 6)]

    @pytest.mark.parametrize("seed", range(50))
    def test_every_door_opens_onto_floor(self, seed: int):
        """No house is sealed: the cell outside every door is open ground."""
        grid = generate_town(80, 50, rng=RandomNumberGenerator(seed))
        for room in grid.rooms:
            (door,) = [c for c in perimeter(room) if grid.tile_at(*c) == TileKind.DOOR]
            x, y = door
            if y == room.y1:
                outside = (x, y - 1)
            elif y == room.y2:
                outside = (x, y + 1)
            elif x == room.x1:
                outside = (x - 1, y)
            else:
                outside = (x + 1, y)
            assert grid.in_bounds(*outside)
            assert grid.tile_at(*outside) == TileKind.FLOOR, f"door of {room} is blocked"

    @pytest.mark.parametrize("seed", range(20))
    def test_houses_are_spaced_apart(self, seed: int):
        grid = generate_town(80, 50, rng=RandomNumberGenerator(seed))
        for i, a in enumerate(grid.rooms):
            for b in grid.rooms[i + 1 :]:
                assert not a.grow(HOUSE_SPACING).intersect(b)
