"""Unit tests for the Rect primitive."""

import pytest

from roguemap.rect import Rect


class TestRectConstruction:
    def test_new_from_origin_and_size(self):
        """x2/y2 are origin plus width/height."""
        rect = Rect.new(10, 10, 8, 8)
        assert rect == Rect(x1=10, y1=10, x2=18, y2=18)
        assert rect.width == 8
        assert rect.height == 8

    @pytest.mark.parametrize("w,h", [(1, 1), (6, 10), (10, 6)])
    def test_corners_are_ordered(self, w, h):
        rect = Rect.new(3, 4, w, h)
        assert rect.x1 <= rect.x2
        assert rect.y1 <= rect.y2


class TestRectIntersect:
    def test_overlapping_rects_intersect(self):
        a = Rect.new(0, 0, 10, 10)
        b = Rect.new(5, 5, 10, 10)
        assert a.intersect(b)
        assert b.intersect(a)

    def test_shared_edge_counts_as_intersection(self):
        """Touching on an edge is an intersection (inclusive test)."""
        a = Rect.new(0, 0, 10, 10)
        b = Rect.new(10, 0, 5, 5)
        assert a.intersect(b)

    def test_shared_corner_counts_as_intersection(self):
        a = Rect.new(0, 0, 10, 10)
        b = Rect.new(10, 10, 3, 3)
        assert a.intersect(b)

    def test_separated_rects_do_not_intersect(self):
        a = Rect.new(0, 0, 10, 10)
        b = Rect.new(11, 0, 5, 5)
        assert not a.intersect(b)
        assert not b.intersect(a)

    def test_contained_rect_intersects(self):
        outer = Rect.new(0, 0, 20, 20)
        inner = Rect.new(5, 5, 2, 2)
        assert outer.intersect(inner)
        assert inner.intersect(outer)


class TestRectCenterAndInterior:
    def test_center_of_even_rect(self):
        assert Rect.new(10, 10, 8, 8).center() == (14, 14)

    def test_center_truncates(self):
        """(1 + 8) // 2 == 4, not 4.5 rounded up."""
        assert Rect.new(1, 1, 7, 7).center() == (4, 4)

    def test_interior_shrinks_each_side(self):
        assert Rect.new(10, 10, 8, 8).interior() == Rect(x1=11, y1=11, x2=17, y2=17)

    def test_grow_pushes_out_each_side(self):
        rect = Rect.new(10, 10, 8, 8)
        assert rect.grow(1) == Rect(x1=9, y1=9, x2=19, y2=19)
        assert rect.grow(0) == rect

    def test_grown_rect_catches_side_by_side_neighbours(self):
        left = Rect.new(2, 2, 6, 6)
        right = Rect.new(9, 2, 6, 6)
        assert not left.intersect(right)
        assert left.grow(1).intersect(right)

    def test_contains_is_inclusive(self):
        rect = Rect.new(2, 2, 3, 3)
        assert rect.contains(2, 2)
        assert rect.contains(5, 5)
        assert not rect.contains(6, 5)
