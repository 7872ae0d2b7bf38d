"""Tests for the primitive models."""

import pytest
from pydantic import ValidationError

from breakout.models import Color, Rectangle, Vector2D


class TestRectangle:
    """Tests for Rectangle."""

    def test_edges(self):
        """Edges derived from origin and size."""
        rect = Rectangle(x=100, y=50, width=40, height=20)
        assert rect.left == 100
        assert rect.right == 140
        assert rect.top == 50
        assert rect.bottom == 70

    def test_center(self):
        rect = Rectangle(x=100, y=50, width=40, height=20)
        assert rect.center == Vector2D(x=120, y=60)

    def test_non_positive_size_rejected(self):
        with pytest.raises(ValidationError):
            Rectangle(x=0, y=0, width=0, height=10)
        with pytest.raises(ValidationError):
            Rectangle(x=0, y=0, width=10, height=-1)

    def test_to_tuple(self):
        rect = Rectangle(x=1, y=2, width=3, height=4)
        assert rect.to_tuple() == (1, 2, 3, 4)

    def test_frozen(self):
        rect = Rectangle(x=1, y=2, width=3, height=4)
        with pytest.raises(ValidationError):
            rect.x = 10


class TestIntersects:
    """Tests for AABB overlap."""

    def test_overlapping(self):
        a = Rectangle(x=0, y=0, width=50, height=50)
        b = Rectangle(x=25, y=25, width=50, height=50)
        assert a.intersects(b)

    def test_touching_edges_collide(self):
        """Rectangles that share an edge count as colliding."""
        a = Rectangle(x=0, y=0, width=50, height=50)
        b = Rectangle(x=50, y=0, width=50, height=50)
        assert a.intersects(b)

    def test_touching_corner_collides(self):
        a = Rectangle(x=0, y=0, width=50, height=50)
        b = Rectangle(x=50, y=50, width=10, height=10)
        assert a.intersects(b)

    def test_horizontal_gap(self):
        a = Rectangle(x=0, y=0, width=50, height=50)
        b = Rectangle(x=51, y=0, width=50, height=50)
        assert not a.intersects(b)

    def test_overlap_on_one_axis_only(self):
        """Both axes must overlap."""
        a = Rectangle(x=0, y=0, width=50, height=50)
        b = Rectangle(x=10, y=100, width=10, height=10)
        assert not a.intersects(b)

    def test_contained(self):
        outer = Rectangle(x=0, y=0, width=100, height=100)
        inner = Rectangle(x=40, y=40, width=10, height=10)
        assert outer.intersects(inner)

    @pytest.mark.parametrize("a,b", [
        ((0, 0, 50, 50), (25, 25, 50, 50)),
        ((0, 0, 50, 50), (50, 0, 50, 50)),
        ((0, 0, 50, 50), (51, 0, 50, 50)),
        ((0, 0, 1, 720), (5, 300, 10, 10)),
        ((0, 719, 1280, 1), (645, 709, 10, 10)),
        ((-20, -20, 10, 10), (0, 0, 1280, 1)),
    ])
    def test_symmetric(self, a, b):
        """overlaps(A, B) == overlaps(B, A)."""
        ra = Rectangle(x=a[0], y=a[1], width=a[2], height=a[3])
        rb = Rectangle(x=b[0], y=b[1], width=b[2], height=b[3])
        assert ra.intersects(rb) == rb.intersects(ra)


class TestColor:
    """Tests for Color."""

    def test_rgb_tuple(self):
        assert Color(r=245, g=245, b=245).as_rgb_tuple == (245, 245, 245)

    def test_default_alpha_opaque(self):
        assert Color(r=1, g=2, b=3).as_tuple == (1, 2, 3, 255)

    def test_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)
        with pytest.raises(ValidationError):
            Color(r=0, g=-1, b=0)
