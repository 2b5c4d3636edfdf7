"""
Tests for the collision resolver.

Covers:
- No-op on separate or touching rectangles
- Axis selection (wide overlap -> vertical bounce, otherwise horizontal)
- Separation after resolution and sign of the corrected component
- Zero component when centers are aligned on the corrected axis
"""

import pytest

from models import Rectangle, Vector2D
from games.Breakout.game.physics import resolve_collision


def rect(x, y, w, h):
    return Rectangle(x=x, y=y, width=w, height=h)


class TestNoContact:
    """Rectangles that do not overlap are left untouched."""

    def test_separate_rectangles_are_noop(self):
        moving = rect(0.0, 0.0, 10.0, 10.0)
        velocity = Vector2D(x=0.6, y=0.8)
        static = rect(50.0, 50.0, 10.0, 10.0)
        before = (moving.model_dump(), velocity.model_dump(), static.model_dump())

        assert resolve_collision(moving, velocity, static) is False
        assert (moving.model_dump(), velocity.model_dump(), static.model_dump()) == before

    def test_touching_edges_are_not_contact(self):
        moving = rect(0.0, 0.0, 10.0, 10.0)
        velocity = Vector2D(x=1.0, y=0.0)
        static = rect(10.0, 0.0, 10.0, 10.0)

        assert resolve_collision(moving, velocity, static) is False
        assert moving.x == 0.0
        assert velocity.x == 1.0


class TestHorizontalBounce:
    """Tall, narrow overlaps push the mover sideways."""

    def test_hit_from_left(self):
        moving = rect(0.0, 0.0, 10.0, 10.0)
        velocity = Vector2D(x=0.6, y=0.8)
        static = rect(8.0, 2.0, 10.0, 10.0)

        assert resolve_collision(moving, velocity, static) is True
        assert moving.x == -2.0
        assert moving.y == 0.0
        assert velocity.x == -0.6
        assert velocity.y == 0.8
        assert moving.intersect(static) is None

    def test_hit_from_right(self):
        moving = rect(15.0, 0.0, 10.0, 10.0)
        velocity = Vector2D(x=-0.6, y=0.8)
        static = rect(8.0, 2.0, 10.0, 10.0)

        assert resolve_collision(moving, velocity, static) is True
        assert moving.x == 18.0
        assert velocity.x == 0.6
        assert moving.intersect(static) is None

    def test_square_overlap_uses_horizontal_axis(self):
        moving = rect(0.0, 0.0, 10.0, 10.0)
        velocity = Vector2D(x=0.6, y=0.8)
        static = rect(5.0, 5.0, 10.0, 10.0)

        assert resolve_collision(moving, velocity, static) is True
        assert moving.x == -5.0
        assert moving.y == 0.0
        assert velocity.x == -0.6
        assert velocity.y == 0.8

    def test_moving_away_still_points_away(self):
        """Velocity already pointing away keeps pointing away."""
        moving = rect(0.0, 0.0, 10.0, 10.0)
        velocity = Vector2D(x=-0.6, y=0.8)
        static = rect(8.0, 2.0, 10.0, 10.0)

        resolve_collision(moving, velocity, static)
        assert velocity.x == -0.6


class TestVerticalBounce:
    """Wide, shallow overlaps push the mover up or down."""

    def test_hit_from_above(self):
        moving = rect(0.0, 0.0, 10.0, 10.0)
        velocity = Vector2D(x=0.6, y=0.8)
        static = rect(-5.0, 8.0, 20.0, 10.0)

        assert resolve_collision(moving, velocity, static) is True
        assert moving.y == -2.0
        assert moving.x == 0.0
        assert velocity.y == -0.8
        assert velocity.x == 0.6
        assert moving.intersect(static) is None

    def test_hit_from_below(self):
        moving = rect(325.0, 230.0, 50.0, 50.0)
        velocity = Vector2D(x=0.0, y=-1.0)
        static = rect(300.0, 200.0, 100.0, 40.0)

        assert resolve_collision(moving, velocity, static) is True
        assert moving.y == 240.0
        assert velocity.y == 1.0
        assert moving.intersect(static) is None

    def test_static_rectangle_not_modified(self):
        moving = rect(0.0, 0.0, 10.0, 10.0)
        velocity = Vector2D(x=0.6, y=0.8)
        static = rect(-5.0, 8.0, 20.0, 10.0)
        before = static.model_dump()

        resolve_collision(moving, velocity, static)
        assert static.model_dump() == before


class TestAlignedCenters:
    """A zero sign on the corrected axis gives a zero component."""

    def test_identical_rectangles(self):
        moving = rect(0.0, 0.0, 10.0, 10.0)
        velocity = Vector2D(x=0.6, y=0.8)
        static = rect(0.0, 0.0, 10.0, 10.0)

        assert resolve_collision(moving, velocity, static) is True
        assert moving.x == 0.0
        assert velocity.x == 0.0
        assert velocity.y == 0.8

    def test_vertical_with_aligned_y(self):
        moving = rect(0.0, 10.0, 40.0, 10.0)
        velocity = Vector2D(x=0.6, y=0.8)
        static = rect(20.0, 5.0, 40.0, 20.0)

        assert resolve_collision(moving, velocity, static) is True
        assert moving.y == 10.0
        assert velocity.y == 0.0


@pytest.mark.parametrize("moving,static", [
    ((0.0, 0.0, 50.0, 50.0), (40.0, 10.0, 100.0, 40.0)),
    ((100.0, 0.0, 50.0, 50.0), (20.0, 30.0, 100.0, 40.0)),
    ((10.0, 60.0, 50.0, 50.0), (0.0, 20.0, 100.0, 45.0)),
    ((10.0, 0.0, 50.0, 50.0), (0.0, 30.0, 100.0, 40.0)),
])
def test_resolution_separates_and_preserves_length(moving, static):
    """After resolving, the rectangles are apart and the direction is still unit length."""
    moving_rect = rect(*moving)
    static_rect = rect(*static)
    velocity = Vector2D(x=0.6, y=0.8)

    assert resolve_collision(moving_rect, velocity, static_rect) is True
    assert moving_rect.intersect(static_rect) is None
    assert velocity.length == pytest.approx(1.0)
    assert resolve_collision(moving_rect, velocity, static_rect) is False
