"""
Tests for Brick Breaker game entities
"""

import pytest

from brick_breaker.core.entities import (
    EntityKind,
    KinematicEntity,
    Rect,
    Vector2D,
    make_ball,
    make_brick,
)


class TestVector2D:
    """Tests for Vector2D class"""

    def test_creation(self) -> None:
        """Test vector creation"""
        v = Vector2D(3.0, 4.0)
        assert v.x == 3.0
        assert v.y == 4.0

    def test_in_place_addition_mutates(self) -> None:
        """Test in-place addition keeps the same object"""
        v = Vector2D(1.0, 2.0)
        same = v
        v += Vector2D(0.5, -1.0)
        assert same is v
        assert v == Vector2D(1.5, 1.0)

    def test_magnitude(self) -> None:
        """Test magnitude calculation"""
        assert Vector2D(3.0, 4.0).magnitude() == 5.0
        assert Vector2D(0.0, 0.0).magnitude() == 0.0

    def test_to_tuple(self) -> None:
        """Test tuple conversion"""
        assert Vector2D(1.5, 2.5).to_tuple() == (1.5, 2.5)


class TestRect:
    """Tests for Rect class"""

    def test_from_center(self) -> None:
        """Test building a rectangle around a center point"""
        rect = Rect.from_center(Vector2D(100.0, 50.0), 48.0, 10.0)
        assert rect == Rect(76.0, 45.0, 48.0, 10.0)

    def test_edges(self) -> None:
        """Test edge properties"""
        rect = Rect(10.0, 20.0, 30.0, 40.0)
        assert rect.left == 10.0
        assert rect.right == 40.0
        assert rect.top == 20.0
        assert rect.bottom == 60.0


class TestKinematicEntity:
    """Tests for KinematicEntity class"""

    def test_creation(self) -> None:
        """Test entity creation derives the rectangle from the center"""
        entity = KinematicEntity(EntityKind.BALL, 100.0, 200.0, 10.0, 10.0, 2.0, -3.0)
        assert entity.position == Vector2D(100.0, 200.0)
        assert entity.velocity == Vector2D(2.0, -3.0)
        assert entity.rectangle == Rect(95.0, 195.0, 10.0, 10.0)

    def test_update_position_has_no_clamping(self) -> None:
        """Test position update moves by exactly one velocity, even off screen"""
        entity = KinematicEntity(EntityKind.BALL, 0.0, 0.0, 10.0, 10.0, -7.0, -3.0)
        entity.update_position()
        assert entity.position == Vector2D(-7.0, -3.0)

    def test_update_position_alone_leaves_rectangle_stale(self) -> None:
        """Test that only update_rectangle resyncs the bounding box"""
        entity = KinematicEntity(EntityKind.BALL, 0.0, 0.0, 10.0, 10.0, 5.0, 0.0)
        entity.update_position()
        assert entity.rectangle.x == -5.0
        entity.update_rectangle()
        assert entity.rectangle.x == 0.0

    def test_update_syncs_rectangle(self) -> None:
        """Test update moves then resyncs the rectangle"""
        entity = KinematicEntity(EntityKind.BALL, 50.0, 50.0, 10.0, 20.0, 2.0, 2.0)
        entity.update()
        assert entity.position == Vector2D(52.0, 52.0)
        assert entity.rectangle == Rect(47.0, 42.0, 10.0, 20.0)

    def test_size_is_read_only(self) -> None:
        """Test size cannot be reassigned"""
        entity = make_brick(0.0, 0.0, 48.0, 10.0)
        with pytest.raises(AttributeError):
            entity.width = 12.0  # type: ignore[misc]

    def test_move_to(self) -> None:
        """Test teleporting resyncs the rectangle"""
        entity = make_ball(0.0, 0.0, 10.0, 1.0, 1.0)
        entity.move_to(20.0, 30.0)
        assert entity.rectangle == Rect(15.0, 25.0, 10.0, 10.0)

    def test_check_collision(self) -> None:
        """Test overlap against another rectangle"""
        entity = make_ball(100.0, 100.0, 10.0, 0.0, 0.0)
        assert entity.check_collision(Rect(100.0, 100.0, 5.0, 5.0))
        assert not entity.check_collision(Rect(105.0, 100.0, 5.0, 5.0))

    def test_factories_set_kind(self) -> None:
        """Test ball and brick factories"""
        assert make_ball(0.0, 0.0, 10.0, 2.0, 2.0).kind is EntityKind.BALL
        brick = make_brick(0.0, 0.0, 48.0, 10.0)
        assert brick.kind is EntityKind.BRICK
        assert brick.velocity == Vector2D(0.0, 0.0)
