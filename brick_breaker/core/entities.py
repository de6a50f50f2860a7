"""
Brick Breaker game entities: vectors, rectangles and kinematic entities
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

Color = tuple[int, int, int]

DEFAULT_COLOR: Color = (245, 245, 245)


class EntityKind(Enum):
    """Which role a kinematic entity plays in the round"""

    BALL = "ball"
    PADDLE = "paddle"
    BRICK = "brick"


class InputIntent(Enum):
    """Discrete paddle input for one tick"""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    NONE = "none"


@dataclass
class Vector2D:
    """Simple 2D vector for positions, velocities and accelerations"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, (x, y) being the top-left corner"""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_center(cls, center: Vector2D, width: float, height: float) -> "Rect":
        return cls(center.x - width / 2, center.y - height / 2, width, height)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height


class KinematicEntity:
    """
    Moving (or static) box-shaped game object.

    The position is the geometric center of the entity. The bounding
    rectangle is derived from it and must be resynchronized after every
    position change, which ``update`` and ``move_to`` do.
    """

    def __init__(
        self,
        kind: EntityKind,
        x: float,
        y: float,
        width: float,
        height: float,
        vx: float = 0.0,
        vy: float = 0.0,
        color: Color = DEFAULT_COLOR,
    ):
        self.kind = kind
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self._width = width
        self._height = height
        self.color = color
        self.rectangle = Rect.from_center(self.position, width, height)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def update_position(self) -> None:
        """Moves the entity by one tick of velocity, without clamping"""
        self.position += self.velocity

    def update_rectangle(self) -> None:
        """Recomputes the bounding rectangle from the current center"""
        self.rectangle = Rect.from_center(self.position, self._width, self._height)

    def update(self) -> None:
        """Advances one tick: position first, then rectangle"""
        self.update_position()
        self.update_rectangle()

    def move_to(self, x: float, y: float) -> None:
        """Teleports the entity and resyncs its rectangle"""
        self.position = Vector2D(x, y)
        self.update_rectangle()

    def check_collision(self, rect: Rect) -> bool:
        """Returns True if this entity's rectangle overlaps ``rect``"""
        # Local import, collision depends on this module
        from brick_breaker.core.collision import rects_overlap

        return rects_overlap(self.rectangle, rect)

    def __repr__(self) -> str:
        return (
            f"KinematicEntity({self.kind.value}, position={self.position.to_tuple()}, "
            f"velocity={self.velocity.to_tuple()}, size=({self._width}, {self._height}))"
        )


def make_ball(
    x: float, y: float, size: float, vx: float, vy: float, color: Color = DEFAULT_COLOR
) -> KinematicEntity:
    """Creates a square ball entity"""
    return KinematicEntity(EntityKind.BALL, x, y, size, size, vx, vy, color)


def make_brick(
    x: float, y: float, width: float, height: float, color: Color = DEFAULT_COLOR
) -> KinematicEntity:
    """Creates a static brick entity"""
    return KinematicEntity(EntityKind.BRICK, x, y, width, height, color=color)
