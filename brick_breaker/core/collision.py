"""
Collision detection for Brick Breaker

Every test is a point-in-time axis-aligned rectangle overlap on the current
rectangles. There is no swept detection: a ball fast enough to cross a thin
obstacle within one tick passes through it.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from brick_breaker.core.entities import KinematicEntity, Rect


class BoundaryContact(Enum):
    """Screen edge touched by an entity"""

    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Strict AABB intersection, rectangles sharing only an edge do not overlap"""
    return (
        a.left < b.right and a.right > b.left and a.top < b.bottom and a.bottom > b.top
    )


@dataclass(frozen=True)
class Boundaries:
    """Thin rectangles lining the four screen edges"""

    top: Rect
    bottom: Rect
    left: Rect
    right: Rect

    @classmethod
    def for_screen(cls, width: float, height: float, thickness: float = 1.0) -> "Boundaries":
        return cls(
            top=Rect(0, 0, width, thickness),
            bottom=Rect(0, height - thickness, width, thickness),
            left=Rect(0, 0, thickness, height),
            right=Rect(width - thickness, 0, thickness, height),
        )

    def get(self, contact: BoundaryContact) -> Rect:
        return getattr(self, contact.value)


# Order matters: only the first matching edge is reported per tick
BALL_BOUNDARY_PRIORITY = (
    BoundaryContact.BOTTOM,
    BoundaryContact.TOP,
    BoundaryContact.LEFT,
    BoundaryContact.RIGHT,
)

PADDLE_BOUNDARY_PRIORITY = (BoundaryContact.LEFT, BoundaryContact.RIGHT)


class CollisionDetector:
    """Collision queries between the ball, the paddle, the bricks and the screen edges"""

    def __init__(self, boundaries: Boundaries):
        self.boundaries = boundaries

    def check_ball_boundaries(self, ball: KinematicEntity) -> BoundaryContact | None:
        """Returns the highest-priority screen edge the ball overlaps, if any"""
        for contact in BALL_BOUNDARY_PRIORITY:
            if rects_overlap(ball.rectangle, self.boundaries.get(contact)):
                return contact
        return None

    def check_ball_paddle(self, ball: KinematicEntity, paddle: KinematicEntity) -> bool:
        """Checks if the ball overlaps the paddle"""
        return rects_overlap(ball.rectangle, paddle.rectangle)

    def check_paddle_boundaries(self, paddle: KinematicEntity) -> BoundaryContact | None:
        """Returns the side edge the paddle overlaps, left taking precedence"""
        for contact in PADDLE_BOUNDARY_PRIORITY:
            if rects_overlap(paddle.rectangle, self.boundaries.get(contact)):
                return contact
        return None

    def first_brick_hit(
        self, ball: KinematicEntity, bricks: Iterable[KinematicEntity]
    ) -> int | None:
        """Index of the first brick, in iteration order, overlapping the ball"""
        for index, brick in enumerate(bricks):
            if rects_overlap(ball.rectangle, brick.rectangle):
                return index
        return None
