"""
Bounce resolution: maps a contact side to a velocity sign change
"""

from enum import Enum

from brick_breaker.core.entities import KinematicEntity


class BounceTag(Enum):
    """Side of an obstacle the ball touched"""

    TOP = "top"
    LEFT = "left"
    RIGHT = "right"
    UNDER = "under"


def apply_bounce(entity: KinematicEntity, tag: BounceTag) -> None:
    """
    Flips the entity velocity according to the contact tag.

    Only signs change, so the speed is conserved. UNDER always sends the
    entity upwards whatever its vertical direction was.
    """
    if tag is BounceTag.TOP:
        entity.velocity.y *= -1
    elif tag is BounceTag.LEFT or tag is BounceTag.RIGHT:
        entity.velocity.x *= -1
    else:
        entity.velocity.y = -abs(entity.velocity.y)


def classify_brick_contact(ball: KinematicEntity, brick: KinematicEntity) -> list[BounceTag]:
    """
    Tags for a ball touching a brick, from the ball center against the brick edges.

    The four checks are independent and run in a fixed order (below, above,
    left, right). Near a corner two of them can match and both flips are
    applied; with the ball center inside the brick extents none match.
    """
    edges = brick.rectangle
    tags = []
    if ball.position.y > edges.bottom:
        tags.append(BounceTag.TOP)
    if ball.position.y < edges.top:
        tags.append(BounceTag.UNDER)
    if ball.position.x < edges.left:
        tags.append(BounceTag.LEFT)
    if ball.position.x > edges.right:
        tags.append(BounceTag.RIGHT)
    return tags


def bounce_off_brick(ball: KinematicEntity, brick: KinematicEntity) -> list[BounceTag]:
    """Applies every matching brick contact flip and returns the tags used"""
    tags = classify_brick_contact(ball, brick)
    for tag in tags:
        apply_bounce(ball, tag)
    return tags
