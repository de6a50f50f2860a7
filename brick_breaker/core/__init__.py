"""
Core module of Brick Breaker game
"""

from brick_breaker.core.bounce import BounceTag
from brick_breaker.core.bricks import BrickSet
from brick_breaker.core.collision import CollisionDetector
from brick_breaker.core.entities import EntityKind
from brick_breaker.core.entities import InputIntent
from brick_breaker.core.entities import KinematicEntity
from brick_breaker.core.entities import Rect
from brick_breaker.core.entities import Vector2D
from brick_breaker.core.paddle import Paddle
from brick_breaker.core.round_state import RoundPhase
from brick_breaker.core.round_state import RoundState

__all__ = [
    "BounceTag",
    "BrickSet",
    "CollisionDetector",
    "EntityKind",
    "InputIntent",
    "KinematicEntity",
    "Paddle",
    "Rect",
    "RoundPhase",
    "RoundState",
    "Vector2D",
]
