"""
Player paddle: acceleration-driven horizontal motion
"""

import logging

from brick_breaker.core.entities import EntityKind
from brick_breaker.core.entities import InputIntent
from brick_breaker.core.entities import KinematicEntity
from brick_breaker.core.entities import Rect
from brick_breaker.core.entities import Vector2D
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

logger = logging.getLogger(__name__)


class Paddle:
    """
    Player paddle.

    Wraps a kinematic body and adds an acceleration. Input changes the
    acceleration, the acceleration changes the velocity, and the velocity
    moves the body, one Euler step per tick.
    """

    def __init__(self, x: float, y: float, config: GameConfig | None = None):
        self.config = config if config is not None else game_config
        self.body = KinematicEntity(
            EntityKind.PADDLE,
            x,
            y,
            self.config.PADDLE_WIDTH,
            self.config.PADDLE_HEIGHT,
            color=self.config.PADDLE_COLOR,
        )
        self.acceleration = Vector2D(0.0, 0.0)

    @property
    def position(self) -> Vector2D:
        return self.body.position

    @property
    def velocity(self) -> Vector2D:
        return self.body.velocity

    @property
    def rectangle(self) -> Rect:
        return self.body.rectangle

    def apply_intent(self, intent: InputIntent) -> None:
        """Updates acceleration (and idle damping) from the tick's input"""
        step = self.config.PADDLE_ACCELERATION_STEP
        max_acceleration = self.config.PADDLE_MAX_ACCELERATION

        if intent is InputIntent.MOVE_LEFT:
            self.acceleration.x = max(self.acceleration.x - step, -max_acceleration)
        elif intent is InputIntent.MOVE_RIGHT:
            self.acceleration.x = min(self.acceleration.x + step, max_acceleration)
        else:
            self.acceleration.x = 0.0
            self._damp_velocity()

    def _damp_velocity(self) -> None:
        velocity = self.body.velocity
        decay = self.config.PADDLE_DECAY
        if velocity.x > 0:
            velocity.x = max(velocity.x - decay, 0.0)
        elif velocity.x < 0:
            velocity.x = min(velocity.x + decay, 0.0)

        if abs(velocity.x) < self.config.PADDLE_SNAP_THRESHOLD:
            velocity.x = 0.0

    def update(self) -> None:
        """Integrates acceleration into velocity, then moves the body"""
        self.body.velocity += self.acceleration
        self.body.update()

    def step(self, intent: InputIntent) -> None:
        """Full paddle tick: input, integration, rectangle sync"""
        self.apply_intent(intent)
        self.update()

    def prevent_left(self) -> bool:
        """Soft wall on the left: pushes back only when still heading left"""
        if self.body.velocity.x < 0:
            self.body.velocity.x *= -self.config.PADDLE_WALL_DAMPING
            logger.debug("Paddle bounced off the left wall, vx=%.2f", self.body.velocity.x)
            return True
        return False

    def prevent_right(self) -> bool:
        """Soft wall on the right: pushes back only when still heading right"""
        if self.body.velocity.x > 0:
            self.body.velocity.x *= -self.config.PADDLE_WALL_DAMPING
            logger.debug("Paddle bounced off the right wall, vx=%.2f", self.body.velocity.x)
            return True
        return False
