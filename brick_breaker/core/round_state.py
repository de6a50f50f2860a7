"""
Round state for Brick Breaker: lives, score and the per-tick update
"""

import logging
from enum import Enum
from typing import Any

from brick_breaker.core.bounce import BounceTag
from brick_breaker.core.bounce import apply_bounce
from brick_breaker.core.bounce import bounce_off_brick
from brick_breaker.core.bricks import BrickSet
from brick_breaker.core.collision import Boundaries
from brick_breaker.core.collision import BoundaryContact
from brick_breaker.core.collision import CollisionDetector
from brick_breaker.core.entities import Color
from brick_breaker.core.entities import InputIntent
from brick_breaker.core.entities import Rect
from brick_breaker.core.entities import make_ball
from brick_breaker.core.entities import make_brick
from brick_breaker.core.paddle import Paddle
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

logger = logging.getLogger(__name__)

# Bottom is not a bounce, the ball is lost
BOUNDARY_BOUNCES = {
    BoundaryContact.TOP: BounceTag.TOP,
    BoundaryContact.LEFT: BounceTag.LEFT,
    BoundaryContact.RIGHT: BounceTag.RIGHT,
}


class RoundPhase(Enum):
    """Round lifecycle, respawning happens inside an IN_PLAY tick"""

    IN_PLAY = "in_play"
    GAME_OVER = "game_over"


class RoundState:
    """
    One round of Brick Breaker.

    Owns the ball, the paddle and the brick set; nothing else mutates them.
    ``tick`` advances the whole round by one fixed-duration step and returns
    the events that happened during that step.
    """

    def __init__(self, config: GameConfig | None = None, bricks: BrickSet | None = None):
        self.config = config if config is not None else game_config
        self.boundaries = Boundaries.for_screen(
            self.config.SCREEN_WIDTH, self.config.SCREEN_HEIGHT, self.config.BOUNDARY_THICKNESS
        )
        self.collision_detector = CollisionDetector(self.boundaries)
        self._initial_bricks = bricks
        self.reset()

    def reset(self) -> None:
        """Starts a fresh round: full lives, zero score, new wall"""
        self.lives = self.config.STARTING_LIVES
        self.score = 0
        self.tick_count = 0
        self.phase = RoundPhase.IN_PLAY

        if self._initial_bricks is not None:
            self.bricks = BrickSet(
                make_brick(
                    brick.position.x, brick.position.y, brick.width, brick.height, brick.color
                )
                for brick in self._initial_bricks
            )
        else:
            self.bricks = BrickSet.from_config(self.config)

        x, y = self.config.paddle_start_position
        self.paddle = Paddle(x, y, self.config)
        self.respawn_ball()
        logger.info("Round started with %d lives and %d bricks", self.lives, len(self.bricks))

    def respawn_ball(self) -> None:
        """Puts the ball back at its spawn point with the spawn velocity"""
        x, y = self.config.ball_spawn_position
        vx, vy = self.config.BALL_SPAWN_VELOCITY
        self.ball = make_ball(x, y, self.config.BALL_SIZE, vx, vy, self.config.BALL_COLOR)

    @property
    def is_game_over(self) -> bool:
        return self.phase is RoundPhase.GAME_OVER

    def tick(self, intent: InputIntent = InputIntent.NONE) -> dict[str, Any]:
        """Advances the round by one tick and returns the events"""
        events: dict[str, Any] = {
            "wall_bounces": [],
            "paddle_hits": 0,
            "paddle_clamps": [],
            "brick_hits": [],
            "lives_lost": [],
            "game_over": self.is_game_over,
        }
        if self.is_game_over:
            return events

        self.tick_count += 1

        self.paddle.step(intent)
        self.ball.update()

        self._check_ball_boundaries_and_paddle(events)
        self._check_paddle_boundaries(events)
        self._check_bricks(events)

        if self.lives <= 0:
            self.phase = RoundPhase.GAME_OVER
            events["game_over"] = True
            logger.info("Game over with score %d after %d ticks", self.score, self.tick_count)

        return events

    def _check_ball_boundaries_and_paddle(self, events: dict[str, Any]) -> None:
        """Bottom, top, left, right, then paddle: at most one of them per tick"""
        contact = self.collision_detector.check_ball_boundaries(self.ball)

        if contact is BoundaryContact.BOTTOM:
            self._lose_life(events)
        elif contact is not None:
            apply_bounce(self.ball, BOUNDARY_BOUNCES[contact])
            events["wall_bounces"].append(contact.value)
        elif self.collision_detector.check_ball_paddle(self.ball, self.paddle.body):
            apply_bounce(self.ball, BounceTag.UNDER)
            events["paddle_hits"] += 1

    def _lose_life(self, events: dict[str, Any]) -> None:
        self.lives -= 1
        self.respawn_ball()
        events["lives_lost"].append({"lives": self.lives})
        logger.info("Ball lost, %d lives left", self.lives)

    def _check_paddle_boundaries(self, events: dict[str, Any]) -> None:
        contact = self.collision_detector.check_paddle_boundaries(self.paddle.body)
        if contact is BoundaryContact.LEFT:
            clamped = self.paddle.prevent_left()
        elif contact is BoundaryContact.RIGHT:
            clamped = self.paddle.prevent_right()
        else:
            return
        if clamped:
            events["paddle_clamps"].append(contact.value)

    def _check_bricks(self, events: dict[str, Any]) -> None:
        """Resolves the first brick the ball overlaps, later bricks wait for the next tick"""
        index = self.collision_detector.first_brick_hit(self.ball, self.bricks)
        if index is None:
            return

        brick = self.bricks[index]
        tags = bounce_off_brick(self.ball, brick)
        removed = self.bricks.remove(index)
        self.score += 1
        events["brick_hits"].append(
            {
                "index": index,
                "removed": removed,
                "tags": [tag.value for tag in tags],
                "score": self.score,
            }
        )
        logger.debug(
            "Brick %d hit at %s, tags=%s, score=%d",
            index,
            brick.position.to_tuple(),
            [tag.value for tag in tags],
            self.score,
        )

    def drawables(self) -> list[tuple[Rect, Color]]:
        """Rectangles to draw this frame: bricks, then ball and paddle while in play"""
        items = [(brick.rectangle, brick.color) for brick in self.bricks]
        if not self.is_game_over:
            items.append((self.ball.rectangle, self.ball.color))
            items.append((self.paddle.rectangle, self.paddle.body.color))
        return items

    def get_game_state(self) -> dict[str, Any]:
        """Returns a plain snapshot of the round"""
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_speed": self.ball.velocity.magnitude(),
            "paddle_position": self.paddle.position.to_tuple(),
            "paddle_velocity": self.paddle.velocity.to_tuple(),
            "paddle_acceleration": self.paddle.acceleration.to_tuple(),
            "bricks": [brick.position.to_tuple() for brick in self.bricks],
            "score": self.score,
            "lives": self.lives,
            "tick_count": self.tick_count,
            "game_over": self.is_game_over,
            "field_bounds": (0, self.config.SCREEN_WIDTH, 0, self.config.SCREEN_HEIGHT),
        }
