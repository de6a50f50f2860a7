"""
Brick set: the wall of static bricks the ball destroys
"""

import logging
from collections.abc import Iterable, Iterator

from brick_breaker.core.entities import EntityKind
from brick_breaker.core.entities import KinematicEntity
from brick_breaker.core.entities import make_brick
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

logger = logging.getLogger(__name__)


class BrickSet:
    """Ordered collection of bricks, the order only drives the hit scan"""

    def __init__(self, bricks: Iterable[KinematicEntity] = ()):
        self._bricks: list[KinematicEntity] = list(bricks)
        for brick in self._bricks:
            if brick.kind is not EntityKind.BRICK:
                raise ValueError(f"BrickSet only holds bricks, got {brick.kind.value}")

    @classmethod
    def from_config(cls, config: GameConfig | None = None) -> "BrickSet":
        """Builds the default wall: rows of evenly spaced bricks, row by row"""
        config = config if config is not None else game_config
        bricks = []
        for row in range(config.BRICK_ROWS):
            y = config.BRICK_ORIGIN_Y + row * config.BRICK_SPACING_Y
            for column in range(config.BRICKS_PER_ROW):
                x = config.BRICK_ORIGIN_X + column * config.BRICK_SPACING_X
                bricks.append(
                    make_brick(x, y, config.BRICK_WIDTH, config.BRICK_HEIGHT, config.BRICK_COLOR)
                )
        return cls(bricks)

    def __len__(self) -> int:
        return len(self._bricks)

    def __iter__(self) -> Iterator[KinematicEntity]:
        return iter(self._bricks)

    def __getitem__(self, index: int) -> KinematicEntity:
        return self._bricks[index]

    def remove(self, index: int) -> bool:
        """
        Removes the brick at ``index`` unless it is the last one left.

        The last brick can never be destroyed, so a round never runs out of
        bricks. Returns True if a brick was removed.
        """
        if len(self._bricks) <= 1:
            logger.debug("Last brick hit, keeping it in place")
            return False
        del self._bricks[index]
        return True
