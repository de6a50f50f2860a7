"""
Brick Breaker game configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    left_keys: tuple[int, ...]
    right_keys: tuple[int, ...]
    display_names: dict[str, str]


# Arrow keys are bound in every layout
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_keys=(pygame.K_LEFT, pygame.K_a),
        right_keys=(pygame.K_RIGHT, pygame.K_d),
        display_names={"left": "A", "right": "D"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys=(pygame.K_LEFT, pygame.K_q),  # Q instead of A
        right_keys=(pygame.K_RIGHT, pygame.K_d),
        display_names={"left": "Q", "right": "D"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_keys=(pygame.K_LEFT, pygame.K_a),
        right_keys=(pygame.K_RIGHT, pygame.K_d),
        display_names={"left": "A", "right": "D"},
    ),
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

Color = tuple[int, int, int]


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Window
    SCREEN_WIDTH: int = Field(default=1280, gt=0, description="Window width in pixels")
    SCREEN_HEIGHT: int = Field(default=720, gt=0, description="Window height in pixels")
    WINDOW_TITLE: str = Field(default="BreakOut", description="Window title")
    FPS: int = Field(default=60, gt=0, description="Target ticks per second")
    HIGH_DPI: bool = Field(default=True, description="Request a high-DPI window")
    BOUNDARY_THICKNESS: float = Field(default=1.0, gt=0, description="Screen edge thickness")

    # Paddle
    PADDLE_WIDTH: float = Field(default=100.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=20.0, gt=0, description="Paddle height in pixels")
    PADDLE_BOTTOM_OFFSET: float = Field(
        default=50.0, gt=0, description="Distance from the bottom edge to the paddle center"
    )
    PADDLE_ACCELERATION_STEP: float = Field(
        default=0.1, gt=0, description="Acceleration added per tick of input"
    )
    PADDLE_MAX_ACCELERATION: float = Field(
        default=0.3, gt=0, description="Absolute acceleration limit"
    )
    PADDLE_DECAY: float = Field(
        default=0.2, gt=0, description="Velocity removed per tick without input"
    )
    PADDLE_SNAP_THRESHOLD: float = Field(
        default=2.0, ge=0, description="Speed under which an idle paddle stops"
    )
    PADDLE_WALL_DAMPING: float = Field(
        default=0.5, ge=0, le=1.0, description="Velocity factor kept when bouncing off a wall"
    )

    # Ball
    BALL_SIZE: float = Field(default=10.0, gt=0, description="Ball side length in pixels")
    BALL_SPAWN_X: float | None = Field(default=None, description="Spawn x (screen center)")
    BALL_SPAWN_Y: float | None = Field(default=None, description="Spawn y (screen center)")
    BALL_SPAWN_VELOCITY: tuple[float, float] = Field(
        default=(2.0, 2.0), description="Ball velocity after each spawn"
    )

    # Bricks
    BRICK_WIDTH: float = Field(default=48.0, gt=0, description="Brick width in pixels")
    BRICK_HEIGHT: float = Field(default=10.0, gt=0, description="Brick height in pixels")
    BRICK_ROWS: int = Field(default=4, ge=1, description="Number of brick rows")
    BRICKS_PER_ROW: int = Field(default=20, ge=1, description="Number of bricks per row")
    BRICK_ORIGIN_X: float = Field(default=50.0, ge=0, description="Center x of the first brick")
    BRICK_ORIGIN_Y: float = Field(default=50.0, ge=0, description="Center y of the first row")
    BRICK_SPACING_X: float = Field(default=50.0, gt=0, description="Horizontal center spacing")
    BRICK_SPACING_Y: float = Field(default=15.0, gt=0, description="Vertical center spacing")

    # Round
    STARTING_LIVES: int = Field(default=3, ge=1, description="Lives at round start")

    # Display
    BACKGROUND_COLOR: Color = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: Color = Field(default=(245, 245, 245), description="RGB color")
    PADDLE_COLOR: Color = Field(default=(245, 245, 245), description="RGB color")
    BRICK_COLOR: Color = Field(default=(245, 245, 245), description="RGB color")
    TEXT_COLOR: Color = Field(default=(200, 200, 200), description="RGB color")
    HUD_FONT_SIZE: int = Field(default=20, gt=0, description="HUD text size")
    GAME_OVER_FONT_SIZE: int = Field(default=40, gt=0, description="Game over text size")

    # Controls
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'. Available: {list(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def validate_max_acceleration(self) -> "GameConfig":
        """Validate that the acceleration limit is reachable in at least one step"""
        if self.PADDLE_MAX_ACCELERATION < self.PADDLE_ACCELERATION_STEP:
            raise ValueError(
                f"PADDLE_MAX_ACCELERATION ({self.PADDLE_MAX_ACCELERATION}) must not be below "
                f"PADDLE_ACCELERATION_STEP ({self.PADDLE_ACCELERATION_STEP})"
            )
        return self

    @model_validator(mode="after")
    def validate_layout_fits(self) -> "GameConfig":
        """Validate the brick wall, paddle and spawn point fit on screen"""
        wall_right = (
            self.BRICK_ORIGIN_X
            + (self.BRICKS_PER_ROW - 1) * self.BRICK_SPACING_X
            + self.BRICK_WIDTH / 2
        )
        if wall_right > self.SCREEN_WIDTH:
            raise ValueError(
                f"Brick wall ends at x={wall_right}, beyond SCREEN_WIDTH ({self.SCREEN_WIDTH})"
            )

        if self.PADDLE_WIDTH >= self.SCREEN_WIDTH:
            raise ValueError("PADDLE_WIDTH must be smaller than SCREEN_WIDTH")

        if self.PADDLE_BOTTOM_OFFSET >= self.SCREEN_HEIGHT:
            raise ValueError("PADDLE_BOTTOM_OFFSET must be smaller than SCREEN_HEIGHT")

        spawn_x, spawn_y = self.ball_spawn_position
        if not (0 <= spawn_x <= self.SCREEN_WIDTH and 0 <= spawn_y <= self.SCREEN_HEIGHT):
            raise ValueError(f"Ball spawn point ({spawn_x}, {spawn_y}) is outside the screen")

        return self

    @property
    def ball_spawn_position(self) -> tuple[float, float]:
        """Ball spawn point, defaulting to the screen center"""
        x = self.BALL_SPAWN_X if self.BALL_SPAWN_X is not None else self.SCREEN_WIDTH / 2
        y = self.BALL_SPAWN_Y if self.BALL_SPAWN_Y is not None else self.SCREEN_HEIGHT / 2
        return (x, y)

    @property
    def paddle_start_position(self) -> tuple[float, float]:
        """Paddle center at round start"""
        return (self.SCREEN_WIDTH / 2, self.SCREEN_HEIGHT - self.PADDLE_BOTTOM_OFFSET)

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])


# Global configuration instance with validation
game_config = GameConfig()


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
