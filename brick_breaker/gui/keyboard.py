"""
Keyboard input for Brick Breaker
"""

import locale
import logging
import os
from collections.abc import Callable
from typing import Any

import pygame

from brick_breaker.core.interfaces.input import LEFT
from brick_breaker.core.interfaces.input import RIGHT
from brick_breaker.utils.config import KEYBOARD_LAYOUTS
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

logger = logging.getLogger(__name__)


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    system_locale = locale.getlocale()[0] or os.environ.get("LANG", "")
    system_locale = system_locale.lower()

    if system_locale.startswith("fr"):
        return "azerty"
    elif system_locale.startswith("de"):
        return "qwertz"
    return "qwerty"


class KeyboardInput:
    """
    Input source backed by pygame's keyboard state.

    ``key_state`` returns the indexable pressed-key state, pygame.key.get_pressed by
    default. Tests pass a plain function instead so no window is needed.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        key_state: Callable[[], Any] | None = None,
    ):
        self.config = config if config is not None else game_config
        self.key_state = key_state if key_state is not None else pygame.key.get_pressed
        layout = self.config.get_keyboard_layout()
        self.key_mapping: dict[str, tuple[int, ...]] = {
            LEFT: layout.left_keys,
            RIGHT: layout.right_keys,
        }
        logger.debug("Keyboard layout %s", layout.name)

    def is_key_down(self, logical_key: str) -> bool:
        """Check whether any physical key bound to ``logical_key`` is held"""
        if logical_key not in self.key_mapping:
            raise ValueError(f"Unknown logical key: {logical_key}")
        pressed = self.key_state()
        return any(pressed[key_code] for key_code in self.key_mapping[logical_key])

    def get_control_info(self) -> dict[str, str]:
        """Get information about controls"""
        layout = self.config.get_keyboard_layout()
        return {name: f"{key} / arrow" for name, key in layout.display_names.items()}


def list_available_layouts() -> dict[str, str]:
    """Get all available keyboard layouts"""
    return {name: layout.name for name, layout in KEYBOARD_LAYOUTS.items()}


def auto_configure_layout(config: GameConfig | None = None) -> str:
    """
    Automatically configure the keyboard layout from the system locale

    Returns:
        The selected layout name
    """
    config = config if config is not None else game_config
    detected = detect_system_layout()
    config.KEYBOARD_LAYOUT = detected
    return detected
