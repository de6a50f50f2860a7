"""
PyGame frontend of Brick Breaker game
"""

from brick_breaker.gui.game_app import BreakoutApp
from brick_breaker.gui.game_app import main
from brick_breaker.gui.keyboard import KeyboardInput
from brick_breaker.gui.pygame_renderer import PygameRenderer

__all__ = ["BreakoutApp", "KeyboardInput", "PygameRenderer", "main"]
