"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from brick_breaker.core.entities import Color
from brick_breaker.core.entities import Rect


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The round only hands out rectangles, colors and HUD strings, so any
    backend able to fill rectangles and print text can show the game.
    """

    def initialize(self, width: int, height: int, title: str) -> None:
        """
        Open the window.

        Args:
            width: Window width in pixels
            height: Window height in pixels
            title: Window caption
        """
        ...

    def begin_frame(self) -> None:
        """Clear the surface before drawing a frame"""
        ...

    def draw_rect(self, rect: Rect, color: Color) -> None:
        """Fill an axis-aligned rectangle"""
        ...

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        """Draw a line of text with its top-left corner at (x, y)"""
        ...

    def end_frame(self) -> None:
        """Present the frame and wait for the next tick"""
        ...

    def get_fps(self) -> float:
        """Measured frames per second"""
        ...

    def should_close(self) -> bool:
        """Check if the window was asked to close"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
