"""
PyGame renderer for Brick Breaker game
"""

import logging

import pygame

from brick_breaker.core.entities import Color
from brick_breaker.core.entities import Rect
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

logger = logging.getLogger(__name__)


class PygameRenderer:
    """PyGame-based renderer implementing the renderer protocol"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config if config is not None else game_config
        self.screen: pygame.Surface | None = None
        self.clock = pygame.time.Clock()
        self.background_color: Color = self.config.BACKGROUND_COLOR
        self._fonts: dict[int, pygame.font.Font] = {}
        self._close_requested = False

    def initialize(self, width: int, height: int, title: str) -> None:
        """Open the window"""
        pygame.init()
        flags = pygame.SCALED if self.config.HIGH_DPI else 0
        self.screen = pygame.display.set_mode((width, height), flags)
        pygame.display.set_caption(title)
        logger.info("Window opened: %dx%d '%s'", width, height, title)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _surface(self) -> pygame.Surface:
        if self.screen is None:
            raise RuntimeError("initialize() must be called first")
        return self.screen

    def begin_frame(self) -> None:
        """Clear the screen with background color"""
        self._surface().fill(self.background_color)

    def draw_rect(self, rect: Rect, color: Color) -> None:
        """Draw a filled rectangle"""
        pygame.draw.rect(
            self._surface(),
            color,
            pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height)),
        )

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        """Draw a line of text"""
        screen = self._surface()
        text_surface = self._font(size).render(text, True, color)
        screen.blit(text_surface, (x, y))

    def end_frame(self) -> None:
        """Present the frame and cap the frame rate"""
        pygame.display.flip()
        self.clock.tick(self.config.FPS)

    def get_fps(self) -> float:
        return self.clock.get_fps()

    def should_close(self) -> bool:
        """Drains the event queue and reports a close request (window button or ESC)"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._close_requested = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._close_requested = True
        return self._close_requested

    def cleanup(self) -> None:
        """Close the window"""
        pygame.display.quit()
        self.screen = None
        logger.info("Window closed")
