"""
Main game application with PyGame GUI
"""

import logging
import sys

import pygame

from brick_breaker.core.interfaces.input import InputSource
from brick_breaker.core.interfaces.input import intent_from_input
from brick_breaker.core.interfaces.renderer import RendererProtocol
from brick_breaker.core.round_state import RoundState
from brick_breaker.gui.keyboard import KeyboardInput
from brick_breaker.gui.keyboard import auto_configure_layout
from brick_breaker.gui.pygame_renderer import PygameRenderer
from brick_breaker.utils.config import GameConfig
from brick_breaker.utils.config import game_config

logger = logging.getLogger(__name__)


class BreakoutApp:
    """Main application class: one round, one tick per rendered frame"""

    def __init__(
        self,
        config: GameConfig | None = None,
        renderer: RendererProtocol | None = None,
        input_source: InputSource | None = None,
    ):
        self.config = config if config is not None else game_config
        self.round_state = RoundState(self.config)
        self.renderer: RendererProtocol = (
            renderer if renderer is not None else PygameRenderer(self.config)
        )
        self.input_source: InputSource = (
            input_source if input_source is not None else KeyboardInput(self.config)
        )
        self.frame_count = 0

    def step(self) -> dict:
        """Reads the input and advances the round by one tick"""
        intent = intent_from_input(self.input_source)
        return self.round_state.tick(intent)

    def render(self) -> None:
        """Draw the whole frame: entities, game over text, then the HUD"""
        renderer = self.renderer
        width = self.config.SCREEN_WIDTH
        height = self.config.SCREEN_HEIGHT
        hud_size = self.config.HUD_FONT_SIZE
        text_color = self.config.TEXT_COLOR

        renderer.begin_frame()

        for rect, color in self.round_state.drawables():
            renderer.draw_rect(rect, color)

        if self.round_state.is_game_over:
            renderer.draw_text(
                "Game Over",
                width // 2 - 25,
                height // 2,
                self.config.GAME_OVER_FONT_SIZE,
                text_color,
            )

        renderer.draw_text(f"FPS: {renderer.get_fps():.0f}", 25, 25, hud_size, text_color)
        renderer.draw_text(
            f"Lives: {max(self.round_state.lives, 0)}", width - 100, 25, hud_size, text_color
        )
        renderer.draw_text(f"Score: {self.round_state.score}", width // 2, 25, hud_size, text_color)

        renderer.end_frame()

    def run(self) -> None:
        """Main application loop, until the window is closed"""
        self.renderer.initialize(
            self.config.SCREEN_WIDTH, self.config.SCREEN_HEIGHT, self.config.WINDOW_TITLE
        )

        logger.info("Starting Brick Breaker")
        try:
            while not self.renderer.should_close():
                self.step()
                self.render()
                self.frame_count += 1
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        self.renderer.cleanup()
        logger.info(
            "Brick Breaker closed after %d frames, score %d",
            self.frame_count,
            self.round_state.score,
        )


def main() -> None:
    """Main entry point"""
    logging.basicConfig(
        level=game_config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    exit_code = 0
    try:
        layout = auto_configure_layout(game_config)
        logger.info("Detected keyboard configuration: %s", layout.upper())
        app = BreakoutApp(game_config)
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
    except Exception:
        logger.exception("Fatal error")
        exit_code = 1
    finally:
        pygame.quit()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
