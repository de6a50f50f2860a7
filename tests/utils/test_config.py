"""
Unit tests for configuration validation

Tests the configuration validation system including:
- Default values matching the classic layout
- Field and model validators
- Context manager for temporary config changes
"""

import pygame
import pytest
from pydantic import ValidationError

from brick_breaker.utils.config import (
    KEYBOARD_LAYOUTS,
    GameConfig,
    game_config,
    game_config_tmp,
)


class TestGameConfigDefaults:
    """Test default configuration values"""

    def test_window(self):
        """Test the fixed window settings"""
        config = GameConfig()
        assert (config.SCREEN_WIDTH, config.SCREEN_HEIGHT) == (1280, 720)
        assert config.WINDOW_TITLE == "BreakOut"
        assert config.FPS == 60

    def test_paddle_constants(self):
        """Test the paddle motion constants"""
        config = GameConfig()
        assert config.PADDLE_ACCELERATION_STEP == 0.1
        assert config.PADDLE_MAX_ACCELERATION == 0.3
        assert config.PADDLE_DECAY == 0.2
        assert config.PADDLE_SNAP_THRESHOLD == 2.0
        assert config.PADDLE_WALL_DAMPING == 0.5

    def test_derived_positions(self):
        """Test spawn and paddle start positions"""
        config = GameConfig()
        assert config.ball_spawn_position == (640, 360)
        assert config.paddle_start_position == (640, 670)

    def test_explicit_spawn_position(self):
        """Test an explicit spawn point overrides the screen center"""
        config = GameConfig(BALL_SPAWN_X=100.0, BALL_SPAWN_Y=200.0)
        assert config.ball_spawn_position == (100.0, 200.0)


class TestGameConfigValidation:
    """Test game configuration validation"""

    @pytest.mark.parametrize(
        "field,value",
        [
            ("SCREEN_WIDTH", 0),
            ("SCREEN_HEIGHT", -720),
            ("PADDLE_WIDTH", -1.0),
            ("BALL_SIZE", 0.0),
            ("STARTING_LIVES", 0),
            ("PADDLE_WALL_DAMPING", 1.5),
        ],
    )
    def test_out_of_range_values(self, field, value):
        """Test field constraints"""
        with pytest.raises(ValidationError):
            GameConfig(**{field: value})

    def test_max_acceleration_below_step(self):
        """Test the acceleration limit must be reachable"""
        with pytest.raises(ValidationError, match="PADDLE_MAX_ACCELERATION"):
            GameConfig(PADDLE_MAX_ACCELERATION=0.05)

    def test_step_above_max_acceleration_is_rejected(self):
        """Test the acceleration check also runs when the step changes"""
        with pytest.raises(ValidationError, match="PADDLE_MAX_ACCELERATION"):
            GameConfig(PADDLE_ACCELERATION_STEP=0.5)

        config = GameConfig()
        with pytest.raises(ValidationError, match="PADDLE_ACCELERATION_STEP"):
            config.PADDLE_ACCELERATION_STEP = 0.5

    def test_unknown_keyboard_layout(self):
        """Test unknown layouts are rejected"""
        with pytest.raises(ValidationError, match="Unknown keyboard layout"):
            GameConfig(KEYBOARD_LAYOUT="dvorak")

    def test_log_level_is_normalized(self):
        """Test log level names are case insensitive"""
        assert GameConfig(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
        with pytest.raises(ValidationError):
            GameConfig(LOG_LEVEL="chatty")

    def test_brick_wall_must_fit(self):
        """Test a wall wider than the screen is rejected"""
        with pytest.raises(ValidationError, match="Brick wall"):
            GameConfig(BRICKS_PER_ROW=30)

    def test_spawn_must_be_on_screen(self):
        """Test a spawn point outside the screen is rejected"""
        with pytest.raises(ValidationError, match="spawn"):
            GameConfig(BALL_SPAWN_X=5000.0)

    def test_assignment_is_validated(self):
        """Test that assignments go through validation"""
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.PADDLE_HEIGHT = -20.0
        assert config.PADDLE_HEIGHT == 20.0


class TestKeyboardLayouts:
    """Test keyboard layout lookup"""

    def test_azerty_uses_q(self):
        """Test AZERTY binds Q to the left"""
        layout = GameConfig(KEYBOARD_LAYOUT="azerty").get_keyboard_layout()
        assert pygame.K_q in layout.left_keys
        assert pygame.K_a not in layout.left_keys

    @pytest.mark.parametrize("name", list(KEYBOARD_LAYOUTS))
    def test_arrows_always_bound(self, name):
        """Test every layout binds the arrow keys"""
        layout = KEYBOARD_LAYOUTS[name]
        assert pygame.K_LEFT in layout.left_keys
        assert pygame.K_RIGHT in layout.right_keys


class TestConfigContextManager:
    """Test temporary configuration changes"""

    def test_values_are_restored(self):
        """Test values come back after the block"""
        original = game_config.STARTING_LIVES
        with game_config_tmp(STARTING_LIVES=7, FPS=30):
            assert game_config.STARTING_LIVES == 7
            assert game_config.FPS == 30
        assert game_config.STARTING_LIVES == original
        assert game_config.FPS == 60

    def test_values_are_restored_on_error(self):
        """Test values come back when the block raises"""
        original = game_config.STARTING_LIVES
        with pytest.raises(RuntimeError):
            with game_config_tmp(STARTING_LIVES=9):
                raise RuntimeError("boom")
        assert game_config.STARTING_LIVES == original

    def test_invalid_value_is_rejected(self):
        """Test the context manager validates values"""
        with pytest.raises(ValidationError):
            with game_config_tmp(FPS=0):
                pass
        assert game_config.FPS == 60
