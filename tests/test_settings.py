"""Unit tests for the settings proxy."""

import types
import unittest

from brickfall.conf import Settings, global_settings, settings


class TestSettings(unittest.TestCase):
    """Unit test class for Settings and LazySettings."""

    def test_overrides_module(self) -> None:
        """Test that upper-case names of a settings module replace the defaults."""
        overrides = types.ModuleType("game_settings")
        overrides.STARTING_LIVES = 5
        overrides.helper_value = 1

        loaded = Settings(overrides)

        assert loaded.STARTING_LIVES == 5
        assert loaded.PADDLE_SPEED == global_settings.PADDLE_SPEED
        assert not hasattr(loaded, "helper_value")

    def test_defaults_are_not_shared(self) -> None:
        """Test that editing a list setting leaves the package defaults alone."""
        loaded = Settings()

        loaded.BRICK_COLORS.append("#000000")

        assert "#000000" not in global_settings.BRICK_COLORS

    def test_configure_and_reset(self) -> None:
        """Test that configured values last until the next reset."""
        settings.configure(STARTING_LIVES=9)
        assert settings.STARTING_LIVES == 9

        settings.reset()
        settings.configure(SCREEN_WIDTH=400)

        assert settings.STARTING_LIVES == global_settings.STARTING_LIVES
