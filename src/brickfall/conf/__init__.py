"""Game settings for Brickfall.

Every tunable number of the game (surface size, paddle and ball speeds, brick
grid, effects, lives, colors) lives in ``global_settings``. A game can change
any of them without touching the package:

    # settings.py next to the script that calls run_game()
    STARTING_LIVES = 5
    BRICK_ROW_COUNT = 12
    DEBUG_MODE = True

    # anywhere in brickfall
    from brickfall.conf import settings

    settings.STARTING_LIVES  # 5

Set BRICKFALL_SETTINGS_MODULE to load the overrides from another module. Tests
call ``settings.configure(...)`` and ``settings.reset()`` instead.
"""

import importlib
import os
from types import ModuleType
from typing import Any

from brickfall.conf import global_settings


def _upper_names(module: ModuleType) -> list[str]:
    return [name for name in dir(module) if name.isupper()]


class Settings:
    """Snapshot of the defaults, optionally overridden by a settings module."""

    def __init__(self, overrides: ModuleType | None = None) -> None:
        """Copy the defaults, then the overrides.

        Args:
            overrides: Module whose upper-case names replace the defaults.
        """
        for name in _upper_names(global_settings):
            value = getattr(global_settings, name)
            # Lists are copied so a game cannot edit the package defaults
            setattr(self, name, list(value) if isinstance(value, list) else value)
        if overrides is not None:
            for name in _upper_names(overrides):
                setattr(self, name, getattr(overrides, name))


class LazySettings:
    """Module-level proxy that builds the Settings on first use.

    Deferring the load lets a game drop its own ``settings.py`` on the path (or
    set BRICKFALL_SETTINGS_MODULE) any time before the first engine is created.
    """

    def __init__(self) -> None:
        """Create an empty proxy."""
        self._wrapped: Settings | None = None

    def _load(self) -> Settings:
        if self._wrapped is None:
            module_path = os.environ.get("BRICKFALL_SETTINGS_MODULE", "settings")
            try:
                overrides = importlib.import_module(module_path)
            except ImportError:
                overrides = None
            self._wrapped = Settings(overrides)
        return self._wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Look a setting up, loading the settings on first access."""
        return getattr(self._load(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Change a setting for the rest of the process."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            setattr(self._load(), name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Override settings from code, skipping the user settings module if not loaded yet.

        Example:
            settings.configure(SCREEN_WIDTH=480, BRICK_ROW_COUNT=4)
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    def reset(self) -> None:
        """Forget every loaded or configured value; the next access loads again."""
        self._wrapped = None


settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
