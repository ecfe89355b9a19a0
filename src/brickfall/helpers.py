"""Helper functions for creating and running Brickfall.

Users can choose between the simple run_game() function or create_game() for
more control over the window before the game loop starts.
"""

import logging

import arcade
from rich.logging import RichHandler

from brickfall.conf import settings
from brickfall.engine import GameEngine
from brickfall.views import GameView


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the game.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_game() -> arcade.Window:
    """Create the game window with a GameView attached.

    The window is sized from SCREEN_WIDTH and SCREEN_HEIGHT and updates at
    UPDATE_RATE; the engine simulates one tick per update.

    Returns:
        Configured arcade.Window showing a fresh game.

    Example:
        >>> from brickfall import create_game
        >>> window = create_game()
        >>> arcade.run()
    """
    setup_logging()

    window = arcade.Window(
        settings.SCREEN_WIDTH,
        settings.SCREEN_HEIGHT,
        settings.WINDOW_TITLE,
        update_rate=settings.UPDATE_RATE,
    )
    engine = GameEngine(settings.SCREEN_WIDTH, settings.SCREEN_HEIGHT)
    window.show_view(GameView(engine))
    return window


def run_game() -> None:
    """Create and run Brickfall until the window is closed.

    Example:
        >>> from brickfall import run_game
        >>> if __name__ == "__main__":
        ...     run_game()
    """
    create_game()
    arcade.run()
