"""Brickfall - an endless brick breaker built on Arcade.

A paddle deflects a ball to destroy a field of bricks that keeps sliding down
whenever its bottom rows are cleared. The simulation runs in pluggable systems
driven by a GameEngine; arcade only draws it and feeds it input.

Quick start:
    from brickfall import run_game

    if __name__ == "__main__":
        run_game()

Headless usage:
    from brickfall import GameEngine

    engine = GameEngine(seed=42)
    for _ in range(600):
        snapshot = engine.tick()
    print(snapshot.score, snapshot.lives, snapshot.mode)
"""

__version__ = "0.1.0"

from brickfall.conf import settings
from brickfall.engine import GameEngine
from brickfall.events import EventBus
from brickfall.helpers import create_game, run_game
from brickfall.snapshot import FrameSnapshot
from brickfall.systems import (
    BrickFieldManager,
    GameContext,
    InputManager,
    ParticleManager,
    PhysicsManager,
    SessionManager,
)
from brickfall.types import GameMode, InputAction
from brickfall.views import GameView

__all__ = [
    "BrickFieldManager",
    "EventBus",
    "FrameSnapshot",
    "GameContext",
    "GameEngine",
    "GameMode",
    "GameView",
    "InputAction",
    "InputManager",
    "ParticleManager",
    "PhysicsManager",
    "SessionManager",
    "__version__",
    "create_game",
    "run_game",
    "settings",
]
