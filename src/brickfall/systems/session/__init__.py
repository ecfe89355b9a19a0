"""Session system.

This module provides the SessionManager class, the game state machine that
tracks score, lives, the launch countdown, pause and debug mode.
"""

from brickfall.systems.session.base import SessionBaseManager, SessionState
from brickfall.systems.session.events import (
    BallLaunchedEvent,
    DebugToggledEvent,
    ExtraLifeEvent,
    GameOverEvent,
    LifeLostEvent,
    PauseToggledEvent,
)
from brickfall.systems.session.manager import SessionManager

__all__ = [
    "BallLaunchedEvent",
    "DebugToggledEvent",
    "ExtraLifeEvent",
    "GameOverEvent",
    "LifeLostEvent",
    "PauseToggledEvent",
    "SessionBaseManager",
    "SessionManager",
    "SessionState",
]
