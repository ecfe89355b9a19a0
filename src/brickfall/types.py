"""Custom types and enumerations."""

from enum import Enum, auto


class GameMode(Enum):
    """Primary state of a game session."""

    WAITING_TO_LAUNCH = auto()  # Ball parked, launch countdown running
    PLAYING = auto()  # Ball in flight
    PAUSED = auto()  # Explicitly paused, resumes to the previous mode
    GAME_OVER = auto()  # Terminal until restart


class InputAction(Enum):
    """Discrete actions queued by the input buffer and applied at the start of a tick."""

    TOGGLE_PAUSE = auto()
    TOGGLE_DEBUG = auto()
    RESTART = auto()
    LAUNCH = auto()
    TAP = auto()
    POINTER_RELEASE = auto()
