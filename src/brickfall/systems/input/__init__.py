"""Input system.

This module provides the InputManager class, the buffer that records keyboard
and pointer input between ticks.
"""

from brickfall.systems.input.base import InputBaseManager, InputState, QueuedAction
from brickfall.systems.input.manager import InputManager

__all__ = ["InputBaseManager", "InputManager", "InputState", "QueuedAction"]
