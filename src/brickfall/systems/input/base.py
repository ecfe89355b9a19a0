"""Base class for InputManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from brickfall.systems.base import BaseSystem
from brickfall.types import InputAction


@dataclass(frozen=True)
class InputState:
    """Continuous input sampled once at the start of a tick.

    Attributes:
        left: Whether a move-left key is held.
        right: Whether a move-right key is held.
        pointer_active: Whether a pointer is steering the paddle.
        pointer_x: X coordinate the paddle steers toward, or None if unknown.
    """

    left: bool = False
    right: bool = False
    pointer_active: bool = False
    pointer_x: float | None = None


@dataclass(frozen=True)
class QueuedAction:
    """A discrete action waiting for the next tick.

    Attributes:
        action: What to do.
        x: Pointer X in simulation space (TAP only).
        y: Pointer Y in simulation space (TAP only).
    """

    action: InputAction
    x: float = 0.0
    y: float = 0.0


class InputBaseManager(BaseSystem, ABC):
    """Base class for InputManager."""

    role = "input_manager"

    @abstractmethod
    def queue_action(self, action: InputAction, x: float = 0.0, y: float = 0.0) -> None:
        """Queue a discrete action for the next tick."""
        ...

    @abstractmethod
    def drain_actions(self) -> list[QueuedAction]:
        """Return and remove every queued action, oldest first."""
        ...

    @abstractmethod
    def sample(self) -> InputState:
        """Snapshot of the continuous input state."""
        ...

    @abstractmethod
    def begin_pointer(self, x: float) -> None:
        """Start steering the paddle toward a pointer position."""
        ...

    @abstractmethod
    def release_pointer(self) -> None:
        """Stop pointer steering."""
        ...
