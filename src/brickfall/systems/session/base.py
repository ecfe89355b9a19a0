"""Base class for SessionManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from brickfall.systems.base import BaseSystem
from brickfall.types import GameMode


@dataclass
class SessionState:
    """Score, lives and mode of the current game.

    Attributes:
        score: Bricks destroyed this game. Never decreases.
        lives: Lives left; the game ends when this reaches zero.
        mode: Current primary state.
        resume_mode: Mode restored when the session is unpaused.
        launch_timer: Ticks left before the parked ball launches by itself.
        debug_mode: Whether debug mode is on (faster ball, bottom edge bounces).
        speed_multiplier: Factor applied to the ball velocity when integrating.
    """

    score: int = 0
    lives: int = 3
    mode: GameMode = GameMode.WAITING_TO_LAUNCH
    resume_mode: GameMode | None = None
    launch_timer: int = 0
    debug_mode: bool = False
    speed_multiplier: float = 1


class SessionBaseManager(BaseSystem, ABC):
    """Base class for SessionManager."""

    role = "session_manager"

    state: SessionState

    @property
    def mode(self) -> GameMode:
        """Current primary state."""
        return self.state.mode

    @property
    def is_paused(self) -> bool:
        return self.state.mode is GameMode.PAUSED

    @property
    def is_game_over(self) -> bool:
        return self.state.mode is GameMode.GAME_OVER

    @property
    def is_waiting(self) -> bool:
        """Whether the ball is parked waiting for launch (not while paused)."""
        return self.state.mode is GameMode.WAITING_TO_LAUNCH

    @property
    def is_active(self) -> bool:
        """Whether the game is neither paused nor over."""
        return not (self.is_paused or self.is_game_over)

    @abstractmethod
    def toggle_pause(self) -> bool:
        """Pause or resume; returns whether the session is now paused."""
        ...

    @abstractmethod
    def toggle_debug(self) -> bool:
        """Flip debug mode; returns whether it is now on."""
        ...

    @abstractmethod
    def update_launch_countdown(self) -> bool:
        """Count the launch delay down; returns True if the ball launched this tick."""
        ...

    @abstractmethod
    def launch(self, *, automatic: bool = False) -> None:
        """Launch the parked ball."""
        ...

    @abstractmethod
    def add_points(self, points: int = 1) -> bool:
        """Add to the score; returns whether an extra life was granted."""
        ...

    @abstractmethod
    def lose_life(self) -> bool:
        """Take a life; returns True if the game is now over."""
        ...
