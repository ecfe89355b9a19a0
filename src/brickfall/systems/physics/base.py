"""Base class for PhysicsManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from brickfall.geometry import Rect
from brickfall.systems.base import BaseSystem

if TYPE_CHECKING:
    from brickfall.systems.input.base import InputState


@dataclass
class Ball:
    """The ball, positioned by its center.

    Attributes:
        x: Center X position.
        y: Center Y position.
        velocity_x: Horizontal velocity per tick, before the speed multiplier.
        velocity_y: Vertical velocity per tick, before the speed multiplier.
            Negative values move the ball up.
        radius: Ball radius in pixels.
        color: Hex fill color.
    """

    x: float
    y: float
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    radius: float = 8.0
    color: str = "#ffffff"

    @property
    def rect(self) -> Rect:
        """Bounding box of the ball."""
        return Rect.around(self.x, self.y, self.radius)

    def stop(self) -> None:
        self.velocity_x = 0.0
        self.velocity_y = 0.0


@dataclass
class Paddle:
    """The player's paddle. Only ``x`` changes during a game.

    Attributes:
        x: Left edge.
        y: Top edge, fixed near the bottom of the surface.
        width: Width in pixels.
        height: Height in pixels.
        color: Hex fill color.
    """

    x: float
    y: float
    width: float
    height: float
    color: str = "#bdc3c7"

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def rect(self) -> Rect:
        return Rect.from_size(self.x, self.y, self.width, self.height)


class PhysicsBaseManager(BaseSystem, ABC):
    """Base class for PhysicsManager."""

    role = "physics_manager"

    ball: Ball
    paddle: Paddle

    @abstractmethod
    def launch_ball(self, velocity_x: float, velocity_y: float) -> None:
        """Give the parked ball its launch velocity."""
        ...

    @abstractmethod
    def reset_ball_for_launch(self) -> None:
        """Park the ball above the paddle with zero velocity."""
        ...

    @abstractmethod
    def update_paddle(self, state: InputState) -> None:
        """Move the paddle for one tick from the sampled input state."""
        ...

    @abstractmethod
    def update_ball(self) -> None:
        """Move the ball for one tick, resolving wall, paddle and bottom collisions."""
        ...

    @abstractmethod
    def brick_collision(self) -> bool:
        """Destroy every brick the ball overlaps; returns whether any was hit."""
        ...
