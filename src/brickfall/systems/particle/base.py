"""Base class for ParticleManager."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from brickfall.systems.base import BaseSystem

if TYPE_CHECKING:
    from brickfall.systems.bricks.base import DestroyedBrick


@dataclass
class Particle:
    """Small square particle thrown out of a broken brick.

    Particles move by their velocity every tick, accelerate downward and expire
    when their life counter runs out. They fade proportionally to the life left.

    Attributes:
        x: Center X position in pixels.
        y: Center Y position in pixels.
        velocity_x: Horizontal velocity in pixels per tick.
        velocity_y: Vertical velocity in pixels per tick (positive is down).
        life: Remaining lifetime in ticks.
        size: Side of the square in pixels.
        color: Hex color inherited from the brick.
        max_life: Lifetime that maps to full opacity.
    """

    x: float
    y: float
    velocity_x: float
    velocity_y: float
    life: float
    size: float
    color: str
    max_life: float = 30.0

    @property
    def alpha(self) -> float:
        """Opacity between 0.0 and 1.0, proportional to the remaining life."""
        if self.max_life <= 0:
            return 0.0
        return max(0.0, min(1.0, self.life / self.max_life))


@dataclass
class Shard:
    """Triangular piece of a shattered brick.

    Shards fall under their own gravity while spinning and are removed once
    they drop out of sight.

    Attributes:
        x: X position of the shard's local origin in pixels.
        y: Y position of the shard's local origin in pixels.
        velocity_x: Horizontal velocity in pixels per tick.
        velocity_y: Vertical velocity in pixels per tick (positive is down).
        angle: Rotation in radians.
        angular_velocity: Rotation speed in radians per tick.
        gravity: Downward acceleration of this shard.
        vertices: Triangle corners relative to (x, y), before rotation.
        color: Hex color of the brick the shard came from.
    """

    x: float
    y: float
    velocity_x: float
    velocity_y: float
    angle: float
    angular_velocity: float
    gravity: float
    vertices: tuple[tuple[float, float], tuple[float, float], tuple[float, float]]
    color: str

    def world_vertices(self) -> list[tuple[float, float]]:
        """Triangle corners rotated by ``angle`` and translated to (x, y)."""
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        return [(self.x + vx * cos_a - vy * sin_a, self.y + vx * sin_a + vy * cos_a) for vx, vy in self.vertices]


class ParticleBaseManager(BaseSystem, ABC):
    """Manages the decorative particle and shard swarms."""

    role = "particle_manager"

    particles: list[Particle]
    shards: list[Shard]

    @abstractmethod
    def emit_brick_break(self, destroyed: DestroyedBrick) -> None:
        """Emit both effects for a destroyed brick."""
        ...

    @abstractmethod
    def emit_particles(self, x: float, y: float, color: str) -> None:
        """Emit a batch of square particles at a point."""
        ...

    @abstractmethod
    def emit_shards(self, x: float, y: float, width: float, height: float, color: str) -> None:
        """Emit a batch of triangular shards sized after a brick."""
        ...

    @abstractmethod
    def update(self) -> None:
        """Age both swarms by one tick."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every particle and shard."""
        ...
