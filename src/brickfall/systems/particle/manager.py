"""Particle system for brick-break effects.

Two independent swarms are spawned whenever a brick breaks:

- Particles: small squares flying out in every direction, pulled down by a
  constant gravity and fading out over about half a second.
- Shards: larger random triangles sized after the brick, each with its own
  gravity and spin, removed once they fall below the surface.

Both swarms are purely decorative; nothing in the simulation reads them back.
Every random value comes from the context's random source, so a seeded game
produces the same effects.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, ClassVar

from brickfall.conf import settings
from brickfall.systems.particle.base import Particle, ParticleBaseManager, Shard
from brickfall.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from brickfall.systems.bricks.base import DestroyedBrick
    from brickfall.systems.game_context import GameContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class ParticleManager(ParticleBaseManager):
    """Spawns and ages the particle and shard swarms.

    Attributes:
        particles: Live square particles, oldest first.
        shards: Live triangular shards, oldest first.
    """

    name: ClassVar[str] = "particle"
    dependencies: ClassVar[list[str]] = []

    def __init__(self) -> None:
        """Initialize empty swarms."""
        self.particles: list[Particle] = []
        self.shards: list[Shard] = []
        self.population_cap = 0

    def setup(self, context: GameContext) -> None:
        """Read effect tuning from settings."""
        self.context = context
        self.population_cap = settings.EFFECT_POPULATION_CAP

    def reset(self, context: GameContext) -> None:
        """Start a new game without leftover effects."""
        self.clear()

    def clear(self) -> None:
        """Remove every particle and shard."""
        self.particles.clear()
        self.shards.clear()

    def emit_brick_break(self, destroyed: DestroyedBrick) -> None:
        """Emit both effects for a destroyed brick, centered on it."""
        self.emit_shards(destroyed.center_x, destroyed.center_y, destroyed.width, destroyed.height, destroyed.color)
        self.emit_particles(destroyed.center_x, destroyed.center_y, destroyed.color)

    def emit_particles(self, x: float, y: float, color: str) -> None:
        """Emit PARTICLE_COUNT square particles at a point.

        Args:
            x: Spawn X position.
            y: Spawn Y position.
            color: Hex color of the particles.
        """
        rng = self.context.rng
        speed = settings.PARTICLE_SPEED_FACTOR
        for _ in range(settings.PARTICLE_COUNT):
            self.particles.append(
                Particle(
                    x=x,
                    y=y,
                    velocity_x=(rng.random() - 0.5) * speed * 2,
                    velocity_y=(rng.random() - 0.5) * speed * 2,
                    life=settings.PARTICLE_LIFE + rng.random() * settings.PARTICLE_LIFE_JITTER,
                    size=settings.PARTICLE_SIZE + rng.random(),
                    color=color,
                    max_life=settings.PARTICLE_LIFE,
                )
            )
        self._enforce_cap(self.particles)

    def emit_shards(self, x: float, y: float, width: float, height: float, color: str) -> None:
        """Emit SHARD_COUNT triangular shards sized after a brick.

        Each triangle gets three corners at increasing random angles (at least a
        fifth of a turn apart) and random distances up to SHARD_SIZE_FACTOR of
        the smaller brick side.

        Args:
            x: Spawn X position (brick center).
            y: Spawn Y position (brick center).
            width: Width of the broken brick.
            height: Height of the broken brick.
            color: Hex color of the broken brick.
        """
        rng = self.context.rng
        max_radius = min(width, height) * settings.SHARD_SIZE_FACTOR
        dy_range = settings.SHARD_DY_RANGE

        for _ in range(settings.SHARD_COUNT):
            angle1 = rng.random() * math.pi * 2
            angle2 = angle1 + (rng.random() * 0.8 + 0.8) * math.pi / 2
            angle3 = angle2 + (rng.random() * 0.8 + 0.8) * math.pi / 2
            vertices = tuple(
                (math.cos(angle) * radius, math.sin(angle) * radius)
                for angle, radius in (
                    (angle1, rng.random() * max_radius),
                    (angle2, rng.random() * max_radius),
                    (angle3, rng.random() * max_radius),
                )
            )

            self.shards.append(
                Shard(
                    x=x,
                    y=y,
                    velocity_x=(rng.random() - 0.5) * settings.SHARD_DX_RANGE * 2,
                    velocity_y=rng.random() * dy_range - dy_range / 2,
                    angle=rng.random() * math.pi * 2,
                    angular_velocity=(rng.random() - 0.5) * settings.SHARD_ROTATION_SPEED_RANGE * 2,
                    gravity=settings.SHARD_GRAVITY + (rng.random() - 0.5) * settings.SHARD_GRAVITY_JITTER,
                    vertices=vertices,  # type: ignore[arg-type]
                    color=color,
                )
            )
        self._enforce_cap(self.shards)

    def update(self) -> None:
        """Age both swarms by one tick and drop expired members."""
        gravity = settings.PARTICLE_GRAVITY
        alive: list[Particle] = []
        for particle in self.particles:
            particle.x += particle.velocity_x
            particle.y += particle.velocity_y
            particle.velocity_y += gravity
            particle.life -= 1
            if particle.life > 0:
                alive.append(particle)
        self.particles = alive

        floor = self.context.height + settings.SHARD_CULL_MARGIN
        falling: list[Shard] = []
        for shard in self.shards:
            shard.velocity_y += shard.gravity
            shard.x += shard.velocity_x
            shard.y += shard.velocity_y
            shard.angle += shard.angular_velocity
            if shard.y <= floor:
                falling.append(shard)
        self.shards = falling

    def _enforce_cap(self, swarm: list) -> None:
        overflow = len(swarm) - self.population_cap
        if self.population_cap > 0 and overflow > 0:
            del swarm[:overflow]
            logger.debug("Effect population cap reached, dropped %d oldest", overflow)
