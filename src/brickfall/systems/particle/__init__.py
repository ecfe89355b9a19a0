"""Particle system.

This module provides the ParticleManager class, which spawns and ages the
square particles and triangular shards thrown out of broken bricks.
"""

from brickfall.systems.particle.base import Particle, ParticleBaseManager, Shard
from brickfall.systems.particle.manager import ParticleManager

__all__ = ["Particle", "ParticleBaseManager", "ParticleManager", "Shard"]
