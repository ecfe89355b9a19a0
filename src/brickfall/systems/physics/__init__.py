"""Physics system.

This module provides the PhysicsManager class, which moves the paddle and the
ball and resolves wall, paddle, bottom edge and brick collisions.
"""

from brickfall.systems.physics.base import Ball, Paddle, PhysicsBaseManager
from brickfall.systems.physics.manager import PhysicsManager

__all__ = ["Ball", "Paddle", "PhysicsBaseManager", "PhysicsManager"]
