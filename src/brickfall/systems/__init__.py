"""Game systems for the different parts of the simulation."""

from brickfall.systems.base import BaseSystem
from brickfall.systems.bricks import Brick, BrickFieldManager, DestroyedBrick, RowShiftState
from brickfall.systems.game_context import GameContext
from brickfall.systems.input import InputManager, InputState
from brickfall.systems.loader import CircularDependencyError, MissingDependencyError, SystemLoader
from brickfall.systems.particle import Particle, ParticleManager, Shard
from brickfall.systems.physics import Ball, Paddle, PhysicsManager
from brickfall.systems.registry import SystemRegistry
from brickfall.systems.session import SessionManager, SessionState

__all__ = [
    "Ball",
    "BaseSystem",
    "Brick",
    "BrickFieldManager",
    "CircularDependencyError",
    "DestroyedBrick",
    "GameContext",
    "InputManager",
    "InputState",
    "MissingDependencyError",
    "Paddle",
    "Particle",
    "ParticleManager",
    "PhysicsManager",
    "RowShiftState",
    "SessionManager",
    "SessionState",
    "Shard",
    "SystemLoader",
    "SystemRegistry",
]
