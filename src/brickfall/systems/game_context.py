"""Game context shared by all systems.

The GameContext is the single session-scoped aggregate of a game: it holds the
event bus, the random source, the surface size and every registered system.
Systems never read module-level globals for game state; they receive the
context on every call and reach each other through it.

Example usage:
    context = GameContext(event_bus=EventBus(), rng=random.Random(7), width=400, height=800)
    context.register_system("bricks", brick_manager)

    # Systems with a role are also exposed as attributes
    context.brick_manager.create_grid()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brickfall.events import EventBus
    from brickfall.random_source import RandomSource
    from brickfall.systems.base import BaseSystem
    from brickfall.systems.bricks.base import BrickFieldBaseManager
    from brickfall.systems.input.base import InputBaseManager
    from brickfall.systems.particle.base import ParticleBaseManager
    from brickfall.systems.physics.base import PhysicsBaseManager
    from brickfall.systems.session.base import SessionBaseManager


class GameContext:
    """Central context object providing access to all game systems.

    Attributes:
        event_bus: Publish/subscribe event system for decoupled communication.
        rng: Random source behind every random decision of the simulation.
        width: Width of the playing surface in pixels, fixed for the session.
        height: Height of the playing surface in pixels, fixed for the session.
    """

    brick_manager: BrickFieldBaseManager
    physics_manager: PhysicsBaseManager
    particle_manager: ParticleBaseManager
    session_manager: SessionBaseManager
    input_manager: InputBaseManager

    def __init__(self, event_bus: EventBus, rng: RandomSource, width: float, height: float) -> None:
        """Initialize game context.

        Systems are registered separately via register_system() after
        instantiation, typically by the GameEngine using the SystemLoader.

        Args:
            event_bus: Central event system for publishing and subscribing to game events.
            rng: Random source used for brick colors, launch direction and effects.
            width: Surface width in pixels.
            height: Surface height in pixels.
        """
        self.event_bus = event_bus
        self.rng = rng
        self.width = width
        self.height = height

        # Registry for all pluggable systems (accessed via get_system)
        self._systems: dict[str, BaseSystem] = {}

    def register_system(self, name: str, system: BaseSystem) -> None:
        """Register a system with the context.

        Systems declaring a role are also set as an attribute of that name.

        Args:
            name: Unique identifier for the system (e.g., "bricks", "physics").
            system: The system instance to register.
        """
        self._systems[name] = system

        if system.role:
            setattr(self, system.role, system)

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a registered system by name, or None if not registered."""
        return self._systems.get(name)
