"""Base class for pluggable systems.

Systems are the building blocks of the simulation. Each one owns a single
concern (the brick field, the ball and paddle, the effect swarms, the session
state machine, the input buffer) and reaches the others through the
``GameContext``.

Example:
    Creating a custom system::

        from brickfall.systems.base import BaseSystem
        from brickfall.systems.registry import SystemRegistry

        @SystemRegistry.register
        class ComboCounter(BaseSystem):
            name = "combo"
            role = "combo_counter"
            dependencies = ["session"]

            def setup(self, context):
                context.event_bus.subscribe(BrickDestroyedEvent, self._on_brick)

            def reset(self, context):
                self.streak = 0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from brickfall.systems.game_context import GameContext


class BaseSystem(ABC):
    """Base class for all pluggable systems.

    Attributes:
        name: Unique identifier for the system. Must be defined as a class variable.
        role: Attribute name under which the GameContext exposes the system
            (e.g. ``context.brick_manager``). Empty string means no attribute.
        dependencies: Names of the systems this one needs. Systems are set up and
            reset in dependency order.
    """

    # System identifier (must be unique across all systems)
    name: ClassVar[str]

    role: ClassVar[str] = ""

    # Other systems this one depends on (by name)
    dependencies: ClassVar[list[str]] = []

    @abstractmethod
    def setup(self, context: GameContext) -> None:
        """Initialize the system once, before the first game starts.

        Read settings here and subscribe to events.

        Args:
            context: Game context providing access to other systems.
        """

    def reset(self, context: GameContext) -> None:  # noqa: B027
        """Return the system to the state of a fresh game.

        Called for the first game and again on every restart.

        Args:
            context: Game context providing access to other systems.
        """

    def cleanup(self) -> None:  # noqa: B027
        """Called when the game exits.

        Override this method to unsubscribe from events and drop references.
        """

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Handle key press events.

        Args:
            symbol: Arcade key constant for the pressed key.
            modifiers: Bitfield of modifier keys held.
            context: Game context providing access to other systems.

        Returns:
            True if the event was handled and should stop propagating, False otherwise.
        """
        return False

    def on_key_release(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Handle key release events.

        Args:
            symbol: Arcade key constant for the released key.
            modifiers: Bitfield of modifier keys held.
            context: Game context providing access to other systems.

        Returns:
            True if the event was handled and should stop propagating, False otherwise.
        """
        return False
