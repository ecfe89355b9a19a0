"""Event system for decoupled game event handling.

Systems publish events when something noteworthy happens in the simulation
(a brick breaks, a life is lost, the field advances) and observers such as the
view or a logger subscribe to them. Publishing never changes simulation state
by itself; handlers run synchronously on the game thread.

Example usage:
    event_bus = EventBus()

    def on_game_over(event: GameOverEvent) -> None:
        print(f"Final score: {event.score}")

    event_bus.subscribe(GameOverEvent, on_game_over)
    event_bus.publish(GameOverEvent(score=42, rows_advanced=3))

    event_bus.clear()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Event:
    """Base event class."""


@dataclass
class GameStartEvent(Event):
    """Fired when a fresh game starts (first start and every restart).

    Attributes:
        lives: Lives the new game starts with.
        debug_mode: Whether debug mode carried over into the new game.
    """

    lives: int
    debug_mode: bool = False


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Publishers emit events without knowing who handles them; subscribers listen
    for an event type without knowing who publishes it.

    Thread safety: this implementation is NOT thread-safe. Subscribe, publish and
    unsubscribe on the game thread only.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type.

        Handlers for the same type are called in registration order. Subscribing
        the same handler twice makes it run twice.

        Args:
            event_type: The type of event to listen for (e.g., BrickDestroyedEvent).
            handler: Callback receiving the published event.
        """
        self.listeners.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Remove every subscription of ``handler`` to ``event_type``.

        Unknown handlers are ignored.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all handlers subscribed to its exact type.

        Events without subscribers are dropped silently. An exception raised by a
        handler propagates to the publisher and skips the remaining handlers.

        Args:
            event: The event instance to publish.
        """
        for handler in list(self.listeners.get(type(event), ())):
            handler(event)

    def clear(self) -> None:
        """Remove all handlers for all event types."""
        self.listeners.clear()

    def unregister_all(self, subscriber: object) -> None:
        """Remove every bound-method handler that belongs to ``subscriber``.

        Args:
            subscriber: The instance (e.g., a view) whose handlers should be removed.
        """
        for event_type in self.listeners:
            self.listeners[event_type] = [
                h for h in self.listeners[event_type] if getattr(h, "__self__", None) is not subscriber
            ]
