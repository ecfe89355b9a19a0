"""Module for events."""

from brickfall.events.base import Event, EventBus, GameStartEvent

__all__ = [
    "Event",
    "EventBus",
    "GameStartEvent",
]
