"""Brick field system.

This module provides the BrickFieldManager class, which owns the brick grid,
brick destruction and the animated row shift that keeps the field descending.
"""

from brickfall.systems.bricks.base import Brick, BrickFieldBaseManager, DestroyedBrick, RowShiftState
from brickfall.systems.bricks.events import BrickDestroyedEvent, RowShiftCompletedEvent, RowShiftStartedEvent
from brickfall.systems.bricks.manager import BrickFieldManager

__all__ = [
    "Brick",
    "BrickDestroyedEvent",
    "BrickFieldBaseManager",
    "BrickFieldManager",
    "DestroyedBrick",
    "RowShiftCompletedEvent",
    "RowShiftStartedEvent",
    "RowShiftState",
]
