"""Base class for BrickFieldManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from brickfall.geometry import Rect
from brickfall.systems.base import BaseSystem

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class Brick:
    """A destructible brick.

    The position is derived from the brick's grid cell; while the field is
    sliding down, the row-shift offset is added on top of ``y`` for collision
    and drawing but never stored.

    Attributes:
        x: Left edge in pixels.
        y: Top edge in pixels, without the row-shift offset.
        width: Width in pixels.
        height: Height in pixels.
        color: Hex color picked from the palette when the brick was created.
    """

    x: float
    y: float
    width: float
    height: float
    color: str

    def rect(self, offset: float = 0.0) -> Rect:
        """Rectangle occupied by the brick, shifted down by ``offset``."""
        return Rect.from_size(self.x, self.y + offset, self.width, self.height)


class DestroyedBrick(NamedTuple):
    """What is left of a brick after it was destroyed, used to spawn effects."""

    column: int
    row: int
    center_x: float
    center_y: float
    width: float
    height: float
    color: str


@dataclass
class RowShiftState:
    """Progress of the animated row shift.

    Attributes:
        active: True while the field is sliding down.
        offset: Current vertical offset in pixels (0 when inactive).
        target: Offset at which the shift is committed to the grid.
        rows: Number of rows the grid moves down when the shift completes.
    """

    active: bool = False
    offset: float = 0.0
    target: float = 0.0
    rows: int = 0


class BrickFieldBaseManager(BaseSystem, ABC):
    """Base class for BrickFieldManager."""

    role = "brick_manager"

    grid: list[list[Brick | None]]
    row_shift: RowShiftState
    rows_advanced: int

    @property
    @abstractmethod
    def is_animating(self) -> bool:
        """Whether a row shift is in progress."""
        ...

    @property
    @abstractmethod
    def row_offset(self) -> float:
        """Current row-shift offset in pixels (0 when no shift is running)."""
        ...

    @abstractmethod
    def create_grid(self) -> None:
        """Fill every cell of the grid with a fresh brick."""
        ...

    @abstractmethod
    def destroy(self, column: int, row: int) -> DestroyedBrick | None:
        """Clear a cell, returning what was destroyed (None for an empty cell)."""
        ...

    @abstractmethod
    def iter_bricks(self) -> Iterator[tuple[int, int, Brick]]:
        """Yield (column, row, brick) for every occupied cell."""
        ...

    @abstractmethod
    def brick_rect(self, brick: Brick) -> Rect:
        """Current rectangle of a brick, including the row-shift offset."""
        ...

    @abstractmethod
    def find_lowest_occupied_row(self) -> int | None:
        """Index of the bottom-most row holding a brick, or None for an empty grid."""
        ...

    @abstractmethod
    def begin_row_shift(self) -> int:
        """Arm the row-shift animation if the bottom rows are empty."""
        ...

    @abstractmethod
    def advance(self) -> bool:
        """Advance a running row shift by one tick."""
        ...
