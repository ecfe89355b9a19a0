"""Brick field system: the grid of bricks and its endless descent.

The field is a column-major grid ``grid[column][row]`` deeper than the visible
play area. Row 0 is the top row. Bricks are destroyed by the ball; whenever the
bottom-most rows run empty the whole field slides down by whole rows, the vacated
top rows are refilled with fresh bricks, and play resumes. The slide is animated
with a pixel offset so the field never jumps between two frames.

Row shift lifecycle:
    1. The frame driver calls begin_row_shift() after a tick that destroyed a brick.
    2. If the lowest occupied row is not the last row, the shift is armed with
       target = rows_to_shift * ROW_HEIGHT.
    3. advance() grows the offset by ROW_ANIMATION_SPEED every tick. Paddle, ball
       and brick collisions are suspended meanwhile.
    4. Once the offset reaches the target, bricks move down in the grid (those
       pushed past the last row are dropped), new bricks fill the top rows and
       the offset returns to zero.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, ClassVar

from brickfall.conf import settings
from brickfall.systems.bricks.base import Brick, BrickFieldBaseManager, DestroyedBrick, RowShiftState
from brickfall.systems.bricks.events import RowShiftCompletedEvent, RowShiftStartedEvent
from brickfall.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from brickfall.geometry import Rect
    from brickfall.systems.game_context import GameContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class BrickFieldManager(BrickFieldBaseManager):
    """Owns the brick grid, brick creation and destruction, and the row shift.

    Attributes:
        grid: Column-major grid; each cell holds a Brick or None.
        row_shift: State of the row-shift animation.
        rows_advanced: Rows the field moved down since the game started.
        columns: Number of columns in the grid.
        rows: Number of rows in the grid, including rows above the play area's bottom.
        row_height: Vertical distance between two rows (brick height plus padding).
        offset_left: Left edge of the first column, centering the field.
    """

    name: ClassVar[str] = "bricks"
    dependencies: ClassVar[list[str]] = ["session"]

    def __init__(self) -> None:
        """Initialize an empty brick field."""
        self.grid: list[list[Brick | None]] = []
        self.row_shift = RowShiftState()
        self.rows_advanced = 0

        self.columns = 0
        self.rows = 0
        self.brick_width = 0.0
        self.brick_height = 0.0
        self.padding = 0.0
        self.offset_top = 0.0
        self.offset_left = 0.0
        self.row_height = 0.0
        self.animation_speed = 0.0
        self.palette: list[str] = []

    def setup(self, context: GameContext) -> None:
        """Read the grid layout from settings.

        Raises:
            ValueError: If the grid has no rows or columns, or the palette is empty.
        """
        self.context = context
        self.columns = settings.BRICK_COLUMN_COUNT
        self.rows = settings.BRICK_ROW_COUNT
        if self.columns < 1 or self.rows < 1:
            msg = f"Brick grid needs at least one row and one column (got {self.columns}x{self.rows})"
            raise ValueError(msg)

        self.palette = list(settings.BRICK_COLORS)
        if not self.palette:
            msg = "BRICK_COLORS must contain at least one color"
            raise ValueError(msg)

        self.brick_width = settings.BRICK_WIDTH
        self.brick_height = settings.BRICK_HEIGHT
        self.padding = settings.BRICK_PADDING
        self.offset_top = settings.BRICK_OFFSET_TOP
        self.row_height = self.brick_height + self.padding
        self.animation_speed = settings.ROW_ANIMATION_SPEED

        field_width = self.columns * (self.brick_width + self.padding) - self.padding
        self.offset_left = (context.width - field_width) / 2
        logger.debug(
            "Brick field: %dx%d cells, row height %.1f, left offset %.1f",
            self.columns,
            self.rows,
            self.row_height,
            self.offset_left,
        )

    def reset(self, context: GameContext) -> None:
        """Start a new game with a full grid."""
        self.create_grid()

    @property
    def is_animating(self) -> bool:
        """Whether a row shift is in progress."""
        return self.row_shift.active

    @property
    def row_offset(self) -> float:
        """Current row-shift offset in pixels (0 when no shift is running)."""
        return self.row_shift.offset if self.row_shift.active else 0.0

    def column_x(self, column: int) -> float:
        """Left edge of a column."""
        return column * (self.brick_width + self.padding) + self.offset_left

    def row_y(self, row: int) -> float:
        """Top edge of a row, without the row-shift offset."""
        return row * self.row_height + self.offset_top

    def create_brick(self, column: int, row: int) -> Brick:
        """Create a brick for a cell: fixed geometry, random palette color."""
        return Brick(
            x=self.column_x(column),
            y=self.row_y(row),
            width=self.brick_width,
            height=self.brick_height,
            color=self.context.rng.choice(self.palette),
        )

    def create_grid(self) -> None:
        """Fill every cell with a fresh brick and clear any running row shift."""
        self.grid = [[self.create_brick(column, row) for row in range(self.rows)] for column in range(self.columns)]
        self.row_shift = RowShiftState()
        self.rows_advanced = 0

    def get_brick(self, column: int, row: int) -> Brick | None:
        """Brick at a cell, or None if the cell is empty."""
        return self.grid[column][row]

    def iter_bricks(self) -> Iterator[tuple[int, int, Brick]]:
        """Yield (column, row, brick) for every occupied cell, column by column."""
        for column, cells in enumerate(self.grid):
            for row, brick in enumerate(cells):
                if brick is not None:
                    yield column, row, brick

    def brick_rect(self, brick: Brick) -> Rect:
        """Current rectangle of a brick, including the row-shift offset."""
        return brick.rect(self.row_offset)

    def destroy(self, column: int, row: int) -> DestroyedBrick | None:
        """Clear a cell.

        Returns:
            Center (row-shift offset included), size and color of the destroyed
            brick, or None if the cell was already empty.
        """
        brick = self.grid[column][row]
        if brick is None:
            return None

        self.grid[column][row] = None
        center_x, center_y = self.brick_rect(brick).center
        return DestroyedBrick(column, row, center_x, center_y, brick.width, brick.height, brick.color)

    def find_lowest_occupied_row(self) -> int | None:
        """Index of the bottom-most row holding at least one brick, or None if the grid is empty."""
        for row in range(self.rows - 1, -1, -1):
            if any(cells[row] is not None for cells in self.grid):
                return row
        return None

    def begin_row_shift(self) -> int:
        """Arm the row-shift animation if the bottom rows are empty.

        Nothing happens while a shift is already running or when the session is
        paused or over. An empty grid shifts by the full grid depth.

        Returns:
            Number of rows the field is going to move down (0 if no shift was armed).
        """
        session = self.context.session_manager
        if self.row_shift.active or session.is_paused or session.is_game_over:
            return 0

        lowest = self.find_lowest_occupied_row()
        shift = self.rows if lowest is None else self.rows - 1 - lowest
        if shift <= 0:
            return 0

        self.rows_advanced += shift
        self.row_shift = RowShiftState(active=True, offset=0.0, target=shift * self.row_height, rows=shift)
        logger.debug("Row shift armed: %d row(s), target offset %.1f", shift, self.row_shift.target)
        self.context.event_bus.publish(RowShiftStartedEvent(rows=shift, target_offset=self.row_shift.target))
        return shift

    def advance(self) -> bool:
        """Advance a running row shift by one tick.

        Returns:
            True if the shift reached its target and was committed to the grid this tick.
        """
        if not self.row_shift.active:
            return False

        self.row_shift.offset += self.animation_speed
        if self.row_shift.offset < self.row_shift.target:
            return False

        self.row_shift.offset = self.row_shift.target
        shift = self.row_shift.rows
        self._shift_grid(shift)
        self.row_shift = RowShiftState()

        logger.debug("Row shift complete: %d row(s), %d advanced in total", shift, self.rows_advanced)
        self.context.event_bus.publish(RowShiftCompletedEvent(rows=shift, rows_advanced=self.rows_advanced))
        return True

    def _shift_grid(self, shift: int) -> None:
        """Move every brick down by ``shift`` rows and refill the vacated top rows."""
        shifted: list[list[Brick | None]] = []
        for column, cells in enumerate(self.grid):
            new_cells: list[Brick | None] = [None] * self.rows
            for row, brick in enumerate(cells):
                target_row = row + shift
                if brick is not None and target_row < self.rows:
                    new_cells[target_row] = replace(brick, y=self.row_y(target_row))
            for row in range(min(shift, self.rows)):
                new_cells[row] = self.create_brick(column, row)
            shifted.append(new_cells)
        self.grid = shifted
