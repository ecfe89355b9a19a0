"""Events for the brick field."""

from dataclasses import dataclass

from brickfall.events import Event


@dataclass
class BrickDestroyedEvent(Event):
    """Fired for every brick the ball destroys.

    Attributes:
        column: Grid column of the destroyed brick.
        row: Grid row of the destroyed brick.
        color: Hex color of the destroyed brick.
        score: Score after the brick was counted.
    """

    column: int
    row: int
    color: str
    score: int


@dataclass
class RowShiftStartedEvent(Event):
    """Fired when the bottom rows emptied and the field starts sliding down.

    Attributes:
        rows: Number of rows the field will move down.
        target_offset: Pixel offset at which the shift completes.
    """

    rows: int
    target_offset: float


@dataclass
class RowShiftCompletedEvent(Event):
    """Fired when a row shift is committed and new rows were spawned at the top.

    Attributes:
        rows: Number of rows the field moved down.
        rows_advanced: Total rows advanced since the game started.
    """

    rows: int
    rows_advanced: int
