"""Events for the session state machine."""

from dataclasses import dataclass

from brickfall.events import Event


@dataclass
class BallLaunchedEvent(Event):
    """Fired when the parked ball is launched.

    Attributes:
        velocity_x: Horizontal launch velocity.
        velocity_y: Vertical launch velocity.
        automatic: True if the launch countdown ran out, False for an explicit launch.
    """

    velocity_x: float
    velocity_y: float
    automatic: bool = True


@dataclass
class ExtraLifeEvent(Event):
    """Fired when the score reaches a multiple of SCORE_FOR_EXTRA_LIFE.

    Attributes:
        score: Score that granted the life.
        lives: Lives after the grant.
    """

    score: int
    lives: int


@dataclass
class LifeLostEvent(Event):
    """Fired when the ball falls past the bottom edge outside debug mode.

    Attributes:
        lives: Lives left after the loss.
    """

    lives: int


@dataclass
class GameOverEvent(Event):
    """Fired when the last life is lost.

    Attributes:
        score: Final score.
        rows_advanced: Rows the field advanced during the game.
    """

    score: int
    rows_advanced: int


@dataclass
class PauseToggledEvent(Event):
    """Fired when the session is paused or resumed.

    Attributes:
        paused: True if the session is now paused.
    """

    paused: bool


@dataclass
class DebugToggledEvent(Event):
    """Fired when debug mode is switched.

    Attributes:
        enabled: True if debug mode is now on.
        speed_multiplier: Ball speed multiplier now in effect.
    """

    enabled: bool
    speed_multiplier: float
