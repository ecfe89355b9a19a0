"""Session state machine: modes, score, lives and the launch countdown.

States and transitions:

    WAITING_TO_LAUNCH --(countdown ends / launch)--> PLAYING
    PLAYING --(life lost, lives left)--> WAITING_TO_LAUNCH
    WAITING_TO_LAUNCH, PLAYING --(last life lost)--> GAME_OVER
    WAITING_TO_LAUNCH, PLAYING <--(toggle_pause)--> PAUSED
    GAME_OVER --(restart, driven by the GameEngine)--> WAITING_TO_LAUNCH

The row-shift animation is an orthogonal sub-state owned by the brick field;
the launch countdown does not run while it is active. Debug mode is independent
of the mode and survives restarts.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from brickfall.conf import settings
from brickfall.systems.registry import SystemRegistry
from brickfall.systems.session.base import SessionBaseManager, SessionState
from brickfall.systems.session.events import (
    BallLaunchedEvent,
    DebugToggledEvent,
    ExtraLifeEvent,
    GameOverEvent,
    LifeLostEvent,
    PauseToggledEvent,
)
from brickfall.types import GameMode

if TYPE_CHECKING:
    from brickfall.systems.game_context import GameContext

logger = logging.getLogger(__name__)


@SystemRegistry.register
class SessionManager(SessionBaseManager):
    """Owns the session state; every other system reads it to gate its behavior.

    Attributes:
        state: Score, lives, mode, countdown and debug flags of the current game.
    """

    name: ClassVar[str] = "session"
    dependencies: ClassVar[list[str]] = []

    def __init__(self) -> None:
        """Initialize the session manager."""
        self.state = SessionState()
        self.starting_lives = 3
        self.launch_delay = 0
        self.extra_life_score = 0
        self.debug_multiplier: float = 1

    def setup(self, context: GameContext) -> None:
        """Read gameplay rules from settings."""
        self.context = context
        self.starting_lives = settings.STARTING_LIVES
        self.launch_delay = settings.LAUNCH_DELAY_FRAMES
        self.extra_life_score = settings.SCORE_FOR_EXTRA_LIFE
        self.debug_multiplier = settings.DEBUG_SPEED_MULTIPLIER
        self.state.debug_mode = settings.DEBUG_MODE

    def reset(self, context: GameContext) -> None:
        """Start a fresh session, keeping the debug mode of the previous one."""
        debug_mode = self.state.debug_mode
        self.state = SessionState(
            lives=self.starting_lives,
            mode=GameMode.WAITING_TO_LAUNCH,
            launch_timer=self.launch_delay,
            debug_mode=debug_mode,
            speed_multiplier=self.debug_multiplier if debug_mode else 1,
        )

    def toggle_pause(self) -> bool:
        """Pause or resume the session.

        Pausing remembers the current mode and resuming restores it. Ignored once
        the game is over.

        Returns:
            True if the session is now paused.
        """
        if self.is_game_over:
            return False

        if self.is_paused:
            self.state.mode = self.state.resume_mode or GameMode.WAITING_TO_LAUNCH
            self.state.resume_mode = None
        else:
            self.state.resume_mode = self.state.mode
            self.state.mode = GameMode.PAUSED

        logger.info("Game %s", "paused" if self.is_paused else "resumed")
        self.context.event_bus.publish(PauseToggledEvent(paused=self.is_paused))
        return self.is_paused

    def toggle_debug(self) -> bool:
        """Flip debug mode and the ball speed multiplier that goes with it.

        Returns:
            True if debug mode is now on.
        """
        self.state.debug_mode = not self.state.debug_mode
        self.state.speed_multiplier = self.debug_multiplier if self.state.debug_mode else 1
        logger.info(
            "Debug mode: %s - speed multiplier: %s",
            "ON" if self.state.debug_mode else "OFF",
            self.state.speed_multiplier,
        )
        self.context.event_bus.publish(
            DebugToggledEvent(enabled=self.state.debug_mode, speed_multiplier=self.state.speed_multiplier)
        )
        return self.state.debug_mode

    def update_launch_countdown(self) -> bool:
        """Count one tick down while the ball is parked.

        The countdown does not run while paused, after game over or during a row
        shift. The ball launches when the countdown reaches zero.

        Returns:
            True if the ball was launched this tick.
        """
        if not self.is_waiting or self.context.brick_manager.is_animating:
            return False

        self.state.launch_timer -= 1
        if self.state.launch_timer > 0:
            return False

        self.launch(automatic=True)
        return True

    def launch(self, *, automatic: bool = False) -> None:
        """Launch the parked ball in a random horizontal direction.

        Does nothing unless the ball is waiting for launch.

        Args:
            automatic: Whether the countdown triggered the launch.
        """
        if not self.is_waiting:
            return

        speed_x = settings.INITIAL_BALL_SPEED_X
        velocity_x = speed_x if self.context.rng.random() < 0.5 else -speed_x  # noqa: PLR2004
        velocity_y = settings.INITIAL_BALL_SPEED_Y
        self.context.physics_manager.launch_ball(velocity_x, velocity_y)

        self.state.mode = GameMode.PLAYING
        self.state.launch_timer = 0
        logger.debug("Ball launched (%s): dx=%.1f dy=%.1f", "auto" if automatic else "manual", velocity_x, velocity_y)
        self.context.event_bus.publish(BallLaunchedEvent(velocity_x, velocity_y, automatic=automatic))

    def add_points(self, points: int = 1) -> bool:
        """Add to the score, granting a life at every multiple of SCORE_FOR_EXTRA_LIFE.

        Args:
            points: Points to add, one at a time.

        Returns:
            True if at least one extra life was granted.

        Raises:
            ValueError: If points is negative.
        """
        if points < 0:
            msg = f"Score never decreases (got {points} points)"
            raise ValueError(msg)

        granted = False
        for _ in range(points):
            self.state.score += 1
            if self.extra_life_score > 0 and self.state.score % self.extra_life_score == 0:
                self.state.lives += 1
                granted = True
                logger.info("Extra life at score %d (%d lives)", self.state.score, self.state.lives)
                self.context.event_bus.publish(ExtraLifeEvent(score=self.state.score, lives=self.state.lives))
        return granted

    def lose_life(self) -> bool:
        """Take a life after the ball fell past the bottom edge.

        With lives left the session goes back to waiting for launch and the
        countdown restarts; otherwise the game is over.

        Returns:
            True if the game is now over.
        """
        self.state.lives -= 1
        logger.info("Life lost, %d left", max(self.state.lives, 0))
        self.context.event_bus.publish(LifeLostEvent(lives=self.state.lives))

        if self.state.lives <= 0:
            self.state.mode = GameMode.GAME_OVER
            self.state.resume_mode = None
            self.state.launch_timer = 0
            rows_advanced = self.context.brick_manager.rows_advanced
            logger.info("Game over: score %d, %d rows advanced", self.state.score, rows_advanced)
            self.context.event_bus.publish(GameOverEvent(score=self.state.score, rows_advanced=rows_advanced))
            return True

        self.state.mode = GameMode.WAITING_TO_LAUNCH
        self.state.launch_timer = self.launch_delay
        return False
