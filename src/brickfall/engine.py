"""Frame driver for the simulation.

The GameEngine owns the GameContext and the SystemLoader, and advances the
whole game by one fixed tick per call. It is independent from arcade: the
GameView feeds it input and draws the FrameSnapshot it returns, and tests drive
it tick by tick.

Tick order:
    1. Apply queued input actions (pause, debug, restart, launch, taps).
    2. Stop here while paused or right after a restart.
    3. Advance the row-shift animation.
    4. Count the launch delay down.
    5. Move the paddle from the sampled input.
    6. Move the ball and resolve wall, paddle and bottom collisions.
    7. Destroy the bricks under the ball.
    8. Arm a row shift if bricks were destroyed and the bottom rows are empty.
    9. Age particles and shards.

Example usage:
    engine = GameEngine(seed=7)
    engine.on_key_press(arcade.key.LEFT, 0)
    for _ in range(60):
        snapshot = engine.tick()
    print(snapshot.score, snapshot.lives)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from brickfall.conf import settings
from brickfall.events import EventBus, GameStartEvent
from brickfall.geometry import pause_button_rect
from brickfall.random_source import create_random_source
from brickfall.snapshot import FrameSnapshot
from brickfall.systems.game_context import GameContext
from brickfall.systems.loader import SystemLoader
from brickfall.types import InputAction

if TYPE_CHECKING:
    from brickfall.random_source import RandomSource
    from brickfall.systems.bricks.base import BrickFieldBaseManager
    from brickfall.systems.input.base import InputBaseManager, QueuedAction
    from brickfall.systems.particle.base import ParticleBaseManager
    from brickfall.systems.physics.base import PhysicsBaseManager
    from brickfall.systems.session.base import SessionBaseManager

logger = logging.getLogger(__name__)


class GameEngine:
    """Runs one game session at a time on a fixed-size surface.

    Attributes:
        event_bus: Event bus shared by every system.
        context: Game context holding the systems.
        system_loader: Loader that created the systems and drives their lifecycle.
        tick_count: Ticks simulated since the current game started.
    """

    def __init__(
        self,
        width: float | None = None,
        height: float | None = None,
        *,
        seed: int | None = None,
        rng: RandomSource | None = None,
        event_bus: EventBus | None = None,
        installed_systems: list[str] | None = None,
    ) -> None:
        """Create the systems, set them up and start the first game.

        Args:
            width: Surface width. Defaults to settings.SCREEN_WIDTH.
            height: Surface height. Defaults to settings.SCREEN_HEIGHT.
            seed: Seed for the default random source. Defaults to settings.RANDOM_SEED.
            rng: Random source to use instead of a seeded ``random.Random``.
            event_bus: Event bus to publish on. A new one is created if omitted.
            installed_systems: System modules to load. Defaults to settings.INSTALLED_SYSTEMS.
        """
        self.width = settings.SCREEN_WIDTH if width is None else width
        self.height = settings.SCREEN_HEIGHT if height is None else height
        if rng is None:
            rng = create_random_source(settings.RANDOM_SEED if seed is None else seed)

        self.event_bus = event_bus or EventBus()
        self.context = GameContext(event_bus=self.event_bus, rng=rng, width=self.width, height=self.height)

        self.system_loader = SystemLoader(installed_systems)
        for name, system in self.system_loader.instantiate_all().items():
            self.context.register_system(name, system)
        self.system_loader.setup_all(self.context)

        self.pause_button = pause_button_rect(self.width, settings.PAUSE_BUTTON_SIZE, settings.UI_TOP_PADDING)
        self.tick_count = 0
        self.new_game()

    @property
    def bricks(self) -> BrickFieldBaseManager:
        return self.context.brick_manager

    @property
    def physics(self) -> PhysicsBaseManager:
        return self.context.physics_manager

    @property
    def particles(self) -> ParticleBaseManager:
        return self.context.particle_manager

    @property
    def session(self) -> SessionBaseManager:
        return self.context.session_manager

    @property
    def input(self) -> InputBaseManager:
        return self.context.input_manager

    def new_game(self) -> None:
        """Reset every system for a fresh game and announce it."""
        self.system_loader.reset_all(self.context)
        self.tick_count = 0
        state = self.session.state
        logger.info("New game: %d lives, debug mode %s", state.lives, "ON" if state.debug_mode else "OFF")
        self.event_bus.publish(GameStartEvent(lives=state.lives, debug_mode=state.debug_mode))

    def tick(self) -> FrameSnapshot:
        """Advance the simulation by one tick.

        Returns:
            Snapshot of the state after the tick.
        """
        restarted = False
        for queued in self.input.drain_actions():
            restarted = self._apply_action(queued) or restarted

        session = self.session
        # A new game starts on the next tick, with a full countdown
        if restarted or session.is_paused:
            return self.snapshot()

        bricks = self.bricks
        physics = self.physics
        bricks.advance()
        session.update_launch_countdown()
        physics.update_paddle(self.input.sample())
        physics.update_ball()
        hit = physics.brick_collision()
        if hit and session.is_active and not bricks.is_animating:
            bricks.begin_row_shift()
        self.particles.update()

        self.tick_count += 1
        return self.snapshot()

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot.capture(self.context, self.tick_count)

    def _apply_action(self, queued: QueuedAction) -> bool:
        """Apply one queued action.

        Returns:
            True if the action started a new game.
        """
        action = queued.action
        session = self.session
        if action is InputAction.TOGGLE_PAUSE:
            session.toggle_pause()
        elif action is InputAction.TOGGLE_DEBUG:
            session.toggle_debug()
        elif action is InputAction.RESTART:
            if session.is_game_over:
                self.new_game()
                return True
        elif action is InputAction.LAUNCH:
            if session.is_waiting and not self.bricks.is_animating:
                session.launch(automatic=False)
        elif action is InputAction.TAP:
            return self._handle_tap(queued.x, queued.y)
        elif action is InputAction.POINTER_RELEASE:
            self.input.release_pointer()
        return False

    def _handle_tap(self, x: float, y: float) -> bool:
        """Resolve a tap or click.

        In priority order: the pause button toggles pause (not after game over),
        any tap restarts after game over, any tap resumes a paused game, and
        otherwise the tap starts steering the paddle unless the field is sliding.
        Pointer control is dropped whenever a tap resumes the game.

        Returns:
            True if the tap started a new game.
        """
        session = self.session
        if not session.is_game_over and self.pause_button.contains(x, y):
            if not session.toggle_pause():
                self.input.release_pointer()
        elif session.is_game_over:
            self.new_game()
            return True
        elif session.is_paused:
            session.toggle_pause()
            self.input.release_pointer()
        elif not self.bricks.is_animating:
            self.input.begin_pointer(x)
        return False

    def on_key_press(self, symbol: int, modifiers: int) -> bool:
        """Dispatch a key press to the systems."""
        return self.system_loader.on_key_press_all(symbol, modifiers, self.context)

    def on_key_release(self, symbol: int, modifiers: int) -> bool:
        """Dispatch a key release to the systems."""
        return self.system_loader.on_key_release_all(symbol, modifiers, self.context)

    def cleanup(self) -> None:
        """Release every system and drop all event subscriptions."""
        self.system_loader.cleanup_all()
        self.event_bus.clear()
