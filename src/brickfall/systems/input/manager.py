"""Input buffer between the window callbacks and the simulation.

Window callbacks may fire at any point between two ticks. They never touch the
game directly: held keys and the pointer target are recorded here, and discrete
commands (pause, restart, launch, debug, taps, pointer releases) are queued in
arrival order. The GameEngine drains the queue and samples the held state once
at the start of every tick.

Key bindings:
    - Left / A, Right / D: move the paddle (left wins when both are held)
    - Escape: pause or resume
    - Space: restart after game over
    - Up / W: launch the parked ball without waiting for the countdown
    - T: toggle debug mode
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, ClassVar

import arcade

from brickfall.systems.input.base import InputBaseManager, InputState, QueuedAction
from brickfall.systems.registry import SystemRegistry
from brickfall.types import InputAction

if TYPE_CHECKING:
    from brickfall.systems.game_context import GameContext

logger = logging.getLogger(__name__)

LEFT_KEYS = frozenset({arcade.key.LEFT, arcade.key.A})
RIGHT_KEYS = frozenset({arcade.key.RIGHT, arcade.key.D})

ACTION_KEYS: dict[int, InputAction] = {
    arcade.key.ESCAPE: InputAction.TOGGLE_PAUSE,
    arcade.key.SPACE: InputAction.RESTART,
    arcade.key.UP: InputAction.LAUNCH,
    arcade.key.W: InputAction.LAUNCH,
    arcade.key.T: InputAction.TOGGLE_DEBUG,
}


@SystemRegistry.register
class InputManager(InputBaseManager):
    """Records held keys and the pointer target, and queues discrete actions.

    Attributes:
        left_pressed: Whether a move-left key is held.
        right_pressed: Whether a move-right key is held.
        pointer_active: Whether a pointer is steering the paddle.
        pointer_x: Pointer X the paddle steers toward.
    """

    name: ClassVar[str] = "input"
    dependencies: ClassVar[list[str]] = ["session", "bricks"]

    def __init__(self) -> None:
        """Initialize an empty input buffer."""
        self.left_pressed = False
        self.right_pressed = False
        self.pointer_active = False
        self.pointer_x: float | None = None
        self._actions: deque[QueuedAction] = deque()

    def setup(self, context: GameContext) -> None:
        self.context = context

    def reset(self, context: GameContext) -> None:
        """Forget held keys, pointer control and pending actions."""
        self.left_pressed = False
        self.right_pressed = False
        self.release_pointer()
        self._actions.clear()

    def cleanup(self) -> None:
        self._actions.clear()

    def _accepts_movement(self) -> bool:
        return self.context.session_manager.is_active and not self.context.brick_manager.is_animating

    def on_key_press(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Record a held movement key or queue the action bound to the key.

        Movement keys are only recorded while the game is running and the field
        is not sliding down.

        Returns:
            True if the key is bound.
        """
        action = ACTION_KEYS.get(symbol)
        if action is not None:
            self.queue_action(action)
            return True

        if symbol in LEFT_KEYS or symbol in RIGHT_KEYS:
            if self._accepts_movement():
                # Keyboard takes the paddle back from the pointer
                self.release_pointer()
                if symbol in LEFT_KEYS:
                    self.left_pressed = True
                else:
                    self.right_pressed = True
            return True
        return False

    def on_key_release(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Release a held movement key."""
        if symbol in LEFT_KEYS:
            self.left_pressed = False
            return True
        if symbol in RIGHT_KEYS:
            self.right_pressed = False
            return True
        return False

    def on_pointer_press(self, x: float, y: float) -> None:
        """Queue a tap; the engine decides what it means on the next tick.

        Args:
            x: Pointer X in simulation space.
            y: Pointer Y in simulation space.
        """
        self.queue_action(InputAction.TAP, x, y)

    def on_pointer_move(self, x: float, y: float) -> None:
        """Retarget the paddle while a pointer is steering it and the game is running."""
        if self.pointer_active and self._accepts_movement():
            self.pointer_x = x

    def on_pointer_release(self) -> None:
        """Queue the end of pointer steering behind any tap still waiting for the tick."""
        self.queue_action(InputAction.POINTER_RELEASE)

    def begin_pointer(self, x: float) -> None:
        self.pointer_active = True
        self.pointer_x = x

    def release_pointer(self) -> None:
        self.pointer_active = False
        self.pointer_x = None

    def queue_action(self, action: InputAction, x: float = 0.0, y: float = 0.0) -> None:
        self._actions.append(QueuedAction(action, x, y))
        logger.debug("Queued %s at (%.1f, %.1f)", action.name, x, y)

    def drain_actions(self) -> list[QueuedAction]:
        actions = list(self._actions)
        self._actions.clear()
        return actions

    def sample(self) -> InputState:
        return InputState(
            left=self.left_pressed,
            right=self.right_pressed,
            pointer_active=self.pointer_active,
            pointer_x=self.pointer_x,
        )
