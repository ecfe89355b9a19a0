"""Ball and paddle physics.

The ball is integrated with a simple projected-position scheme: every tick the
next position is computed from the velocity (scaled by the session's speed
multiplier), checked against the side walls, the top wall, the paddle and the
bottom edge, and the ball then moves by its possibly reflected velocity. There
is no swept collision, so a very fast ball can tunnel through the paddle.

Bricks never deflect the ball. brick_collision() destroys every brick whose
rectangle overlaps the ball's bounding box, so a single pass can clear a whole
column.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from brickfall.conf import settings
from brickfall.systems.bricks.events import BrickDestroyedEvent
from brickfall.systems.physics.base import Ball, Paddle, PhysicsBaseManager
from brickfall.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from brickfall.systems.game_context import GameContext
    from brickfall.systems.input.base import InputState

logger = logging.getLogger(__name__)


@SystemRegistry.register
class PhysicsManager(PhysicsBaseManager):
    """Moves the paddle and the ball and resolves their collisions.

    Attributes:
        ball: The ball.
        paddle: The paddle.
    """

    name: ClassVar[str] = "physics"
    dependencies: ClassVar[list[str]] = ["session", "bricks", "particle"]

    def __init__(self) -> None:
        """Initialize with a placeholder ball and paddle; reset() places them."""
        self.ball = Ball(0.0, 0.0)
        self.paddle = Paddle(0.0, 0.0, 0.0, 0.0)
        self.paddle_speed = 0.0
        self.pointer_deadzone = 0.0
        self.max_bounce_dx = 0.0

    def setup(self, context: GameContext) -> None:
        """Read paddle and ball tuning from settings."""
        self.context = context
        self.paddle_speed = settings.PADDLE_SPEED
        self.pointer_deadzone = settings.PADDLE_SPEED / settings.POINTER_DEADZONE_DIVISOR
        self.max_bounce_dx = abs(settings.INITIAL_BALL_SPEED_X) * settings.PADDLE_MAX_BOUNCE_FACTOR

    def reset(self, context: GameContext) -> None:
        """Center the paddle and park the ball for a new game."""
        self.paddle = Paddle(
            x=(context.width - settings.PADDLE_WIDTH) / 2,
            y=context.height - settings.PADDLE_HEIGHT - settings.PADDLE_BOTTOM_MARGIN,
            width=settings.PADDLE_WIDTH,
            height=settings.PADDLE_HEIGHT,
            color=settings.PADDLE_COLOR,
        )
        self.reset_ball_for_launch()

    def reset_ball_for_launch(self) -> None:
        """Park a fresh ball above the paddle, horizontally centered."""
        self.ball = Ball(
            x=self.context.width / 2,
            y=self.context.height - settings.BALL_START_OFFSET,
            radius=settings.BALL_RADIUS,
            color=settings.BALL_COLOR,
        )

    def launch_ball(self, velocity_x: float, velocity_y: float) -> None:
        self.ball.velocity_x = velocity_x
        self.ball.velocity_y = velocity_y

    def _is_frozen(self) -> bool:
        return not self.context.session_manager.is_active or self.context.brick_manager.is_animating

    def update_paddle(self, state: InputState) -> None:
        """Move the paddle one step from the input state, then clamp it to the surface.

        Pointer control takes precedence over the keys: the paddle steps toward
        the pointer only when it is farther than the dead zone from the paddle
        center. An active pointer without a target requests no movement.
        Otherwise left wins over right.

        Args:
            state: Input sampled at the start of the tick.
        """
        if self._is_frozen():
            return

        paddle = self.paddle
        direction = 0
        if state.pointer_active:
            if state.pointer_x is not None:
                difference = state.pointer_x - paddle.center_x
                if abs(difference) > self.pointer_deadzone:
                    direction = 1 if difference > 0 else -1
        elif state.left:
            direction = -1
        elif state.right:
            direction = 1

        paddle.x += direction * self.paddle_speed
        paddle.x = max(0.0, min(paddle.x, self.context.width - paddle.width))

    def update_ball(self) -> None:
        """Advance the ball by one tick.

        Only one of top wall, paddle and bottom edge is resolved per tick, after
        the side walls. Losing a life ends the update early.
        """
        session = self.context.session_manager
        if self._is_frozen() or session.is_waiting:
            return

        ball = self.ball
        width = self.context.width
        height = self.context.height
        multiplier = session.state.speed_multiplier
        radius = ball.radius
        next_x = ball.x + ball.velocity_x * multiplier
        next_y = ball.y + ball.velocity_y * multiplier
        landed_on_paddle = False

        # Side walls
        if next_x > width - radius or next_x < radius:
            ball.velocity_x = -ball.velocity_x
            ball.x = min(max(next_x, radius), width - radius)
            next_x = ball.x + ball.velocity_x * multiplier

        paddle = self.paddle
        if next_y < radius:
            ball.velocity_y = -ball.velocity_y
            ball.y = radius
        elif (
            ball.velocity_y > 0
            and next_y + radius > paddle.y
            and ball.y + radius <= paddle.y
            and next_x + radius > paddle.x
            and next_x - radius < paddle.x + paddle.width
        ):
            self._bounce_off_paddle()
            landed_on_paddle = True
        elif next_y > height - radius:
            if session.state.debug_mode:
                ball.velocity_y = -ball.velocity_y
                ball.y = height - radius
            else:
                self._lose_ball()
                return

        ball.x += ball.velocity_x * multiplier
        if not landed_on_paddle:
            ball.y += ball.velocity_y * multiplier

    def _bounce_off_paddle(self) -> None:
        """Reflect the ball up, angled by where it hit the paddle, and leave it flush on top."""
        ball = self.ball
        paddle = self.paddle
        ball.velocity_y = -ball.velocity_y
        velocity_x = (ball.x - paddle.center_x) * settings.PADDLE_BOUNCE_FACTOR
        ball.velocity_x = max(-self.max_bounce_dx, min(self.max_bounce_dx, velocity_x))
        ball.y = paddle.y - ball.radius - settings.PADDLE_FLUSH_GAP

    def _lose_ball(self) -> None:
        if self.context.session_manager.lose_life():
            self.ball.stop()
            self.ball.x = self.context.width / 2
            self.ball.y = self.context.height / 2 + settings.GAME_OVER_BALL_OFFSET
        else:
            self.reset_ball_for_launch()

    def brick_collision(self) -> bool:
        """Destroy every brick overlapping the ball's bounding box.

        Each destroyed brick spawns both effects at its center, scores one point
        and publishes a BrickDestroyedEvent. The ball keeps its velocity.

        Returns:
            True if at least one brick was destroyed this tick.
        """
        session = self.context.session_manager
        if self._is_frozen() or session.is_waiting:
            return False

        bricks = self.context.brick_manager
        ball_rect = self.ball.rect
        hits = [
            (column, row) for column, row, brick in bricks.iter_bricks() if ball_rect.overlaps(bricks.brick_rect(brick))
        ]

        for column, row in hits:
            destroyed = bricks.destroy(column, row)
            if destroyed is None:
                continue
            self.context.particle_manager.emit_brick_break(destroyed)
            session.add_points(1)
            self.context.event_bus.publish(
                BrickDestroyedEvent(column=column, row=row, color=destroyed.color, score=session.state.score)
            )

        if hits:
            logger.debug("Ball destroyed %d brick(s), score %d", len(hits), session.state.score)
        return bool(hits)
