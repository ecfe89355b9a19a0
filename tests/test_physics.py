"""Unit tests for PhysicsManager."""

import random
import unittest
from unittest.mock import MagicMock

import pytest

from brickfall.conf import settings
from brickfall.systems.bricks.base import Brick, DestroyedBrick
from brickfall.systems.bricks.events import BrickDestroyedEvent
from brickfall.systems.input.base import InputState
from brickfall.systems.physics.manager import PhysicsManager
from brickfall.systems.session.base import SessionState
from brickfall.types import GameMode

PADDLE_X = 155
PADDLE_Y = 768


class PhysicsTestCase(unittest.TestCase):
    """Shared setup: a playing session on a 400x800 surface."""

    def setUp(self) -> None:
        """Set up PhysicsManager with a mock context."""
        self.mock_context = MagicMock()
        self.mock_context.width = 400
        self.mock_context.height = 800
        self.mock_context.rng = random.Random(5)
        self.mock_bricks = self.mock_context.brick_manager
        self.mock_bricks.is_animating = False
        self.mock_bricks.iter_bricks.return_value = []
        self.mock_session = self.mock_context.session_manager
        self.mock_session.lose_life.return_value = False
        self.set_mode(GameMode.PLAYING)

        self.manager = PhysicsManager()
        self.manager.setup(self.mock_context)
        self.manager.reset(self.mock_context)

    def set_mode(self, mode: GameMode, *, debug_mode: bool = False) -> None:
        self.mock_session.state = SessionState(mode=mode, debug_mode=debug_mode, speed_multiplier=5 if debug_mode else 1)
        self.mock_session.is_active = mode not in (GameMode.PAUSED, GameMode.GAME_OVER)
        self.mock_session.is_waiting = mode is GameMode.WAITING_TO_LAUNCH

    def place_ball(self, x: float, y: float, velocity_x: float, velocity_y: float) -> None:
        ball = self.manager.ball
        ball.x, ball.y = x, y
        ball.velocity_x, ball.velocity_y = velocity_x, velocity_y


class TestReset(PhysicsTestCase):
    """Unit test class for the starting positions."""

    def test_paddle_centered_at_bottom(self) -> None:
        """Test the paddle position of a new game."""
        paddle = self.manager.paddle

        assert paddle.x == PADDLE_X
        assert paddle.y == PADDLE_Y
        assert (paddle.width, paddle.height) == (90, 12)

    def test_ball_parked(self) -> None:
        """Test that the ball waits above the paddle without velocity."""
        ball = self.manager.ball

        assert (ball.x, ball.y) == (200, 720)
        assert (ball.velocity_x, ball.velocity_y) == (0, 0)
        assert ball.radius == 8

    def test_launch_ball(self) -> None:
        """Test that launching sets the velocity only."""
        self.manager.launch_ball(-4, -5)

        assert (self.manager.ball.velocity_x, self.manager.ball.velocity_y) == (-4, -5)
        assert (self.manager.ball.x, self.manager.ball.y) == (200, 720)


class TestUpdatePaddle(PhysicsTestCase):
    """Unit test class for paddle movement."""

    def test_keys(self) -> None:
        """Test that each key moves the paddle by PADDLE_SPEED."""
        self.manager.update_paddle(InputState(left=True))
        assert self.manager.paddle.x == PADDLE_X - 7

        self.manager.update_paddle(InputState(right=True))
        assert self.manager.paddle.x == PADDLE_X

    def test_left_wins_over_right(self) -> None:
        """Test that holding both keys moves left."""
        self.manager.update_paddle(InputState(left=True, right=True))

        assert self.manager.paddle.x == PADDLE_X - 7

    def test_clamped_to_surface(self) -> None:
        """Test that the paddle never leaves the surface."""
        self.manager.paddle.x = 3
        self.manager.update_paddle(InputState(left=True))
        assert self.manager.paddle.x == 0

        self.manager.paddle.x = 308
        self.manager.update_paddle(InputState(right=True))
        assert self.manager.paddle.x == 310

    def test_pointer_takes_precedence(self) -> None:
        """Test that an active pointer overrides the keys."""
        self.manager.update_paddle(InputState(left=True, pointer_active=True, pointer_x=300))

        assert self.manager.paddle.x == PADDLE_X + 7

    def test_pointer_dead_zone(self) -> None:
        """Test that a target within PADDLE_SPEED / 1.5 of the center does not move the paddle."""
        self.manager.update_paddle(InputState(pointer_active=True, pointer_x=200 + 4.5))
        assert self.manager.paddle.x == PADDLE_X

        self.manager.update_paddle(InputState(pointer_active=True, pointer_x=200 - 5))
        assert self.manager.paddle.x == PADDLE_X - 7

    def test_pointer_without_target(self) -> None:
        """Test that an active pointer without a target requests no movement."""
        self.manager.update_paddle(InputState(left=True, pointer_active=True, pointer_x=None))

        assert self.manager.paddle.x == PADDLE_X

    def test_frozen_states(self) -> None:
        """Test that the paddle does not move while paused, after game over or during a row shift."""
        for mode in (GameMode.PAUSED, GameMode.GAME_OVER):
            self.set_mode(mode)
            self.manager.update_paddle(InputState(left=True))
            assert self.manager.paddle.x == PADDLE_X

        self.set_mode(GameMode.PLAYING)
        self.mock_bricks.is_animating = True
        self.manager.update_paddle(InputState(left=True))
        assert self.manager.paddle.x == PADDLE_X


class TestUpdateBall(PhysicsTestCase):
    """Unit test class for ball movement and collisions."""

    def test_free_flight(self) -> None:
        """Test that the ball moves by its velocity."""
        self.place_ball(100, 300, 4, -5)

        self.manager.update_ball()

        assert (self.manager.ball.x, self.manager.ball.y) == (104, 295)

    def test_speed_multiplier(self) -> None:
        """Test that debug mode scales the distance travelled."""
        self.set_mode(GameMode.PLAYING, debug_mode=True)
        self.place_ball(100, 300, 4, -5)

        self.manager.update_ball()

        assert (self.manager.ball.x, self.manager.ball.y) == (120, 275)

    def test_side_wall(self) -> None:
        """Test that the ball reflects off a side wall and is clamped inside."""
        self.place_ball(395, 300, 4, -5)

        self.manager.update_ball()

        assert self.manager.ball.velocity_x == -4
        assert self.manager.ball.x == 388

    def test_top_wall(self) -> None:
        """Test that the ball reflects off the top wall."""
        self.place_ball(100, 10, 0, -5)

        self.manager.update_ball()

        assert self.manager.ball.velocity_y == 5
        assert self.manager.ball.y == 13

    def test_paddle_bounce_scenario(self) -> None:
        """Test a ball 1px above the paddle center moving down."""
        self.place_ball(200, PADDLE_Y - 8 - 1, 0, 3)

        self.manager.update_ball()

        ball = self.manager.ball
        assert ball.velocity_y < 0
        assert ball.y == pytest.approx(PADDLE_Y - 8 - 0.1)
        assert ball.velocity_x == 0

    def test_paddle_bounce_angle(self) -> None:
        """Test that the bounce angle follows the hit position; x still advances."""
        self.place_ball(210, PADDLE_Y - 8 - 1, 0, 3)

        self.manager.update_ball()

        ball = self.manager.ball
        assert ball.velocity_x == pytest.approx(1.5)
        assert ball.x == pytest.approx(211.5)
        assert ball.y == pytest.approx(PADDLE_Y - 8 - 0.1)

    def test_paddle_bounce_clamped(self) -> None:
        """Test that the horizontal bounce speed is capped at 2.2 times the launch speed."""
        settings.configure(PADDLE_BOUNCE_FACTOR=0.5)
        self.place_ball(PADDLE_X + 90 + 5, PADDLE_Y - 8 - 1, 0, 3)

        self.manager.update_ball()

        assert self.manager.ball.velocity_x == pytest.approx(8.8)

    def test_ball_moving_up_ignores_paddle(self) -> None:
        """Test that only a descending ball bounces off the paddle."""
        self.place_ball(200, PADDLE_Y + 2, 0, -3)

        self.manager.update_ball()

        assert self.manager.ball.velocity_y == -3

    def test_bottom_bounce_in_debug_mode(self) -> None:
        """Test that the bottom edge reflects the ball in debug mode."""
        self.set_mode(GameMode.PLAYING, debug_mode=True)
        self.place_ball(20, 790, 0, 5)

        self.manager.update_ball()

        self.mock_session.lose_life.assert_not_called()
        assert self.manager.ball.velocity_y == -5
        assert self.manager.ball.y == 792 - 25

    def test_life_lost(self) -> None:
        """Test that falling past the bottom parks a new ball."""
        self.place_ball(20, 790, 1, 5)

        self.manager.update_ball()

        self.mock_session.lose_life.assert_called_once()
        ball = self.manager.ball
        assert (ball.x, ball.y) == (200, 720)
        assert (ball.velocity_x, ball.velocity_y) == (0, 0)

    def test_last_life_freezes_ball(self) -> None:
        """Test that the ball stops at the game over position."""
        self.mock_session.lose_life.return_value = True
        self.place_ball(20, 790, 1, 5)

        self.manager.update_ball()

        ball = self.manager.ball
        assert (ball.x, ball.y) == (200, 450)
        assert (ball.velocity_x, ball.velocity_y) == (0, 0)

    def test_ball_frozen_states(self) -> None:
        """Test that the ball does not move while waiting, paused, over or animating."""
        self.place_ball(100, 300, 4, -5)
        for mode in (GameMode.WAITING_TO_LAUNCH, GameMode.PAUSED, GameMode.GAME_OVER):
            self.set_mode(mode)
            self.manager.update_ball()

        self.set_mode(GameMode.PLAYING)
        self.mock_bricks.is_animating = True
        self.manager.update_ball()

        assert (self.manager.ball.x, self.manager.ball.y) == (100, 300)


class TestBrickCollision(PhysicsTestCase):
    """Unit test class for brick collisions."""

    def setUp(self) -> None:
        """Set up two bricks, one under the ball."""
        super().setUp()
        self.hit_brick = Brick(x=180, y=300, width=45, height=20, color="#e74c3c")
        self.far_brick = Brick(x=20, y=100, width=45, height=20, color="#3498db")
        self.mock_bricks.iter_bricks.return_value = [(3, 5, self.hit_brick), (0, 1, self.far_brick)]
        self.mock_bricks.brick_rect.side_effect = lambda brick: brick.rect(0)
        self.destroyed = DestroyedBrick(3, 5, 202.5, 310, 45, 20, "#e74c3c")
        self.mock_bricks.destroy.return_value = self.destroyed
        self.mock_session.state.score = 7

    def test_hit_destroys_brick(self) -> None:
        """Test that an overlapped brick is destroyed, scored and announced."""
        self.place_ball(200, 325, 3, -5)

        assert self.manager.brick_collision()

        self.mock_bricks.destroy.assert_called_once_with(3, 5)
        self.mock_context.particle_manager.emit_brick_break.assert_called_once_with(self.destroyed)
        self.mock_session.add_points.assert_called_once_with(1)
        published_event = self.mock_context.event_bus.publish.call_args[0][0]
        assert isinstance(published_event, BrickDestroyedEvent)
        assert (published_event.column, published_event.row) == (3, 5)

    def test_no_bounce_on_brick(self) -> None:
        """Test that destroying a brick keeps the ball velocity."""
        self.place_ball(200, 325, 3, -5)

        self.manager.brick_collision()

        assert (self.manager.ball.velocity_x, self.manager.ball.velocity_y) == (3, -5)

    def test_touching_brick_is_not_hit(self) -> None:
        """Test that a ball only touching the brick edge does not destroy it."""
        self.place_ball(200, 328, 3, -5)

        assert not self.manager.brick_collision()
        self.mock_bricks.destroy.assert_not_called()

    def test_skipped_while_waiting(self) -> None:
        """Test that bricks are not checked while the ball is parked."""
        self.set_mode(GameMode.WAITING_TO_LAUNCH)
        self.place_ball(200, 325, 0, 0)

        assert not self.manager.brick_collision()
        self.mock_bricks.destroy.assert_not_called()
