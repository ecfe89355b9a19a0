"""Arcade view that plays the game.

The GameView is a thin adapter between arcade and the GameEngine. It owns no
game rules:

- Keyboard and mouse callbacks are forwarded to the engine's input buffer.
  Arcade's y axis points up, the simulation's points down, so every pointer
  position is flipped on the way in and every drawn shape on the way out.
- on_update() advances the engine by exactly one tick; the delta time is
  ignored, the window update rate sets the pace.
- on_draw() renders the FrameSnapshot of the last tick.

Draw order:
    1. Bricks with a thin outline
    2. Shards (darkened, translucent)
    3. Paddle with rounded ends
    4. Ball
    5. Particles fading with their remaining life
    6. Score and lives counters, pause button, debug indicator
    7. PAUSED or GAME OVER stripe
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

from brickfall.colors import hex_to_rgba, with_alpha
from brickfall.conf import settings
from brickfall.engine import GameEngine
from brickfall.systems.session.events import GameOverEvent
from brickfall.types import GameMode

if TYPE_CHECKING:
    from brickfall.snapshot import FrameSnapshot

logger = logging.getLogger(__name__)


class GameView(arcade.View):
    """Plays one game on the window.

    Attributes:
        engine: The simulation being shown.
        snapshot: State captured after the last tick.
    """

    def __init__(self, engine: GameEngine | None = None) -> None:
        """Initialize the view.

        Args:
            engine: Engine to drive. A new one sized from settings is created if omitted.
        """
        super().__init__()
        self.engine = engine or GameEngine()
        self.snapshot: FrameSnapshot = self.engine.snapshot()
        self.engine.event_bus.subscribe(GameOverEvent, self._on_game_over)

        # Text objects are created once and updated every frame
        text_color = hex_to_rgba(settings.TEXT_COLOR)
        padding = settings.UI_TOP_PADDING
        top = self.engine.height - padding
        self.score_text = arcade.Text(
            "", padding, top, text_color, font_size=settings.UI_FONT_SIZE, anchor_x="left", anchor_y="top"
        )
        self.lives_text = arcade.Text(
            "",
            self.engine.width - padding,
            top,
            text_color,
            font_size=settings.UI_FONT_SIZE,
            anchor_x="right",
            anchor_y="top",
        )
        self.debug_text = arcade.Text(
            "",
            self.engine.width / 2,
            padding,
            hex_to_rgba(settings.GAMEOVER_COLOR),
            font_size=settings.UI_FONT_SIZE,
            anchor_x="center",
            anchor_y="bottom",
            bold=True,
        )
        self.message_text = arcade.Text(
            "",
            self.engine.width / 2,
            self.engine.height / 2,
            text_color,
            font_size=settings.MESSAGE_FONT_SIZE,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )

    def _on_game_over(self, event: GameOverEvent) -> None:
        logger.info("Final score %d after %d rows", event.score, event.rows_advanced)

    def on_show_view(self) -> None:
        self.window.background_color = hex_to_rgba(settings.BACKGROUND_COLOR)

    def on_update(self, delta_time: float) -> None:
        """Advance the game by one tick (arcade lifecycle callback)."""
        self.snapshot = self.engine.tick()

    def on_key_press(self, symbol: int, modifiers: int) -> bool | None:
        if self.engine.on_key_press(symbol, modifiers):
            return True
        return None

    def on_key_release(self, symbol: int, modifiers: int) -> bool | None:
        self.engine.on_key_release(symbol, modifiers)
        return None

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        self.engine.input.on_pointer_press(x, self._flip(y))

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int) -> None:
        self.engine.input.on_pointer_move(x, self._flip(y))

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        self.engine.input.on_pointer_release()

    def on_hide_view(self) -> None:
        self.engine.event_bus.unregister_all(self)

    def _flip(self, y: float) -> float:
        """Convert a y coordinate between arcade space and simulation space."""
        return self.engine.height - y

    def on_draw(self) -> None:
        """Render the last snapshot (arcade lifecycle callback)."""
        self.clear()
        snapshot = self.snapshot

        self._draw_bricks(snapshot)
        self._draw_shards(snapshot)
        self._draw_paddle(snapshot)
        ball = snapshot.ball
        arcade.draw_circle_filled(ball.x, self._flip(ball.y), ball.radius, hex_to_rgba(ball.color))
        self._draw_particles(snapshot)
        self._draw_hud(snapshot)

        if snapshot.mode is GameMode.PAUSED:
            self._draw_message("PAUSED", settings.PAUSE_COLOR)
        elif snapshot.mode is GameMode.GAME_OVER:
            self._draw_message("GAME OVER", settings.GAMEOVER_COLOR)

    def _draw_bricks(self, snapshot: FrameSnapshot) -> None:
        for column in snapshot.bricks:
            for brick in column:
                if brick is None:
                    continue
                rect = brick.rect(snapshot.row_offset)
                bottom = self._flip(rect.bottom)
                top = self._flip(rect.top)
                arcade.draw_lrbt_rectangle_filled(rect.left, rect.right, bottom, top, hex_to_rgba(brick.color))
                arcade.draw_lrbt_rectangle_outline(
                    rect.left, rect.right, bottom, top, settings.BRICK_OUTLINE_COLOR, border_width=1
                )

    def _draw_shards(self, snapshot: FrameSnapshot) -> None:
        for shard in snapshot.shards:
            (x1, y1), (x2, y2), (x3, y3) = shard.world_vertices()
            color = hex_to_rgba(shard.color, settings.SHARD_ALPHA, settings.SHARD_DARKEN_FACTOR)
            arcade.draw_triangle_filled(x1, self._flip(y1), x2, self._flip(y2), x3, self._flip(y3), color)

    def _draw_paddle(self, snapshot: FrameSnapshot) -> None:
        """Draw the paddle as a thick line with round caps."""
        paddle = snapshot.paddle
        color = hex_to_rgba(paddle.color)
        radius = paddle.height / 2
        center_y = self._flip(paddle.y + radius)
        start_x = paddle.x + radius
        end_x = paddle.x + paddle.width - radius
        arcade.draw_line(start_x, center_y, end_x, center_y, color, paddle.height)
        arcade.draw_circle_filled(start_x, center_y, radius, color)
        arcade.draw_circle_filled(end_x, center_y, radius, color)

    def _draw_particles(self, snapshot: FrameSnapshot) -> None:
        for particle in snapshot.particles:
            half = particle.size / 2
            y = self._flip(particle.y)
            color = with_alpha(hex_to_rgba(particle.color), particle.alpha)
            arcade.draw_lrbt_rectangle_filled(particle.x - half, particle.x + half, y - half, y + half, color)

    def _draw_hud(self, snapshot: FrameSnapshot) -> None:
        self.score_text.text = f"Score: {snapshot.score}"
        self.score_text.draw()
        self.lives_text.text = f"Lives: {max(snapshot.lives, 0)}"
        self.lives_text.draw()

        if snapshot.debug_mode:
            self.debug_text.text = f"DEBUG x{snapshot.speed_multiplier:g}"
            self.debug_text.draw()

        if snapshot.mode is not GameMode.GAME_OVER:
            self._draw_pause_button(paused=snapshot.mode is GameMode.PAUSED)

    def _draw_pause_button(self, *, paused: bool) -> None:
        """Draw the pause button: two bars while playing, a resume triangle while paused."""
        button = self.engine.pause_button
        left, right = button.left, button.right
        bottom, top = self._flip(button.bottom), self._flip(button.top)
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, settings.PAUSE_BUTTON_BACKGROUND_COLOR)

        icon_color = hex_to_rgba(settings.PAUSE_ICON_COLOR)
        icon_size = button.width * 0.4
        icon_left = left + (button.width - icon_size) / 2
        icon_bottom = bottom + (button.height - icon_size) / 2
        if paused:
            arcade.draw_triangle_filled(
                icon_left,
                icon_bottom,
                icon_left,
                icon_bottom + icon_size,
                icon_left + icon_size,
                icon_bottom + icon_size / 2,
                icon_color,
            )
        else:
            bar_width = icon_size / 4
            icon_top = icon_bottom + icon_size
            arcade.draw_lrbt_rectangle_filled(icon_left, icon_left + bar_width, icon_bottom, icon_top, icon_color)
            arcade.draw_lrbt_rectangle_filled(
                icon_left + icon_size - bar_width, icon_left + icon_size, icon_bottom, icon_top, icon_color
            )

    def _draw_message(self, message: str, color: str) -> None:
        """Draw a centered message on a translucent stripe."""
        half_stripe = settings.MESSAGE_STRIPE_HEIGHT / 2
        center_y = self.engine.height / 2
        arcade.draw_lrbt_rectangle_filled(
            0, self.engine.width, center_y - half_stripe, center_y + half_stripe, settings.MESSAGE_BACKGROUND_COLOR
        )
        self.message_text.text = message
        self.message_text.color = hex_to_rgba(color)
        self.message_text.draw()
