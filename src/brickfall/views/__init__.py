"""Arcade views."""

from brickfall.views.game_view import GameView

__all__ = ["GameView"]
