"""Axis-aligned geometry in simulation space.

Simulation space has its origin at the top-left corner of the playing surface
and the y axis pointing down, so ``top < bottom`` for every rectangle.
"""

from __future__ import annotations

from typing import NamedTuple


class Rect(NamedTuple):
    """Axis-aligned rectangle given by its edges."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_size(cls, x: float, y: float, width: float, height: float) -> Rect:
        """Build a rectangle from its top-left corner and size."""
        return cls(x, y, x + width, y + height)

    @classmethod
    def around(cls, center_x: float, center_y: float, radius: float) -> Rect:
        """Bounding box of a circle."""
        return cls(center_x - radius, center_y - radius, center_x + radius, center_y + radius)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> tuple[float, float]:
        return ((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    def overlaps(self, other: Rect) -> bool:
        """Strict overlap test; rectangles that only share an edge do not overlap."""
        return (
            self.right > other.left
            and self.left < other.right
            and self.bottom > other.top
            and self.top < other.bottom
        )

    def contains(self, x: float, y: float) -> bool:
        """Inclusive point test."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom


def pause_button_rect(surface_width: float, size: float, top_padding: float) -> Rect:
    """Hit box of the pause button, centered horizontally at the top of the surface."""
    return Rect.from_size((surface_width - size) / 2, top_padding, size, size)
