"""Seedable randomness for brick colors and effects.

Every random decision of the simulation goes through a ``RandomSource`` held by
the ``GameContext``. ``random.Random`` satisfies the protocol, so tests pass a
seeded instance (or a stub) and get reproducible grids and effects.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Minimal interface of the random number generator used by the systems."""

    def random(self) -> float:
        """Return a float uniformly drawn from [0.0, 1.0)."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return one element of a non-empty sequence."""
        ...


def create_random_source(seed: int | None = None) -> random.Random:
    """Create the default random source.

    Args:
        seed: Seed for reproducible sessions. None seeds from system entropy.

    Returns:
        A ``random.Random`` instance.
    """
    if seed is not None:
        logger.debug("Seeding random source with %d", seed)
    return random.Random(seed)  # noqa: S311
