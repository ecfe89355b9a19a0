"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from brickfall.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test.

    This fixture runs automatically before each test so tests never pick up a
    user settings module, and resets the settings after the test completes.

    Yields:
        None
    """
    settings.configure(
        SCREEN_WIDTH=400,
        SCREEN_HEIGHT=800,
        WINDOW_TITLE="Test",
        RANDOM_SEED=1234,
        DEBUG_MODE=False,
    )
    yield
    settings.reset()
