"""Unit tests for the color helpers."""

import unittest

from brickfall.colors import hex_to_rgba, with_alpha


class TestHexToRgba(unittest.TestCase):
    """Unit test class for hex_to_rgba."""

    def test_full_notation(self) -> None:
        """Test that #RRGGBB is parsed channel by channel."""
        assert hex_to_rgba("#3498db") == (52, 152, 219, 255)

    def test_shorthand_notation(self) -> None:
        """Test that #RGB doubles every digit."""
        assert hex_to_rgba("#0af") == (0, 170, 255, 255)

    def test_unknown_length_gives_black(self) -> None:
        """Test that malformed colors fall back to black."""
        assert hex_to_rgba("#12345", alpha=0.5) == (0, 0, 0, 128)

    def test_darken_and_alpha(self) -> None:
        """Test the darkened translucent variant used for shards."""
        assert hex_to_rgba("#e74c3c", alpha=0.75, darken_factor=0.75) == (173, 57, 45, 191)

    def test_alpha_is_clamped(self) -> None:
        """Test that alpha outside 0-1 is clamped."""
        assert hex_to_rgba("#ffffff", alpha=2.0)[3] == 255
        assert hex_to_rgba("#ffffff", alpha=-1.0)[3] == 0


class TestWithAlpha(unittest.TestCase):
    """Unit test class for with_alpha."""

    def test_replaces_alpha_only(self) -> None:
        """Test that only the alpha channel changes."""
        assert with_alpha((10, 20, 30, 255), 0.0) == (10, 20, 30, 0)
        assert with_alpha((10, 20, 30, 0), 1.0) == (10, 20, 30, 255)
