"""Color helpers used by the renderer."""

RGBA = tuple[int, int, int, int]


def hex_to_rgba(hex_color: str, alpha: float = 1.0, darken_factor: float = 1.0) -> RGBA:
    """Convert a hex color string to an RGBA tuple, optionally darkening it.

    Both shorthand (``#03F``) and full (``#0033FF``) notations are accepted.
    Any other length yields black, matching how the palette has always been
    treated by the drawing code.

    Args:
        hex_color: Color in ``#RGB`` or ``#RRGGBB`` form.
        alpha: Opacity between 0.0 and 1.0.
        darken_factor: Multiplier applied to each channel (1.0 keeps the color).

    Returns:
        Tuple (red, green, blue, alpha) with integer channels in 0-255.

    Example:
        >>> hex_to_rgba("#e74c3c", alpha=0.75, darken_factor=0.75)
        (173, 57, 45, 191)
    """
    red = green = blue = 0
    if len(hex_color) == 4:
        red = int(hex_color[1] * 2, 16)
        green = int(hex_color[2] * 2, 16)
        blue = int(hex_color[3] * 2, 16)
    elif len(hex_color) == 7:
        red = int(hex_color[1:3], 16)
        green = int(hex_color[3:5], 16)
        blue = int(hex_color[5:7], 16)

    red = max(0, int(red * darken_factor))
    green = max(0, int(green * darken_factor))
    blue = max(0, int(blue * darken_factor))
    alpha_channel = max(0, min(255, round(alpha * 255)))
    return (red, green, blue, alpha_channel)


def with_alpha(color: RGBA, alpha: float) -> RGBA:
    """Return ``color`` with its alpha channel replaced by ``alpha`` (0.0 to 1.0)."""
    return (color[0], color[1], color[2], max(0, min(255, round(alpha * 255))))
