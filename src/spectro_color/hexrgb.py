from __future__ import annotations

import math
import string

RGB = tuple[int, int, int]
Hex = str

BLACK: Hex = "#000000"
WHITE: Hex = "#ffffff"


def round_half_up(x: float) -> int:
    """Round to nearest with halves going up, like JavaScript's ``Math.round``.

    Python's ``round`` (and ``np.round``) use banker's rounding, which would
    turn a channel mean of 254.5 into 254.
    """
    return int(math.floor(x + 0.5))


def rgb_to_hex(r: int, g: int, b: int) -> Hex:
    """Always lowercase ``#rrggbb``. Other sources may quote ``#FF8000``, so
    compare hex strings case-insensitively (or via `hex_to_rgb`)."""
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse ``#rrggbb`` (hash optional, any case); anything else is black."""
    if not isinstance(hex_str, str):
        return (0, 0, 0)
    raw = hex_str[1:] if hex_str.startswith("#") else hex_str
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        return (0, 0, 0)
    r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
    return (r, g, b)


def get_complementary_rgb(r: int, g: int, b: int) -> RGB:
    return (255 - r, 255 - g, 255 - b)


__all__ = [
    "BLACK",
    "WHITE",
    "Hex",
    "RGB",
    "get_complementary_rgb",
    "hex_to_rgb",
    "rgb_to_hex",
    "round_half_up",
]
