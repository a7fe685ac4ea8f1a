# spectrum.py – empirical wavelength → RGB curve and the seven named bands
#   - six piecewise-linear segments, breakpoints 380/440/490/510/580/645/780 nm
#   - intensity fall-off towards both ends of the visible range
#   - band lookup is half-open [min, max), so 780 nm itself has no band

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence

import numpy as np

from .hexrgb import RGB, Hex, rgb_to_hex, round_half_up

log = logging.getLogger(__name__)

# --- constants ---------------------------------------------------------------
WL_MIN = 380.0
WL_MAX = 780.0

_EDGE_FLOOR = 0.3  # intensity at the very ends of the range
_BLUE_EDGE = 420.0  # fall-off below this
_RED_EDGE = 700.0  # fall-off from here on


@dataclass(frozen=True)
class Band:
    name: str
    min: float
    max: float
    absorbed: Hex
    observed: Hex

    def contains(self, wavelength: float) -> bool:
        return self.min <= wavelength < self.max


# Ascending order matters: get_color_band returns the first match.
# Hex is lowercase like rgb_to_hex output.
BANDS: tuple[Band, ...] = (
    Band("violet", 380.0, 450.0, "#8b00ff", "#ffff00"),
    Band("blue", 450.0, 495.0, "#0000ff", "#ff8000"),
    Band("cyan", 495.0, 520.0, "#00ffff", "#ff0000"),
    Band("green", 520.0, 565.0, "#00ff00", "#ff00ff"),
    Band("yellow", 565.0, 590.0, "#ffff00", "#8b00ff"),
    Band("orange", 590.0, 620.0, "#ff8000", "#0000ff"),
    Band("red", 620.0, 780.0, "#ff0000", "#00ffff"),
)

BANDS_BY_NAME = {b.name: b for b in BANDS}


# --- 1) scalar conversion ----------------------------------------------------
def _fractions(w: float) -> tuple[float, float, float]:
    if 380 <= w < 440:
        return -(w - 440) / (440 - 380), 0.0, 1.0
    if 440 <= w < 490:
        return 0.0, (w - 440) / (490 - 440), 1.0
    if 490 <= w < 510:
        return 0.0, 1.0, -(w - 510) / (510 - 490)
    if 510 <= w < 580:
        return (w - 510) / (580 - 510), 1.0, 0.0
    if 580 <= w < 645:
        return 1.0, -(w - 645) / (645 - 580), 0.0
    if 645 <= w <= 780:
        return 1.0, 0.0, 0.0
    return 0.0, 0.0, 0.0


def _factor(w: float) -> float:
    if WL_MIN <= w < _BLUE_EDGE:
        return _EDGE_FLOOR + 0.7 * (w - WL_MIN) / (_BLUE_EDGE - WL_MIN)
    if _RED_EDGE <= w <= WL_MAX:
        return _EDGE_FLOOR + 0.7 * (WL_MAX - w) / (WL_MAX - _RED_EDGE)
    return 1.0


def wavelength_to_rgb(wavelength: float) -> RGB:
    """Approximate RGB of monochromatic light at `wavelength` nm.

    Anything outside [380, 780] is black; callers rely on that as
    "out of range" rather than treating it as an error.
    """
    w = float(wavelength)
    factor = _factor(w)
    r, g, b = (round_half_up(c * factor * 255) for c in _fractions(w))
    return (r, g, b)


# --- 2) vectorised conversion ------------------------------------------------
def wavelengths_to_rgb(wl: Sequence[float] | np.ndarray) -> np.ndarray:
    """NumPy version of `wavelength_to_rgb`: N wavelengths → N×3 int array."""
    w = np.asarray(wl, dtype=np.float64).reshape(-1)

    segments = [
        (w >= 380) & (w < 440),
        (w >= 440) & (w < 490),
        (w >= 490) & (w < 510),
        (w >= 510) & (w < 580),
        (w >= 580) & (w < 645),
        (w >= 645) & (w <= 780),
    ]
    r = np.select(
        segments,
        [-(w - 440) / (440 - 380), 0.0, 0.0, (w - 510) / (580 - 510), 1.0, 1.0],
    )
    g = np.select(
        segments,
        [0.0, (w - 440) / (490 - 440), 1.0, 1.0, -(w - 645) / (645 - 580), 0.0],
    )
    b = np.select(segments, [1.0, 1.0, -(w - 510) / (510 - 490), 0.0, 0.0, 0.0])

    factor = np.select(
        [(w >= WL_MIN) & (w < _BLUE_EDGE), (w >= _RED_EDGE) & (w <= WL_MAX)],
        [
            _EDGE_FLOOR + 0.7 * (w - WL_MIN) / (_BLUE_EDGE - WL_MIN),
            _EDGE_FLOOR + 0.7 * (WL_MAX - w) / (WL_MAX - _RED_EDGE),
        ],
        default=1.0,
    )

    rgb = np.stack([r, g, b], axis=1) * factor[:, None] * 255
    return np.floor(rgb + 0.5).astype(np.int64)


# --- 3) bands ----------------------------------------------------------------
def get_color_band(wavelength: float) -> str | None:
    for band in BANDS:
        if band.contains(wavelength):
            return band.name
    return None


# --- 4) spectrum bar ---------------------------------------------------------
@lru_cache(maxsize=32)
def _spectrum_bar(width: int) -> tuple[Hex, ...]:
    wl = WL_MIN + (np.arange(width, dtype=np.float64) / width) * (WL_MAX - WL_MIN)
    return tuple(rgb_to_hex(*px) for px in wavelengths_to_rgb(wl).tolist())


def spectrum_bar(width: int) -> list[Hex]:
    """Column colours for a `width`-pixel spectrum bar from 380 nm to 780 nm."""
    if width < 1:
        raise ValueError("width must be ≥ 1")
    return list(_spectrum_bar(int(width)))


__all__ = [
    "BANDS",
    "BANDS_BY_NAME",
    "Band",
    "WL_MAX",
    "WL_MIN",
    "get_color_band",
    "spectrum_bar",
    "wavelength_to_rgb",
    "wavelengths_to_rgb",
]
