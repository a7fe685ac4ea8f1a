# mixing.py – what a fast-spinning disk looks like
#   - continuous disk: the whole visible spectrum minus excluded ranges
#   - discrete disk: the seven VIBGYOR hues, each switched on or off

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Sequence

import numpy as np

from .hexrgb import BLACK, RGB, WHITE, Hex, rgb_to_hex, round_half_up
from .observed import Mode, RangeLike, as_range
from .spectrum import WL_MAX, WL_MIN, wavelengths_to_rgb

log = logging.getLogger(__name__)

# --- constants ---------------------------------------------------------------
DEFAULT_STEP = 2.0  # nm → 201 samples over 380…780
COARSE_STEP = 5.0  # nm → 81 samples
MIN_STEP = 0.5  # nm; keeps the sampling grid at ≤ 801 points
MAX_STEP = 400.0  # nm; one span of the visible range
WHITE_THRESHOLD = 0.95  # surviving fraction above which the mix reads as white
MAX_BOOST = 1.5


# --- 1) continuous spectrum --------------------------------------------------
@lru_cache(maxsize=16)
def _grid(step: float) -> tuple[np.ndarray, np.ndarray]:
    n = int(np.floor((WL_MAX - WL_MIN) / step + 1e-9)) + 1
    wl = WL_MIN + np.arange(n, dtype=np.float64) * step
    rgb = wavelengths_to_rgb(wl)
    wl.flags.writeable = False
    rgb.flags.writeable = False
    return wl, rgb


def sample_spectrum(step: float = DEFAULT_STEP) -> tuple[np.ndarray, np.ndarray]:
    """Sampling grid (wavelengths, N×3 RGB) covering 380…780 nm inclusive."""
    if not MIN_STEP <= step <= MAX_STEP:
        raise ValueError(f"step must be between {MIN_STEP:g} and {MAX_STEP:g} nm")
    return _grid(float(step))


def white_threshold(step: float) -> float | None:
    """Surviving fraction above which the mix is white at this sampling step.

    The fine grid tolerates a few missing samples. On coarser grids a single
    sample is a sizeable slice of the spectrum, so only the untouched
    spectrum (``None``) reads as white.
    """
    return WHITE_THRESHOLD if step <= DEFAULT_STEP else None


def boost_brightness(rgb: Sequence[float]) -> RGB:
    """Scale a dim average back up so its brightest channel nears 255.

    An unweighted mean of many saturated hues is a dull grey-ish colour;
    scaling by ``min(255 / max, 1.5)`` restores brightness and keeps the
    channel ratios. A black input stays black.
    """
    peak = max(rgb)
    boost = min(255.0 / peak, MAX_BOOST) if peak > 0 else 1.0
    r, g, b = (min(255, round_half_up(c * boost)) for c in rgb)
    return (r, g, b)


def mix_spectrum(
    excluded: Iterable[RangeLike] | None = (), step: float = DEFAULT_STEP
) -> Hex:
    wl, rgb = sample_spectrum(step)
    total = len(wl)

    active = np.ones(total, dtype=bool)
    for r in excluded or ():
        rng = as_range(r)
        active &= ~((wl >= rng.min) & (wl <= rng.max))

    survivors = int(active.sum())
    if survivors == 0:
        log.debug("spectrum fully excluded (step=%s)", step)
        return BLACK
    cutoff = white_threshold(step)
    if survivors == total or (cutoff is not None and survivors / total > cutoff):
        return WHITE

    mean = rgb[active].mean(axis=0)
    return rgb_to_hex(*boost_brightness(mean.tolist()))


# --- 2) discrete VIBGYOR palette ---------------------------------------------
@dataclass(frozen=True)
class PaletteEntry:
    name: str
    hex: Hex
    rgb: RGB


VIBGYOR: tuple[PaletteEntry, ...] = (
    PaletteEntry("Violet", "#8b00ff", (139, 0, 255)),
    PaletteEntry("Indigo", "#4b0082", (75, 0, 130)),
    PaletteEntry("Blue", "#0000ff", (0, 0, 255)),
    PaletteEntry("Green", "#00ff00", (0, 255, 0)),
    PaletteEntry("Yellow", "#ffff00", (255, 255, 0)),
    PaletteEntry("Orange", "#ff8000", (255, 128, 0)),
    PaletteEntry("Red", "#ff0000", (255, 0, 0)),
)


def select_palette(names: Iterable[str]) -> list[PaletteEntry]:
    """Resolve hue names (any case) to palette entries, in VIBGYOR order."""
    wanted = {n.strip().lower() for n in names if n.strip()}
    known = {e.name.lower() for e in VIBGYOR}
    unknown = wanted - known
    if unknown:
        raise ValueError(f"unknown palette colour(s): {', '.join(sorted(unknown))}")
    return [e for e in VIBGYOR if e.name.lower() in wanted]


def mix_colors(enabled: Sequence[PaletteEntry], mode: Mode = "ideal") -> Hex:
    n = len(enabled)
    if n == 0:
        return BLACK
    if n == 1:
        return enabled[0].hex

    sums = np.array([e.rgb for e in enabled], dtype=np.float64).sum(axis=0)
    if mode == "real":
        r, g, b = (round_half_up(s / n) for s in sums.tolist())
        return rgb_to_hex(r, g, b)
    if mode != "ideal":
        raise ValueError(f"unknown mode '{mode}'")

    # Complete additive recombination only once every hue is present.
    if n == len(VIBGYOR):
        return WHITE
    weight = 1 + n / len(VIBGYOR)
    r, g, b = (min(255, round_half_up(s / n * weight)) for s in sums.tolist())
    return rgb_to_hex(r, g, b)


__all__ = [
    "COARSE_STEP",
    "DEFAULT_STEP",
    "MAX_STEP",
    "MIN_STEP",
    "PaletteEntry",
    "VIBGYOR",
    "WHITE_THRESHOLD",
    "boost_brightness",
    "mix_colors",
    "mix_spectrum",
    "sample_spectrum",
    "select_palette",
    "white_threshold",
]
