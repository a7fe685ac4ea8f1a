"""Absorbed vs observed colour.

A compound that absorbs light of some wavelength is seen in the
complementary colour. Two models are offered:

  ideal  – fixed lookup of each band's canonical complement
  real   – RGB inversion of the spectral colour itself

Several absorbed wavelengths or ranges are combined by a flat average of
their observed colours; every range counts once regardless of its width.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal, Mapping, Sequence, Union, cast

from .hexrgb import (
    WHITE,
    Hex,
    get_complementary_rgb,
    hex_to_rgb,
    rgb_to_hex,
    round_half_up,
)
from .spectrum import BANDS_BY_NAME, get_color_band, wavelength_to_rgb

log = logging.getLogger(__name__)

Mode = Literal["ideal", "real"]
MODES: tuple[Mode, ...] = ("ideal", "real")

# A lone wavelength is treated as a narrow band of this half-width.
DISCRETE_HALF_WIDTH = 5.0


@dataclass(frozen=True)
class AbsorptionRange:
    min: float
    max: float

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2

    @property
    def width(self) -> float:
        return self.max - self.min


RangeLike = Union[AbsorptionRange, Sequence[float], Mapping[str, float]]


def as_range(r: RangeLike) -> AbsorptionRange:
    """Accept an AbsorptionRange, a (min, max) pair or a {"min", "max"} mapping."""
    if isinstance(r, AbsorptionRange):
        return r
    if isinstance(r, Mapping):
        return AbsorptionRange(float(r["min"]), float(r["max"]))
    lo, hi = r
    return AbsorptionRange(float(lo), float(hi))


def parse_mode(val: str | None, default: Mode = "ideal") -> Mode:
    m = (val or default).strip().lower()
    if m not in MODES:
        raise ValueError(f"unknown mode '{val}' (expected one of {', '.join(MODES)})")
    return cast(Mode, m)


def get_absorbed_color(wavelength: float) -> Hex:
    # Mode-independent: the absorbed colour is always the spectral one.
    return rgb_to_hex(*wavelength_to_rgb(wavelength))


def get_observed_color(wavelength: float, mode: Mode = "ideal") -> Hex:
    """Observed colour as lowercase ``#rrggbb``; compare hex case-insensitively."""
    if mode not in MODES:
        raise ValueError(f"unknown mode '{mode}'")

    band = get_color_band(wavelength)
    if band is None:
        log.debug("no band for %s nm, observed falls back to white", wavelength)
        return WHITE

    if mode == "ideal":
        return BANDS_BY_NAME[band].observed
    return rgb_to_hex(*get_complementary_rgb(*wavelength_to_rgb(wavelength)))


def _average_hex(colors: Sequence[Hex]) -> Hex:
    n = len(colors)
    sums = [0, 0, 0]
    for hex_i in colors:
        for k, v in enumerate(hex_to_rgb(hex_i)):
            sums[k] += v
    r, g, b = (round_half_up(s / n) for s in sums)
    return rgb_to_hex(r, g, b)


def get_observed_color_multi_range(
    ranges: Iterable[RangeLike] | None, mode: Mode = "ideal"
) -> Hex:
    rs = [as_range(r) for r in ranges or ()]
    if not rs:
        return WHITE

    observed = [get_observed_color(r.midpoint, mode) for r in rs]
    if len(observed) == 1:
        return observed[0]
    return _average_hex(observed)


def observed_for_wavelengths(
    wavelengths: Iterable[float], mode: Mode = "ideal"
) -> Hex:
    """Observed colour when each of `wavelengths` is absorbed at once."""
    wls = list(wavelengths)
    if not wls:
        return WHITE
    if len(wls) == 1:
        return get_observed_color(wls[0], mode)
    return get_observed_color_multi_range(
        [
            AbsorptionRange(w - DISCRETE_HALF_WIDTH, w + DISCRETE_HALF_WIDTH)
            for w in wls
        ],
        mode,
    )


__all__ = [
    "AbsorptionRange",
    "DISCRETE_HALF_WIDTH",
    "MODES",
    "Mode",
    "RangeLike",
    "as_range",
    "get_absorbed_color",
    "get_observed_color",
    "get_observed_color_multi_range",
    "observed_for_wavelengths",
    "parse_mode",
]
