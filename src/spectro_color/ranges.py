"""Input checks for user-entered wavelengths and absorption ranges.

The colour engine itself never validates; these run at the input layer
(the HTTP handlers) before anything reaches it.
"""

from __future__ import annotations

import math
from typing import Iterable

from .observed import AbsorptionRange, RangeLike, as_range
from .spectrum import WL_MAX, WL_MIN

MIN_RANGE_WIDTH = 10.0
MAX_RANGE_WIDTH = 150.0


def _number(x: object) -> float:
    try:
        v = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan
    return v


def validate_wavelength(wavelength: object) -> float:
    w = _number(wavelength)
    if math.isnan(w):
        raise ValueError("Please enter a valid number")
    if w < WL_MIN or w > WL_MAX:
        raise ValueError("Wavelength must be between 380 and 780 nm")
    return w


def validate_wavelengths(wavelengths: Iterable[object]) -> list[float]:
    """Validate each wavelength; absorbing the same one twice is rejected."""
    out: list[float] = []
    for raw in wavelengths:
        w = validate_wavelength(raw)
        if w in out:
            raise ValueError("This wavelength is already added")
        out.append(w)
    return out


def validate_range(
    lo: object, hi: object, existing: Iterable[RangeLike] = ()
) -> AbsorptionRange:
    """Check a new absorption range against the domain and `existing` ones.

    Ranges that merely touch an existing one (shared endpoint) count as
    overlapping.
    """
    lo_f, hi_f = _number(lo), _number(hi)
    if math.isnan(lo_f) or math.isnan(hi_f):
        raise ValueError("Please enter valid wavelength values")
    if lo_f < WL_MIN or hi_f > WL_MAX or lo_f >= hi_f:
        raise ValueError("Invalid range. Ensure 380 ≤ min < max ≤ 780")

    width = hi_f - lo_f
    if width > MAX_RANGE_WIDTH:
        raise ValueError(
            "Range too wide! Scientific absorption bands are typically ≤150 nm"
        )
    if width < MIN_RANGE_WIDTH:
        raise ValueError("Range too narrow! Minimum range is 10 nm")

    for r in existing:
        other = as_range(r)
        if lo_f <= other.max and hi_f >= other.min:
            raise ValueError("Range overlaps with existing absorption range")

    return AbsorptionRange(lo_f, hi_f)


def validate_ranges(ranges: Iterable[RangeLike]) -> list[AbsorptionRange]:
    """Validate a whole list, each range against the ones before it."""
    out: list[AbsorptionRange] = []
    for r in ranges:
        rng = as_range(r)
        out.append(validate_range(rng.min, rng.max, out))
    return out


__all__ = [
    "MAX_RANGE_WIDTH",
    "MIN_RANGE_WIDTH",
    "validate_range",
    "validate_ranges",
    "validate_wavelength",
    "validate_wavelengths",
]
