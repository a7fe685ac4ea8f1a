from __future__ import annotations

from dataclasses import dataclass

from .hexrgb import Hex
from .observed import Mode, get_absorbed_color, observed_for_wavelengths


@dataclass(frozen=True)
class Example:
    name: str
    wavelength: float
    description: str
    appears_color: str
    appears_hex: Hex
    wavelength2: float | None = None

    @property
    def wavelengths(self) -> list[float]:
        if self.wavelength2 is None:
            return [self.wavelength]
        return [self.wavelength, self.wavelength2]


EXAMPLES: tuple[Example, ...] = (
    Example(
        "β-Carotene", 450, "Absorbs blue (~450 nm)", "Orange", "#ff8000"
    ),
    Example(
        "Chlorophyll-a",
        430,
        "Absorbs blue (~430 nm) and red (~662 nm)",
        "Green",
        "#00ff00",
        wavelength2=662,
    ),
    Example("KMnO₄", 525, "Absorbs green (~525 nm)", "Purple", "#ff00ff"),
    Example(
        "Crystal Violet Dye",
        420,
        "Absorbs yellow-green (~410–430 nm)",
        "Violet",
        "#8b00ff",
    ),
    Example(
        "Dichromate Ion (Cr₂O₇²⁻)",
        450,
        "Absorbs blue (~450 nm)",
        "Orange",
        "#ff8000",
    ),
)


def find_example(name: str) -> Example:
    key = name.strip().lower()
    for ex in EXAMPLES:
        if ex.name.lower() == key:
            return ex
    raise KeyError(name)


def example_colors(example: Example, mode: Mode = "ideal") -> dict[str, Hex]:
    """Absorbed colour of the primary wavelength and the blended observed colour."""
    return {
        "absorbed": get_absorbed_color(example.wavelength),
        "observed": observed_for_wavelengths(example.wavelengths, mode),
    }


__all__ = ["EXAMPLES", "Example", "example_colors", "find_example"]
