# spin.py – rotation lifecycle of the colour disk
#   idle → accelerating → steady → decelerating → idle
#
# Time only moves when the caller ticks, so any frame loop (or a test) can
# drive it. The blend factor returned by tick() is how far the segments have
# merged into the mixed colour: 0 at rest, 1 at full speed.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

from coloraide import Color

from .hexrgb import Hex
from .mixing import PaletteEntry, mix_colors
from .observed import Mode

log = logging.getLogger(__name__)

Phase = Literal["idle", "accelerating", "steady", "decelerating"]


def blend_segments(
    enabled: Sequence[PaletteEntry], mode: Mode = "ideal", blend: float = 0.0
) -> list[Hex]:
    """Segment colours `blend` of the way (sRGB lerp) toward their mixed colour."""
    t = float(blend)
    if not 0.0 <= t <= 1.0:
        raise ValueError("blend must be between 0 and 1")
    mixed = mix_colors(enabled, mode)
    return [
        Color(e.hex).mix(mixed, t, space="srgb").to_string(hex=True)
        for e in enabled
    ]


@dataclass
class DiskSpin:
    max_speed: float = 720.0  # deg/s at which the segments fully merge
    acceleration: float = 480.0  # deg/s²
    deceleration: float = 360.0  # deg/s²
    phase: Phase = "idle"
    speed: float = 0.0
    angle: float = 0.0

    def __post_init__(self) -> None:
        if self.max_speed <= 0 or self.acceleration <= 0 or self.deceleration <= 0:
            raise ValueError("max_speed, acceleration and deceleration must be > 0")

    @property
    def blend(self) -> float:
        return min(1.0, max(0.0, self.speed / self.max_speed))

    @property
    def spinning(self) -> bool:
        return self.phase in ("accelerating", "steady")

    def start(self) -> None:
        if self.phase in ("idle", "decelerating"):
            self._enter("accelerating")

    def stop(self) -> None:
        if self.phase in ("accelerating", "steady"):
            self._enter("decelerating")

    def toggle(self) -> None:
        if self.spinning:
            self.stop()
        else:
            self.start()

    def tick(self, dt: float) -> float:
        """Advance by `dt` seconds and return the current blend factor."""
        if dt < 0:
            raise ValueError("dt must be ≥ 0")

        if self.phase == "accelerating":
            self.speed = min(self.max_speed, self.speed + self.acceleration * dt)
            if self.speed >= self.max_speed:
                self._enter("steady")
        elif self.phase == "decelerating":
            self.speed = max(0.0, self.speed - self.deceleration * dt)
            if self.speed <= 0.0:
                self._enter("idle")

        self.angle = (self.angle + self.speed * dt) % 360.0
        return self.blend

    def frame(self, enabled: Sequence[PaletteEntry], mode: Mode = "ideal") -> list[Hex]:
        """Segment colours to paint at the current speed."""
        return blend_segments(enabled, mode, self.blend)

    def _enter(self, phase: Phase) -> None:
        log.debug("disk %s → %s (speed=%.1f)", self.phase, phase, self.speed)
        self.phase = phase


__all__ = ["DiskSpin", "Phase", "blend_segments"]
