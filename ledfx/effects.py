"""Frame generators for LED effects."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence

Color = tuple[float, float, float]


class Effect(ABC):
    """Produces the colours of every LED for one frame."""

    @abstractmethod
    def assemble_frame(
        self, phase: float, led_count: int, color: Sequence[float]
    ) -> list[Color]:
        """Return ``led_count`` colours for the given phase (0 to 2*pi)."""


class PulsingEffect(Effect):
    """All LEDs breathe in and out with the phase."""

    def assemble_frame(
        self, phase: float, led_count: int, color: Sequence[float]
    ) -> list[Color]:
        factor = 0.5 * (math.sin(phase) + 1)
        pulsed = (factor * color[0], factor * color[1], factor * color[2])
        return [pulsed] * led_count


class SolidEffect(Effect):
    """All LEDs show the same colour."""

    def assemble_frame(
        self, phase: float, led_count: int, color: Sequence[float]
    ) -> list[Color]:
        solid = (color[0], color[1], color[2])
        return [solid] * led_count