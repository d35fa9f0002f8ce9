"""
Pixel / millimetre scale.

Every conversion between the editing pixel space and physical dimensions
goes through a ``Scale``; nothing else multiplies by the raw factor.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Tuple, Union


class InvalidScaleError(ValueError):
    pass


@dataclass(frozen=True)
class Scale:
    """Pixels per millimetre. Always strictly positive and finite."""

    px_per_mm: float

    def __post_init__(self):
        value = self.px_per_mm
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidScaleError(f"Scale must be a number, got {value!r}")
        if not math.isfinite(value) or value <= 0:
            raise InvalidScaleError(
                f"Scale must be positive and finite (px/mm), got {value!r}"
            )
        object.__setattr__(self, "px_per_mm", float(value))

    @classmethod
    def coerce(cls, value: Union["Scale", float]) -> "Scale":
        """Accept an existing Scale or a raw px/mm number."""
        if isinstance(value, Scale):
            return value
        return cls(value)

    @classmethod
    def from_segment(
        cls,
        start: Tuple[float, float],
        end: Tuple[float, float],
        length_mm: float,
    ) -> "Scale":
        """
        Calibrate from a reference segment drawn on the plan.

        ``length_mm`` is the real-world length of the segment.
        """
        if not length_mm or length_mm <= 0 or not math.isfinite(length_mm):
            raise InvalidScaleError("Known calibration length must be positive.")
        pixel_length = math.hypot(end[0] - start[0], end[1] - start[1])
        if pixel_length < 1e-9:
            raise InvalidScaleError("Calibration points are too close.")
        return cls(pixel_length / float(length_mm))

    def to_pixels(self, mm: float) -> float:
        return mm * self.px_per_mm

    def to_millimeters(self, px: float) -> float:
        return px / self.px_per_mm

    @property
    def mm_per_px(self) -> float:
        return 1.0 / self.px_per_mm
