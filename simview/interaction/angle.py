"""Rotation angle accumulated from horizontal pointer drags."""
from __future__ import annotations

import math

from simview.errors import InvalidArgumentError


class AngleManager:
    """Turns pixel deltas into a total angle, wrapping at 360 degrees."""

    def __init__(self, sensitivity: float = 1.0):
        self.sensitivity = 1.0  # degrees per pixel
        self.set_sensitivity(sensitivity)
        self.degrees = 0.0

    def set_sensitivity(self, sensitivity: float) -> None:
        if sensitivity <= 0:
            raise InvalidArgumentError(f"Sensitivity must be positive, got {sensitivity}")
        self.sensitivity = sensitivity

    def accumulate(self, pixel_dx: float) -> None:
        self.degrees = (self.degrees + pixel_dx * self.sensitivity) % 360.0

    def reset(self) -> None:
        self.degrees = 0.0

    @property
    def radians(self) -> float:
        return math.radians(self.degrees)
