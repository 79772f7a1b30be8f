"""Bounded zoom accumulators stepped by wheel notches."""
from __future__ import annotations

from abc import ABC, abstractmethod

from simview.errors import InvalidArgumentError


class ZoomManager(ABC):
    """Holds a zoom level inside [minimum, maximum].

    Out-of-range results saturate silently; they are never errors.
    """

    def __init__(self, zoom: float = 1.0, minimum: float = 0.0, maximum: float = float("inf")):
        if minimum > maximum:
            raise InvalidArgumentError(f"Zoom minimum {minimum} exceeds maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum
        self._zoom = self._clamp(zoom)

    @property
    def zoom(self) -> float:
        return self._zoom

    def _clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)

    def set_zoom(self, value: float) -> None:
        self._zoom = self._clamp(value)

    def increment(self, notches: int = 1) -> None:
        self._zoom = self._clamp(self._stepped(self._zoom, notches))

    def decrement(self, notches: int = 1) -> None:
        self._zoom = self._clamp(self._stepped(self._zoom, -notches))

    @abstractmethod
    def _stepped(self, value: float, notches: int) -> float:
        ...


class LinearZoomManager(ZoomManager):
    """Each notch adds ``step``."""

    def __init__(self, zoom: float = 1.0, step: float = 1.0,
                 minimum: float = 0.0, maximum: float = float("inf")):
        super().__init__(zoom, minimum, maximum)
        self.step = 1.0
        self.set_step(step)

    def set_step(self, step: float) -> None:
        if step <= 0:
            raise InvalidArgumentError(f"Zoom step must be positive, got {step}")
        self.step = step

    def _stepped(self, value: float, notches: int) -> float:
        return value + notches * self.step


class ExponentialZoomManager(ZoomManager):
    """Each notch multiplies by ``base``."""

    def __init__(self, zoom: float = 1.0, base: float = 1.1,
                 minimum: float = 0.0, maximum: float = float("inf")):
        super().__init__(zoom, minimum, maximum)
        self.base = 1.1
        self.set_base(base)

    def set_base(self, base: float) -> None:
        if base <= 0:
            raise InvalidArgumentError(f"Zoom base must be positive, got {base}")
        self.base = base

    def _stepped(self, value: float, notches: int) -> float:
        return value * self.base ** notches
