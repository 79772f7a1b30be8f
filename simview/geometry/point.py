"""Immutable 2D point shared by environment and view space."""
from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

# Default tolerance for comparing points produced by the view transform.
DEFAULT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class Point:
    """A 2D point or vector.

    The space (environment or view) is implied by whoever holds it.
    Equality and hashing are exact; use ``is_close`` when comparing values
    that went through a transform.
    """

    x: float
    y: float

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0)

    @classmethod
    def from_pixel(cls, px: int, py: int) -> Point:
        return cls(float(px), float(py))

    @classmethod
    def from_vector(cls, v: pygame.math.Vector2) -> Point:
        return cls(float(v.x), float(v.y))

    def to_pixel(self) -> tuple[int, int]:
        """Nearest integer pixel."""
        return round(self.x), round(self.y)

    def to_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def to_vector(self) -> pygame.math.Vector2:
        return pygame.math.Vector2(self.x, self.y)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: Point, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Componentwise comparison, absolute below 1 and relative above."""
        return (math.isclose(self.x, other.x, rel_tol=tolerance, abs_tol=tolerance)
                and math.isclose(self.y, other.y, rel_tol=tolerance, abs_tol=tolerance))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"
