"""View and environment bounding boxes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from simview.errors import InvalidArgumentError
from simview.geometry.point import Point


@dataclass(frozen=True)
class ViewBounds:
    """Pixel size of the rendering surface."""

    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise InvalidArgumentError(f"View size must not be negative: {self.width}x{self.height}")

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)

    @property
    def aspect_ratio(self) -> float | None:
        if self.width <= 0 or self.height <= 0:
            return None
        return self.width / self.height


@dataclass(frozen=True)
class EnvironmentBounds:
    """Axis-aligned bounding box of the environment (offset + size).

    For geographic environments x is longitude and y is latitude.
    """

    offset_x: float = 0.0
    offset_y: float = 0.0
    size_x: float = 0.0
    size_y: float = 0.0

    def __post_init__(self):
        if self.size_x < 0 or self.size_y < 0:
            raise InvalidArgumentError(
                f"Environment size must not be negative: {self.size_x}x{self.size_y}")

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> EnvironmentBounds:
        pts = list(points)
        if not pts:
            return cls()
        min_x = min(p.x for p in pts)
        min_y = min(p.y for p in pts)
        max_x = max(p.x for p in pts)
        max_y = max(p.y for p in pts)
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @property
    def offset(self) -> Point:
        return Point(self.offset_x, self.offset_y)

    @property
    def center(self) -> Point:
        return Point(self.offset_x + self.size_x / 2, self.offset_y + self.size_y / 2)

    @property
    def is_degenerate(self) -> bool:
        return self.size_x <= 0 or self.size_y <= 0

    @property
    def aspect_ratio(self) -> float | None:
        if self.is_degenerate:
            return None
        return self.size_x / self.size_y

    def corners(self) -> tuple[Point, Point]:
        """Lower-left and upper-right corners."""
        return (Point(self.offset_x, self.offset_y),
                Point(self.offset_x + self.size_x, self.offset_y + self.size_y))

    def contains(self, p: Point) -> bool:
        return (self.offset_x <= p.x <= self.offset_x + self.size_x
                and self.offset_y <= p.y <= self.offset_y + self.size_y)
