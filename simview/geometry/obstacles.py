"""Adapters from environment-space obstacles to view-space shapes."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

import pygame

from simview.errors import InvalidArgumentError
from simview.geometry.bounds import EnvironmentBounds
from simview.geometry.point import Point

if TYPE_CHECKING:
    from simview.render.viewport import ViewportTransform


@dataclass(frozen=True)
class Obstacle:
    """Closed polygon in environment space."""

    vertices: tuple[Point, ...]

    def __post_init__(self):
        if len(self.vertices) < 3:
            raise InvalidArgumentError(
                f"An obstacle needs at least 3 vertices, got {len(self.vertices)}")

    @classmethod
    def rectangle(cls, x: float, y: float, width: float, height: float) -> Obstacle:
        return cls((Point(x, y), Point(x + width, y),
                    Point(x + width, y + height), Point(x, y + height)))

    @property
    def bounds(self) -> EnvironmentBounds:
        return EnvironmentBounds.from_points(self.vertices)


def obstacle_to_view(viewport: ViewportTransform, obstacle: Obstacle) -> list[Point]:
    return [viewport.to_view(v) for v in obstacle.vertices]


def obstacle_view_rect(viewport: ViewportTransform, obstacle: Obstacle) -> pygame.Rect:
    """Pixel bounding rectangle of the obstacle as currently drawn."""
    pts = obstacle_to_view(viewport, obstacle)
    left = math.floor(min(p.x for p in pts))
    top = math.floor(min(p.y for p in pts))
    right = math.ceil(max(p.x for p in pts))
    bottom = math.ceil(max(p.y for p in pts))
    return pygame.Rect(left, top, right - left, bottom - top)


def visible_obstacles(viewport: ViewportTransform,
                      obstacles: Iterable[Obstacle]) -> list[Obstacle]:
    """Obstacles whose view rectangle touches the view."""
    view = viewport.view_rect
    visible = []
    for obstacle in obstacles:
        rect = obstacle_view_rect(viewport, obstacle)
        # Zero-size rects never collide in pygame; inflate to 1 px
        if rect.w == 0 or rect.h == 0:
            rect = rect.inflate(1, 1)
        if view.colliderect(rect):
            visible.append(obstacle)
    return visible
