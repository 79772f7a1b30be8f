"""Grid overlay and environment border, drawn through the viewport."""
from __future__ import annotations

import math

import pygame

from simview.geometry.bounds import EnvironmentBounds
from simview.geometry.point import Point
from simview.render.viewport import ViewportTransform


def grid_lines(bounds: EnvironmentBounds, spacing: float) -> list[tuple[Point, Point]]:
    """Environment-space grid segments covering ``bounds``, aligned to multiples of ``spacing``."""
    if spacing <= 0 or bounds.is_degenerate:
        return []
    x0, y0 = bounds.offset_x, bounds.offset_y
    x1, y1 = x0 + bounds.size_x, y0 + bounds.size_y
    lines = []
    x = math.ceil(x0 / spacing) * spacing
    while x <= x1:
        lines.append((Point(x, y0), Point(x, y1)))
        x += spacing
    y = math.ceil(y0 / spacing) * spacing
    while y <= y1:
        lines.append((Point(x0, y), Point(x1, y)))
        y += spacing
    return lines


def draw_grid(
    surface: pygame.Surface,
    viewport: ViewportTransform,
    spacing: float,
    color: tuple[int, int, int] = (255, 255, 255),
    max_lines: int = 400,
) -> int:
    """Draw grid lines for the visible part of the environment. Returns lines drawn."""
    visible = viewport.visible_env_rect()
    env = viewport.env_bounds
    # Clamp to environment bounds
    x0 = max(visible.offset_x, env.offset_x)
    y0 = max(visible.offset_y, env.offset_y)
    x1 = min(visible.offset_x + visible.size_x, env.offset_x + env.size_x)
    y1 = min(visible.offset_y + visible.size_y, env.offset_y + env.size_y)
    if x1 <= x0 or y1 <= y0:
        return 0
    lines = grid_lines(EnvironmentBounds(x0, y0, x1 - x0, y1 - y0), spacing)
    if len(lines) > max_lines:
        return 0

    clip = surface.get_clip()
    surface.set_clip(viewport.view_rect)
    for a, b in lines:
        pygame.draw.line(surface, color, viewport.to_view(a).to_pixel(),
                         viewport.to_view(b).to_pixel(), 1)
    surface.set_clip(clip)
    return len(lines)


def draw_environment_border(
    surface: pygame.Surface,
    viewport: ViewportTransform,
    color: tuple[int, int, int] = (200, 200, 200),
) -> None:
    """Draw the environment bounding box (a polygon once rotated)."""
    env = viewport.env_bounds
    lower, upper = env.corners()
    corners = [lower, Point(upper.x, lower.y), upper, Point(lower.x, upper.y)]
    pts = [viewport.to_view(c).to_pixel() for c in corners]
    clip = surface.get_clip()
    surface.set_clip(viewport.view_rect)
    pygame.draw.polygon(surface, color, pts, 2)
    surface.set_clip(clip)
