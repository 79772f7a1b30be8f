"""Draws the environment's nodes, links and obstacles onto the view."""
from __future__ import annotations

import pygame

from simview.app.ui.theme import Theme
from simview.geometry.obstacles import Obstacle, obstacle_to_view, visible_obstacles
from simview.geometry.point import Point
from simview.render.snapshot import EnvironmentSnapshot
from simview.render.viewport import ViewportTransform


class NodeRenderer:
    """Renders a snapshot through a viewport, one ``to_view`` per entity."""

    def __init__(self, node_radius: int = Theme.NODE_RADIUS, draw_links: bool = True):
        self.node_radius = node_radius
        self.draw_links = draw_links
        self.obstacles: list[Obstacle] = []

    def draw_obstacles(self, surface: pygame.Surface, viewport: ViewportTransform) -> int:
        drawn = 0
        for obstacle in visible_obstacles(viewport, self.obstacles):
            pts = [p.to_pixel() for p in obstacle_to_view(viewport, obstacle)]
            pygame.draw.polygon(surface, Theme.OBSTACLE, pts)
            drawn += 1
        return drawn

    def draw_nodes(self, surface: pygame.Surface, viewport: ViewportTransform,
                   snapshot: EnvironmentSnapshot) -> int:
        """Draw links then nodes. Returns how many nodes landed inside the view."""
        drawn = 0
        with snapshot.reading() as (positions, neighbors):
            view_points: dict[int, Point] = {
                node: viewport.to_view(p) for node, p in positions.items()
            }
            if self.draw_links:
                seen: set[tuple[int, int]] = set()
                for node, links in neighbors.items():
                    start = view_points.get(node)
                    if start is None:
                        continue
                    for other in links:
                        end = view_points.get(other)
                        pair = (min(node, other), max(node, other))
                        if end is None or pair in seen:
                            continue
                        seen.add(pair)
                        pygame.draw.line(surface, Theme.LINK, start.to_pixel(), end.to_pixel(), 1)
            for vp in view_points.values():
                if not viewport.is_inside_view(vp):
                    continue
                pygame.draw.circle(surface, Theme.NODE, vp.to_pixel(), self.node_radius)
                drawn += 1
        return drawn

    def draw(self, surface: pygame.Surface, viewport: ViewportTransform,
             snapshot: EnvironmentSnapshot) -> int:
        clip = surface.get_clip()
        surface.set_clip(viewport.view_rect)
        self.draw_obstacles(surface, viewport)
        drawn = self.draw_nodes(surface, viewport, snapshot)
        surface.set_clip(clip)
        return drawn
