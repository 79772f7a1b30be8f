"""Display variants: a viewport plus the input state that drives it.

Variants are looked up by name in ``DISPLAYS`` when the configuration is
loaded, never while painting.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable

import pygame

from simview.app.ui.theme import Theme
from simview.errors import UnsupportedOperationError
from simview.geometry.bounds import EnvironmentBounds, ViewBounds
from simview.geometry.obstacles import Obstacle
from simview.geometry.point import Point
from simview.interaction.angle import AngleManager
from simview.interaction.pointer import PointerDelta
from simview.interaction.zoom import ExponentialZoomManager, LinearZoomManager, ZoomManager
from simview.render import mercator
from simview.render.grid import draw_environment_border, draw_grid
from simview.render.map_viewport import MapViewport
from simview.render.node_renderer import NodeRenderer
from simview.render.snapshot import EnvironmentSnapshot
from simview.render.viewport import EuclideanViewport, Mode, ViewportTransform

if TYPE_CHECKING:
    from simview.config import ViewerConfig

logger = logging.getLogger(__name__)


class Display(ABC):
    """One open view onto an environment."""

    name = ""

    def __init__(self, view_size: ViewBounds, config: ViewerConfig):
        self.config = config
        self.view_size = view_size
        self.viewport: ViewportTransform | None = None
        self.zoom_manager = self._create_zoom_manager()
        self.angle_manager = AngleManager(config.rotation_sensitivity)
        self.pointer = PointerDelta()
        self.snapshot = EnvironmentSnapshot()
        self.renderer = NodeRenderer()

        # Status / notifications
        self.notification: str = ""
        self.notification_timer: float = 0.0

    @abstractmethod
    def _create_viewport(self, bounds: EnvironmentBounds) -> ViewportTransform:
        ...

    @abstractmethod
    def _create_zoom_manager(self) -> ZoomManager:
        ...

    def _draw_background(self, surface: pygame.Surface) -> None:
        pass

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def bind_environment(self, bounds: EnvironmentBounds,
                         obstacles: Iterable[Obstacle] = ()) -> None:
        """Rebuild the viewport for a new environment and frame it."""
        self.viewport = self._create_viewport(bounds)
        self.renderer.obstacles = list(obstacles)
        self.angle_manager.reset()
        self.reset_view()
        logger.info("%s display bound to %s", self.name, bounds)

    def on_resize(self, size: ViewBounds) -> None:
        self.view_size = size
        if self.viewport is not None:
            self.viewport.set_view_size(size)

    def reset_view(self) -> None:
        self.viewport.center()
        self.viewport.optimal_zoom()
        # The manager clamps to the configured range; the viewport follows it
        self.zoom_manager.set_zoom(self.viewport.zoom)
        self.viewport.set_zoom(self.zoom_manager.zoom)

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    def pan(self, delta: Point) -> None:
        self.viewport.set_delta_view_position(delta)

    def wheel(self, pivot: Point, notches: int) -> None:
        if notches > 0:
            self.zoom_manager.increment(notches)
        elif notches < 0:
            self.zoom_manager.decrement(-notches)
        self.viewport.zoom_on_point(pivot, self.zoom_manager.zoom)

    def drag_rotate(self, pixel_dx: float, pivot: Point | None = None) -> None:
        """Rotate by a horizontal drag, around ``pivot`` or the view centre."""
        if pivot is None:
            pivot = self.viewport.view_size.center
        previous = self.angle_manager.degrees
        self.angle_manager.accumulate(pixel_dx)
        try:
            self.viewport.rotate_around_point(pivot, self.angle_manager.radians)
        except UnsupportedOperationError:
            self.angle_manager.degrees = previous
            raise

    def zoom_to(self, env_point: Point, zoom: float) -> None:
        self.zoom_manager.set_zoom(zoom)
        self.viewport.zoom_to(env_point, self.zoom_manager.zoom)

    def toggle_mode(self) -> None:
        pass

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def set_notification(self, text: str, duration: float = 3.0) -> None:
        self.notification = text
        self.notification_timer = duration

    def update_timers(self, dt: float) -> None:
        if self.notification_timer > 0:
            self.notification_timer -= dt
            if self.notification_timer <= 0:
                self.notification = ""

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def paint(self, surface: pygame.Surface) -> int:
        """Draw the environment. Returns the number of visible nodes."""
        surface.fill(Theme.BG_CANVAS)
        if self.viewport is None:
            return 0
        self._draw_background(surface)
        draw_environment_border(surface, self.viewport, Theme.ENV_BORDER)
        return self.renderer.draw(surface, self.viewport, self.snapshot)


class Generic2DDisplay(Display):
    """Planar environments through an affine viewport."""

    name = "generic"

    def _create_viewport(self, bounds: EnvironmentBounds) -> ViewportTransform:
        viewport = EuclideanViewport(self.view_size, bounds)
        viewport.set_mode(self.config.mode)
        return viewport

    def _create_zoom_manager(self) -> ZoomManager:
        c = self.config
        if c.zoom_kind == "linear":
            return LinearZoomManager(1.0, c.zoom_step, c.zoom_min, c.zoom_max)
        return ExponentialZoomManager(1.0, c.zoom_step, c.zoom_min, c.zoom_max)

    def _draw_background(self, surface: pygame.Surface) -> None:
        if self.config.grid_spacing > 0:
            draw_grid(surface, self.viewport, self.config.grid_spacing, Theme.GRID)

    def toggle_mode(self) -> None:
        nxt = Mode.ADAPT_TO_VIEW if self.viewport.mode is Mode.ISOMETRIC else Mode.ISOMETRIC
        self.viewport.set_mode(nxt)
        self.set_notification(f"Mode: {nxt.value}")


class MapDisplay(Display):
    """Geographic environments on Mercator map tiles."""

    name = "map"

    def _create_viewport(self, bounds: EnvironmentBounds) -> ViewportTransform:
        return MapViewport(self.view_size, bounds)

    def _create_zoom_manager(self) -> ZoomManager:
        return LinearZoomManager(1, 1, 1, mercator.MAX_ZOOM_LEVEL)


DISPLAYS: dict[str, type[Display]] = {
    Generic2DDisplay.name: Generic2DDisplay,
    MapDisplay.name: MapDisplay,
}
