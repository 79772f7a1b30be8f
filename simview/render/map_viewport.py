"""Viewport over a Mercator-projected, tile-backed map."""
from __future__ import annotations

import logging

from simview.errors import UnsupportedOperationError
from simview.geometry.bounds import EnvironmentBounds, ViewBounds
from simview.geometry.point import Point
from simview.render import mercator
from simview.render.viewport import TWO_PI, Mode, ViewportTransform

logger = logging.getLogger(__name__)


class MapViewPosition:
    """Map centre and discrete zoom level, as read by the tile layer.

    Only the owning ``MapViewport`` mutates it.
    """

    def __init__(self, center: Point = Point(0.0, 0.0), zoom_level: int = 0):
        self.center = center  # (longitude, latitude)
        self.zoom_level = zoom_level

    def set_center(self, center: Point) -> None:
        self.center = center

    def set_zoom_level(self, zoom_level: int) -> None:
        self.zoom_level = zoom_level

    def move_center(self, dx: float, dy: float) -> None:
        """Drag the map by (dx, dy) pixels; the centre moves the opposite way."""
        size = mercator.map_size(self.zoom_level)
        c = mercator.to_pixel(self.center, self.zoom_level)
        px = min(max(c.x - dx, 0.0), float(size))
        py = min(max(c.y - dy, 0.0), float(size))
        self.center = mercator.from_pixel(Point(px, py), self.zoom_level)


class MapViewport(ViewportTransform):
    """North-up viewport whose scale comes from integer tile zoom levels.

    Environment points are (longitude, latitude). The view position is always
    the view centre, and it shows the map centre.
    """

    SUPPORTED_MODES = frozenset({Mode.MAP_PROJECTED})

    def __init__(self, view_size: ViewBounds, env_bounds: EnvironmentBounds,
                 zoom_level: int = 1):
        super().__init__(view_size, env_bounds)
        self._map = MapViewPosition()
        self.set_zoom(zoom_level)
        self.center()

    # --- read accessors ---

    @property
    def map_center(self) -> Point:
        return self._map.center

    @property
    def zoom_level(self) -> int:
        return self._map.zoom_level

    @property
    def zoom(self) -> float:
        return float(self._map.zoom_level)

    @property
    def rotation(self) -> float:
        return 0.0

    @property
    def mode(self) -> Mode:
        return Mode.MAP_PROJECTED

    @property
    def view_position(self) -> Point:
        return self._view_size.center

    @property
    def anchor(self) -> Point:
        return self._map.center

    # --- mapping ---

    def _project(self, env_point: Point, zoom_level: int) -> Point | None:
        p = mercator.to_pixel(env_point, zoom_level)
        if not mercator.is_pixel_in_range(p, zoom_level):
            return None
        c = mercator.to_pixel(self._map.center, zoom_level)
        return self.view_position + (p - c)

    def to_view(self, env_point: Point) -> Point:
        view_point = self._project(env_point, self._map.zoom_level)
        if view_point is None:
            logger.debug("%s is outside the map at zoom %d", env_point, self._map.zoom_level)
            return self.view_position
        return view_point

    def to_env(self, view_point: Point) -> Point:
        z = self._map.zoom_level
        c = mercator.to_pixel(self._map.center, z)
        p = c + (view_point - self.view_position)
        if not mercator.is_pixel_in_range(p, z):
            logger.debug("%s is outside the map at zoom %d", view_point, z)
            return self._map.center
        return mercator.from_pixel(p, z)

    # --- mutators ---

    def set_view_size(self, size: ViewBounds) -> None:
        self._view_size = size

    def set_mode(self, mode: Mode) -> None:
        self._check_mode(mode)

    def set_zoom(self, value: float) -> None:
        level = int(min(max(value, 0), mercator.MAX_ZOOM_LEVEL))
        self._map.set_zoom_level(level)

    def set_rotation(self, radians: float) -> None:
        if radians % TWO_PI != 0:
            raise UnsupportedOperationError("Map viewports are always north-up")

    def rotate_around_point(self, pivot: Point, radians: float) -> None:
        raise UnsupportedOperationError("Map viewports are always north-up")

    def set_view_position(self, view_point: Point) -> None:
        self.set_delta_view_position(view_point - self.view_position)

    def set_delta_view_position(self, delta: Point) -> None:
        self._map.move_center(delta.x, delta.y)

    def center(self) -> None:
        self.center_on(self._env_bounds.center)

    def center_on(self, env_point: Point) -> None:
        if not mercator.is_valid_lat_lon(env_point.y, env_point.x):
            logger.warning("Invalid map centre %s, using (0, 0)", env_point)
            env_point = Point(0.0, 0.0)
        # Past the limit the centre would project to infinity
        lat = min(max(env_point.y, -mercator.LATITUDE_LIMIT), mercator.LATITUDE_LIMIT)
        self._map.set_center(Point(env_point.x, lat))

    def _fits(self, zoom_level: int) -> bool:
        for corner in self._env_bounds.corners():
            view_point = self._project(corner, zoom_level)
            if view_point is None or not self.is_inside_view(view_point):
                return False
        return True

    def optimal_zoom(self) -> None:
        """Most zoomed-in level that still shows the whole bounding box, at least 1."""
        level = 1
        for z in range(mercator.MAX_ZOOM_LEVEL, 0, -1):
            if self._fits(z):
                level = z
                break
        self._map.set_zoom_level(level)
        logger.debug("Optimal map zoom level %d", level)

    def zoom_on_point(self, pivot: Point, zoom: float) -> None:
        env_point = self.to_env(pivot)
        self.set_zoom(zoom)
        self.set_delta_view_position(pivot - self.to_view(env_point))
