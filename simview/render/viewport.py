"""Viewport transforms between environment space and view space.

A viewport keeps an *anchor* (an environment point) pinned to a *position*
(a view point). Every other point is mapped relative to that pair:

    view = position + S(zoom * h_rate, -zoom * v_rate) . R(rotation) . (env - anchor)

Environment y grows upward, view y grows downward, hence the negated vertical
scale. Anchored operations (zoom or rotate around a pointer) first move the
anchor under the pivot without changing the mapping, apply the change, then
move the anchor back to where it was.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable

import pygame

from simview.errors import SingularTransformError, UnsupportedOperationError
from simview.geometry.bounds import EnvironmentBounds, ViewBounds
from simview.geometry.point import Point

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


class Mode(Enum):
    ISOMETRIC = "isometric"
    ADAPT_TO_VIEW = "adapt_to_view"
    MAP_PROJECTED = "map_projected"


@dataclass(frozen=True)
class ViewState:
    """Read-only copy of a viewport's state."""

    position: Point
    anchor: Point
    zoom: float
    rotation: float
    h_rate: float
    v_rate: float
    mode: Mode


class ViewportTransform(ABC):
    """Contract shared by every coordinate regime."""

    SUPPORTED_MODES: frozenset[Mode] = frozenset()

    def __init__(self, view_size: ViewBounds, env_bounds: EnvironmentBounds):
        self._view_size = view_size
        self._env_bounds = env_bounds

    # --- shared queries ---

    @property
    def view_size(self) -> ViewBounds:
        return self._view_size

    @property
    def env_bounds(self) -> EnvironmentBounds:
        return self._env_bounds

    @property
    def view_rect(self) -> pygame.Rect:
        return pygame.Rect(0, 0, int(self._view_size.width), int(self._view_size.height))

    def is_inside_view(self, view_point: Point) -> bool:
        return (0 <= view_point.x <= self._view_size.width
                and 0 <= view_point.y <= self._view_size.height)

    def visible_env_rect(self) -> EnvironmentBounds:
        """Environment-space bounding box of everything currently on screen."""
        w, h = self._view_size.width, self._view_size.height
        corners = [Point(0, 0), Point(w, 0), Point(0, h), Point(w, h)]
        return EnvironmentBounds.from_points(self.to_env(c) for c in corners)

    @property
    def view_state(self) -> ViewState:
        return ViewState(
            position=self.view_position,
            anchor=self.anchor,
            zoom=self.zoom,
            rotation=self.rotation,
            h_rate=self.h_rate,
            v_rate=self.v_rate,
            mode=self.mode,
        )

    def _check_mode(self, mode: Mode) -> None:
        if mode not in self.SUPPORTED_MODES:
            raise UnsupportedOperationError(
                f"{type(self).__name__} does not support mode {mode.value}")

    # --- shared mutators ---

    def set_env_bounds(self, bounds: EnvironmentBounds) -> None:
        self._env_bounds = bounds

    def zoom_to(self, env_point: Point, zoom: float) -> None:
        """Show ``env_point`` at the view centre with the given zoom."""
        self.set_zoom(zoom)
        self.center_on(env_point)

    # --- regime specific ---

    @property
    @abstractmethod
    def zoom(self) -> float: ...

    @property
    @abstractmethod
    def rotation(self) -> float: ...

    @property
    @abstractmethod
    def mode(self) -> Mode: ...

    @property
    @abstractmethod
    def view_position(self) -> Point: ...

    @property
    @abstractmethod
    def anchor(self) -> Point: ...

    @property
    def h_rate(self) -> float:
        return 1.0

    @property
    def v_rate(self) -> float:
        return 1.0

    @abstractmethod
    def to_view(self, env_point: Point) -> Point: ...

    @abstractmethod
    def to_env(self, view_point: Point) -> Point: ...

    @abstractmethod
    def set_view_size(self, size: ViewBounds) -> None: ...

    @abstractmethod
    def set_mode(self, mode: Mode) -> None: ...

    @abstractmethod
    def set_zoom(self, value: float) -> None: ...

    @abstractmethod
    def set_rotation(self, radians: float) -> None: ...

    @abstractmethod
    def set_view_position(self, view_point: Point) -> None: ...

    @abstractmethod
    def set_delta_view_position(self, delta: Point) -> None: ...

    @abstractmethod
    def center(self) -> None: ...

    @abstractmethod
    def center_on(self, env_point: Point) -> None: ...

    @abstractmethod
    def optimal_zoom(self) -> None: ...

    @abstractmethod
    def zoom_on_point(self, pivot: Point, zoom: float) -> None: ...

    @abstractmethod
    def rotate_around_point(self, pivot: Point, radians: float) -> None: ...


# ---------------------------------------------------------------------------
# Euclidean regime
# ---------------------------------------------------------------------------

def _isometric_rates(view: ViewBounds, env: EnvironmentBounds) -> tuple[float, float]:
    return 1.0, 1.0


def _adapt_to_view_rates(view: ViewBounds, env: EnvironmentBounds) -> tuple[float, float]:
    if env.is_degenerate:
        logger.warning("Cannot adapt to view: environment has no area (%s x %s)",
                       env.size_x, env.size_y)
        return 1.0, 1.0
    return view.width / env.size_x, view.height / env.size_y


_RATE_POLICIES: dict[Mode, Callable[[ViewBounds, EnvironmentBounds], tuple[float, float]]] = {
    Mode.ISOMETRIC: _isometric_rates,
    Mode.ADAPT_TO_VIEW: _adapt_to_view_rates,
}


class EuclideanViewport(ViewportTransform):
    """Affine viewport for planar environments."""

    SUPPORTED_MODES = frozenset(_RATE_POLICIES)

    def __init__(self, view_size: ViewBounds, env_bounds: EnvironmentBounds):
        super().__init__(view_size, env_bounds)
        # Environment offset starts at the bottom-left corner of the view
        self._position = Point(0.0, float(view_size.height))
        self._anchor = env_bounds.offset
        self._zoom = 1.0
        self._rotation = 0.0
        self._h_rate = 1.0
        self._v_rate = 1.0
        self._mode = Mode.ISOMETRIC
        self.is_degenerate = False

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def view_position(self) -> Point:
        return self._position

    @property
    def anchor(self) -> Point:
        return self._anchor

    @property
    def h_rate(self) -> float:
        return self._h_rate

    @property
    def v_rate(self) -> float:
        return self._v_rate

    # --- mapping ---

    def _scales(self) -> tuple[float, float]:
        return self._zoom * self._h_rate, -self._zoom * self._v_rate

    def to_view(self, env_point: Point) -> Point:
        sx, sy = self._scales()
        d = (env_point - self._anchor).to_vector().rotate_rad(self._rotation)
        return Point(self._position.x + d.x * sx, self._position.y + d.y * sy)

    def _inverse(self, view_point: Point) -> Point:
        sx, sy = self._scales()
        if sx == 0 or sy == 0 or not (math.isfinite(sx) and math.isfinite(sy)):
            raise SingularTransformError(
                f"scale ({sx}, {sy}) is not invertible (zoom={self._zoom})")
        d = view_point - self._position
        v = pygame.math.Vector2(d.x / sx, d.y / sy).rotate_rad(-self._rotation)
        return Point(self._anchor.x + v.x, self._anchor.y + v.y)

    def to_env(self, view_point: Point) -> Point:
        """Inverse mapping; a singular transform leaves the point untouched."""
        try:
            env_point = self._inverse(view_point)
        except SingularTransformError as e:
            if not self.is_degenerate:
                logger.warning("Degenerate view transform: %s", e)
            self.is_degenerate = True
            return view_point
        self.is_degenerate = False
        return env_point

    # --- re-homing ---

    def _set_view_position_without_moving(self, view_point: Point) -> None:
        """Pin the anchor to whatever lies under ``view_point``. The mapping is unchanged."""
        self._anchor = self.to_env(view_point)
        self._position = view_point

    def _set_env_position_without_moving(self, env_point: Point) -> None:
        self._position = self.to_view(env_point)
        self._anchor = env_point

    # --- mutators ---

    def _refresh_rates(self) -> None:
        self._h_rate, self._v_rate = _RATE_POLICIES[self._mode](self._view_size, self._env_bounds)

    def set_view_size(self, size: ViewBounds) -> None:
        self._view_size = size
        self._refresh_rates()

    def set_env_bounds(self, bounds: EnvironmentBounds) -> None:
        super().set_env_bounds(bounds)
        self._refresh_rates()

    def set_mode(self, mode: Mode) -> None:
        self._check_mode(mode)
        self._mode = mode
        self._refresh_rates()
        logger.debug("Mode %s: rates h=%s v=%s", mode.value, self._h_rate, self._v_rate)

    def set_zoom(self, value: float) -> None:
        # No upper bound here: zoom managers bound user input
        self._zoom = max(0.0, float(value))

    def set_rotation(self, radians: float) -> None:
        self._rotation = radians % TWO_PI

    def set_view_position(self, view_point: Point) -> None:
        self._position = view_point

    def set_delta_view_position(self, delta: Point) -> None:
        self._position = self._position + delta

    def center(self) -> None:
        self.center_on(self._env_bounds.center)

    def center_on(self, env_point: Point) -> None:
        self._anchor = env_point
        self._position = self._view_size.center

    def optimal_zoom(self) -> None:
        """Largest zoom that fits the whole environment in the view.

        In isometric mode this is ``view_h / env_h`` when the environment is
        relatively taller than the view, ``view_w / env_w`` otherwise. In
        adapt-to-view mode the rates already fit, so the result is 1.
        """
        env = self._env_bounds
        view = self._view_size
        if env.is_degenerate or view.aspect_ratio is None:
            logger.warning("Optimal zoom skipped: environment %sx%s, view %sx%s",
                           env.size_x, env.size_y, view.width, view.height)
            return
        self._zoom = min(view.width / (env.size_x * self._h_rate),
                         view.height / (env.size_y * self._v_rate))
        logger.debug("Optimal zoom %s", self._zoom)

    def zoom_on_point(self, pivot: Point, zoom: float) -> None:
        original = self._anchor
        self._set_view_position_without_moving(pivot)
        self.set_zoom(zoom)
        self._set_env_position_without_moving(original)

    def rotate_around_point(self, pivot: Point, radians: float) -> None:
        original = self._anchor
        self._set_view_position_without_moving(pivot)
        self.set_rotation(radians)
        self._set_env_position_without_moving(original)
