import pytest

from simview.errors import UnsupportedOperationError
from simview.geometry.bounds import EnvironmentBounds, ViewBounds
from simview.geometry.point import Point
from simview.render import mercator
from simview.render.map_viewport import MapViewport
from simview.render.viewport import Mode


def test_mercator_formulas():
    assert mercator.map_size(0) == 256
    assert mercator.map_size(3) == 2048
    assert mercator.longitude_to_pixel_x(-180, 1) == 0
    assert mercator.longitude_to_pixel_x(180, 1) == 512
    assert mercator.latitude_to_pixel_y(0, 2) == pytest.approx(512)
    assert mercator.latitude_to_pixel_y(mercator.LATITUDE_LIMIT, 0) == pytest.approx(0, abs=1e-6)
    p = mercator.to_pixel(Point(12.25, 44.14), 10)
    back = mercator.from_pixel(p, 10)
    assert back.is_close(Point(12.25, 44.14), 1e-9)


def test_poles_are_out_of_range():
    assert not mercator.is_pixel_in_range(mercator.to_pixel(Point(0, 90), 3), 3)
    assert not mercator.is_pixel_in_range(mercator.to_pixel(Point(0, -90), 3), 3)


def test_starts_centred_on_environment(map_viewport):
    assert map_viewport.map_center == map_viewport.env_bounds.center
    assert map_viewport.mode is Mode.MAP_PROJECTED
    assert map_viewport.view_position == Point(400, 300)
    assert map_viewport.to_view(map_viewport.env_bounds.center).is_close(Point(400, 300))


@pytest.mark.parametrize("level", [4, 10, 15])
def test_round_trip(map_viewport, level):
    map_viewport.set_zoom(level)
    for p in [Point(0, 0), Point(800, 600), Point(123.5, 456.25)]:
        assert map_viewport.to_view(map_viewport.to_env(p)).is_close(p)
    for e in [Point(12.2, 44.1), Point(12.45, 44.25)]:
        assert map_viewport.to_env(map_viewport.to_view(e)).is_close(e)


def test_optimal_zoom_is_largest_fitting_level(map_viewport):
    map_viewport.optimal_zoom()
    level = map_viewport.zoom_level
    assert 1 <= level < mercator.MAX_ZOOM_LEVEL
    for corner in map_viewport.env_bounds.corners():
        assert map_viewport.is_inside_view(map_viewport.to_view(corner))
    map_viewport.set_zoom(level + 1)
    assert not all(map_viewport.is_inside_view(map_viewport.to_view(c))
                   for c in map_viewport.env_bounds.corners())


def test_optimal_zoom_on_tiny_area_reaches_max_level():
    vp = MapViewport(ViewBounds(800, 600), EnvironmentBounds(12.2, 44.1, 0.0001, 0.0001))
    vp.optimal_zoom()
    assert vp.zoom_level == mercator.MAX_ZOOM_LEVEL


def test_optimal_zoom_falls_back_to_level_one():
    vp = MapViewport(ViewBounds(100, 100), EnvironmentBounds(-180, -80, 360, 160))
    vp.optimal_zoom()
    assert vp.zoom_level == 1


def test_set_zoom_truncates_and_clamps(map_viewport):
    map_viewport.set_zoom(7.9)
    assert map_viewport.zoom == 7
    map_viewport.set_zoom(99)
    assert map_viewport.zoom == mercator.MAX_ZOOM_LEVEL
    map_viewport.set_zoom(-2)
    assert map_viewport.zoom == 0


@pytest.mark.parametrize("pivot", [Point(100, 150), Point(400, 300), Point(780, 20)])
def test_zoom_on_point_keeps_pivot(map_viewport, pivot):
    map_viewport.set_zoom(10)
    e = map_viewport.to_env(pivot)
    map_viewport.zoom_on_point(pivot, 12)
    assert map_viewport.zoom == 12
    assert map_viewport.to_view(e).is_close(pivot)


def test_rotation_is_unsupported(map_viewport):
    center = map_viewport.map_center
    with pytest.raises(UnsupportedOperationError):
        map_viewport.rotate_around_point(Point(10, 10), 0.5)
    with pytest.raises(UnsupportedOperationError):
        map_viewport.set_rotation(1.0)
    map_viewport.set_rotation(0.0)
    assert map_viewport.rotation == 0.0
    assert map_viewport.map_center == center


def test_only_map_mode(map_viewport):
    with pytest.raises(UnsupportedOperationError):
        map_viewport.set_mode(Mode.ISOMETRIC)
    map_viewport.set_mode(Mode.MAP_PROJECTED)


def test_out_of_range_falls_back_to_centre(map_viewport):
    map_viewport.set_zoom(2)
    assert map_viewport.to_view(Point(200, 10)) == map_viewport.view_position
    assert map_viewport.to_env(Point(-5000, 300)) == map_viewport.map_center


def test_pan_moves_map_centre(map_viewport):
    map_viewport.set_zoom(10)
    e = Point(12.3, 44.2)
    before = map_viewport.to_view(e)
    map_viewport.set_delta_view_position(Point(30, -20))
    assert map_viewport.to_view(e).is_close(before + Point(30, -20))


def test_set_view_position(map_viewport):
    map_viewport.set_zoom(10)
    e = map_viewport.map_center
    map_viewport.set_view_position(Point(500, 350))
    assert map_viewport.to_view(e).is_close(Point(500, 350))


def test_invalid_centre_falls_back_to_origin(map_viewport):
    map_viewport.center_on(Point(500, 95))
    assert map_viewport.map_center == Point(0.0, 0.0)


def test_resize_keeps_view_position_centred(map_viewport):
    map_viewport.set_view_size(ViewBounds(1000, 400))
    assert map_viewport.view_position == Point(500, 200)


@pytest.mark.parametrize("latitude", [90.0, -90.0, 89.5])
def test_polar_centre_is_clamped(map_viewport, latitude):
    map_viewport.center_on(Point(10, latitude))
    assert abs(map_viewport.map_center.y) == mercator.LATITUDE_LIMIT
    p = map_viewport.to_view(Point(10, 40))
    assert p.is_finite()
    p.to_pixel()
