import pygame
import pytest

from simview.errors import InvalidArgumentError
from simview.geometry.bounds import EnvironmentBounds, ViewBounds
from simview.geometry.point import Point


def test_arithmetic():
    a = Point(1.5, -2.0)
    b = Point(0.5, 4.0)
    assert a + b == Point(2.0, 2.0)
    assert a - b == Point(1.0, -6.0)
    assert -a == Point(-1.5, 2.0)
    assert a * 2 == Point(3.0, -4.0)
    assert 2 * a == Point(3.0, -4.0)


def test_pixel_conversion():
    assert Point(10.4, 20.6).to_pixel() == (10, 21)
    assert Point.from_pixel(3, 4) == Point(3.0, 4.0)


def test_vector_bridge():
    v = Point(3, 4).to_vector()
    assert isinstance(v, pygame.math.Vector2)
    assert Point.from_vector(v) == Point(3.0, 4.0)
    assert Point(0, 0).distance_to(Point(3, 4)) == pytest.approx(5.0)


def test_equality_is_exact_and_closeness_is_explicit():
    a = Point(0.1 + 0.2, 1.0)
    b = Point(0.3, 1.0)
    assert a != b
    assert a.is_close(b)
    assert not a.is_close(Point(0.31, 1.0))
    assert len({Point(1, 2), Point(1.0, 2.0)}) == 1


def test_environment_bounds():
    b = EnvironmentBounds(-10, 5, 20, 10)
    assert b.center == Point(0, 10)
    assert b.corners() == (Point(-10, 5), Point(10, 15))
    assert b.aspect_ratio == 2
    assert b.contains(Point(0, 10))
    assert not b.contains(Point(11, 10))


def test_zero_size_bounds_are_degenerate():
    b = EnvironmentBounds()
    assert b.is_degenerate
    assert b.aspect_ratio is None
    assert b.center == Point(0, 0)


def test_bounds_from_points():
    b = EnvironmentBounds.from_points([Point(1, 1), Point(-2, 4), Point(3, 0)])
    assert b == EnvironmentBounds(-2, 0, 5, 4)
    assert EnvironmentBounds.from_points([]) == EnvironmentBounds()


def test_negative_sizes_rejected():
    with pytest.raises(InvalidArgumentError):
        EnvironmentBounds(0, 0, -1, 1)
    with pytest.raises(InvalidArgumentError):
        ViewBounds(-1, 10)
