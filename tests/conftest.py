"""Shared fixtures for the viewport tests."""
import pytest

from simview.config import ViewerConfig
from simview.geometry.bounds import EnvironmentBounds, ViewBounds
from simview.render.map_viewport import MapViewport
from simview.render.viewport import EuclideanViewport

VIEW = ViewBounds(800, 600)

# Roughly the Cesena area, as (longitude, latitude)
GEO_BOUNDS = EnvironmentBounds(12.1, 44.0, 0.4, 0.3)


@pytest.fixture
def view():
    return VIEW


@pytest.fixture
def euclidean():
    return EuclideanViewport(VIEW, EnvironmentBounds(-50, -20, 100, 50))


@pytest.fixture
def geo_bounds():
    return GEO_BOUNDS


@pytest.fixture
def map_viewport():
    return MapViewport(VIEW, GEO_BOUNDS)


@pytest.fixture
def config():
    return ViewerConfig()
