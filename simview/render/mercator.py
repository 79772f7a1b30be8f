"""Spherical Mercator pixel math for 256 px map tiles."""
from __future__ import annotations

import math

from simview.geometry.point import Point

TILE_SIZE = 256
MAX_ZOOM_LEVEL = 18
LATITUDE_LIMIT = 85.05112877980659
LONGITUDE_LIMIT = 180.0


def map_size(zoom_level: int) -> int:
    """Edge length in pixels of the whole world at ``zoom_level``."""
    return TILE_SIZE << zoom_level


def longitude_to_pixel_x(longitude: float, zoom_level: int) -> float:
    return (longitude + 180.0) / 360.0 * map_size(zoom_level)


def latitude_to_pixel_y(latitude: float, zoom_level: int) -> float:
    # The poles project to infinity
    if latitude >= 90.0:
        return -math.inf
    if latitude <= -90.0:
        return math.inf
    sin_lat = math.sin(math.radians(latitude))
    y = 0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)
    return y * map_size(zoom_level)


def pixel_x_to_longitude(pixel_x: float, zoom_level: int) -> float:
    return 360.0 * (pixel_x / map_size(zoom_level) - 0.5)


def pixel_y_to_latitude(pixel_y: float, zoom_level: int) -> float:
    y = 0.5 - pixel_y / map_size(zoom_level)
    return 90.0 - 360.0 * math.atan(math.exp(-y * 2 * math.pi)) / math.pi


def to_pixel(lon_lat: Point, zoom_level: int) -> Point:
    """Project a (longitude, latitude) point to map pixels."""
    return Point(longitude_to_pixel_x(lon_lat.x, zoom_level),
                 latitude_to_pixel_y(lon_lat.y, zoom_level))


def from_pixel(pixel: Point, zoom_level: int) -> Point:
    """Map pixels back to a (longitude, latitude) point."""
    return Point(pixel_x_to_longitude(pixel.x, zoom_level),
                 pixel_y_to_latitude(pixel.y, zoom_level))


def is_pixel_in_range(pixel: Point, zoom_level: int) -> bool:
    size = map_size(zoom_level)
    return 0 <= pixel.x <= size and 0 <= pixel.y <= size


def is_valid_lat_lon(latitude: float, longitude: float) -> bool:
    return -90.0 <= latitude <= 90.0 and -LONGITUDE_LIMIT <= longitude <= LONGITUDE_LIMIT
