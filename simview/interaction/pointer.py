"""Last two pointer samples and their difference."""
from __future__ import annotations

from simview.geometry.point import Point


class PointerDelta:
    """Tracks pointer motion between consecutive samples.

    There is no primed state: the first variation is measured from the origin.
    """

    def __init__(self):
        self._previous = Point.origin()
        self._current = Point.origin()

    @property
    def current_position(self) -> Point:
        return self._current

    @property
    def previous_position(self) -> Point:
        return self._previous

    def set_current_position(self, p: Point) -> None:
        self._previous = self._current
        self._current = p

    def variation(self) -> Point:
        return self._current - self._previous
