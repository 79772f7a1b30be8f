"""Entity positions shared between the stepping thread and the painter."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, Mapping

from simview.geometry.point import Point


class EnvironmentSnapshot:
    """Node positions and neighbourhoods, replaced wholesale by the writer.

    A single lock covers "clear + repopulate" on the writer side and
    iteration on the reader side, so a reader never sees a half-filled copy.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._positions: dict[int, Point] = {}
        self._neighbors: dict[int, tuple[int, ...]] = {}
        self.step = 0

    def update(self, positions: Mapping[int, Point],
               neighbors: Mapping[int, Iterable[int]] | None = None,
               step: int | None = None) -> None:
        with self._lock:
            self._positions.clear()
            self._neighbors.clear()
            self._positions.update(positions)
            if neighbors:
                for node, links in neighbors.items():
                    self._neighbors[node] = tuple(links)
            if step is not None:
                self.step = step

    @contextmanager
    def reading(self) -> Iterator[tuple[Mapping[int, Point], Mapping[int, tuple[int, ...]]]]:
        """Hold the lock while the caller iterates positions and neighbourhoods."""
        with self._lock:
            yield self._positions, self._neighbors

    def __len__(self) -> int:
        with self._lock:
            return len(self._positions)
