"""JSON scenario files: environment bounds, nodes, links and obstacles."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from simview.errors import ConfigError
from simview.geometry.bounds import EnvironmentBounds
from simview.geometry.obstacles import Obstacle
from simview.geometry.point import Point

FORMAT_VERSION = 1


@dataclass
class Scenario:
    name: str = "Untitled"
    bounds: EnvironmentBounds = field(default_factory=EnvironmentBounds)
    geographic: bool = False
    positions: dict[int, Point] = field(default_factory=dict)
    neighbors: dict[int, list[int]] = field(default_factory=dict)
    obstacles: list[Obstacle] = field(default_factory=list)
    file_path: str | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _point(value: Any) -> Point:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"Expected [x, y], got {value!r}")
    return Point(float(value[0]), float(value[1]))


def _bounds_from_dict(d: Any, positions: dict[int, Point]) -> EnvironmentBounds:
    if not isinstance(d, dict):
        raise ConfigError(f"Expected an environment object, got {d!r}")
    if not d:
        # No explicit bounds: fit the nodes
        return EnvironmentBounds.from_points(positions.values())
    offset = _point(d.get("offset", [0, 0]))
    size = _point(d.get("size", [0, 0]))
    return EnvironmentBounds(offset.x, offset.y, size.x, size.y)


# ---------------------------------------------------------------------------
# From dict / to dict
# ---------------------------------------------------------------------------

def scenario_from_dict(data: dict) -> Scenario:
    if not isinstance(data, dict):
        raise ConfigError(f"A scenario must be an object, got {type(data).__name__}")
    try:
        version = data.get("format_version", FORMAT_VERSION)
        if version > FORMAT_VERSION:
            raise ConfigError(f"Unsupported scenario format_version {version}")
        positions = {int(k): _point(v) for k, v in data.get("nodes", {}).items()}
        neighbors = {int(k): [int(n) for n in v] for k, v in data.get("links", {}).items()}
        obstacles = [Obstacle(tuple(_point(p) for p in poly))
                     for poly in data.get("obstacles", [])]
        env = data.get("environment", {})
        bounds = _bounds_from_dict(env, positions)
    except ConfigError:
        raise
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigError(f"Malformed scenario: {e}") from e
    return Scenario(
        name=data.get("name", "Untitled"),
        bounds=bounds,
        geographic=bool(env.get("geographic", False)),
        positions=positions,
        neighbors=neighbors,
        obstacles=obstacles,
    )


def scenario_to_dict(s: Scenario) -> dict:
    return {
        "format_version": FORMAT_VERSION,
        "name": s.name,
        "environment": {
            "offset": [s.bounds.offset_x, s.bounds.offset_y],
            "size": [s.bounds.size_x, s.bounds.size_y],
            "geographic": s.geographic,
        },
        "nodes": {str(k): [p.x, p.y] for k, p in s.positions.items()},
        "links": {str(k): list(v) for k, v in s.neighbors.items()},
        "obstacles": [[[p.x, p.y] for p in o.vertices] for o in s.obstacles],
    }


def load_scenario(path: str) -> Scenario:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"{path}: {e}") from e
    scenario = scenario_from_dict(data)
    scenario.file_path = path
    return scenario
