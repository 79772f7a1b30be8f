import json

import pytest

from simview.errors import ConfigError
from simview.geometry.bounds import EnvironmentBounds
from simview.geometry.obstacles import Obstacle
from simview.geometry.point import Point
from simview.project.scenario import (
    FORMAT_VERSION,
    Scenario,
    load_scenario,
    scenario_from_dict,
    scenario_to_dict,
)


def test_from_dict():
    s = scenario_from_dict({
        "name": "ring",
        "environment": {"offset": [0, 0], "size": [10, 10]},
        "nodes": {"1": [1, 2], "2": [3, 4]},
        "links": {"1": [2]},
        "obstacles": [[[5, 5], [6, 5], [6, 6]]],
    })
    assert s.name == "ring"
    assert s.bounds == EnvironmentBounds(0, 0, 10, 10)
    assert s.positions == {1: Point(1, 2), 2: Point(3, 4)}
    assert s.neighbors == {1: [2]}
    assert len(s.obstacles) == 1
    assert not s.geographic


def test_bounds_fitted_to_nodes():
    s = scenario_from_dict({"nodes": {"1": [-1, 2], "2": [3, 7]}})
    assert s.bounds == EnvironmentBounds(-1, 2, 4, 5)


def test_to_dict_keeps_everything():
    s = Scenario(name="geo", bounds=EnvironmentBounds(12, 44, 1, 1), geographic=True,
                 positions={3: Point(12.5, 44.5)}, neighbors={3: []},
                 obstacles=[Obstacle.rectangle(12, 44, 0.1, 0.1)])
    back = scenario_from_dict(scenario_to_dict(s))
    assert back.geographic
    assert back.bounds == s.bounds
    assert back.positions == s.positions
    assert back.obstacles == s.obstacles


@pytest.mark.parametrize("data", [
    {"format_version": FORMAT_VERSION + 1},
    {"nodes": {"a": [1, 2]}},
    {"nodes": {"1": [1]}},
    {"obstacles": [[[0, 0], [1, 1]]]},
    {"environment": {"offset": [0, 0], "size": [-1, 3]}},
    [],
    {"format_version": "1"},
    {"environment": [1, 2]},
    {"nodes": [[0, 0]]},
])
def test_malformed(data):
    with pytest.raises(ConfigError):
        scenario_from_dict(data)


def test_load(tmp_path):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps({"nodes": {"1": [0, 0]}}))
    s = load_scenario(str(path))
    assert s.file_path == str(path)
    path.write_text("{")
    with pytest.raises(ConfigError):
        load_scenario(str(path))
    path.write_bytes(b'{"name": "\xff"}')
    with pytest.raises(ConfigError):
        load_scenario(str(path))
