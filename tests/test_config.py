import json

import pytest

from simview.app.display import Generic2DDisplay, MapDisplay
from simview.config import config_from_dict, load_config
from simview.errors import ConfigError
from simview.render.viewport import Mode


def test_defaults(config):
    assert config.display == "generic"
    assert config.display_factory is Generic2DDisplay
    assert config.mode is Mode.ISOMETRIC


def test_display_resolved_once():
    cfg = config_from_dict({"display": "map", "log_level": "debug"})
    assert cfg.display_factory is MapDisplay
    assert cfg.log_level == "DEBUG"


def test_mode_from_string():
    assert config_from_dict({"mode": "adapt_to_view"}).mode is Mode.ADAPT_TO_VIEW


@pytest.mark.parametrize("data", [
    {"display": "globe"},
    {"colour": "red"},
    {"mode": "sideways"},
    {"mode": "map_projected"},
    {"zoom_step": 0},
    {"zoom_min": 5, "zoom_max": 1},
    {"width": 0},
    {"zoom_kind": "cubic"},
    {"grid_spacing": -1},
    {"rotation_sensitivity": 0},
    {"log_level": "LOUD"},
])
def test_invalid_values(data):
    with pytest.raises(ConfigError):
        config_from_dict(data)


def test_load_missing_file_gives_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.json"))
    assert cfg.width == 1280


def test_load_file(tmp_path):
    path = tmp_path / "viewer.json"
    path.write_text(json.dumps({"width": 640, "height": 480, "grid_spacing": 10}))
    cfg = load_config(str(path))
    assert (cfg.width, cfg.height, cfg.grid_spacing) == (640, 480, 10)


def test_load_broken_file(tmp_path):
    path = tmp_path / "viewer.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(str(path))
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_config(str(path))
