import json

from simview.app.main import App
from simview.config import ViewerConfig, config_from_dict


def _write(tmp_path, data):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_load_scenario_binds_display(tmp_path):
    app = App(ViewerConfig())
    app._load_scenario(_write(tmp_path, {"nodes": {"1": [0, 0], "2": [10, 5]},
                                         "links": {"1": [2]}}))
    assert app.scenario is not None
    assert app.display.viewport is not None
    assert len(app.display.snapshot) == 2
    assert app.display.notification == "Loaded: scenario.json"


def test_geographic_scenario_on_generic_display_is_reported(tmp_path):
    app = App(ViewerConfig())
    app._load_scenario(_write(tmp_path, {
        "environment": {"offset": [12.1, 44.0], "size": [0.4, 0.3], "geographic": True},
        "nodes": {"1": [12.2, 44.1]},
    }))
    assert "Geographic scenario" in app.display.notification


def test_geographic_scenario_on_map_display(tmp_path):
    app = App(config_from_dict({"display": "map"}))
    app._load_scenario(_write(tmp_path, {
        "environment": {"offset": [12.1, 44.0], "size": [0.4, 0.3], "geographic": True},
    }))
    assert app.display.notification == "Loaded: scenario.json"


def test_bad_scenario_keeps_viewer_running(tmp_path):
    app = App(ViewerConfig())
    path = tmp_path / "broken.json"
    path.write_bytes(b"[1, 2]")
    app._load_scenario(str(path))
    assert app.scenario is None
    assert app.display.notification.startswith("Load failed")
