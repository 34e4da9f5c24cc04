"""
Tests for map_config, which overrides the default settings from a json file.
"""

import json

import pytest
import map_config
from map_config import config
from ordered_map import OrderedMap


@pytest.fixture
def saved_config():
    before = dict(config)
    yield config
    config.clear()
    config.update(before)


class TestLoad:
    def test_missing_file(self, tmp_path, saved_config):
        before = dict(saved_config)
        assert map_config.load(str(tmp_path / "nothing.json")) is False
        assert saved_config == before

    def test_overrides(self, tmp_path, saved_config):
        path = tmp_path / "ordered_map.json"
        path.write_text(json.dumps({"initial_capacity": 64}))
        assert map_config.load(str(path)) is True
        assert saved_config["initial_capacity"] == 64
        assert OrderedMap().capacity() == 64

    def test_unknown_setting(self, tmp_path, saved_config):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"colour": "blue"}))
        with pytest.raises(KeyError):
            map_config.load(str(path))
        assert "colour" not in saved_config

    def test_not_an_object(self, tmp_path, saved_config):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            map_config.load(str(path))


    @pytest.mark.parametrize("overrides", [
        {"initial_capacity": "x"},
        {"initial_capacity": 2.5},
        {"initial_capacity": True},
        {"initial_capacity": -3},
        {"verbose": 1},
    ])
    def test_bad_values(self, tmp_path, saved_config, overrides):
        before = dict(saved_config)
        path = tmp_path / "typed.json"
        path.write_text(json.dumps(overrides))
        with pytest.raises(ValueError):
            map_config.load(str(path))
        assert saved_config == before
        OrderedMap()


class TestLog:
    def test_quiet_by_default(self, capsys, saved_config):
        saved_config["verbose"] = False
        map_config.log("hello")
        assert capsys.readouterr().out == ""

    def test_verbose(self, capsys, saved_config):
        saved_config["verbose"] = True
        map_config.log("hello")
        assert capsys.readouterr().out == "hello\n"
