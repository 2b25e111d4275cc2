"""Tests for YAML config file loading."""

import pytest

from tagsafe.config import DEFAULT_CONFIG, Config
from tagsafe.config_loader import ConfigLoader
from tagsafe.errors import ConfigFileError, ConfigRangeError


def write_config(directory, content: str):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "config.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestConfigLoader:
    def test_no_config_file(self, tmp_path):
        loader = ConfigLoader(search_locations=[tmp_path / "user", tmp_path / "project"])

        assert loader.find_config_file() is None
        assert loader.load() is DEFAULT_CONFIG

    def test_loads_explicit_path(self, tmp_path):
        path = write_config(tmp_path, "tab_size: 4\nignore:\n  - script\n  - pre\n")
        config = ConfigLoader(path=path).load()

        assert config == Config(tab_size=4, ignore=("script", "pre"))

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigFileError, match="not found"):
            ConfigLoader(path=tmp_path / "missing.yaml").load()

    def test_priority_order(self, tmp_path):
        write_config(tmp_path / "user", "tab_size: 8\n")
        write_config(tmp_path / "project", "tab_size: 3\n")
        loader = ConfigLoader(search_locations=[tmp_path / "user", tmp_path / "project"])

        assert loader.find_config_file() == tmp_path / "user" / "config.yaml"
        assert loader.load().tab_size == 8

    def test_falls_through_to_later_location(self, tmp_path):
        write_config(tmp_path / "project", "tab_size: 3\n")
        loader = ConfigLoader(search_locations=[tmp_path / "user", tmp_path / "project"])

        assert loader.load().tab_size == 3

    def test_explicit_path_wins(self, tmp_path):
        write_config(tmp_path / "user", "tab_size: 8\n")
        path = write_config(tmp_path / "explicit", "tab_size: 5\n")
        loader = ConfigLoader(path=path, search_locations=[tmp_path / "user"])

        assert loader.load().tab_size == 5

    def test_empty_file(self, tmp_path):
        path = write_config(tmp_path, "")
        assert ConfigLoader(path=path).load() is DEFAULT_CONFIG

    def test_invalid_yaml(self, tmp_path):
        path = write_config(tmp_path, "ignore: [script\n")

        with pytest.raises(ConfigFileError) as exc_info:
            ConfigLoader(path=path).load()
        assert exc_info.value.path == str(path)

    def test_non_mapping_document(self, tmp_path):
        path = write_config(tmp_path, "- script\n- pre\n")

        with pytest.raises(ConfigFileError, match="must contain a mapping"):
            ConfigLoader(path=path).load()

    def test_invalid_values_are_validated(self, tmp_path):
        path = write_config(tmp_path, "tab_size: 40\n")

        with pytest.raises(ConfigRangeError):
            ConfigLoader(path=path).load()

    def test_overrides_layer_on_file(self, tmp_path):
        path = write_config(tmp_path, "tab_size: 4\ntrim: [p]\nstrict: true\n")
        config = ConfigLoader(path=path).load({"tab_size": 6, "trim": ["li"]})

        assert config.tab_size == 6
        assert config.trim == ("p", "li")
        assert config.strict is True

    def test_unicode_marker(self, tmp_path):
        path = write_config(tmp_path, "ignore_with: \"££marker££\"\n")
        assert ConfigLoader(path=path).load().ignore_with == "££marker££"

    def test_default_locations(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        monkeypatch.chdir(tmp_path)
        write_config(tmp_path / ".tagsafe", "tag_wrap: true\n")

        assert ConfigLoader().load().tag_wrap is True
