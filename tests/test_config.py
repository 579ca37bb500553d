"""Tests for config module."""

import dataclasses

import pytest
import yaml

from loggly_tree.client import DEFAULT_ENDPOINT, ConfigurationError
from loggly_tree.config import Config, load_config

ENV_VARS = (
    "LOGGLY_CONFIG",
    "LOGGLY_TOKEN",
    "LOGGLY_ENDPOINT",
    "LOGGLY_TAGS",
    "LOGGLY_TIMEOUT",
    "LOGGLY_MAX_WORKERS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _write_yaml(tmp_path, data):
    path = tmp_path / "loggly.yaml"
    path.write_text(yaml.dump(data))
    return str(path)


class TestConfigDefaults:
    def test_defaults(self):
        cfg = Config()
        assert cfg.token == ""
        assert cfg.endpoint == DEFAULT_ENDPOINT
        assert cfg.tags == ""
        assert cfg.timeout == 10.0
        assert cfg.max_workers == 2

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.token = "abc"

    def test_load_without_sources(self):
        assert load_config() == Config()


class TestLoadConfigYaml:
    def test_yaml_section(self, tmp_path):
        path = _write_yaml(tmp_path, {"loggly": {"token": "abc", "timeout": 2, "tags": "prod"}})
        cfg = load_config(path)
        assert cfg.token == "abc"
        assert cfg.timeout == 2.0
        assert cfg.tags == "prod"
        assert cfg.max_workers == 2

    def test_tag_list(self, tmp_path):
        path = _write_yaml(tmp_path, {"loggly": {"tags": ["prod", "web"]}})
        assert load_config(path).tags == "prod,web"

    def test_path_from_env(self, tmp_path, monkeypatch):
        path = _write_yaml(tmp_path, {"loggly": {"token": "from-file"}})
        monkeypatch.setenv("LOGGLY_CONFIG", path)
        assert load_config().token == "from-file"

    def test_missing_file_uses_defaults(self):
        assert load_config("/nonexistent/loggly.yaml") == Config()

    def test_invalid_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("loggly: [unclosed")
        assert load_config(str(path)) == Config()

    def test_unknown_keys_ignored(self, tmp_path):
        path = _write_yaml(tmp_path, {"loggly": {"token": "abc", "colour": "blue"}})
        assert load_config(path).token == "abc"

    def test_bad_value_raises(self, tmp_path):
        path = _write_yaml(tmp_path, {"loggly": {"max_workers": "many"}})
        with pytest.raises(ConfigurationError):
            load_config(path)


class TestLoadConfigEnv:
    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("LOGGLY_TOKEN", "env-token")
        monkeypatch.setenv("LOGGLY_ENDPOINT", "http://localhost:8080/")
        monkeypatch.setenv("LOGGLY_TAGS", "a,b")
        monkeypatch.setenv("LOGGLY_TIMEOUT", "1.5")
        monkeypatch.setenv("LOGGLY_MAX_WORKERS", "4")
        cfg = load_config()
        assert cfg == Config(
            token="env-token",
            endpoint="http://localhost:8080/",
            tags="a,b",
            timeout=1.5,
            max_workers=4,
        )

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = _write_yaml(tmp_path, {"loggly": {"token": "from-file", "tags": "file"}})
        monkeypatch.setenv("LOGGLY_TOKEN", "from-env")
        cfg = load_config(path)
        assert cfg.token == "from-env"
        assert cfg.tags == "file"

    def test_bad_env_value_raises(self, monkeypatch):
        monkeypatch.setenv("LOGGLY_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            load_config()
