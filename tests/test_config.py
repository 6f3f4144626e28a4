"""Tests for the settings object."""

import logging

from twitter_archive_codec.config import Config


def test_defaults():
    config = Config()
    assert config.data_dir == "data"
    assert config.manifest_path == "data/manifest.js"
    assert config.manifest_prefix == "window.__THAR_CONFIG = "
    assert config.indent_output is False
    assert config.log_level == logging.INFO


def test_dict_round_trip():
    config = Config.from_dict({"indent_output": True, "encoding": "utf-8-sig"})
    assert config.indent_output is True
    assert Config.from_dict(config.to_dict()).to_dict() == config.to_dict()


def test_load_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"data_dir": "export", "indent_output": true}')
    config = Config()
    config.load(path)
    assert config.data_dir == "export"
    assert config.indent_output is True


def test_manifest_path_follows_data_dir(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"data_dir": "export"}')
    config = Config()
    config.load(path)
    assert config.manifest_path == "export/manifest.js"


def test_explicit_manifest_path_wins():
    config = Config.from_dict({"data_dir": "export", "manifest_path": "meta/manifest.js"})
    assert config.manifest_path == "meta/manifest.js"
    config.data_dir = "other"
    assert config.manifest_path == "meta/manifest.js"
    assert Config.from_dict(config.to_dict()).manifest_path == "meta/manifest.js"


def test_derived_manifest_path_survives_dict_round_trip():
    config = Config.from_dict(Config().to_dict())
    config.data_dir = "export"
    assert config.manifest_path == "export/manifest.js"


def test_setup_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    config = Config.from_dict({"log_level": logging.DEBUG, "log_format": "%(message)s"})
    config.setup_logging()
    assert calls == [{"level": logging.DEBUG, "format": "%(message)s"}]


def test_load_missing_file_keeps_defaults(tmp_path, caplog):
    config = Config()
    with caplog.at_level(logging.WARNING):
        config.load(tmp_path / "missing.json")
    assert config.to_dict() == Config().to_dict()
    assert "No config file" in caplog.text


def test_load_invalid_json(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    config = Config()
    with caplog.at_level(logging.WARNING):
        config.load(path)
    assert config.to_dict() == Config().to_dict()
    assert "Failed to load config" in caplog.text


def test_load_non_object(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with caplog.at_level(logging.WARNING):
        Config().load(path)
    assert "expected a JSON object" in caplog.text


def test_unknown_keys_are_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        config = Config.from_dict({"colour": "blue"})
    assert not hasattr(config, "colour")
    assert "Unknown config key: colour" in caplog.text
