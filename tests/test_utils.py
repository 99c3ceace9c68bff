# tests/test_utils.py
"""Tests for utils: load_config (cache, validation, data dir) and the topic debug printer."""

from __future__ import annotations

import json
from importlib import import_module
from pathlib import Path

import pytest

# utils/__init__ re-exports the load_config *function* under the submodule's
# name, so the modules are loaded by dotted path
LC = import_module("text_splitter.utils.load_config")
LOG = import_module("text_splitter.utils.log")

DataDirNotFound = LC.DataDirNotFound
ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via env."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv(LC.DATA_DIR_ENV_VAR, str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv(LOG.ENV_VAR, raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    clear_config_cache()


# ---------- load_config ----------
def test_load_config_cache_and_clear(tmp_data_dir):
    p = tmp_data_dir / "cfg.json"
    p.write_text(json.dumps({"a": 1}), encoding="utf-8")

    first = load_config("cfg")
    assert first == {"a": 1}
    assert load_config("cfg.json") is first  # cache hit, with or without suffix

    p.write_text(json.dumps({"a": 2}), encoding="utf-8")
    clear_config_cache()
    assert load_config("cfg") == {"a": 2}


def test_load_config_validator_and_errors(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    out = load_config("settings", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}
    assert load_config("settings") == {"alpha": 1}  # cached per validator

    def failing(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(ConfigParseError):
        load_config("settings", validator=failing)

    (tmp_data_dir / "oops.json").write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_explicit_base_dir(tmp_path, monkeypatch):
    monkeypatch.delenv(LC.DATA_DIR_ENV_VAR, raising=False)
    (tmp_path / "x.json").write_text('{"k": [1]}', encoding="utf-8")
    assert load_config("x", base_dir=tmp_path) == {"k": [1]}


def test_temp_data_dir_sets_and_restores_env(tmp_path, monkeypatch):
    monkeypatch.setenv(LC.DATA_DIR_ENV_VAR, "/before")
    with LC.temp_data_dir(tmp_path):
        assert LC.resolve_data_dir() == tmp_path.resolve()
    assert LC.resolve_data_dir() == Path("/before").resolve()


def test_data_dir_walks_up(tmp_path, monkeypatch):
    monkeypatch.delenv(LC.DATA_DIR_ENV_VAR, raising=False)
    (tmp_path / "data").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    # resolve_data_dir starts from the parent of the file it is given
    assert LC.resolve_data_dir(nested / "mod.py") == (tmp_path / "data").resolve()


def test_data_dir_not_found(monkeypatch, tmp_path):
    with monkeypatch.context() as m:
        m.setattr(LC.Path, "is_dir", lambda self: False, raising=True)
        with pytest.raises(DataDirNotFound):
            LC._find_data_dir(tmp_path)


def test_shipped_settings_file_is_discovered(monkeypatch):
    monkeypatch.delenv(LC.DATA_DIR_ENV_VAR, raising=False)
    out = load_config("splitter_settings")
    assert out["empty_delimiter_policy"] == "noop"


# ---------- log.debug ----------
def test_log_debug_silent_by_default(capsys):
    LOG.debug("nobody listens", topic="split")
    assert capsys.readouterr().err == ""


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "pattern")
    LOG.reload_topics()

    LOG.debug("hello on pattern", topic="pattern")
    LOG.debug("should be silent", topic="settings")

    captured = capsys.readouterr()
    assert "hello on pattern" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv(LOG.ENV_VAR, "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="BAR", level="info")

    err = capsys.readouterr().err
    assert "m1" in err and "[bar][INFO] m2" in err
    assert LOG.is_enabled("anything")
