import logging

import pytest

from shallot import config


def test_defaults(monkeypatch):
    for var in ("SHALLOT_PRELUDE_PATH", "SHALLOT_RECURSION_LIMIT", "SHALLOT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prelude_file().name == "core.shl"
    assert config.get_prelude_file().is_file()
    assert config.get_recursion_limit() == config.DEFAULT_RECURSION_LIMIT
    assert config.get_log_level() == logging.WARNING
    assert (config.programs_root() / "factorial.shl").is_file()


def test_prelude_path_file_uses_parent(monkeypatch, tmp_path):
    f = tmp_path / "core.shl"
    f.write_text("", encoding="utf-8")
    monkeypatch.setenv("SHALLOT_PRELUDE_PATH", str(f))
    assert config.get_prelude_root() == tmp_path


def test_prelude_path_directory_and_blank(monkeypatch, tmp_path):
    monkeypatch.setenv("SHALLOT_PRELUDE_PATH", str(tmp_path))
    assert config.get_prelude_file() == tmp_path / "core.shl"
    monkeypatch.setenv("SHALLOT_PRELUDE_PATH", "  ")
    assert config.get_prelude_file().is_file()


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_bad_recursion_limit(monkeypatch, raw):
    monkeypatch.setenv("SHALLOT_RECURSION_LIMIT", raw)
    with pytest.raises(ValueError):
        config.get_recursion_limit()


def test_log_level(monkeypatch):
    monkeypatch.setenv("SHALLOT_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("SHALLOT_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        config.get_log_level()
