"""Tests for settings loading."""

import os

from roster import config


def test_defaults(monkeypatch) -> None:
    monkeypatch.setattr(config, "load_env_file", lambda: None)
    monkeypatch.delenv("ROSTER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ROSTER_LOG_FORMAT", raising=False)
    settings = config.load_settings()
    assert settings.log_level == "INFO"
    assert settings.log_format == config.DEFAULT_LOG_FORMAT


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setattr(config, "load_env_file", lambda: None)
    monkeypatch.setenv("ROSTER_LOG_LEVEL", " debug ")
    monkeypatch.setenv("ROSTER_LOG_FORMAT", "%(message)s")
    settings = config.load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "%(message)s"


def test_unknown_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setattr(config, "load_env_file", lambda: None)
    monkeypatch.setenv("ROSTER_LOG_LEVEL", "chatty")
    assert config.load_settings().log_level == "INFO"


def test_env_file_loaded_from_cwd(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config, "_REPO_ROOT", tmp_path / "no-repo")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(os, "environ", dict(os.environ))
    monkeypatch.delenv("ROSTER_LOG_LEVEL", raising=False)
    (tmp_path / ".env").write_text("ROSTER_LOG_LEVEL=WARNING\n", encoding="utf-8")
    assert config.load_env_file() == tmp_path / ".env"
    assert config.load_settings().log_level == "WARNING"
