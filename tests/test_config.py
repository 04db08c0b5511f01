"""Tests for configuration and the entry point."""

import io
import sys
from pathlib import Path

import pytest

from isopod_adventure import main
from isopod_adventure.config import Config


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for var in ("ISOPOD_WORLD_FILE", "ISOPOD_LOG_LEVEL", "ISOPOD_LOG_FILE", "ISOPOD_JSON_LOGS"):
        monkeypatch.delenv(var, raising=False)
    config = Config.from_env()
    assert config.world_file is None
    assert config.log_level == "WARNING"
    assert config.log_file is None
    assert not config.json_logs


def test_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("ISOPOD_WORLD_FILE", str(tmp_path / "w.toml"))
    monkeypatch.setenv("ISOPOD_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ISOPOD_LOG_FILE", str(tmp_path / "game.log"))
    monkeypatch.setenv("ISOPOD_JSON_LOGS", "yes")
    config = Config.from_env()
    assert config.world_file == tmp_path / "w.toml"
    assert config.log_level == "DEBUG"
    assert config.log_file == tmp_path / "game.log"
    assert config.json_logs


def test_main_aborts_on_bad_world(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture,
):
    monkeypatch.setenv("ISOPOD_WORLD_FILE", str(tmp_path / "missing.toml"))
    monkeypatch.setenv("ISOPOD_LOG_FILE", str(tmp_path / "game.log"))
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 1
    assert "Could not read world file" in capsys.readouterr().err
    assert "world_load_failed" in (tmp_path / "game.log").read_text()


def test_main_plays(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys):
    monkeypatch.delenv("ISOPOD_WORLD_FILE", raising=False)
    monkeypatch.setenv("ISOPOD_LOG_FILE", str(tmp_path / "game.log"))
    monkeypatch.setattr(sys, "stdin", io.StringIO("look\nquit\n"))
    main()
    out = capsys.readouterr().out
    assert "lush garden" in out
    assert "Goodbye, little isopod!" in out
