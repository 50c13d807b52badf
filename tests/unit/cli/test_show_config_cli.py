from __future__ import annotations

import json
from pathlib import Path

import yaml

from simple_adb.cli import show_config


def test_show_config_defaults_as_yaml(monkeypatch, capsys) -> None:
    monkeypatch.delenv("SIMPLE_ADB_PATH", raising=False)
    monkeypatch.delenv("SIMPLE_ADB_SERIAL", raising=False)

    assert show_config.main([]) == 0

    data = yaml.safe_load(capsys.readouterr().out)
    assert data == {"path": "adb", "serial": None, "base_command": ["adb"]}


def test_show_config_file_then_flag_override(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.delenv("SIMPLE_ADB_PATH", raising=False)
    monkeypatch.delenv("SIMPLE_ADB_SERIAL", raising=False)
    cfg = tmp_path / "adb.yaml"
    cfg.write_text("path: /usr/bin/adb\nserial: emulator-5554\n", encoding="utf-8")

    rc = show_config.main(["--config", str(cfg), "--path", "foo", "--format", "json"])
    assert rc == 0

    data = json.loads(capsys.readouterr().out)
    assert data["path"] == "foo"
    assert data["serial"] == "emulator-5554"
    assert data["base_command"] == ["foo", "-s", "emulator-5554"]


def test_show_config_reads_env_defaults(monkeypatch, capsys) -> None:
    monkeypatch.setenv("SIMPLE_ADB_PATH", "/env/adb")
    monkeypatch.setenv("SIMPLE_ADB_SERIAL", "env-serial")

    assert show_config.main(["--format", "json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["base_command"] == ["/env/adb", "-s", "env-serial"]


def test_show_config_missing_file_returns_2(tmp_path: Path, capsys) -> None:
    rc = show_config.main(["--config", str(tmp_path / "nope.yaml")])
    assert rc == 2
    assert capsys.readouterr().err.startswith("error: ")


def test_show_config_directory_as_config_returns_2(tmp_path: Path, capsys) -> None:
    conf = tmp_path / "conf.yaml"
    conf.mkdir()

    rc = show_config.main(["--config", str(conf)])
    assert rc == 2
    assert capsys.readouterr().err.startswith("error: ")
