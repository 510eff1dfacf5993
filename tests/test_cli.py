from __future__ import annotations

import logging
from pathlib import Path

import pytest

from flatkv.cli import main
from flatkv.config import ENV_SETTINGS_PATH, default_settings_path


def test_default_settings_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(ENV_SETTINGS_PATH, raising=False)
    assert default_settings_path() == Path.home() / ".flatkv" / "settings.txt"

    monkeypatch.setenv(ENV_SETTINGS_PATH, str(tmp_path / "custom.txt"))
    assert default_settings_path() == tmp_path / "custom.txt"


def test_cli_set_get_list_unset(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "conf" / "settings.txt"
    f = ["--file", str(p)]

    assert main(f + ["set", "name", "demo"]) == 0
    assert main(f + ["set", "count", "7", "--as", "int"]) == 0
    assert main(f + ["set", "enabled", "yes", "--as", "bool"]) == 0
    assert p.is_file()
    capsys.readouterr()

    assert main(f + ["get", "count", "--as", "int"]) == 0
    assert main(f + ["get", "enabled", "--as", "bool"]) == 0
    assert main(f + ["list"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["7", "true", "count=7", "enabled=true", "name=demo"]

    assert main(f + ["unset", "name"]) == 0
    assert "name=" not in p.read_text(encoding="utf-8")


def test_cli_uses_env_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "env.txt"
    monkeypatch.setenv(ENV_SETTINGS_PATH, str(p))

    assert main(["init"]) == 0
    assert p.is_file()
    assert capsys.readouterr().out.strip() == str(p)


def test_cli_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "settings.txt"
    p.write_bytes(b"word=abc\n")
    f = ["--file", str(p)]

    assert main(f + ["get", "missing"]) == 1
    assert "Setting not found: missing" in capsys.readouterr().err

    assert main(f + ["get", "word", "--as", "int"]) == 1
    assert "Cannot convert" in capsys.readouterr().err

    assert main(f + ["set", "n", "1.5", "--as", "int"]) == 1
    assert main(f + ["set", "b", "maybe", "--as", "bool"]) == 1
    assert p.read_bytes() == b"word=abc\n"

    assert main(["--file", str(tmp_path / "absent.txt"), "list"]) == 1
    assert "Unable to open settings file" in capsys.readouterr().err


def test_cli_log_file(tmp_path: Path) -> None:
    p = tmp_path / "settings.txt"
    log = tmp_path / "logs" / "flatkv.log"
    root = logging.getLogger()
    level = root.level
    try:
        assert main(["--file", str(p), "-v", "--log-file", str(log), "set", "a", "1"]) == 0
        assert log.is_file()
    finally:
        for h in list(root.handlers):
            if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log:
                root.removeHandler(h)
                h.close()
        root.setLevel(level)


def test_cli_every_subcommand_has_a_handler() -> None:
    from flatkv.cli import _COMMANDS, _build_parser

    ap = _build_parser()
    sub = next(a for a in ap._actions if a.dest == "command")
    assert set(sub.choices) == set(_COMMANDS) | {"init"}
