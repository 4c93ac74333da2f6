"""Tests for the command line entry point."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from chess_prefs.app import apply_assignments, main, parse_assignment
from chess_prefs.preferences import Preferences
from chess_prefs.store import PreferencesStore


def test_show_creates_file_and_prints_defaults(prefs_path: Path, capsys) -> None:
    assert main(["--path", str(prefs_path), "show"]) == 0
    out = capsys.readouterr().out
    assert json.loads(out)["Background"] == "Cosmos"
    assert prefs_path.is_file()


def test_default_command_is_show(prefs_path: Path, capsys) -> None:
    assert main(["--path", str(prefs_path)]) == 0
    assert json.loads(capsys.readouterr().out)["ConfirmMove"] is True


def test_path_command(prefs_path: Path, capsys) -> None:
    assert main(["--path", str(prefs_path), "path"]) == 0
    assert capsys.readouterr().out.strip() == str(prefs_path.resolve())


def test_set_updates_only_named_fields(prefs_path: Path) -> None:
    code = main(["--path", str(prefs_path), "set", "PieceSounds=true", "confirm_move=no", "Board=Icy Sea"])
    assert code == 0
    assert PreferencesStore(prefs_path).load() == Preferences(piece_sounds=True, confirm_move=False)


def test_set_rejects_bad_input(prefs_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--path", str(prefs_path), "set", "Volume=11"])
    assert excinfo.value.code == 2
    assert "Unknown setting" in capsys.readouterr().err


def test_reset_restores_defaults(prefs_path: Path) -> None:
    store = PreferencesStore(prefs_path)
    store.save(Preferences(board="Walnut", epson_rc=True))
    assert main(["--path", str(prefs_path), "reset"]) == 0
    assert store.load() == Preferences()


def test_config_file_selects_preferences_path(tmp_path: Path, capsys) -> None:
    target = tmp_path / "elsewhere" / "prefs.json"
    config = tmp_path / "chess.yaml"
    config.write_text(f"preferences_path: {target}\nlog_level: WARNING\n", encoding="utf-8")
    assert main(["--config", str(config), "path"]) == 0
    assert capsys.readouterr().out.strip() == str(target.resolve())


def test_invalid_config_exits_with_usage_error(tmp_path: Path) -> None:
    config = tmp_path / "chess.yaml"
    config.write_text("log_level: loud\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(config), "show"])
    assert excinfo.value.code == 2


def test_log_file_receives_messages(prefs_path: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "prefs.log"
    main(["--path", str(prefs_path), "--log-level", "DEBUG", "--log-file", str(log_file), "reset"])
    assert "Saved preferences" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("EpsonRC=1", ("epson_rc", True)),
        ("cognex_vision=Off", ("cognex_vision", False)),
        ("Pieces=Neo Wood", ("pieces", "NeoWood")),
    ],
)
def test_parse_assignment(text: str, expected: tuple) -> None:
    assert parse_assignment(text) == expected


@pytest.mark.parametrize("text", ["PieceSounds", "PieceSounds=maybe", "Board=", "Theme=Dark"])
def test_parse_assignment_errors(text: str) -> None:
    with pytest.raises(ValueError):
        parse_assignment(text)


def test_apply_assignments_builds_new_record() -> None:
    prefs = Preferences()
    updated = apply_assignments(prefs, ["Background=Deep Space", "PieceSounds=yes"])
    assert updated == Preferences(background="DeepSpace", piece_sounds=True)
    assert prefs == Preferences()


def test_missing_config_file_exits_with_usage_error(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path / "absent.yaml"), "show"])
    assert excinfo.value.code == 2
    assert "Cannot read" in capsys.readouterr().err
