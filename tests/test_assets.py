"""Tests for theme asset resolution."""
from __future__ import annotations

from pathlib import Path

import pytest

from chess_prefs.assets import PIECE_TYPES, AssetPaths, available_themes
from chess_prefs.preferences import Preferences


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")


def test_paths_follow_selected_themes(tmp_path: Path) -> None:
    paths = AssetPaths.from_preferences(Preferences(), tmp_path)
    assert paths.background == tmp_path / "Assets" / "Backgrounds" / "Cosmos.png"
    assert paths.board == tmp_path / "Assets" / "Boards" / "IcySea.png"
    assert paths.pieces_dir == tmp_path / "Assets" / "Pieces" / "NeoWood"
    assert paths.piece_image("White", "Queen") == paths.pieces_dir / "WhiteQueen.png"
    assert len(paths.piece_images()) == 2 * len(PIECE_TYPES)


def test_piece_image_rejects_unknown_names(tmp_path: Path) -> None:
    paths = AssetPaths.from_preferences(Preferences(), tmp_path)
    with pytest.raises(ValueError):
        paths.piece_image("Red", "Pawn")
    with pytest.raises(ValueError):
        paths.piece_image("Black", "Archbishop")


def test_missing_reports_absent_images(tmp_path: Path) -> None:
    paths = AssetPaths.from_preferences(Preferences(), tmp_path)
    _touch(paths.background)
    _touch(paths.board)
    for image in paths.piece_images():
        _touch(image)
    assert paths.missing() == []

    paths.piece_image("Black", "King").unlink()
    assert paths.missing() == [paths.piece_image("Black", "King")]


def test_available_themes_lists_images_and_piece_sets(tmp_path: Path) -> None:
    assets = tmp_path / "Assets"
    _touch(assets / "Boards" / "Walnut.png")
    _touch(assets / "Boards" / "IcySea.png")
    _touch(assets / "Boards" / "notes.txt")
    (assets / "Pieces" / "NeoWood").mkdir(parents=True)
    (assets / "Pieces" / "Glass").mkdir(parents=True)

    assert available_themes(assets / "Boards", images=True) == ["IcySea", "Walnut"]
    assert available_themes(assets / "Pieces", images=False) == ["Glass", "NeoWood"]
    assert available_themes(assets / "Backgrounds", images=True) == []
