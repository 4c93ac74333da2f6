"""Resolve image asset locations for the selected themes."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .preferences import Preferences

PIECE_TYPES = ("Pawn", "Knight", "Bishop", "Rook", "Queen", "King")
PIECE_COLORS = ("White", "Black")


@dataclass(frozen=True, slots=True)
class AssetPaths:
    """Image files used to draw the board for one set of preferences."""

    background: Path
    board: Path
    pieces_dir: Path

    @classmethod
    def from_preferences(cls, preferences: Preferences, base_dir: Path) -> "AssetPaths":
        root = Path(base_dir) / "Assets"
        return cls(
            background=root / "Backgrounds" / f"{preferences.background}.png",
            board=root / "Boards" / f"{preferences.board}.png",
            pieces_dir=root / "Pieces" / preferences.pieces,
        )

    def piece_image(self, color: str, piece_type: str) -> Path:
        if color not in PIECE_COLORS:
            raise ValueError(f"Unknown piece color: {color!r}")
        if piece_type not in PIECE_TYPES:
            raise ValueError(f"Unknown piece type: {piece_type!r}")
        return self.pieces_dir / f"{color}{piece_type}.png"

    def piece_images(self) -> List[Path]:
        return [self.piece_image(color, piece) for piece in PIECE_TYPES for color in PIECE_COLORS]

    def missing(self) -> List[Path]:
        """Return every expected image that is not on disk."""

        expected = [self.background, self.board, *self.piece_images()]
        return [path for path in expected if not path.is_file()]


def available_themes(directory: Path, *, images: bool) -> List[str]:
    """List theme names found in an asset directory.

    Image themes are ``<name>.png`` files, piece sets are subdirectories.
    """

    if not directory.is_dir():
        return []
    if images:
        names = [entry.stem for entry in directory.glob("*.png") if entry.is_file()]
    else:
        names = [entry.name for entry in directory.iterdir() if entry.is_dir()]
    return sorted(names)


__all__ = ["AssetPaths", "PIECE_COLORS", "PIECE_TYPES", "available_themes"]
