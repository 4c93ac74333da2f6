"""Helpers for theme names and board label colors."""
from __future__ import annotations

import enum
import logging
from dataclasses import replace
from typing import Dict, Optional, Tuple

from .preferences import Preferences

logger = logging.getLogger(__name__)


class ThemeCategory(enum.Enum):
    """Theme slots of the preferences record."""

    BACKGROUND = "background"
    PIECES = "pieces"
    BOARD = "board"


# Light and dark label colors per board skin
BOARD_LABEL_COLORS: Dict[str, Tuple[str, str]] = {
    "Baseball": ("#F0D9B5", "#B58863"),
    "Basketball": ("#F0D9B5", "#B58863"),
    "Blue": ("#ECECD7", "#4D6D92"),
    "Brown": ("#F0D9B5", "#B58863"),
    "Bubblegum": ("#fff3f3", "#f9cdd3"),
    "Dash": ("#bd9257", "#6b3a27"),
    "Glass": ("#667188", "#282f3f"),
    "Green": ("#edeed1", "#779952"),
    "IcySea": ("#c5d5dc", "#7a9db2"),
    "Light": ("#dcdcdc", "#aaaaaa"),
    "Purple": ("#EFEFEF", "#8877B7"),
    "Red": ("#F0D8BF", "#BA5546"),
    "Sky": ("#efefef", "#c2d7e2"),
    "Tournament": ("#ebece8", "#316549"),
    "Valentine'sDay": ("#f1fbff", "#f1a3a7"),
    "Walnut": ("#c0a684", "#835f42"),
    "8-Bit": ("#f3f3f4", "#6a9b41"),
}


def format_theme_name(name: Optional[str]) -> str:
    """Split camel case for display, e.g. ``NeoWood`` -> ``Neo Wood``."""

    if name is None:
        return ""
    if not name.strip():
        return name
    chars = [name[0]]
    for previous, current in zip(name, name[1:]):
        if previous.islower() and current.isupper():
            chars.append(" ")
        chars.append(current)
    return "".join(chars)


def normalize_theme_name(display: Optional[str]) -> str:
    """Inverse of :func:`format_theme_name`."""

    return (display or "").replace(" ", "")


def apply_theme_selection(preferences: Preferences, category: ThemeCategory, selected: Optional[str]) -> Preferences:
    """Return a copy of ``preferences`` with ``category`` set to ``selected``."""

    theme = normalize_theme_name(selected)
    if not theme:
        return preferences
    return replace(preferences, **{category.value: theme})


def board_label_colors(board: str) -> Optional[Tuple[str, str]]:
    """Return the (light, dark) label colors for ``board``, or ``None`` if unknown."""

    colors = BOARD_LABEL_COLORS.get(board)
    if colors is None:
        logger.warning("Unknown board theme: %s. Skipping label coloring.", board)
    return colors


__all__ = [
    "BOARD_LABEL_COLORS",
    "ThemeCategory",
    "apply_theme_selection",
    "board_label_colors",
    "format_theme_name",
    "normalize_theme_name",
]
