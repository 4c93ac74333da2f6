"""Load and save the preferences file next to the application."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .preferences import DEFAULT_PREFERENCES, Preferences, dumps_preferences, parse_preferences

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "Configuration"
PREFERENCES_FILE_NAME = "preferences.json"

_SOURCE_ROOT = Path(__file__).resolve().parents[1]


def application_base_dir() -> Path:
    """Directory holding the running executable.

    A frozen build uses the executable's folder. A source checkout uses the
    project root. An installed package uses the folder of the launched
    script, never site-packages.
    """

    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    if (_SOURCE_ROOT / "pyproject.toml").is_file():
        return _SOURCE_ROOT
    return Path(sys.argv[0] or ".").resolve().parent


def default_preferences_path(base_dir: Optional[Path] = None) -> Path:
    """Return ``<base>/Configuration/preferences.json``."""

    base = base_dir if base_dir is not None else application_base_dir()
    return Path(base) / CONFIG_DIR_NAME / PREFERENCES_FILE_NAME


class PreferencesStore:
    """Reads and writes a single preferences file.

    The file is created with default values on the first :meth:`load`.
    Errors other than a missing file are left to the caller.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else default_preferences_path()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> Preferences:
        """Return the stored preferences, writing defaults if the file is missing."""

        if not self._path.exists():
            logger.info("No preferences at %s, writing defaults", self._path)
            preferences = Preferences()
            self.save(preferences)
            return preferences

        try:
            text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            text = ""
        preferences = parse_preferences(text)
        if preferences is None:
            logger.warning("Preferences file %s is unreadable, using defaults", self._path)
            return Preferences()
        return preferences

    def save(self, preferences: Preferences) -> None:
        """Overwrite the preferences file with ``preferences``."""

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(dumps_preferences(preferences), encoding="utf-8")
        logger.debug("Saved preferences to %s", self._path)

    def load_or_default(self) -> Preferences:
        """Like :meth:`load`, but fall back to defaults when the disk fails."""

        try:
            return self.load()
        except OSError as exc:
            logger.warning("Failed to load preferences. Using defaults. (%s)", exc)
            return DEFAULT_PREFERENCES


def load_preferences(path: Optional[Path] = None) -> Preferences:
    return PreferencesStore(path).load()


def save_preferences(preferences: Preferences, path: Optional[Path] = None) -> None:
    PreferencesStore(path).save(preferences)


__all__ = [
    "CONFIG_DIR_NAME",
    "PREFERENCES_FILE_NAME",
    "PreferencesStore",
    "application_base_dir",
    "default_preferences_path",
    "load_preferences",
    "save_preferences",
]
