"""Chess application preferences package."""

from .config import AppConfig, ConfigError
from .preferences import DEFAULT_PREFERENCES, Preferences
from .store import PreferencesStore, load_preferences, save_preferences
from .themes import ThemeCategory, apply_theme_selection, format_theme_name

__all__ = [
    "AppConfig",
    "ConfigError",
    "DEFAULT_PREFERENCES",
    "Preferences",
    "PreferencesStore",
    "ThemeCategory",
    "apply_theme_selection",
    "format_theme_name",
    "load_preferences",
    "save_preferences",
]
