"""Qt widgets for the preferences tools."""

from .preferences_dialog import PreferencesDialog

__all__ = ["PreferencesDialog"]
