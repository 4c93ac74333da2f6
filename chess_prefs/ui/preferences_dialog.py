"""Qt dialog for editing theme choices and behavior flags."""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Optional

from PySide6 import QtWidgets

from ..assets import available_themes
from ..preferences import Preferences
from ..themes import BOARD_LABEL_COLORS, ThemeCategory, apply_theme_selection, format_theme_name


class PreferencesDialog(QtWidgets.QDialog):
    """Edit a single preferences record without touching the disk."""

    def __init__(
        self,
        preferences: Preferences,
        assets_dir: Optional[Path] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Preferences")
        self.setModal(True)
        self._preferences = preferences
        self._assets_dir = assets_dir
        self._result: Optional[Preferences] = None

        main_layout = QtWidgets.QVBoxLayout(self)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(12)

        self._build_theme_group(main_layout)
        self._build_behavior_group(main_layout)

        button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Cancel |
            QtWidgets.QDialogButtonBox.StandardButton.Ok
        )
        button_box.accepted.connect(self.accept)
        button_box.rejected.connect(self.reject)
        main_layout.addWidget(button_box)

        self.resize(360, 0)

    def result_preferences(self) -> Optional[Preferences]:
        return self._result

    def accept(self) -> None:
        self._result = self._build_preferences()
        super().accept()

    def _theme_choices(self, category: ThemeCategory, current: str) -> List[str]:
        names: set[str] = {current} if current else set()
        if self._assets_dir is not None:
            if category is ThemeCategory.BACKGROUND:
                names.update(available_themes(self._assets_dir / "Backgrounds", images=True))
            elif category is ThemeCategory.BOARD:
                names.update(available_themes(self._assets_dir / "Boards", images=True))
            else:
                names.update(available_themes(self._assets_dir / "Pieces", images=False))
        if category is ThemeCategory.BOARD:
            names.update(BOARD_LABEL_COLORS)
        return sorted(names, key=str.casefold)

    def _make_combo(self, category: ThemeCategory, current: str) -> QtWidgets.QComboBox:
        combo = QtWidgets.QComboBox()
        combo.addItems([format_theme_name(name) for name in self._theme_choices(category, current)])
        index = combo.findText(format_theme_name(current))
        if index >= 0:
            combo.setCurrentIndex(index)
        return combo

    def _build_theme_group(self, layout: QtWidgets.QVBoxLayout) -> None:
        group = QtWidgets.QGroupBox("Appearance")
        form = QtWidgets.QFormLayout(group)
        form.setSpacing(6)

        self._background_combo = self._make_combo(ThemeCategory.BACKGROUND, self._preferences.background)
        self._pieces_combo = self._make_combo(ThemeCategory.PIECES, self._preferences.pieces)
        self._board_combo = self._make_combo(ThemeCategory.BOARD, self._preferences.board)
        form.addRow("Background", self._background_combo)
        form.addRow("Pieces", self._pieces_combo)
        form.addRow("Board", self._board_combo)

        layout.addWidget(group)

    def _build_behavior_group(self, layout: QtWidgets.QVBoxLayout) -> None:
        group = QtWidgets.QGroupBox("Behavior")
        group_layout = QtWidgets.QVBoxLayout(group)
        group_layout.setSpacing(6)

        self._sounds_checkbox = QtWidgets.QCheckBox("Piece sounds")
        self._confirm_checkbox = QtWidgets.QCheckBox("Confirm moves")
        self._epson_checkbox = QtWidgets.QCheckBox("Epson robot motion")
        self._cognex_checkbox = QtWidgets.QCheckBox("Cognex vision")
        for checkbox, checked in self._checkbox_states():
            checkbox.setChecked(checked)
            group_layout.addWidget(checkbox)

        layout.addWidget(group)

    def _checkbox_states(self) -> Iterable[tuple[QtWidgets.QCheckBox, bool]]:
        return (
            (self._sounds_checkbox, self._preferences.piece_sounds),
            (self._confirm_checkbox, self._preferences.confirm_move),
            (self._epson_checkbox, self._preferences.epson_rc),
            (self._cognex_checkbox, self._preferences.cognex_vision),
        )

    def _build_preferences(self) -> Preferences:
        preferences = self._preferences
        for category, combo in (
            (ThemeCategory.BACKGROUND, self._background_combo),
            (ThemeCategory.PIECES, self._pieces_combo),
            (ThemeCategory.BOARD, self._board_combo),
        ):
            preferences = apply_theme_selection(preferences, category, combo.currentText())
        return replace(
            preferences,
            piece_sounds=self._sounds_checkbox.isChecked(),
            confirm_move=self._confirm_checkbox.isChecked(),
            epson_rc=self._epson_checkbox.isChecked(),
            cognex_vision=self._cognex_checkbox.isChecked(),
        )


__all__ = ["PreferencesDialog"]
