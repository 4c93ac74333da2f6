"""Pytest configuration."""
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

try:  # pragma: no cover - optional dependency
    from PySide6 import QtWidgets
except ImportError:  # pragma: no cover - environments without Qt
    QtWidgets = None  # type: ignore

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chess_prefs.logging_setup import reset_logging  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for UI tests."""

    if QtWidgets is None:  # pragma: no cover - tests are skipped
        pytest.skip("PySide6 not available")

    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by ``configure_logging`` between tests."""

    yield
    reset_logging()


@pytest.fixture
def prefs_path(tmp_path: Path) -> Path:
    return tmp_path / "Configuration" / "preferences.json"
