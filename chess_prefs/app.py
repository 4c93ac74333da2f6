"""Command line entry point for inspecting and editing preferences."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, LOG_LEVELS, AppConfig, ConfigError
from .logging_setup import configure_logging
from .preferences import JSON_KEYS, Preferences, dumps_preferences
from .store import PreferencesStore
from .themes import normalize_theme_name

logger = logging.getLogger(__name__)

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}
_THEME_FIELDS = {"background", "pieces", "board"}


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chess-prefs", description="Chess preferences")
    parser.add_argument("--config", type=Path, help="Path to YAML configuration", default=None)
    parser.add_argument("--path", type=Path, help="Preferences file to use", default=None)
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Logging level")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")

    commands = parser.add_subparsers(dest="command")
    commands.add_parser("show", help="Print the current preferences as JSON")
    commands.add_parser("path", help="Print the preferences file location")
    commands.add_parser("reset", help="Restore the default preferences")
    set_parser = commands.add_parser("set", help="Change one or more settings")
    set_parser.add_argument("assignments", nargs="+", metavar="KEY=VALUE")
    commands.add_parser("edit", help="Open the preferences dialog")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    config = replace(DEFAULT_CONFIG)
    if args.config:
        config = AppConfig.from_yaml(args.config)
    # CLI overrides the file
    if args.path:
        config.preferences_path = args.path.expanduser().resolve()
    if args.log_level:
        config.log_level = args.log_level
    if args.log_file:
        config.log_file = args.log_file.expanduser().resolve()
    return config


def _field_for_key(key: str) -> str:
    if key in JSON_KEYS:
        return JSON_KEYS[key]
    if key in JSON_KEYS.values():
        return key
    raise ValueError(f"Unknown setting: {key}")


def parse_assignment(text: str) -> Tuple[str, Any]:
    """Turn ``KEY=VALUE`` into a record attribute and a typed value."""

    key, sep, raw = text.partition("=")
    if not sep:
        raise ValueError(f"Expected KEY=VALUE, got {text!r}")
    attr = _field_for_key(key.strip())
    raw = raw.strip()
    if attr in _THEME_FIELDS:
        theme = normalize_theme_name(raw)
        if not theme:
            raise ValueError(f"{key} needs a theme name")
        return attr, theme
    lowered = raw.lower()
    if lowered in _TRUE:
        return attr, True
    if lowered in _FALSE:
        return attr, False
    raise ValueError(f"{key} expects true or false, got {raw!r}")


def apply_assignments(preferences: Preferences, assignments: Sequence[str]) -> Preferences:
    changes: Dict[str, Any] = dict(parse_assignment(item) for item in assignments)
    return replace(preferences, **changes)


def _run_editor(store: PreferencesStore, config: AppConfig) -> int:
    from PySide6 import QtWidgets

    from .ui import PreferencesDialog

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    dialog = PreferencesDialog(store.load_or_default(), config.resolved_assets_dir())
    if dialog.exec() != QtWidgets.QDialog.DialogCode.Accepted:
        return 0
    result = dialog.result_preferences()
    if result is not None:
        store.save(result)
        logger.info("Preferences updated from dialog")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    try:
        config = load_config(args)
    except ConfigError as exc:
        arg_parser.error(str(exc))

    configure_logging(config.log_level, config.log_file)
    store = PreferencesStore(config.resolved_preferences_path())
    command = args.command or "show"

    if command == "path":
        print(store.path)
        return 0
    if command == "reset":
        store.save(Preferences())
        return 0
    if command == "set":
        try:
            updated = apply_assignments(store.load(), args.assignments)
        except ValueError as exc:
            arg_parser.error(str(exc))
        store.save(updated)
        return 0
    if command == "edit":
        return _run_editor(store, config)

    sys.stdout.write(dumps_preferences(store.load()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
