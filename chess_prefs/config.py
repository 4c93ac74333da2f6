"""Application configuration for the preferences tools."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .store import application_base_dir, default_preferences_path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


def _expand(path: Optional[str]) -> Optional[Path]:
    if path is None:
        return None
    return Path(path).expanduser().resolve()


@dataclass(slots=True)
class AppConfig:
    """Where preferences and assets live, and how to log."""

    base_dir: Path = field(default_factory=application_base_dir)
    preferences_path: Optional[Path] = None
    assets_dir: Optional[Path] = None
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def resolved_preferences_path(self) -> Path:
        if self.preferences_path is not None:
            return self.preferences_path
        return default_preferences_path(self.base_dir)

    def resolved_assets_dir(self) -> Path:
        if self.assets_dir is not None:
            return self.assets_dir
        return self.base_dir / "Assets"

    @classmethod
    def from_yaml(cls, file: Path) -> "AppConfig":
        try:
            data = yaml.safe_load(Path(file).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {file}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Cannot read {file}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"{file} must contain a mapping")

        log_level = str(data.get("log_level", "INFO")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {log_level}")

        base_dir = _expand(data.get("base_dir"))
        return cls(
            base_dir=base_dir if base_dir is not None else application_base_dir(),
            preferences_path=_expand(data.get("preferences_path")),
            assets_dir=_expand(data.get("assets_dir")),
            log_level=log_level,
            log_file=_expand(data.get("log_file")),
        )


DEFAULT_CONFIG = AppConfig()


__all__ = ["AppConfig", "ConfigError", "DEFAULT_CONFIG", "LOG_LEVELS"]
