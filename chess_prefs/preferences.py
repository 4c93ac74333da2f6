"""Persistent user preference record for the chess application."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Preferences:
    """Display and behavior settings chosen by the player."""

    background: str = "Cosmos"
    pieces: str = "NeoWood"
    board: str = "IcySea"
    piece_sounds: bool = False
    confirm_move: bool = True
    epson_rc: bool = False
    cognex_vision: bool = False

    def to_json_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, attr) for key, attr in JSON_KEYS.items()}

    @classmethod
    def from_json_dict(cls, data: Mapping[str, Any]) -> "Preferences":
        """Build a record from a decoded JSON object.

        Keys that are missing or carry a value of the wrong type keep the
        class default for that field. Unknown keys are ignored.
        """

        values: Dict[str, Any] = {}
        for key, attr in JSON_KEYS.items():
            if key not in data:
                continue
            value = data[key]
            expected = _FIELD_TYPES[attr]
            # bool is a subclass of int, but ints are not accepted for flags
            if type(value) is not expected:
                logger.warning("Ignoring %s=%r in preferences, expected %s", key, value, expected.__name__)
                continue
            values[attr] = value
        return cls(**values)


JSON_KEYS: Dict[str, str] = {
    "Background": "background",
    "Pieces": "pieces",
    "Board": "board",
    "PieceSounds": "piece_sounds",
    "ConfirmMove": "confirm_move",
    "EpsonRC": "epson_rc",
    "CognexVision": "cognex_vision",
}

_FIELD_TYPES: Dict[str, type] = {item.name: type(item.default) for item in fields(Preferences)}

DEFAULT_PREFERENCES = Preferences()


def dumps_preferences(preferences: Preferences) -> str:
    """Serialize preferences as indented JSON text."""

    return json.dumps(preferences.to_json_dict(), indent=2, ensure_ascii=False) + "\n"


def parse_preferences(text: str) -> Optional[Preferences]:
    """Return the decoded record, or ``None`` if ``text`` holds no usable object."""

    if not text.strip():
        return None
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        logger.debug("Malformed preferences JSON: %s", exc)
        return None
    if not isinstance(data, dict):
        return None
    return Preferences.from_json_dict(data)


__all__ = [
    "Preferences",
    "DEFAULT_PREFERENCES",
    "JSON_KEYS",
    "dumps_preferences",
    "parse_preferences",
]
