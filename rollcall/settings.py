from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .profiles import default_home

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"


@dataclass
class Settings:
    """User preferences stored next to the profile directory.

    default_profile is the roster loaded when no --profile is given.
    separator only affects how drawn names are joined for display.
    """

    default_profile: str = "default"
    default_count: int = 1
    separator: str = "  "


def settings_path(home: Optional[Path] = None) -> Path:
    return (home or default_home()) / SETTINGS_FILE


def load_settings(path: Path) -> Settings:
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8", errors="ignore"))
        default_profile = str(data.get("default_profile", "default")).strip()
        default_count = int(data.get("default_count", 1))
        separator = data.get("separator", "  ")

        if not default_profile:
            default_profile = "default"
        if default_count < 1:
            default_count = 1
        if not isinstance(separator, str):
            separator = "  "

        return Settings(default_profile=default_profile, default_count=default_count, separator=separator)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        # If corrupted, fall back safely.
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return Settings()


def save_settings(path: Path, settings: Settings) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "default_profile": settings.default_profile,
        "default_count": int(settings.default_count),
        "separator": settings.separator,
    }
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
