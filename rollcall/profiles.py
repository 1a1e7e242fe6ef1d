from __future__ import annotations
import os
from pathlib import Path
from typing import List, Optional

PROFILE_SUFFIX = ".csv"


def default_home() -> Path:
    """Per-user data root.

    ``ROLLCALL_HOME`` wins; otherwise ``%APPDATA%/RollCall`` on Windows and
    ``~/.config/rollcall`` elsewhere.
    """
    override = os.environ.get("ROLLCALL_HOME")
    if override:
        return Path(override)
    appdata = os.environ.get("APPDATA")
    if appdata:
        return Path(appdata) / "RollCall"
    return Path.home() / ".config" / "rollcall"


def profile_dir(home: Optional[Path] = None) -> Path:
    return (home or default_home()) / "Profile"


def profile_path(name: str, home: Optional[Path] = None) -> Path:
    stem = name.strip()
    if not stem.lower().endswith(PROFILE_SUFFIX):
        stem += PROFILE_SUFFIX
    return profile_dir(home) / stem


def resolve_source(source: str, home: Optional[Path] = None) -> Path:
    """An existing file path is used as-is; anything else is a profile name."""
    p = Path(source)
    if p.is_file():
        return p
    return profile_path(source, home)


def list_profiles(home: Optional[Path] = None) -> List[str]:
    d = profile_dir(home)
    if not d.is_dir():
        return []
    return sorted(p.stem for p in d.glob(f"*{PROFILE_SUFFIX}") if p.is_file())
