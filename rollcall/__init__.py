from __future__ import annotations

__version__ = "1.2.0"

from .errors import (
    EmptyRoster,
    NotInitialized,
    RequestExceedsAvailable,
    RequestExceedsRoster,
    RollCallError,
    SourceUnavailable,
)
from .caller import RollCall

__all__ = [
    "__version__",
    "RollCall",
    "RollCallError",
    "SourceUnavailable",
    "EmptyRoster",
    "NotInitialized",
    "RequestExceedsRoster",
    "RequestExceedsAvailable",
]
