"""Host-facing calls with the flat wire format the classroom shell expects.

The shell has no error channel: imports report 0 / -1 and draws return
either the joined names or one of the sentinel strings below. Reasons for
failure go to the log.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from .caller import RollCall
from .errors import ErrorKind, RollCallError
from .profiles import resolve_source

logger = logging.getLogger(__name__)

SEPARATOR = "  "

NOT_INITIALIZED = "Not Initialized!"
NOT_ENOUGH_STUDENTS = "Not enough students!"
NOT_ENOUGH_AVAILABLE = "Not enough available students!"

SENTINELS: Dict[ErrorKind, str] = {
    "NotInitialized": NOT_INITIALIZED,
    "RequestExceedsRoster": NOT_ENOUGH_STUDENTS,
    "RequestExceedsAvailable": NOT_ENOUGH_AVAILABLE,
}

_default = RollCall()


def default_caller() -> RollCall:
    return _default


def is_sentinel(text: str) -> bool:
    return text in SENTINELS.values()


def import_source(source: str, caller: Optional[RollCall] = None, home: Optional[Path] = None) -> int:
    rc = caller or _default
    try:
        rc.import_file(resolve_source(source, home))
    except RollCallError as e:
        logger.error("%s", e)
        return -1
    return 0


def clear_history(caller: Optional[RollCall] = None) -> None:
    (caller or _default).clear_history()


def draw(count: int, caller: Optional[RollCall] = None, separator: str = SEPARATOR) -> str:
    rc = caller or _default
    if count < 0:
        return NOT_ENOUGH_STUDENTS if rc.initialized else NOT_INITIALIZED
    try:
        names = rc.draw(count)
    except RollCallError as e:
        logger.debug("Draw of %d failed: %s", count, e)
        return SENTINELS[e.kind]
    return separator.join(names)
