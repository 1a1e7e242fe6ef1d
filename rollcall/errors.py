from __future__ import annotations
from typing import Literal

ErrorKind = Literal[
    "SourceUnavailable",
    "EmptyRoster",
    "NotInitialized",
    "RequestExceedsRoster",
    "RequestExceedsAvailable",
]


class RollCallError(Exception):
    """Base class for every expected failure of an import or a draw.

    None of these are fatal: the caller is expected to re-import, ask for
    fewer names or clear the history and try again.
    """

    kind: ErrorKind


class SourceUnavailable(RollCallError):
    kind: ErrorKind = "SourceUnavailable"

    def __init__(self, source: str, reason: str = "") -> None:
        self.source = source
        self.reason = reason
        msg = f"Failed to open: {source}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class EmptyRoster(RollCallError):
    kind: ErrorKind = "EmptyRoster"

    def __init__(self, source: str = "") -> None:
        self.source = source
        super().__init__("Namelist is empty!" + (f" ({source})" if source else ""))


class NotInitialized(RollCallError):
    kind: ErrorKind = "NotInitialized"

    def __init__(self) -> None:
        super().__init__("No roster has been imported yet.")


class RequestExceedsRoster(RollCallError):
    kind: ErrorKind = "RequestExceedsRoster"

    def __init__(self, requested: int, roster_size: int) -> None:
        self.requested = requested
        self.roster_size = roster_size
        super().__init__(f"Requested {requested} names but the roster only has {roster_size}.")


class RequestExceedsAvailable(RollCallError):
    kind: ErrorKind = "RequestExceedsAvailable"

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(f"Requested {requested} names but only {available} remain in this round.")
