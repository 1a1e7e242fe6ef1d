from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Set, Tuple

from .errors import EmptyRoster
from .names import normalize_names


@dataclass
class Roster:
    """Names available for drawing plus the per-round draw history.

    ``drawn`` is always a subset of ``names``. The two are only ever
    changed together by ``replace`` so a new roster never inherits the
    history of the previous one. Callers are responsible for holding the
    owning lock (see ``RollCall``).
    """

    names: Tuple[str, ...] = ()
    initialized: bool = False
    drawn: Set[str] = field(default_factory=set)

    def replace(self, candidates: Iterable[str], source: str = "") -> int:
        cleaned = normalize_names(candidates)
        if not cleaned:
            raise EmptyRoster(source)
        self.names = tuple(cleaned)
        self.drawn = set()
        self.initialized = True
        return len(self.names)

    def clear_history(self) -> None:
        self.drawn.clear()

    def available(self) -> list[str]:
        return [n for n in self.names if n not in self.drawn]

    def round_complete(self) -> bool:
        return len(self.drawn) >= len(self.names)
