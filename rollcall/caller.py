from __future__ import annotations
import logging
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .errors import RollCallError
from .names import read_profile_names
from .rng import RNGFactory, fresh_rng
from .roster import Roster
from .sampler import draw_names

logger = logging.getLogger(__name__)


class RollCall:
    """Thread-safe handle over one roster and its draw history.

    Every public method takes the same lock, so an import, a history clear
    and a draw never interleave. ``rng_factory`` is called once per draw;
    the generator it returns is discarded when the draw finishes.
    """

    def __init__(self, rng_factory: Optional[RNGFactory] = None) -> None:
        self._lock = threading.Lock()
        self._roster = Roster()
        self._rng_factory = rng_factory or fresh_rng

    def import_names(self, candidates: Iterable[str], source: str = "") -> int:
        """Replace the roster with ``candidates``; returns the roster size."""
        with self._lock:
            return self._replace(list(candidates), source)

    def import_file(self, path: Path) -> int:
        """Load a profile file and replace the roster with its names.

        The file is read while the lock is held so the swap is atomic with
        respect to concurrent draws. Nothing changes if the file cannot be
        read or holds no usable names.
        """
        p = Path(path)
        with self._lock:
            candidates = read_profile_names(p)
            return self._replace(candidates, p.name)

    def _replace(self, candidates: List[str], source: str) -> int:
        try:
            n = self._roster.replace(candidates, source)
        except RollCallError as e:
            logger.warning("Import rejected: %s", e)
            raise
        logger.info("Imported %d names from %s", n, source or "<memory>")
        return n

    def clear_history(self) -> None:
        with self._lock:
            self._roster.clear_history()

    def draw(self, count: int) -> List[str]:
        with self._lock:
            return draw_names(self._roster, count, self._rng_factory())

    @property
    def initialized(self) -> bool:
        with self._lock:
            return self._roster.initialized

    def names(self) -> Tuple[str, ...]:
        with self._lock:
            return self._roster.names

    def drawn(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._roster.drawn)
