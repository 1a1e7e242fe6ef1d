from __future__ import annotations
import logging
from typing import List, Sequence, Set

from .errors import NotInitialized, RequestExceedsAvailable, RequestExceedsRoster
from .rng import RNG
from .roster import Roster

logger = logging.getLogger(__name__)


def partial_shuffle(pool: Sequence[str], count: int, rng: RNG, drawn: Set[str]) -> List[str]:
    """Pick ``count`` distinct entries of ``pool`` with a partial Fisher-Yates shuffle.

    Only the first ``count`` slots of an index array are shuffled, so the
    cost is O(count) swaps on top of building the index. Every ordered
    selection of ``count`` entries is equally likely. Each pick is added to
    ``drawn`` as soon as it is made.
    """
    if count > len(pool):
        raise ValueError(f"cannot pick {count} from a pool of {len(pool)}")
    idx = list(range(len(pool)))
    out: List[str] = []
    for i in range(count):
        j = rng.randint(i, len(idx) - 1)
        idx[i], idx[j] = idx[j], idx[i]
        name = pool[idx[i]]
        drawn.add(name)
        out.append(name)
    return out


def draw_names(roster: Roster, count: int, rng: RNG) -> List[str]:
    """Draw ``count`` names that have not been drawn yet in the current round.

    Checks run in a fixed order: not initialized, larger than the whole
    roster, then (after resetting a finished round, at most once per call)
    larger than what is left. A failed call only ever changes the history
    through that one reset.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if not roster.initialized:
        raise NotInitialized()
    if count > len(roster.names):
        raise RequestExceedsRoster(count, len(roster.names))

    if roster.round_complete():
        logger.debug("All %d names drawn; starting a new round", len(roster.names))
        roster.clear_history()

    available = roster.available()
    if count > len(available):
        raise RequestExceedsAvailable(count, len(available))
    return partial_shuffle(available, count, rng, roster.drawn)
