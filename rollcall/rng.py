from __future__ import annotations
import hashlib, random
from dataclasses import dataclass
from typing import Any, Callable, Optional

def hash64(*parts: Any) -> int:
    h = hashlib.blake2b(digest_size=8)
    for p in parts:
        h.update(str(p).encode("utf-8"))
        h.update(b"\x1f")
    return int.from_bytes(h.digest(), "big", signed=False)

@dataclass
class RNG:
    # seed=None pulls fresh OS entropy
    seed: Optional[int] = None
    _r: random.Random = None  # type: ignore

    def __post_init__(self) -> None:
        self._r = random.Random(self.seed)

    def randint(self, a: int, b: int) -> int:
        return self._r.randint(a, b)


RNGFactory = Callable[[], RNG]


def fresh_rng() -> RNG:
    """Default factory: a brand-new generator seeded from OS entropy."""
    return RNG()


def seeded_factory(seed: int) -> RNGFactory:
    """Reproducible factory for debugging and tests.

    Every call still returns a new generator; call number ``n`` is seeded
    with ``hash64(seed, "DRAW", n)`` so consecutive draws differ.
    """
    counter = {"n": 0}

    def make() -> RNG:
        counter["n"] += 1
        return RNG(hash64(seed, "DRAW", counter["n"]))

    return make
