from pathlib import Path
from typing import Callable, List

import pytest

from rollcall.caller import RollCall
from rollcall.rng import seeded_factory


@pytest.fixture
def caller() -> RollCall:
    return RollCall(seeded_factory(1234))


@pytest.fixture
def home(tmp_path: Path) -> Path:
    return tmp_path / "home"


@pytest.fixture
def make_profile(home: Path) -> Callable[..., Path]:
    """Write Profile/<name>.csv under ``home`` with an id,name header."""

    def make(name: str, names: List[str], header: str = "id,name") -> Path:
        path = home / "Profile" / f"{name}.csv"
        path.parent.mkdir(parents=True, exist_ok=True)
        rows = [header] + [f"{i},{n}" for i, n in enumerate(names, start=1)]
        path.write_text("\n".join(rows) + "\n", encoding="utf-8")
        return path

    return make
