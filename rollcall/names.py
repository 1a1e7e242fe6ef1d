from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

from .errors import SourceUnavailable

logger = logging.getLogger(__name__)

NAME_COLUMN = 1


def _name_field(line: str) -> str:
    fields = line.split(",")
    if len(fields) <= NAME_COLUMN:
        return ""
    token = fields[NAME_COLUMN]
    if token.startswith('"'):
        token = token[1:]
    if token.endswith('"'):
        token = token[:-1]
    return token.strip()


def read_profile_names(path: Path) -> List[str]:
    """Read raw name candidates from a two-column profile file.

    The first line is a header and is skipped. The name is the second
    comma-separated field, optionally wrapped in double quotes. Quoting is
    not escaped: a comma inside a name splits it like any other comma.

    Candidates are returned in file order, blanks and duplicates included;
    ``normalize_names`` is what turns them into a roster.
    """
    p = Path(path)
    try:
        txt = p.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        raise SourceUnavailable(p.name, e.strerror or type(e).__name__) from e
    lines = txt.splitlines()
    out = [_name_field(ln) for ln in lines[1:]]
    logger.debug("Read %d candidate rows from %s", len(out), p)
    return out


def normalize_names(candidates: Iterable[str]) -> List[str]:
    # trim, drop blanks, de-dup while preserving order
    seen = set(); uniq = []
    for n in candidates:
        n = n.strip()
        if n and n not in seen:
            uniq.append(n); seen.add(n)
    return uniq
