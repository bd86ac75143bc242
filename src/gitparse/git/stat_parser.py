"""Parser for ``git diff --shortstat`` summary sentences."""

from __future__ import annotations

import re
import time
from typing import Optional, Union

import structlog

from gitparse.git.headers import to_text
from gitparse.git.models import ShortStat

logger = structlog.get_logger(__name__)

_SHORT_STAT_RE = re.compile(
    r"(\d+)\s+files? changed"
    r"(?:,\s+(\d+)\s+insertions?\(\+\))?"
    r"(?:,\s+(\d+)\s+deletions?\(-\))?"
)


def parse_short_stat(data: Union[str, bytes]) -> Optional[ShortStat]:
    """Parse ``N files changed, N insertions(+), N deletions(-)``.

    Missing clauses count as 0. Returns None for empty or unrecognised input.
    """
    start = time.perf_counter()
    text = to_text(data)
    if not text:
        logger.debug("short_stat.parsed", reason="no data")
        return None

    m = _SHORT_STAT_RE.search(text)
    if m is None:
        logger.debug("short_stat.parsed", reason="no match")
        return None

    files, insertions, deletions = m.groups()
    stat = ShortStat(
        files=int(files),
        additions=int(insertions) if insertions is not None else 0,
        deletions=int(deletions) if deletions is not None else 0,
    )
    logger.debug(
        "short_stat.parsed",
        files=stat.files,
        additions=stat.additions,
        deletions=stat.deletions,
        duration_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return stat
