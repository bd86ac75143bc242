"""Header patterns and helpers shared by the diff parsers."""

from __future__ import annotations

import re
from typing import Optional, Tuple, Union

from gitparse.git.models import HunkRange

DIFF_HEADER_RE = re.compile(r"^diff --git a/(.*) b/(.*)$")
HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
FILE_SPLIT_RE = re.compile(r"^diff --git ", re.MULTILINE)

HUNK_MARKER = "\n@@ -"
BOM = "\ufeff"


def to_text(data: Union[str, bytes]) -> str:
    """Decode *data* to text. Line endings and any BOM are left as they are.

    Raises TypeError for anything other than str or bytes.
    """
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    if not isinstance(data, str):
        raise TypeError(f"expected str or bytes, got {type(data).__name__}")
    return data


def _range(start: str, count: Optional[str]) -> HunkRange:
    # A missing count means a single line
    return HunkRange(start=int(start), count=int(count) if count is not None else 1)


def parse_hunk_header(line: str) -> Optional[Tuple[HunkRange, HunkRange]]:
    """Return ``(previous, current)`` ranges for a ``@@ -a,b +c,d @@`` line, or None."""
    m = HUNK_HEADER_RE.match(line)
    if m is None:
        return None
    return _range(m.group(1), m.group(2)), _range(m.group(3), m.group(4))
