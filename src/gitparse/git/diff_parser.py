"""Unified diff parser: splits multi-file diffs and rebuilds per-line state.

``parse_diff`` cuts the text into ``diff --git`` sections and hands each
section's hunk body to ``parse_file_diff``, which walks the ``@@`` blocks and
classifies every line as added, removed, changed or unchanged, keyed by its
line number in the current version of the file.

Deleted lines are paired with the additions that immediately follow them by
position only: the first deleted line pairs with the first added line, and so
on. A deletion run with no additions after it keeps its positions, and the
next line is keyed after the last deleted one. A ``\\ No newline at end of
file`` marker between the deletions and the additions does not break the run.
"""

from __future__ import annotations

import time
from types import MappingProxyType
from typing import Dict, List, Optional, Union

import structlog

from gitparse.git.headers import (
    BOM,
    DIFF_HEADER_RE,
    FILE_SPLIT_RE,
    HUNK_MARKER,
    parse_hunk_header,
    to_text,
)
from gitparse.git.models import (
    FileDiff,
    FileStatus,
    Hunk,
    HunkLine,
    HunkLineState,
    HunkRange,
    ParsedDiff,
    ParsedHunks,
)

logger = structlog.get_logger(__name__)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 3)


class _HunkBuilder:
    """Working state for one hunk; frozen into a Hunk by ``build``."""

    def __init__(self, header: str, previous: HunkRange, current: HunkRange) -> None:
        self.header = header
        self.previous = previous
        self.current = current
        self.lines: Dict[int, HunkLine] = {}

    def unchanged(self, line_no: int, text: str) -> None:
        self.lines[line_no] = HunkLine(HunkLineState.UNCHANGED, previous=text, current=text)

    def added(self, line_no: int, text: str) -> None:
        self.lines[line_no] = HunkLine(HunkLineState.ADDED, current=text)

    def removed(self, line_no: int, text: str) -> None:
        self.lines[line_no] = HunkLine(HunkLineState.REMOVED, previous=text)

    def pair(self, line_no: int, text: str) -> None:
        """Record an addition, upgrading a removal at the same position to a change."""
        existing = self.lines.get(line_no)
        if existing is not None:
            self.lines[line_no] = HunkLine(HunkLineState.CHANGED, previous=existing.previous, current=text)
        else:
            self.added(line_no, text)

    def build(self, content: str) -> Hunk:
        return Hunk(
            header=self.header,
            content=content,
            previous=self.previous,
            current=self.current,
            lines=MappingProxyType(dict(sorted(self.lines.items()))),
        )


def parse_file_diff(
    data: Union[str, bytes], include_raw_content: bool = False
) -> Optional[ParsedHunks]:
    """Parse one file's hunk body (from its first ``@@`` line onward).

    Returns None for empty input.
    """
    start = time.perf_counter()
    text = to_text(data)
    if not text:
        logger.debug("file_diff.parsed", hunks=0, reason="no data")
        return None

    lines = text.split("\n")
    total = len(lines)
    hunks: List[Hunk] = []

    # Skip anything before the first hunk header
    idx = 0
    while idx < total and not lines[idx].startswith("@@"):
        idx += 1

    while idx < total:
        header = lines[idx]
        ranges = parse_hunk_header(header) if header.startswith("@@") else None
        if ranges is None:
            idx += 1
            continue

        previous, current = ranges
        builder = _HunkBuilder(header, previous, current)
        line_no = current.start

        idx += 1
        content_start = idx

        while idx < total and not lines[idx].startswith("@@"):
            line = lines[idx]
            prefix = line[:1]

            if prefix == "-":
                deleted_no = line_no
                while idx < total and lines[idx][:1] in ("-", "\\"):
                    # "\ No newline at end of file" sits inside the run
                    if lines[idx].startswith("-"):
                        builder.removed(deleted_no, lines[idx][1:])
                        deleted_no += 1
                    idx += 1

                if idx < total and lines[idx].startswith("+"):
                    added_no = line_no
                    while idx < total and lines[idx].startswith("+"):
                        builder.pair(added_no, lines[idx][1:])
                        added_no += 1
                        idx += 1
                    line_no = added_no
                else:
                    line_no = deleted_no
                continue

            if prefix == "+":
                builder.added(line_no, line[1:])
                line_no += 1
            elif prefix == " ":
                builder.unchanged(line_no, line[1:])
                line_no += 1
            # Anything else ("\ No newline at end of file", trailing blank) is ignored

            idx += 1

        hunks.append(builder.build("\n".join(lines[content_start:idx])))

    logger.debug("file_diff.parsed", hunks=len(hunks), duration_ms=_elapsed_ms(start))
    return ParsedHunks(hunks=tuple(hunks), raw_content=text if include_raw_content else None)


def _parse_file_section(section: str, include_raw_content: bool) -> Optional[FileDiff]:
    # CRLF input leaves a \r on the header line
    first_line = section.split("\n", 1)[0].rstrip("\r")
    m = DIFF_HEADER_RE.match(f"diff --git {first_line}")
    if m is None:
        return None

    original_path, path = m.group(1), m.group(2)

    hunk_start = section.find(HUNK_MARKER)
    if hunk_start == -1:
        # Binary or mode-only change: header but no hunks
        return None

    content = section[hunk_start + 1:]
    parsed = parse_file_diff(content, include_raw_content)
    renamed = path != original_path

    return FileDiff(
        path=path,
        original_path=original_path if renamed else None,
        status=FileStatus.RENAMED if renamed else FileStatus.MODIFIED,
        header=f"diff --git {section[:hunk_start]}",
        hunks=parsed.hunks if parsed is not None else (),
        raw_content=content if include_raw_content else None,
    )


def parse_diff(data: Union[str, bytes], include_raw_content: bool = False) -> ParsedDiff:
    """Parse multi-file unified diff text into a ParsedDiff.

    Sections with an unrecognised ``diff --git`` line or without any hunk are
    dropped; they never raise.
    """
    start = time.perf_counter()
    text = to_text(data)
    raw = text if include_raw_content else None

    sections = [s for s in FILE_SPLIT_RE.split(text.lstrip(BOM)) if s]
    if not sections:
        logger.debug("diff.parsed", files=0, reason="no files")
        return ParsedDiff(files=(), raw_content=raw)

    files: List[FileDiff] = []
    skipped = 0
    for section in sections:
        file_diff = _parse_file_section(section, include_raw_content)
        if file_diff is None:
            skipped += 1
            continue
        files.append(file_diff)

    logger.debug(
        "diff.parsed",
        files=len(files),
        skipped=skipped,
        duration_ms=_elapsed_ms(start),
    )
    return ParsedDiff(files=tuple(files), raw_content=raw)
