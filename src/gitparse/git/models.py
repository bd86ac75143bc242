"""Data models for parsed git output."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


class HunkLineState(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


class FileStatus(str, Enum):
    """Single-letter git status codes."""

    ADDED = "A"
    COPIED = "C"
    DELETED = "D"
    MODIFIED = "M"
    RENAMED = "R"
    TYPE_CHANGED = "T"
    UNMERGED = "U"
    IGNORED = "!"
    UNKNOWN = "?"

    @classmethod
    def from_code(cls, code: str) -> "FileStatus":
        """Map a status character to a FileStatus; '.' and unknown codes become UNKNOWN."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class HunkRange:
    """A ``start,count`` pair from a hunk header."""

    start: int
    count: int

    @property
    def end(self) -> int:
        return self.start + self.count - 1


@dataclass(frozen=True, slots=True)
class HunkLine:
    """State of one current-file line inside a hunk."""

    state: HunkLineState
    previous: Optional[str] = None
    current: Optional[str] = None

    def __post_init__(self) -> None:
        if self.state == HunkLineState.ADDED and (self.previous is not None or self.current is None):
            raise ValueError("added line must have current text only")
        if self.state == HunkLineState.REMOVED and (self.current is not None or self.previous is None):
            raise ValueError("removed line must have previous text only")
        if self.state == HunkLineState.CHANGED and (self.previous is None or self.current is None):
            raise ValueError("changed line must have previous and current text")
        if self.state == HunkLineState.UNCHANGED and (self.previous is None or self.previous != self.current):
            raise ValueError("unchanged line must have equal previous and current text")


def _empty_lines() -> Mapping[int, HunkLine]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Hunk:
    """One ``@@ ... @@`` block of a file diff.

    ``lines`` is keyed by current-file line number. Removed lines that were
    not paired with an addition sit at the position they vacated, so keys are
    not a contiguous range.
    """

    header: str
    content: str
    previous: HunkRange
    current: HunkRange
    lines: Mapping[int, HunkLine] = field(default_factory=_empty_lines)

    def get_line(self, line_no: int) -> Optional[HunkLine]:
        return self.lines.get(line_no)

    def _numbers(self, *states: HunkLineState) -> List[int]:
        return [n for n, line in self.lines.items() if line.state in states]

    @property
    def added(self) -> List[int]:
        return self._numbers(HunkLineState.ADDED)

    @property
    def removed(self) -> List[int]:
        return self._numbers(HunkLineState.REMOVED)

    @property
    def changed(self) -> List[int]:
        return self._numbers(HunkLineState.CHANGED)

    @property
    def additions(self) -> int:
        """Lines present in the current version only (added or changed)."""
        return len(self._numbers(HunkLineState.ADDED, HunkLineState.CHANGED))

    @property
    def deletions(self) -> int:
        """Lines present in the previous version only (removed or changed)."""
        return len(self._numbers(HunkLineState.REMOVED, HunkLineState.CHANGED))


@dataclass(frozen=True)
class ParsedHunks:
    """All hunks of a single file's diff body."""

    hunks: Tuple[Hunk, ...] = ()
    raw_content: Optional[str] = None


@dataclass(frozen=True)
class FileDiff:
    """One ``diff --git`` section."""

    path: str
    header: str
    hunks: Tuple[Hunk, ...] = ()
    original_path: Optional[str] = None  # set on renames
    status: FileStatus = FileStatus.MODIFIED
    raw_content: Optional[str] = None

    @property
    def is_renamed(self) -> bool:
        return self.status == FileStatus.RENAMED

    @property
    def additions(self) -> int:
        return sum(h.additions for h in self.hunks)

    @property
    def deletions(self) -> int:
        return sum(h.deletions for h in self.hunks)


@dataclass(frozen=True)
class ShortStat:
    """Aggregate ``files changed, insertions, deletions`` triple."""

    files: int = 0
    additions: int = 0
    deletions: int = 0


@dataclass(frozen=True)
class ParsedDiff:
    """A complete multi-file diff."""

    files: Tuple[FileDiff, ...] = ()
    raw_content: Optional[str] = None

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    def find(self, path: str) -> Optional[FileDiff]:
        """Return the file whose current or original path is *path*."""
        for f in self.files:
            if f.path == path or f.original_path == path:
                return f
        return None

    def stats(self) -> ShortStat:
        return ShortStat(
            files=len(self.files),
            additions=sum(f.additions for f in self.files),
            deletions=sum(f.deletions for f in self.files),
        )


@dataclass(frozen=True, slots=True)
class FileStats:
    changes: int = 0
    additions: int = 0
    deletions: int = 0


@dataclass(frozen=True)
class FileChangeRecord:
    """A file entry from name-status or apply-summary output."""

    status: FileStatus
    path: str
    repo_path: str
    original_path: Optional[str] = None  # set on renames and copies
    stats: Optional[FileStats] = None
