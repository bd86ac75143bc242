"""Git output parsers: unified diffs, name-status, apply summaries, short stats."""

from gitparse.git.apply_parser import parse_apply_files
from gitparse.git.diff_parser import parse_diff, parse_file_diff
from gitparse.git.models import (
    FileChangeRecord,
    FileDiff,
    FileStats,
    FileStatus,
    Hunk,
    HunkLine,
    HunkLineState,
    HunkRange,
    ParsedDiff,
    ParsedHunks,
    ShortStat,
)
from gitparse.git.stat_parser import parse_short_stat
from gitparse.git.status_parser import parse_name_status

__all__ = [
    "FileChangeRecord",
    "FileDiff",
    "FileStats",
    "FileStatus",
    "Hunk",
    "HunkLine",
    "HunkLineState",
    "HunkRange",
    "ParsedDiff",
    "ParsedHunks",
    "ShortStat",
    "parse_apply_files",
    "parse_diff",
    "parse_file_diff",
    "parse_name_status",
    "parse_short_stat",
]
