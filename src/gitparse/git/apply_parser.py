"""Parser for ``git apply --numstat --summary -z`` output.

The numstat records come first, NUL-terminated. The human readable summary
(``create mode``, ``delete mode``, ``rename``, ``copy``) follows the last NUL
as newline-separated text. Numstat rows become Modified records; the summary
then upgrades them to Added, Deleted, Renamed or Copied.
"""

from __future__ import annotations

import re
import time
from dataclasses import replace
from typing import Dict, List, Optional, Tuple, Union

import structlog

from gitparse.git.headers import BOM, to_text
from gitparse.git.models import FileChangeRecord, FileStats, FileStatus
from gitparse.git.paths import join_paths, normalize_path

logger = structlog.get_logger(__name__)

# dir/{old => new}/file, or old => new with no common part
_ARROW_BRACE_RE = re.compile(r"^(?P<root>[^{]*)\{(?P<old>.*?) => (?P<new>.*?)\}(?P<suffix>.*)$")
_ARROW_PLAIN_RE = re.compile(r"^(?P<old>.+?) => (?P<new>.+)$")

_SUMMARY_MOVE_RE = re.compile(r"^(?P<action>rename|copy) (?P<paths>.+?)(?: \(\d+%\))?$")
_SUMMARY_MODE_RE = re.compile(r"^(?P<action>create|delete) mode \d+ (?P<path>.+)$")


def _to_int(value: str) -> int:
    """Numstat counts; git prints ``-`` for binary files, which counts as 0."""
    try:
        return int(value)
    except ValueError:
        return 0


def split_rename(paths: str) -> Optional[Tuple[str, str]]:
    """Expand git's ``root{old => new}suffix`` shorthand into ``(old, new)`` paths."""
    m = _ARROW_BRACE_RE.match(paths)
    if m is not None:
        root, suffix = m.group("root"), m.group("suffix")
        return (
            normalize_path(join_paths(root, m.group("old"), suffix)),
            normalize_path(join_paths(root, m.group("new"), suffix)),
        )
    m = _ARROW_PLAIN_RE.match(paths)
    if m is not None:
        return normalize_path(m.group("old")), normalize_path(m.group("new"))
    return None


def _numstat_record(
    insertions: str, deletions: str, path: str, repo_path: str
) -> Tuple[str, FileChangeRecord]:
    renamed = split_rename(path)
    key = renamed[1] if renamed is not None else normalize_path(path)
    record = FileChangeRecord(
        status=FileStatus.MODIFIED,
        path=path,
        repo_path=repo_path,
        stats=FileStats(
            changes=0,
            additions=_to_int(insertions),
            deletions=_to_int(deletions),
        ),
    )
    return key, record


def parse_apply_files(data: Union[str, bytes], repo_path: str) -> List[FileChangeRecord]:
    """Combine numstat rows and the trailing summary into file change records.

    Summary lines that reference a path missing from the numstat rows are
    ignored. Returns an empty list for empty input.
    """
    start = time.perf_counter()
    text = to_text(data).lstrip(BOM)
    if not text:
        logger.debug("apply.parsed", files=0, reason="no data")
        return []

    fields = text.split("\0")
    summary_lines = fields.pop().split("\n")

    # Without -z the numstat rows share the block with the summary
    body = fields + [line for line in summary_lines if "\t" in line]
    summary_lines = [line for line in summary_lines if "\t" not in line]

    files: Dict[str, FileChangeRecord] = {}

    i = 0
    while i < len(body):
        line = body[i].strip("\r\n")
        i += 1
        if not line.strip():
            continue

        parts = line.split("\t", 2)
        if len(parts) != 3:
            logger.debug("apply.numstat_skipped", line=line)
            continue
        insertions, deletions, path = parts

        # -z renames leave the path empty; the old and new paths follow as fields
        if not path:
            if i + 1 >= len(body):
                logger.debug("apply.numstat_truncated", line=line)
                break
            path = body[i + 1]
            i += 2

        key, record = _numstat_record(insertions, deletions, path, repo_path)
        files[key] = record

    for line in summary_lines:
        line = line.strip()
        if not line:
            continue

        m = _SUMMARY_MOVE_RE.match(line)
        if m is not None:
            paths = split_rename(m.group("paths"))
            if paths is None:
                continue
            original_path, path = paths
            existing = files.get(path)
            if existing is None:
                logger.debug("apply.summary_unmatched", action=m.group("action"), path=path)
                continue
            files[path] = FileChangeRecord(
                status=FileStatus.RENAMED if m.group("action") == "rename" else FileStatus.COPIED,
                path=path,
                original_path=original_path,
                repo_path=repo_path,
                stats=existing.stats,
            )
            continue

        m = _SUMMARY_MODE_RE.match(line)
        if m is not None:
            key = normalize_path(m.group("path"))
            existing = files.get(key)
            if existing is None:
                logger.debug("apply.summary_unmatched", action=m.group("action"), path=key)
                continue
            files[key] = replace(
                existing,
                status=FileStatus.ADDED if m.group("action") == "create" else FileStatus.DELETED,
            )

    logger.debug(
        "apply.parsed",
        files=len(files),
        duration_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return list(files.values())
