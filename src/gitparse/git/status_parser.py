"""Parser for ``git diff --name-status -z`` output."""

from __future__ import annotations

import time
from typing import List, Optional, Union

import structlog

from gitparse.git.headers import BOM, to_text
from gitparse.git.models import FileChangeRecord, FileStatus

logger = structlog.get_logger(__name__)

# Statuses followed by two paths: original, then new
_DUAL_PATH = frozenset({FileStatus.RENAMED, FileStatus.COPIED})


def parse_name_status(data: Union[str, bytes], repo_path: str) -> Optional[List[FileChangeRecord]]:
    """Parse NUL-separated status records. Returns None for empty input."""
    start = time.perf_counter()
    text = to_text(data).lstrip(BOM)
    if not text:
        logger.debug("name_status.parsed", files=0, reason="no data")
        return None

    fields = text.split("\0")
    # The last field follows the final NUL and is normally empty
    last = len(fields) - 1
    files: List[FileChangeRecord] = []

    i = 0
    while i < last:
        token = fields[i]
        status = FileStatus.from_code(token[:1])

        original_path: Optional[str] = None
        if status in _DUAL_PATH:
            i += 1
            original_path = fields[i] if i < len(fields) else None
        i += 1
        if i >= len(fields) or not fields[i]:
            logger.debug("name_status.truncated", status=status.value)
            break

        files.append(
            FileChangeRecord(
                status=status,
                path=fields[i],
                original_path=original_path,
                repo_path=repo_path,
            )
        )
        i += 1

    logger.debug(
        "name_status.parsed",
        files=len(files),
        duration_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return files
