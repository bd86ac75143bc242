"""JSON reporter for parsed git output."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Union

from gitparse.git.models import (
    FileChangeRecord,
    FileDiff,
    Hunk,
    HunkRange,
    ParsedDiff,
    ParsedHunks,
    ShortStat,
)

Result = Union[ParsedDiff, ParsedHunks, Sequence[FileChangeRecord], ShortStat, None]


def _range_dict(r: HunkRange) -> Dict[str, int]:
    return {"start": r.start, "count": r.count, "end": r.end}


def _hunk_dict(hunk: Hunk) -> Dict[str, Any]:
    return {
        "header": hunk.header,
        "content": hunk.content,
        "previous": _range_dict(hunk.previous),
        "current": _range_dict(hunk.current),
        "lines": {
            str(line_no): {
                "state": line.state.value,
                **({"previous": line.previous} if line.previous is not None else {}),
                **({"current": line.current} if line.current is not None else {}),
            }
            for line_no, line in hunk.lines.items()
        },
    }


def _file_dict(f: FileDiff) -> Dict[str, Any]:
    return {
        "path": f.path,
        "status": f.status.value,
        **({"original_path": f.original_path} if f.original_path else {}),
        "header": f.header,
        "additions": f.additions,
        "deletions": f.deletions,
        "hunks": [_hunk_dict(h) for h in f.hunks],
        **({"raw_content": f.raw_content} if f.raw_content is not None else {}),
    }


def _record_dict(r: FileChangeRecord) -> Dict[str, Any]:
    return {
        "status": r.status.value,
        "path": r.path,
        **({"original_path": r.original_path} if r.original_path else {}),
        "repo_path": r.repo_path,
        **(
            {
                "stats": {
                    "changes": r.stats.changes,
                    "additions": r.stats.additions,
                    "deletions": r.stats.deletions,
                }
            }
            if r.stats is not None
            else {}
        ),
    }


def _short_stat_dict(s: ShortStat) -> Dict[str, int]:
    return {"files": s.files, "additions": s.additions, "deletions": s.deletions}


def to_dict(result: Result) -> Optional[Union[Dict[str, Any], List[Dict[str, Any]]]]:
    """Convert a parse result to a JSON-serialisable structure."""
    if result is None:
        return None
    if isinstance(result, ParsedDiff):
        return {
            "files": [_file_dict(f) for f in result.files],
            "stats": _short_stat_dict(result.stats()),
            **({"raw_content": result.raw_content} if result.raw_content is not None else {}),
        }
    if isinstance(result, ParsedHunks):
        return {
            "hunks": [_hunk_dict(h) for h in result.hunks],
            **({"raw_content": result.raw_content} if result.raw_content is not None else {}),
        }
    if isinstance(result, ShortStat):
        return _short_stat_dict(result)
    return [_record_dict(r) for r in result]


def render(result: Result) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)
