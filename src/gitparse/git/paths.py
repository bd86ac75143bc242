"""Path helpers for git-style forward-slash paths."""

from __future__ import annotations

import re

_SLASHES_RE = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Return *path* with forward slashes, no duplicate or trailing slashes and no leading ``./``."""
    if not path:
        return path
    path = _SLASHES_RE.sub("/", path.replace("\\", "/"))
    while path.startswith("./"):
        path = path[2:]
    if len(path) > 1:
        path = path.rstrip("/")
    return path


def join_paths(*parts: str) -> str:
    """Join path segments with ``/``, ignoring empty segments."""
    return "/".join(p.strip("/") for p in parts if p and p.strip("/"))
