"""Cache-buster helpers: content-derived tokens embedded in URI paths."""

from __future__ import annotations

import hashlib
import os
import re
from typing import Iterable

_EXT_RE = re.compile(r"\.[^./]+$")


def mtime_for(files: Iterable[str | None]) -> int | None:
    """Newest modification time (whole seconds) among the existing files."""
    mtimes = [int(os.path.getmtime(f)) for f in files if f and os.path.isfile(f)]
    return max(mtimes) if mtimes else None


def cache_buster_hash(*files: str | None) -> str | None:
    mtime = mtime_for(files)
    if mtime is None:
        return None
    return hashlib.md5(str(mtime).encode("utf-8")).hexdigest()


def insert_before_ext(path: str, segment: str) -> str:
    """'/js/app.js' + '.abc' -> '/js/app.abc.js'; paths without an extension get it appended."""
    m = _EXT_RE.search(path)
    if not m:
        return f"{path}{segment}"
    return f"{path[: m.start()]}{segment}{path[m.start():]}"


def add_cache_buster(path: str, *files: str | None) -> str:
    token = cache_buster_hash(*files)
    return insert_before_ext(path, f".{token}") if token else path
