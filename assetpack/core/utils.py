"""Lightweight helpers for resolving filespecs (globs, ignores)."""
from __future__ import annotations

import fnmatch
import glob
import os
from typing import Sequence


def matches_any_glob(name: str, patterns: Sequence[str]) -> bool:
    if not patterns:
        return True  # no filters = match all
    return any(fnmatch.fnmatchcase(name, pat) for pat in patterns)


def is_ignored_path(path: str, patterns: Sequence[str]) -> bool:
    """True when a pattern matches the whole URI path or any one of its segments."""
    if not patterns:
        return False
    if matches_any_glob(path, patterns):
        return True
    return any(matches_any_glob(part, patterns) for part in path.split("/") if part)


def resolve_asset_globs(root: str, patterns: Sequence[str]) -> list[str]:
    """Expand each pattern under root; files only, sorted per pattern, first hit wins."""
    if not patterns:
        return []
    out: list[str] = []
    seen: set[str] = set()
    for p in patterns:
        for match in sorted(glob.glob(os.path.join(glob.escape(root), p), recursive=True)):
            if match in seen or not os.path.isfile(match):
                continue
            seen.add(match)
            out.append(match)
    return out


def join_uri(prefix: str, rel: str) -> str:
    prefix = prefix.rstrip("/")
    rel = rel.replace(os.sep, "/").lstrip("/")
    return f"{prefix}/{rel}"
