"""Tag building for rendered packages."""

from __future__ import annotations

import hashlib
from html import escape
from typing import Mapping, Sequence

from .types import AssetType


def e(value: object) -> str:
    return escape(str(value), quote=True)


def kv(attrs: Mapping[str, object] | None) -> str:
    if not attrs:
        return ""
    return "".join(f' {e(k)}="{e(v)}"' for k, v in attrs.items())


def get_file_uri(path: str, asset_hosts: Sequence[str] = ()) -> str:
    """Prefix path with one of the asset hosts, picked stably from the path's digest."""
    if not asset_hosts:
        return path
    idx = int(hashlib.md5(path.encode("utf-8")).hexdigest(), 16) % len(asset_hosts)
    return f"{asset_hosts[idx]}{path}"


def link_tag(asset_type: AssetType, uri: str, attrs: Mapping[str, object] | None = None) -> str:
    if asset_type is AssetType.js:
        return f'<script src="{e(uri)}"{kv(attrs)}></script>'
    return f'<link rel="stylesheet" href="{e(uri)}"{kv(attrs)} />'
