"""Minification delegated to per-type engines.

Engines are looked up in an explicit table keyed by asset type, so adding an
engine means adding a row here rather than a new method somewhere else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import rcssmin
import rjsmin

from .errors import CompressionError
from .types import AssetType

Engine = Callable[..., str]


def _identity(text: str, **_options: Any) -> str:
    return text


COMPRESSORS: dict[AssetType, dict[str, Engine]] = {
    AssetType.js: {"jsmin": rjsmin.jsmin, "none": _identity},
    AssetType.css: {"cssmin": rcssmin.cssmin, "none": _identity},
}


@dataclass(frozen=True)
class CompressionConfig:
    engine: str
    options: dict[str, Any] = field(default_factory=dict)


def compress(text: str, asset_type: AssetType, engine: str, options: dict[str, Any] | None = None) -> str:
    asset_type = AssetType(asset_type)
    engines = COMPRESSORS.get(asset_type, {})
    fn = engines.get(engine)
    if fn is None:
        known = ", ".join(sorted(engines)) or "none"
        raise CompressionError(f"Unknown {asset_type.value} compression engine {engine!r} (known: {known})")
    try:
        return fn(text, **(options or {}))
    except TypeError as e:
        raise CompressionError(f"Bad options for {engine!r}: {e}") from e
