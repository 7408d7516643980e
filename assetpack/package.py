"""A package: a named, typed bundle of source files with one output path.

Common usage::

    package = assets.packages["application.css"]

    package.files   # list of local files
    package.paths   # list of URI paths

    package.type    # AssetType.css or AssetType.js
    package.is_css
    package.is_js

    package.path    # '/css/application.css', where the minified file is served

    package.to_development_html("/")
    package.to_production_html("/")
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Mapping

from .core.buster import add_cache_buster, mtime_for
from .core.compressor import compress
from .core.constants import BUSTER_SEGMENT
from .core.errors import FetchError
from .core.fetch_client import FetchResult, authorization_from
from .core.html import get_file_uri, link_tag
from .core.types import AssetType, FetchStatus

if TYPE_CHECKING:
    from .core.options import AssetOptions


class Package:
    def __init__(
        self,
        assets: AssetOptions,
        name: str,
        type: AssetType,
        path: str,
        filespecs: list[str],
    ) -> None:
        self.assets = assets
        self.name = name  # "application"
        self.type = AssetType(type)
        self.path = path  # '/js/app.js'
        self.filespecs = filespecs  # ['/js/*.js']
        self._path_cache: dict[str, FetchResult] = {}

    def __repr__(self) -> str:
        return f"Package({self.name!r}, {self.type.value!r}, {self.path!r})"

    # ---------- resolution ----------
    @property
    def paths_and_files(self) -> dict[str, str]:
        return {p: f for p, f in self.assets.glob(self.filespecs).items() if not self.assets.is_ignored(p)}

    @property
    def files(self) -> list[str]:
        return [f for f in self.paths_and_files.values() if f]

    @property
    def paths(self) -> list[str]:
        return list(self.paths_and_files)

    @property
    def mtime(self) -> int | None:
        return mtime_for(self.files)

    @property
    def route_regex(self) -> re.Pattern[str]:
        """Route match for the output path, with or without a cache buster."""
        m = re.search(r"\.[^./]+$", self.path)
        if m:
            stem, ext = self.path[: m.start()], self.path[m.start():]
        else:
            stem, ext = self.path, ""
        return re.compile(f"^{re.escape(stem)}{BUSTER_SEGMENT}{re.escape(ext)}$")

    @property
    def is_js(self) -> bool:
        return self.type is AssetType.js

    @property
    def is_css(self) -> bool:
        return self.type is AssetType.css

    # ---------- rendering ----------
    def to_development_html(self, path_prefix: str, attrs: Mapping[str, Any] | None = None) -> str:
        tags = []
        for path, file in self.paths_and_files.items():
            path = add_cache_buster(path, file)
            path = self.add_path_prefix(path, path_prefix)
            tags.append(self._link_tag(path, attrs))
        return "\n".join(tags)

    @property
    def production_path(self) -> str:
        """URI path of the minified file (cache-busted, no path prefix)."""
        return add_cache_buster(self.path, *self.files)

    def to_production_html(self, path_prefix: str, attrs: Mapping[str, Any] | None = None) -> str:
        path = self.add_path_prefix(self.production_path, path_prefix)
        return self._link_tag(path, attrs)

    @staticmethod
    def add_path_prefix(path: str, path_prefix: str | None) -> str:
        if not path_prefix or path_prefix == "/":
            return path
        return f"{path_prefix.rstrip('/')}{path}"

    def _link_tag(self, path: str, attrs: Mapping[str, Any] | None) -> str:
        return link_tag(self.type, get_file_uri(path, self.assets.asset_hosts), attrs)

    # ---------- output ----------
    def minify(self, request: Any = None, strict: bool = False) -> str:
        config = self.assets.compression[self.type]
        return compress(self.combined(request, strict=strict), self.type, config.engine, config.options)

    @property
    def cache_key(self) -> str:
        if self.assets.development:
            return f"{self.name}.{self.type.value}/{self.mtime}"
        return f"{self.name}.{self.type.value}"

    def combined(self, request: Any = None, strict: bool = False) -> str:
        parts = []
        for path, file in self.paths_and_files.items():
            result = self._fetch(path, file, request)
            if strict and result.status is FetchStatus.error:
                raise FetchError(f"Could not fetch {path}: {result.error}")
            parts.append(result.content)
        return "\n".join(parts)

    def fetch_path(self, path: str, request: Any = None) -> FetchResult:
        """Content for one URI path; the first outcome per path is kept for this instance."""
        if path in self._path_cache:
            return self._path_cache[path]
        file = None if self.assets.remote_host else self.paths_and_files.get(path)
        return self._fetch(path, file, request)

    def _fetch(self, path: str, file: str | None, request: Any) -> FetchResult:
        if path in self._path_cache:
            return self._path_cache[path]

        client = self.assets.fetch_client()
        if client is not None:
            result = client.fetch(path, authorization_from(request))
        else:
            result = self._read_local(path, file)

        self._path_cache[path] = result
        return result

    @staticmethod
    def _read_local(path: str, file: str | None) -> FetchResult:
        if not file:
            return FetchResult(path, FetchStatus.error, error="no local file")
        try:
            with open(file, encoding="utf-8", errors="replace") as fh:
                return FetchResult(path, FetchStatus.ok, fh.read())
        except OSError as e:
            return FetchResult(path, FetchStatus.error, error=repr(e))
