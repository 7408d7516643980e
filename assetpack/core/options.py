"""Asset pipeline options: mounts, ignores, compression and registered packages."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any, Sequence

from pydantic import BaseModel, Field, ValidationError

from .compressor import CompressionConfig
from .constants import DEFAULT_IGNORE, HTTP_TIMEOUT_SEC
from .errors import ManifestError, UnknownPackageError
from .fetch_client import FetchClient
from .types import AssetType
from .utils import is_ignored_path, join_uri, resolve_asset_globs

if TYPE_CHECKING:
    from ..config.settings import Settings
    from ..package import Package


class PackageSpec(BaseModel):
    path: str
    files: list[str] = Field(default_factory=list)


class Manifest(BaseModel):
    serve: dict[str, str] = Field(default_factory=dict)
    ignore: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE))
    js: dict[str, PackageSpec] = Field(default_factory=dict)
    css: dict[str, PackageSpec] = Field(default_factory=dict)
    compression_options: dict[AssetType, dict[str, Any]] = Field(default_factory=dict)


class AssetOptions:
    def __init__(
        self,
        *,
        development: bool = True,
        ignore: Sequence[str] = DEFAULT_IGNORE,
        asset_hosts: Sequence[str] = (),
        compression: dict[AssetType, CompressionConfig] | None = None,
        remote_host: str | None = None,
        remote_base_path: str = "",
        http_timeout: float = HTTP_TIMEOUT_SEC,
    ) -> None:
        self.development = development
        self.ignored: list[str] = list(ignore)
        self.asset_hosts: list[str] = list(asset_hosts)
        self.compression: dict[AssetType, CompressionConfig] = {
            AssetType.js: CompressionConfig("jsmin"),
            AssetType.css: CompressionConfig("cssmin"),
            **(compression or {}),
        }
        self.remote_host = remote_host
        self.remote_base_path = remote_base_path
        self.http_timeout = http_timeout
        self.served: dict[str, str] = {}
        self.packages: dict[str, Package] = {}

    # ---------- setup ----------
    def serve(self, uri_prefix: str, from_dir: str) -> None:
        """Mount a local directory at a URI prefix ('/js' -> 'app/js')."""
        prefix = "/" + uri_prefix.strip("/")
        self.served[prefix] = from_dir

    def ignore(self, *patterns: str) -> None:
        self.ignored.extend(patterns)

    def js(self, name: str, path: str, filespecs: Sequence[str]) -> Package:
        return self._register(name, AssetType.js, path, filespecs)

    def css(self, name: str, path: str, filespecs: Sequence[str]) -> Package:
        return self._register(name, AssetType.css, path, filespecs)

    def _register(self, name: str, asset_type: AssetType, path: str, filespecs: Sequence[str]) -> Package:
        from ..package import Package

        package = Package(self, name, asset_type, path, list(filespecs))
        self.packages[f"{name}.{asset_type.value}"] = package
        return package

    def package(self, key: str) -> Package:
        try:
            return self.packages[key]
        except KeyError:
            known = ", ".join(sorted(self.packages)) or "none"
            raise UnknownPackageError(f"No package {key!r} (known: {known})") from None

    # ---------- resolution ----------
    def _mount_for(self, filespec: str) -> tuple[str, str] | None:
        # longest prefix wins so '/js/vendor' beats '/js'
        for prefix in sorted(self.served, key=len, reverse=True):
            if prefix == "/" or filespec == prefix or filespec.startswith(prefix + "/"):
                return prefix, self.served[prefix]
        return None

    def glob(self, filespecs: Sequence[str]) -> dict[str, str]:
        """Ordered {uri_path: local_file} for every file the filespecs match."""
        out: dict[str, str] = {}
        for spec in filespecs:
            mount = self._mount_for(spec)
            if mount is None:
                continue
            prefix, root = mount
            rel = spec[len(prefix):].lstrip("/") if prefix != "/" else spec.lstrip("/")
            for f in resolve_asset_globs(root, [rel]):
                uri = join_uri(prefix, os.path.relpath(f, root))
                out.setdefault(uri, f)
        return out

    def is_ignored(self, path: str) -> bool:
        return is_ignored_path(path, self.ignored)

    def fetch_client(self) -> FetchClient | None:
        if not self.remote_host:
            return None
        return FetchClient(self.remote_host, self.remote_base_path, timeout=self.http_timeout)

    # ---------- construction ----------
    @classmethod
    def from_settings(cls, settings: Settings) -> AssetOptions:
        return cls(
            development=settings.development,
            asset_hosts=settings.asset_host_list,
            compression={
                AssetType.js: CompressionConfig(settings.js_compression),
                AssetType.css: CompressionConfig(settings.css_compression),
            },
            remote_host=settings.remote_host,
            remote_base_path=settings.remote_base_path,
            http_timeout=settings.http_timeout,
        )

    @classmethod
    def from_manifest(cls, manifest_path: str, settings: Settings) -> AssetOptions:
        try:
            with open(manifest_path, encoding="utf-8") as fh:
                manifest = Manifest.model_validate(json.load(fh))
        except OSError as e:
            raise ManifestError(f"Cannot read manifest {manifest_path}: {e}") from e
        except (json.JSONDecodeError, ValidationError) as e:
            raise ManifestError(f"Invalid manifest {manifest_path}: {e}") from e

        options = cls.from_settings(settings)
        options.ignored = list(manifest.ignore)
        for asset_type, extra in manifest.compression_options.items():
            current = options.compression[asset_type]
            options.compression[asset_type] = CompressionConfig(current.engine, dict(extra))

        base = os.path.dirname(os.path.abspath(manifest_path))
        for prefix, directory in manifest.serve.items():
            options.serve(prefix, os.path.join(base, directory))
        for name, spec in manifest.js.items():
            options.js(name, spec.path, spec.files)
        for name, spec in manifest.css.items():
            options.css(name, spec.path, spec.files)
        return options
