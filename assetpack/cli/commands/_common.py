"""Shared loading for CLI commands."""

from __future__ import annotations

import typer

from ...config.settings import Settings
from ...core.errors import ManifestError
from ...core.options import AssetOptions


def load_options(manifest: str | None, settings: Settings) -> AssetOptions:
    try:
        return AssetOptions.from_manifest(manifest or settings.manifest, settings)
    except ManifestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2) from e
