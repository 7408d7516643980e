"""CLI for building minified packages."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...services.build import build_packages
from ._common import load_options

app = typer.Typer(add_completion=False)


@app.command()
def build(
    manifest: str | None = typer.Option(None, "--manifest", "-m", help="Path to assetpack.json"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output directory"),
    only: str | None = typer.Option(None, "--only", help="Comma-separated package globs (e.g. 'app.*,*.css')"),
    strict: bool = typer.Option(False, "--strict", help="Fail a package when any source cannot be fetched"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print targets without writing"),
):
    """
    Minify every package and write it at its plain and cache-busted paths.
    Examples:
      assetpack build
      assetpack build --only 'app.*' --output dist
      ASSETPACK_REMOTE_HOST=http://localhost:8000 assetpack build --strict
    """
    s = get_settings()
    options = load_options(manifest, s)
    if options.remote_host is None and strict:
        typer.echo("Note: no remote host configured; reading sources from disk.", err=True)

    _built, failed = build_packages(
        options,
        output_dir=output or s.output_dir,
        only_globs=(only.split(",") if only else []),
        strict=strict,
        dry_run=dry_run,
    )
    if failed:
        raise typer.Exit(code=1)
