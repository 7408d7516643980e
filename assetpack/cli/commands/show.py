"""CLI for listing packages."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ._common import load_options

app = typer.Typer(add_completion=False)


@app.command()
def show(
    manifest: str | None = typer.Option(None, "--manifest", "-m", help="Path to assetpack.json"),
):
    """List every package, its route pattern and resolved files."""
    s = get_settings()
    options = load_options(manifest, s)
    if not options.packages:
        typer.echo("No packages defined.")
        return

    for key in sorted(options.packages):
        package = options.packages[key]
        typer.echo(f"{key}  {package.path}  route={package.route_regex.pattern}")
        paths = package.paths
        if not paths:
            typer.echo("  (no files)")
        for p in paths:
            typer.echo(f"  {p}")
