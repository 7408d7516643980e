"""CLI for rendering one package's tags."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...core.errors import UnknownPackageError
from ._common import load_options

app = typer.Typer(add_completion=False)


@app.command()
def html(
    key: str = typer.Argument(..., help="Package key, e.g. app.js"),
    manifest: str | None = typer.Option(None, "--manifest", "-m", help="Path to assetpack.json"),
    mode: str | None = typer.Option(
        None, "--mode", help="development|production (default: from ASSETPACK_ENVIRONMENT)"
    ),
    prefix: str = typer.Option("/", "--prefix", help="Path prefix for rendered URIs"),
):
    """Typer command to print development or production tags for a package."""
    s = get_settings()
    options = load_options(manifest, s)
    try:
        package = options.package(key)
    except UnknownPackageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2) from e

    if mode not in (None, "development", "production"):
        raise typer.BadParameter("--mode must be development or production.")
    use_production = (mode == "production") if mode else not options.development
    out = package.to_production_html(prefix) if use_production else package.to_development_html(prefix)
    if out:
        typer.echo(out)
