"""CLI entrypoint that wires subcommands into a Typer app."""

import typer

from .commands.build import app as build_app
from .commands.html import app as html_app
from .commands.show import app as show_app

app = typer.Typer(add_completion=False, help="Build and render JS/CSS asset packages.")


app.add_typer(build_app, help="Minify packages into the output directory")
app.add_typer(html_app, help="Print the tags for one package")
app.add_typer(show_app, help="List packages and the files they resolve to")
