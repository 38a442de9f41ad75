"""Typer application for the genetics CLI."""

import logging

import typer
from rich.console import Console

from .. import __version__

app = typer.Typer(
    name="genetics",
    help="Reproducible procedural character appearances.",
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"genetics {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
from .commands import config, validate, generate  # noqa: E402,F401
