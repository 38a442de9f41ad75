"""validate command: check a catalog file before generating."""

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.markup import escape

from ...appearance import load_catalog, validate_catalog
from ...core.config import load_config
from ...core.models import ConfigError
from ..app import app, console


@app.command("validate")
def validate_command(
    catalog_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Catalog YAML"),
) -> None:
    """Validate a trait catalog."""
    try:
        config = load_config()
        catalog, build_result = load_catalog(catalog_file)
    except (ConfigError, ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    result = validate_catalog(catalog, config)
    result.merge(build_result)

    for issue in result.errors:
        console.print(f"[red]ERROR[/red] {escape(str(issue))}")
    for issue in result.warnings:
        console.print(f"[yellow]WARNING[/yellow] {escape(str(issue))}")

    if not result.valid:
        console.print(f"[red]Catalog invalid:[/red] {len(result.errors)} error(s)")
        raise typer.Exit(1)
    console.print(f"[green]Catalog valid[/green] ({len(result.warnings)} warning(s))")
