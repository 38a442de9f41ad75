"""generate command: produce appearances for a list of characters."""

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.markup import escape

from ...appearance import JsonSink, generate_population, load_catalog, load_characters
from ...core.config import load_config
from ...core.models import GeneticsError
from ..app import app, console


@app.command("generate")
def generate_command(
    catalog_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Catalog YAML"),
    characters_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Characters YAML"),
    output: Path = typer.Option(Path("appearances.json"), "--output", "-o", help="Output JSON"),
    seed: int | None = typer.Option(None, "--seed", help="Override generation.seed"),
) -> None:
    """Generate appearances for every character."""
    try:
        config = load_config()
        if seed is not None:
            if not 0 <= seed <= 0xFFFFFFFF:
                raise typer.BadParameter("Seed must be an unsigned 32-bit integer", param_hint="--seed")
            config = config.model_copy(
                update={"generation": config.generation.model_copy(update={"seed": seed})}
            )

        catalog, _ = load_catalog(catalog_file)
        characters = load_characters(characters_file)

        with JsonSink(output) as sink:
            result = generate_population(characters, catalog, sink, config)
    except (GeneticsError, ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]Generated {result.count} appearance(s)[/green] -> {escape(str(output))}"
    )
    if result.skipped_tints:
        console.print(f"Tints left untouched for {len(result.skipped_tints)} unique character(s)")
