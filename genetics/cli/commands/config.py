"""config command: show or change persistent settings."""

import typer
from rich.markup import escape
from rich.table import Table

from ...core.config import load_config, save_config, set_config_value
from ...core.models import ConfigError
from ..app import app, console

SECTION_TITLES = {
    "generation": "Generation",
    "makeup": "Makeup",
    "factions": "Factions",
}


def _show() -> None:
    config = load_config()
    for section_name, section in config:
        table = Table(title=SECTION_TITLES.get(section_name, section_name))
        table.add_column("Key")
        table.add_column("Value")
        for field_name, value in section:
            table.add_row(f"{section_name}.{field_name}", escape(str(value)))
        console.print(table)


def _set(key: str, value: str) -> None:
    config = load_config()
    updated = set_config_value(config, key, value)
    path = save_config(updated)
    console.print(escape(f"Set {key} = {value} ({path})"))


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="show | set"),
    key: str | None = typer.Argument(None, help="Key in section.field form"),
    value: str | None = typer.Argument(None, help="New value"),
) -> None:
    """Show or change configuration."""
    try:
        if action == "show":
            _show()
        elif action == "set":
            if key is None or value is None:
                console.print("[red]Usage:[/red] genetics config set KEY VALUE")
                raise typer.Exit(1)
            _set(key, value)
        else:
            console.print(f"[red]Unknown action:[/red] {escape(action)}")
            raise typer.Exit(1)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
