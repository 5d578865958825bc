from __future__ import annotations

"""verdict Command Line Interface."""

from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from verdict import __version__
from verdict.config import get_settings, load_settings_from_yaml

app = typer.Typer(
    name="verdict",
    help="CLI for verdict: explicit success/failure values.",
    add_completion=False,
)

console = Console()


@app.command()
def version():
    """Print the installed verdict version."""
    console.print(f"verdict [bold]{__version__}[/]")


@app.command()
def settings(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML file with settings to load first."
    ),
):
    """Show the effective settings (environment, then optional YAML file)."""
    if config is not None:
        if not config.exists():
            console.print(f"[bold red]Error: File not found: {escape(str(config))}[/]")
            raise typer.Exit(code=1)
        try:
            load_settings_from_yaml(config)
        except Exception as e:  # noqa: BLE001
            console.print(f"[bold red]Error loading settings from {escape(str(config))}: {escape(str(e))}[/]")
            raise typer.Exit(code=1)

    table = Table(title="verdict settings", box=box.ROUNDED)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")
    for name, value in get_settings().model_dump().items():
        table.add_row(name, str(value))
    console.print(table)


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
