"""Init command for desired - create desired.toml."""

from pathlib import Path

import typer

from desired.cli.common import console
from desired.config import CONFIG_FILENAME, DesiredConfig


def init() -> None:
    """Create an empty desired.toml in the current directory.

    Examples:
      desired init
    """
    config_path = Path.cwd() / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[yellow]{CONFIG_FILENAME} already exists at {config_path}[/yellow]")
        raise typer.Exit(1)

    DesiredConfig(path=config_path).save()
    console.print(f"[green]Created {config_path}[/green]")
