"""Types commands for desired - inspect and declare resource types."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from desired.cli.common import console, context_config, load_registry
from desired.config import CONFIG_FILENAME, DesiredConfig, find_config
from desired.exceptions import ConfigNotFoundError, ConfigParseError, ConfigValidationError

app = typer.Typer(
    help="Inspect and declare resource types.",
    no_args_is_help=True,
)


@app.command("list")
def list_types(ctx: typer.Context) -> None:
    """List registered resource types and their namevars.

    Examples:
      desired types list
    """
    registry = load_registry(context_config(ctx))

    table = Table(title="Resource types")
    table.add_column("Type", style="cyan")
    table.add_column("Namevar")
    table.add_column("Parameters", style="dim")

    for name, descriptor in sorted(registry.all_types().items()):
        table.add_row(name, descriptor.namevar, ", ".join(descriptor.parameters) or "any")

    console.print(table)


@app.command("add")
def add_type(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(help="Type name to declare", metavar="NAME"),
    ],
    namevar: Annotated[
        str,
        typer.Option("--namevar", "-n", help="Identity parameter of the type."),
    ] = "name",
    parameters: Annotated[
        Optional[list[str]],
        typer.Option("--param", "-p", help="Declared parameter. Repeatable."),
    ] = None,
) -> None:
    """Declare a resource type in desired.toml.

    Examples:
      desired types add vhost --namevar servername -p port -p docroot
    """
    config_path = context_config(ctx) or find_config() or Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        try:
            config = DesiredConfig.load(config_path)
        except (ConfigNotFoundError, ConfigParseError, ConfigValidationError) as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(1)
    else:
        config = DesiredConfig(path=config_path)

    config.add_type(name.lower(), namevar=namevar, parameters=parameters)
    config.save()
    console.print(f"[green]Declared type '{name.lower()}' in {config_path}[/green]")
