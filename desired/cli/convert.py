"""Convert command for desired - render serialized resources."""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from desired.cli.common import OutputFormat, console, context_config, load_registry, render_resource
from desired.exceptions import DesiredError
from desired.serialization import load_resources


def convert(
    ctx: typer.Context,
    path: Annotated[
        Path,
        typer.Argument(
            help="YAML file holding one resource or a list of resources",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    output: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format."),
    ] = OutputFormat.MANIFEST,
) -> None:
    """Load serialized resources and print each in another format.

    Examples:
      desired convert catalog.yaml
      desired convert catalog.yaml --format trans
    """
    registry = load_registry(context_config(ctx))

    try:
        resources = load_resources(path.read_text(encoding="utf-8"), registry=registry)
        rendered = [render_resource(resource, output) for resource in resources]
    except DesiredError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not rendered:
        console.print(f"[yellow]No resources in {path}[/yellow]")
        return

    separator = "\n\n" if output is OutputFormat.MANIFEST else "\n---\n"
    typer.echo(separator.join(rendered))
