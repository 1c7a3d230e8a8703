"""Show command for desired - render a single resource."""

from typing import Annotated, Optional

import typer
from rich.markup import escape

from desired.cli.common import (
    OutputFormat,
    collect_parameters,
    console,
    context_config,
    load_registry,
    render_resource,
)
from desired.exceptions import DesiredError
from desired.resource import Resource


def show(
    ctx: typer.Context,
    kind: Annotated[
        str,
        typer.Argument(help="Resource type (e.g., file, service)", metavar="TYPE"),
    ],
    title: Annotated[
        str,
        typer.Argument(help="Resource title", metavar="TITLE"),
    ],
    parameters: Annotated[
        Optional[list[str]],
        typer.Option(
            "--param",
            "-p",
            help="Parameter as KEY=VALUE. Repeat a key to build a list.",
        ),
    ] = None,
    output: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format."),
    ] = OutputFormat.MANIFEST,
) -> None:
    """Build a resource from the command line and print it.

    Examples:
      desired show file /etc/motd -p owner=root -p mode=0644
      desired show service nginx -p require=Package[nginx] --format trans
    """
    registry = load_registry(context_config(ctx))

    try:
        params = collect_parameters(parameters)
        resource = Resource(kind, title, params, registry=registry)
        typer.echo(render_resource(resource, output))
    except DesiredError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
