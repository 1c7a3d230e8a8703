"""CLI entry point for desired."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from desired import __version__
from desired.cli import resource_types
from desired.cli.common import console
from desired.cli.convert import convert
from desired.cli.init import init
from desired.cli.show import show
from desired.log import setup_logging

app = typer.Typer(
    name="desired",
    help="Inspect and convert declarative resources.",
    no_args_is_help=True,
    add_completion=False,
)

app.command("show")(show)
app.command("convert")(convert)
app.command("init")(init)
app.add_typer(resource_types.app, name="types")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"desired {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Path to desired.toml (defaults to searching upwards from the current directory).",
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Inspect and convert declarative resources."""
    setup_logging("DEBUG" if verbose else None)
    ctx.obj = {"config": config}


if __name__ == "__main__":
    app()
