"""Shared CLI utilities for desired commands."""

from enum import Enum
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from desired.config import DesiredConfig, find_config
from desired.exceptions import DesiredError, InvalidReferenceError
from desired.parameters import Value, canonical_key
from desired.reference import Reference
from desired.registry import TypeRegistry, default_registry
from desired.resource import Resource

console = Console()


class OutputFormat(str, Enum):
    """Renderings a resource can be printed in."""

    MANIFEST = "manifest"
    TRANS = "trans"
    YAML = "yaml"


def parse_parameter(text: str) -> tuple[str, Value]:
    """Parse a KEY=VALUE command-line parameter.

    Values that look like capitalized references (``Package[nginx]``)
    become References; everything else stays a string.
    """
    if "=" not in text:
        raise typer.BadParameter(f"Invalid parameter '{text}': expected KEY=VALUE")

    key, value = text.split("=", 1)
    key = key.strip()
    if not key:
        raise typer.BadParameter(f"Invalid parameter '{text}': empty name")

    if value[:1].isupper():
        try:
            return canonical_key(key), Reference.parse(value)
        except InvalidReferenceError:
            pass
    return canonical_key(key), value


def collect_parameters(items: list[str] | None) -> dict[str, Value]:
    """Parse repeated KEY=VALUE options; repeated keys build a list."""
    result: dict[str, Value] = {}
    for item in items or []:
        key, value = parse_parameter(item)
        if key in result:
            existing = result[key]
            result[key] = (existing if isinstance(existing, list) else [existing]) + [value]
        else:
            result[key] = value
    return result


def load_registry(config_path: Path | None) -> TypeRegistry:
    """Build a registry from the built-in types plus desired.toml, if any.

    Exits with status 1 when the configuration cannot be loaded.
    """
    registry = TypeRegistry(default_registry().all_types().values())

    path = config_path or find_config()
    if path is None:
        return registry

    try:
        DesiredConfig.load(path).apply(registry)
    except DesiredError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    return registry


def render_resource(resource: Resource, output: OutputFormat) -> str:
    """Render a resource in the requested format."""
    if output is OutputFormat.MANIFEST:
        return resource.to_manifest()
    if output is OutputFormat.TRANS:
        return yaml.safe_dump(resource.to_trans().to_data(), sort_keys=False).rstrip()
    return resource.to_yaml().rstrip()


def context_config(ctx: typer.Context) -> Path | None:
    """Config path given to the top-level --config option."""
    obj: dict[str, Any] = ctx.obj or {}
    return obj.get("config")
