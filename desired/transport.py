"""Legacy transport representation of resources.

Older consumers expect a flat shape: parameters hold only scalars and
lists of scalars, references travel as ``[type, title]`` pairs and lists
of one value are sent as the bare value. Instances of registered types
become TransObjects; anything else becomes a TransBucket that only
carries its name and type.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from desired.parameters import Value
from desired.reference import Reference

if TYPE_CHECKING:
    from desired.registry import TypeRegistry
    from desired.resource import Resource


@dataclass
class TransBucket:
    """Transport shape for instances of unregistered types."""

    name: Any
    type: str
    file: str | None = None
    line: int | None = None

    def to_data(self) -> dict[str, Any]:
        """Convert to a wire-ready dict."""
        result: dict[str, Any] = {"name": self.name, "type": self.type}
        if self.file is not None:
            result["file"] = self.file
        if self.line is not None:
            result["line"] = self.line
        return result


@dataclass
class TransObject:
    """Transport shape for instances of registered types.

    Parameters are reachable by item access with string names, e.g.
    ``trans["owner"]``.
    """

    name: Any
    type: str
    file: str | None = None
    line: int | None = None
    tags: set[str] = field(default_factory=set)
    parameters: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.parameters.get(str(key))

    def __setitem__(self, key: str, value: Any) -> None:
        self.parameters[str(key)] = value

    def __contains__(self, key: object) -> bool:
        return str(key) in self.parameters

    def keys(self) -> list[str]:
        return list(self.parameters)

    def to_data(self) -> dict[str, Any]:
        """Convert to a wire-ready dict."""
        result: dict[str, Any] = {"name": self.name, "type": self.type}
        if self.file is not None:
            result["file"] = self.file
        if self.line is not None:
            result["line"] = self.line
        result["tags"] = sorted(self.tags)
        result["parameters"] = dict(self.parameters)
        return result


def _flatten_item(value: Value) -> Any:
    if isinstance(value, Reference):
        return value.to_trans_ref()
    if isinstance(value, list):
        return [_flatten_item(item) for item in value]
    return value


def flatten_value(value: Value) -> Any:
    """Convert a parameter value to its backward-compatible form.

    Examples:
        >>> flatten_value(["yay"])
        'yay'
        >>> flatten_value(["a", Reference("file", "/f")])
        ['a', ['file', '/f']]
    """
    flattened = _flatten_item(value)
    if isinstance(value, list) and len(flattened) == 1:
        return flattened[0]
    return flattened


def to_trans(resource: "Resource", registry: "TypeRegistry") -> TransBucket | TransObject:
    """Convert a resource to its transport representation."""
    if registry.lookup(resource.type) is None:
        return TransBucket(
            name=resource.title,
            type=resource.type,
            file=resource.file,
            line=resource.line,
        )

    trans = TransObject(
        name=resource.title,
        type=resource.type,
        file=resource.file,
        line=resource.line,
        tags=resource.tags,
    )
    for name, value in resource.to_hash().items():
        trans[name] = flatten_value(value)
    return trans
