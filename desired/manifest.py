"""Rendering of resources as manifest source text.

The output is meant for people: scalars are single-quoted, lists use
array literal syntax and references use resource reference syntax.

    file { '/etc/motd':
        owner => 'root',
        require => [Package['motd'],User['root']]
    }
"""

from typing import TYPE_CHECKING

from desired.parameters import Value
from desired.reference import Reference

if TYPE_CHECKING:
    from desired.resource import Resource

INDENT = "    "


def quote(text: str) -> str:
    """Single-quote a string, escaping backslashes and single quotes.

    Examples:
        >>> quote("/my/file")
        "'/my/file'"
        >>> quote("it's")
        "'it\\\\'s'"
    """
    escaped = str(text).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def format_value(value: Value) -> str:
    """Render one parameter value.

    Examples:
        >>> format_value(True)
        "'true'"
        >>> format_value(["one", "two"])
        "['one','two']"
        >>> format_value(Reference("file", "/f"))
        "File[/f]"
    """
    if isinstance(value, bool):
        return quote("true" if value else "false")
    if isinstance(value, Reference):
        return value.to_string()
    if isinstance(value, list):
        return "[" + ",".join(format_value(item) for item in value) + "]"
    return quote(value)


def render(resource: "Resource") -> str:
    """Render a resource declaration; parameters keep insertion order."""
    lines = [f"{resource.type.lower()} {{ {quote(resource.title)}:"]
    parameters = [f"{INDENT}{name} => {format_value(value)}" for name, value in resource.items()]
    if parameters:
        lines.append(",\n".join(parameters))
    lines.append("}")
    return "\n".join(lines)
