"""Canonical resource identity.

A reference names exactly one resource by its type and title and renders
the familiar ``Type[title]`` string used throughout manifests, logs and
dependency declarations.
"""

import re
from dataclasses import dataclass
from typing import Any

from desired.exceptions import ArityError, InvalidReferenceError

_REFERENCE_PATTERN = re.compile(r"^(?P<kind>\w[-\w]*(?:::\w[-\w]*)*)\[(?P<title>.*)\]$", re.DOTALL)


def capitalize_kind(kind: str) -> str:
    """Capitalize every ``::`` segment of a type name.

    Examples:
        >>> capitalize_kind("file")
        'File'
        >>> capitalize_kind("one::two")
        'One::Two'
    """
    return "::".join(segment.capitalize() for segment in str(kind).split("::"))


@dataclass(frozen=True, eq=False)
class Reference:
    """Immutable (type, title) pair identifying a resource.

    The type keeps the case it was given with, but comparison and hashing
    treat it case-insensitively so ``Reference("File", "/f")`` and
    ``Reference("file", "/f")`` name the same resource.

    Attributes:
        kind: Resource type name (e.g., "file", "one::two")
        title: Identity of the resource within its type
    """

    kind: str | None = None
    title: Any = None

    def __post_init__(self) -> None:
        if self.kind is None or self.title is None:
            raise ArityError("A reference requires both a type and a title")
        object.__setattr__(self, "kind", str(self.kind))

    @property
    def type(self) -> str:
        """The resource type name."""
        return self.kind

    def to_string(self) -> str:
        """Render the canonical reference string.

        Examples:
            >>> Reference("file", "/etc/motd").to_string()
            'File[/etc/motd]'
            >>> Reference("one::two", "x").to_string()
            'One::Two[x]'
        """
        return f"{capitalize_kind(self.kind)}[{self.title}]"

    def to_trans_ref(self) -> list[str]:
        """Backward-compatible ``[type, title]`` pair used by transport objects."""
        return [self.kind.lower(), str(self.title)]

    def to_data(self) -> dict[str, Any]:
        """Convert to a plain mapping."""
        return {"type": self.kind, "title": self.title}

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> "Reference":
        """Create a Reference from a mapping produced by ``to_data``."""
        return cls(data.get("type"), data.get("title"))

    @classmethod
    def parse(cls, text: str) -> "Reference":
        """Parse a ``Type[title]`` string.

        The parsed type is lower-cased, so parsing is the inverse of
        ``to_string`` up to type case.

        Raises:
            InvalidReferenceError: If the text is not a reference string

        Examples:
            >>> Reference.parse("File[/etc/motd]")
            Reference(kind='file', title='/etc/motd')
        """
        match = _REFERENCE_PATTERN.match(text.strip()) if text else None
        if match is None:
            raise InvalidReferenceError(f"Invalid resource reference: {text!r}")
        return cls(match.group("kind").lower(), match.group("title"))

    def _key(self) -> tuple[str, Any]:
        return (self.kind.lower(), self.title)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reference):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.to_string()
