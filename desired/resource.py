"""The managed resource.

A Resource is one typed, titled unit of desired state as produced by the
manifest evaluator: a reference, an ordered parameter set, tags and the
source location it was declared at. It converts itself into the
representations the rest of the pipeline consumes.
"""

import weakref
from collections.abc import Iterator, Mapping
from typing import Any

from desired import manifest, ral, transport
from desired.exceptions import ArityError, SerializationError
from desired.parameters import ParameterStore, Value, canonical_key
from desired.reference import Reference
from desired.registry import TypeRegistry, default_registry
from desired.tagging import Taggable, valid_tag


class Resource(Taggable):
    """A typed, titled and parameterized unit of desired state.

    Parameters are addressed by canonical names. For registered types the
    identity parameter can be reached as ``"name"`` regardless of what the
    type calls its namevar.

    Usage:
        resource = Resource("file", "/etc/motd", {"owner": "root"})
        resource["mode"] = "0644"
        resource.ref            # "File[/etc/motd]"
        resource["name"]        # "/etc/motd", via the "path" namevar
    """

    def __init__(
        self,
        kind: str | None = None,
        title: Any = None,
        parameters: Mapping[Any, Any] | None = None,
        *,
        registry: TypeRegistry | None = None,
        file: str | None = None,
        line: int | None = None,
        implicit: bool = False,
        catalog: Any = None,
    ) -> None:
        if kind is None or title is None:
            raise ArityError("A resource requires both a type and a title")

        self.reference = Reference(kind, title)
        self.registry = registry if registry is not None else default_registry()
        self.file = file
        self.line = line
        self.implicit = implicit
        self.catalog = catalog
        self._parameters = ParameterStore()

        if valid_tag(self.type):
            self.tag(self.type)
        if valid_tag(self.title):
            self.tag(self.title)

        for key, value in (parameters or {}).items():
            self[key] = value

    @property
    def type(self) -> str:
        return self.reference.type

    @property
    def title(self) -> Any:
        return self.reference.title

    @property
    def ref(self) -> str:
        return self.reference.to_string()

    @property
    def catalog(self) -> Any:
        """The owning catalog, or None if detached or already collected."""
        if self._catalog is None:
            return None
        return self._catalog()

    @catalog.setter
    def catalog(self, catalog: Any) -> None:
        self._catalog = weakref.ref(catalog) if catalog is not None else None

    def _namevar(self) -> str | None:
        descriptor = self.registry.lookup(self.type)
        return descriptor.namevar if descriptor is not None else None

    def _parameter_name(self, key: Any) -> str:
        name = canonical_key(key)
        if name == "name":
            return self._namevar() or name
        return name

    def __getitem__(self, key: Any) -> Any:
        name = canonical_key(key)
        if name == "name":
            namevar = self._namevar()
            if namevar is not None:
                return self._parameters.get(namevar, self.title)
        return self._parameters.get(name)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._parameters.set(self._parameter_name(key), value)

    def __delitem__(self, key: Any) -> None:
        self.delete(key)

    def __contains__(self, key: Any) -> bool:
        return self._parameter_name(key) in self._parameters

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __bool__(self) -> bool:
        # A resource without parameters is still a resource
        return True

    def get(self, key: Any, default: Any = None) -> Any:
        if key in self:
            return self[key]
        if canonical_key(key) == "name" and self._namevar() is not None:
            # Registered types always have a name: the title stands in
            return self[key]
        return default

    def has_key(self, key: Any) -> bool:
        return key in self

    def keys(self) -> list[str]:
        return self._parameters.keys()

    def values(self) -> list[Value]:
        return [value for _, value in self._parameters.items()]

    def items(self) -> Iterator[tuple[str, Value]]:
        """Iterate over (name, value) pairs in insertion order."""
        return self._parameters.items()

    def length(self) -> int:
        return len(self)

    def delete(self, key: Any) -> Value | None:
        """Remove a parameter; absent parameters are ignored.

        Returns:
            The removed value, or None if it wasn't set
        """
        return self._parameters.delete(self._parameter_name(key))

    def is_empty(self) -> bool:
        return len(self._parameters) == 0

    def to_hash(self) -> dict[str, Value]:
        """Return a detached copy of all parameters.

        The identity parameter is always present: when it hasn't been set,
        it defaults to the title under the type's namevar (or ``"name"`` for
        unregistered types).
        """
        result = self._parameters.copy()
        namevar = self._namevar() or "name"
        if namevar not in result:
            result[namevar] = self.title
        return result

    def to_ral(self) -> Any:
        """Build the runtime object via the type registry."""
        return ral.to_ral(self, self.registry)

    def to_manifest(self) -> str:
        """Render this resource as manifest source text."""
        return manifest.render(self)

    def to_trans(self) -> "transport.TransBucket | transport.TransObject":
        """Convert to the legacy transport representation."""
        return transport.to_trans(self, self.registry)

    def to_data(self) -> dict[str, Any]:
        """Convert to a plain mapping; Reference values are kept as References."""
        return {
            "type": self.type,
            "title": self.title,
            "file": self.file,
            "line": self.line,
            "implicit": self.implicit,
            "tags": sorted(self.tags),
            "parameters": self._parameters.copy(),
        }

    @classmethod
    def from_data(cls, data: Mapping[str, Any], registry: TypeRegistry | None = None) -> "Resource":
        """Create a Resource from a mapping produced by ``to_data``.

        Raises:
            SerializationError: If the mapping has no type or title, its
                parameters are not a mapping with string names, or its tags
                are not a list
        """
        if data.get("type") is None or data.get("title") is None:
            raise SerializationError("Serialized resource is missing its type or title")
        parameters = data.get("parameters") or {}
        if not isinstance(parameters, Mapping):
            raise SerializationError(
                f"Parameters must be a mapping, got {type(parameters).__name__}"
            )

        tags = data.get("tags") or []
        if not isinstance(tags, list):
            raise SerializationError(f"Tags must be a list, got {type(tags).__name__}")

        try:
            resource = cls(
                data["type"],
                data["title"],
                parameters,
                registry=registry,
                file=data.get("file"),
                line=data.get("line"),
                implicit=bool(data.get("implicit", False)),
            )
        except TypeError as e:
            raise SerializationError(f"Invalid serialized parameters: {e}") from e
        if tags:
            resource.tag(*tags)
        return resource

    def to_yaml(self) -> str:
        # Import here to avoid circular imports
        from desired.serialization import dump

        return dump(self)

    @classmethod
    def from_yaml(cls, text: str, registry: TypeRegistry | None = None) -> "Resource":
        """Decode a single resource from YAML.

        Raises:
            SerializationError: If the document is not a single resource
        """
        from desired.serialization import load

        loaded = load(text, registry=registry)
        if not isinstance(loaded, cls):
            raise SerializationError(f"Expected a serialized resource, got {type(loaded).__name__}")
        return loaded

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self.reference == other.reference and self._parameters == other._parameters

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Resource {self.ref}>"
