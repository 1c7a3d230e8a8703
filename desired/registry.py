"""Registry of resource type descriptors.

A resource asks its registry two questions: which parameter is the
type's identity (the namevar), and how to build a runtime object from a
resource. Types missing from the registry are treated as user-defined
aggregates.

Thread-safe: All registry operations are protected by a lock.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from desired.exceptions import TypeNotFoundError
from desired.parameters import canonical_key
from desired.ral import METAPARAMETERS, RuntimeResource

if TYPE_CHECKING:
    from desired.resource import Resource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeDescriptor:
    """Description of a registered resource type.

    Attributes:
        name: Type name, stored lower-case
        namevar: Parameter that carries the resource's identity
        parameters: Declared parameter names; empty accepts any parameter
        factory: Optional constructor for runtime objects; defaults to
                 building a RuntimeResource
    """

    name: str
    namevar: str = "name"
    parameters: tuple[str, ...] = ()
    factory: "Callable[[Resource], Any] | None" = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.lower())
        object.__setattr__(self, "namevar", canonical_key(self.namevar))
        object.__setattr__(
            self, "parameters", tuple(canonical_key(p) for p in self.parameters)
        )

    def accepts(self, parameter: str) -> bool:
        """Check whether this type takes a parameter.

        The namevar and metaparameters are always accepted.
        """
        if not self.parameters:
            return True
        name = canonical_key(parameter)
        return name == self.namevar or name in self.parameters or name in METAPARAMETERS

    def create(self, resource: "Resource") -> Any:
        """Build the runtime object for a resource of this type."""
        if self.factory is not None:
            return self.factory(resource)
        return RuntimeResource.from_resource(self, resource)


class TypeRegistry:
    """Lookup table from type name to TypeDescriptor.

    Usage:
        registry = TypeRegistry([TypeDescriptor("file", namevar="path")])
        registry.lookup("File").namevar   # "path"
        registry.lookup("mymodule::thing")  # None
    """

    def __init__(self, descriptors: Iterable[TypeDescriptor] = ()) -> None:
        self._lock = threading.Lock()
        self._types: dict[str, TypeDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: TypeDescriptor) -> None:
        """Register a type, replacing any existing type of the same name."""
        with self._lock:
            self._types[descriptor.name] = descriptor
        logger.debug("Registered resource type %s (namevar %s)", descriptor.name, descriptor.namevar)

    def unregister(self, name: str) -> bool:
        """Remove a type.

        Returns:
            True if the type was removed, False if it wasn't registered
        """
        with self._lock:
            return self._types.pop(str(name).lower(), None) is not None

    def lookup(self, name: str) -> TypeDescriptor | None:
        """Get a type descriptor by name (case-insensitive).

        Returns:
            The TypeDescriptor or None if not registered
        """
        with self._lock:
            return self._types.get(str(name).lower())

    def get(self, name: str) -> TypeDescriptor:
        """Get a type descriptor by name.

        Raises:
            TypeNotFoundError: If the type is not registered
        """
        descriptor = self.lookup(name)
        if descriptor is None:
            with self._lock:
                available = ", ".join(sorted(self._types)) if self._types else "none"
            raise TypeNotFoundError(f"Unknown resource type '{name}'. Available: {available}")
        return descriptor

    def all_types(self) -> dict[str, TypeDescriptor]:
        """Get a copy of all registered types."""
        with self._lock:
            return self._types.copy()

    def clear(self) -> None:
        with self._lock:
            self._types.clear()

    def __contains__(self, name: object) -> bool:
        return self.lookup(str(name)) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)


_default_lock = threading.Lock()
_default_registry = TypeRegistry()
_builtin_types_registered = False


def default_registry() -> TypeRegistry:
    """Get the process-wide registry, registering built-in types on first use."""
    global _builtin_types_registered
    with _default_lock:
        if not _builtin_types_registered:
            _builtin_types_registered = True
            # Import here to avoid circular imports
            from desired.builtin import BUILTIN_TYPES

            for descriptor in BUILTIN_TYPES:
                _default_registry.register(descriptor)
    return _default_registry
