"""Conversion from declarative resources to runtime objects.

The runtime abstraction layer (RAL) is where a declared resource becomes
something the execution engine can act on. Registered types build their
own runtime object; any other type becomes a generic Component.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from desired.exceptions import InvalidParameterError
from desired.parameters import Value
from desired.reference import Reference

if TYPE_CHECKING:
    from desired.registry import TypeDescriptor, TypeRegistry
    from desired.resource import Resource

logger = logging.getLogger(__name__)

# Parameters every type accepts, regardless of what it declares
METAPARAMETERS = frozenset(
    {
        "alias",
        "audit",
        "before",
        "loglevel",
        "noop",
        "notify",
        "require",
        "schedule",
        "subscribe",
        "tag",
    }
)


@dataclass
class RuntimeResource:
    """Runtime object for an instance of a registered type."""

    descriptor: "TypeDescriptor"
    title: Any
    parameters: dict[str, Value] = field(default_factory=dict)
    tags: set[str] = field(default_factory=set)
    file: str | None = None
    line: int | None = None

    @property
    def type(self) -> str:
        return self.descriptor.name

    @property
    def name(self) -> Any:
        """Value of the type's namevar."""
        return self.parameters.get(self.descriptor.namevar, self.title)

    @property
    def ref(self) -> str:
        return Reference(self.type, self.title).to_string()

    @classmethod
    def from_resource(cls, descriptor: "TypeDescriptor", resource: "Resource") -> "RuntimeResource":
        """Validate a resource's parameters against its type and build the object.

        Raises:
            InvalidParameterError: If the resource uses parameters the type
                does not declare
        """
        parameters = resource.to_hash()
        unknown = [name for name in parameters if not descriptor.accepts(name)]
        if unknown:
            raise InvalidParameterError(
                f"Invalid parameter(s) {', '.join(unknown)} for {resource.ref}"
            )
        return cls(
            descriptor=descriptor,
            title=resource.title,
            parameters=parameters,
            tags=resource.tags,
            file=resource.file,
            line=resource.line,
        )


@dataclass
class Component:
    """Generic aggregate standing in for types the registry doesn't know.

    Components are what user-defined types and classes evaluate to; their
    name is the full reference string of the resource they came from.
    """

    type: str
    title: Any
    parameters: dict[str, Value] = field(default_factory=dict)
    tags: set[str] = field(default_factory=set)
    file: str | None = None
    line: int | None = None

    @property
    def name(self) -> str:
        return self.ref

    @property
    def ref(self) -> str:
        return Reference(self.type, self.title).to_string()

    @classmethod
    def create(cls, resource: "Resource") -> "Component":
        return cls(
            type=resource.type,
            title=resource.title,
            parameters=resource.to_hash(),
            tags=resource.tags,
            file=resource.file,
            line=resource.line,
        )


def to_ral(resource: "Resource", registry: "TypeRegistry") -> Any:
    """Build the runtime object for a resource.

    Registry and constructor errors propagate unchanged.
    """
    descriptor = registry.lookup(resource.type)
    if descriptor is None:
        logger.debug("No registered type for %s, building a component", resource.ref)
        return Component.create(resource)
    return descriptor.create(resource)
