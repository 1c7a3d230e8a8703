"""desired: the managed-resource core of a declarative configuration system.

- Reference: canonical (type, title) identity
- Resource: typed, titled, parameterized unit of desired state
- TypeRegistry / TypeDescriptor: resource types and their namevars
- Conversions: runtime objects, manifest text, transport objects, YAML
"""

__version__ = "0.3.0"

from desired.exceptions import (
    ArityError,
    DesiredError,
    InvalidParameterError,
    InvalidReferenceError,
    InvalidTagError,
    ParameterValueError,
    SerializationError,
    TypeNotFoundError,
)
from desired.ral import Component, RuntimeResource
from desired.reference import Reference
from desired.registry import TypeDescriptor, TypeRegistry, default_registry
from desired.resource import Resource
from desired.tagging import Taggable, valid_tag
from desired.transport import TransBucket, TransObject

__all__ = [
    "__version__",
    # Core types
    "Reference",
    "Resource",
    "Taggable",
    "valid_tag",
    # Registry
    "TypeDescriptor",
    "TypeRegistry",
    "default_registry",
    # Conversion targets
    "Component",
    "RuntimeResource",
    "TransBucket",
    "TransObject",
    # Errors
    "DesiredError",
    "ArityError",
    "InvalidParameterError",
    "InvalidReferenceError",
    "InvalidTagError",
    "ParameterValueError",
    "SerializationError",
    "TypeNotFoundError",
]
