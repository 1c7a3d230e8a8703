"""Shared exception classes for desired."""


class DesiredError(Exception):
    """Base exception for desired errors."""


class ArityError(DesiredError, TypeError):
    """Raised when a resource or reference is built without a type or title."""


class InvalidReferenceError(DesiredError, ValueError):
    """Raised when a reference string cannot be parsed."""


class InvalidTagError(DesiredError, ValueError):
    """Raised when an explicitly requested tag is not a valid tag name."""


class ParameterValueError(DesiredError, ValueError):
    """Raised when a parameter value is not a supported value shape."""


class InvalidParameterError(DesiredError):
    """Raised when a runtime object is given a parameter its type does not declare."""


class TypeNotFoundError(DesiredError):
    """Raised when a resource type is not registered."""


class SerializationError(DesiredError):
    """Raised when serialized data cannot be decoded into resources."""


class ConfigNotFoundError(DesiredError):
    """Raised when desired.toml is not found."""


class ConfigParseError(DesiredError):
    """Raised when desired.toml cannot be parsed."""


class ConfigValidationError(DesiredError):
    """Raised when desired.toml contains invalid configuration."""
