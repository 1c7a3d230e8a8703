"""Parameter keys and values.

Parameter names are canonicalized at every entry point so that the
different spellings a manifest evaluator may hand over (``"noop"``,
``"NOOP"``, ``b"noop"``, an enum member) all address the same slot.

Values form a closed set of shapes: scalars (str, bool, int, float),
References, and lists of values.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Any, Union

from desired.exceptions import ParameterValueError
from desired.reference import Reference

Scalar = Union[str, bool, int, float]
Value = Union[Scalar, Reference, list["Value"]]

_SCALAR_TYPES = (str, bool, int, float)


def canonical_key(key: Any) -> str:
    """Canonicalize a parameter name.

    Examples:
        >>> canonical_key("Noop")
        'noop'
        >>> canonical_key(b" path ")
        'path'
    """
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, bytes):
        key = key.decode("utf-8")
    if not isinstance(key, str):
        raise TypeError(f"Parameter names must be strings, got {type(key).__name__}")
    name = key.strip().lower()
    if not name:
        raise ParameterValueError("Parameter names cannot be empty")
    return name


def canonical_value(value: Any) -> Value:
    """Validate a parameter value and normalize tuples to lists.

    Raises:
        ParameterValueError: If the value is not a supported shape
    """
    if isinstance(value, (_SCALAR_TYPES, Reference)):
        return value
    if isinstance(value, (list, tuple)):
        return [canonical_value(item) for item in value]
    raise ParameterValueError(
        f"Unsupported parameter value {value!r} of type {type(value).__name__}"
    )


def copy_value(value: Value) -> Value:
    """Copy a value deeply enough that the copy shares no mutable state."""
    if isinstance(value, list):
        return [copy_value(item) for item in value]
    return value


class ParameterStore:
    """Ordered parameter mapping keyed on canonical names.

    Insertion order is preserved; re-assigning an existing key keeps its
    original position.
    """

    def __init__(self) -> None:
        self._values: dict[str, Value] = {}

    def get(self, key: Any, default: Any = None) -> Any:
        return self._values.get(canonical_key(key), default)

    def set(self, key: Any, value: Any) -> None:
        self._values[canonical_key(key)] = canonical_value(value)

    def delete(self, key: Any) -> Value | None:
        return self._values.pop(canonical_key(key), None)

    def __contains__(self, key: Any) -> bool:
        return canonical_key(key) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def items(self) -> Iterator[tuple[str, Value]]:
        return iter(self._values.items())

    def keys(self) -> list[str]:
        return list(self._values)

    def copy(self) -> dict[str, Value]:
        """Return a detached plain dict of all parameters."""
        return {key: copy_value(value) for key, value in self._values.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterStore):
            return NotImplemented
        return self._values == other._values
