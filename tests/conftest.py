"""Test configuration and fixtures."""

import pytest

from desired.builtin import BUILTIN_TYPES
from desired.registry import TypeDescriptor, TypeRegistry


@pytest.fixture
def registry():
    """Provide an isolated registry holding the built-in types."""
    return TypeRegistry(BUILTIN_TYPES)


@pytest.fixture
def myvar_registry():
    """Provide a registry where the file type's namevar is 'myvar'."""
    return TypeRegistry([TypeDescriptor("file", namevar="myvar")])


@pytest.fixture
def empty_registry():
    """Provide a registry with no types at all."""
    return TypeRegistry()
