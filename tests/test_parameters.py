"""Tests for desired.parameters module."""

from enum import Enum

import pytest

from desired.exceptions import ParameterValueError
from desired.parameters import ParameterStore, canonical_key, canonical_value, copy_value
from desired.reference import Reference


class Param(Enum):
    NOOP = "noop"


class TestCanonicalKey:
    """Tests for parameter name canonicalization."""

    def test_lowercases(self):
        """Names are lower-cased."""
        assert canonical_key("Owner") == "owner"

    def test_strips_whitespace(self):
        """Surrounding whitespace is removed."""
        assert canonical_key("  mode ") == "mode"

    def test_bytes(self):
        """Byte strings address the same slot as str."""
        assert canonical_key(b"path") == "path"

    def test_enum(self):
        """Enum members use their value."""
        assert canonical_key(Param.NOOP) == "noop"

    def test_non_string_rejected(self):
        """Non-string names raise TypeError."""
        with pytest.raises(TypeError):
            canonical_key(42)

    def test_empty_rejected(self):
        """Empty names raise ParameterValueError."""
        with pytest.raises(ParameterValueError):
            canonical_key("   ")


class TestCanonicalValue:
    """Tests for value validation."""

    @pytest.mark.parametrize("value", ["text", True, 3, 2.5, Reference("file", "/f")])
    def test_scalars_and_references(self, value):
        """Scalars and references are kept as they are."""
        assert canonical_value(value) is value

    def test_tuple_becomes_list(self):
        """Tuples are stored as lists."""
        assert canonical_value(("a", "b")) == ["a", "b"]

    def test_nested_lists(self):
        """Nested lists are validated recursively."""
        assert canonical_value(["a", ("b", Reference("file", "/f"))]) == [
            "a",
            ["b", Reference("file", "/f")],
        ]

    @pytest.mark.parametrize("value", [None, {"a": 1}, object(), ["ok", None]])
    def test_unsupported_rejected(self, value):
        """Unsupported shapes raise ParameterValueError."""
        with pytest.raises(ParameterValueError):
            canonical_value(value)

    def test_copy_value_detaches_lists(self):
        """copy_value copies nested lists."""
        original = ["a", ["b"]]
        copied = copy_value(original)
        copied[1].append("c")
        assert original == ["a", ["b"]]


class TestParameterStore:
    """Tests for ParameterStore."""

    def test_set_and_get(self):
        """Values are reachable through any spelling of the key."""
        store = ParameterStore()
        store.set("Owner", "root")
        assert store.get("owner") == "root"
        assert store.get(b"OWNER") == "root"

    def test_missing_key_default(self):
        """Missing keys return the default."""
        assert ParameterStore().get("nope") is None
        assert ParameterStore().get("nope", "x") == "x"

    def test_insertion_order(self):
        """Iteration follows insertion order; reassignment keeps position."""
        store = ParameterStore()
        store.set("b", 1)
        store.set("a", 2)
        store.set("B", 3)
        assert list(store) == ["b", "a"]
        assert list(store.items()) == [("b", 3), ("a", 2)]

    def test_delete(self):
        """delete removes and returns the value, ignoring absent keys."""
        store = ParameterStore()
        store.set("a", 1)
        assert store.delete("A") == 1
        assert store.delete("a") is None
        assert len(store) == 0

    def test_copy_is_detached(self):
        """copy returns a dict that shares no state with the store."""
        store = ParameterStore()
        store.set("list", ["x"])
        copied = store.copy()
        copied["list"].append("y")
        copied["new"] = 1
        assert store.get("list") == ["x"]
        assert "new" not in store
