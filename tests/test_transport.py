"""Tests for desired.transport module."""

import pytest

from desired.reference import Reference
from desired.resource import Resource
from desired.transport import TransBucket, TransObject, flatten_value


class TestNonBuiltinType:
    """Tests for resources whose type is not registered."""

    @pytest.fixture
    def resource(self, registry):
        """Create an instance of an unregistered type."""
        return Resource("foo", "bar", registry=registry)

    def test_returns_bucket(self, resource):
        """Unregistered types become a TransBucket."""
        bucket = resource.to_trans()
        assert type(bucket) is TransBucket
        assert bucket.type == resource.type
        assert bucket.name == resource.title

    def test_copies_file(self, resource):
        """The declaring file is copied."""
        resource.file = "/foo/bar"
        assert resource.to_trans().file == "/foo/bar"

    def test_copies_line(self, resource):
        """The declaring line is copied."""
        resource.line = 50
        assert resource.to_trans().line == 50

    def test_bucket_data(self, resource):
        """Buckets carry only name, type and location."""
        resource["foo"] = "ignored"
        resource.line = 50
        assert resource.to_trans().to_data() == {"name": "bar", "type": "foo", "line": 50}


class TestBuiltinType:
    """Tests for resources whose type is registered."""

    @pytest.fixture
    def resource(self, registry):
        """Create an instance of the built-in file type."""
        return Resource("file", "bar", registry=registry)

    def test_returns_trans_object(self, resource):
        """Registered types become a TransObject."""
        trans = resource.to_trans()
        assert type(trans) is TransObject
        assert trans.type == "file"
        assert trans.name == resource.title

    def test_copies_file(self, resource):
        """The declaring file is copied."""
        resource.file = "/foo/bar"
        assert resource.to_trans().file == "/foo/bar"

    def test_copies_line(self, resource):
        """The declaring line is copied."""
        resource.line = 50
        assert resource.to_trans().line == 50

    def test_copies_tags(self, resource):
        """Tags are copied; only TransObjects carry them."""
        resource.tag("foo")
        assert resource.to_trans().tags == resource.tags

    def test_copies_parameters_with_string_names(self, resource):
        """Parameters are reachable by string name."""
        resource["foo"] = "bar"
        assert resource.to_trans()["foo"] == "bar"

    def test_includes_namevar_default(self, resource):
        """The namevar defaults to the title."""
        assert resource.to_trans()["path"] == "bar"

    def test_copies_arrays(self, resource):
        """Multi-value arrays are kept."""
        resource["foo"] = ["yay", "fee"]
        assert resource.to_trans()["foo"] == ["yay", "fee"]

    def test_reduces_single_value_arrays(self, resource):
        """Single-value arrays become the bare value."""
        resource["foo"] = ["yay"]
        assert resource.to_trans()["foo"] == "yay"

    def test_converts_references(self, resource):
        """References become [type, title] pairs."""
        resource["foo"] = Reference("file", "/f")
        assert resource.to_trans()["foo"] == ["file", "/f"]

    def test_converts_references_within_arrays(self, resource):
        """References inside arrays are converted in place."""
        resource["foo"] = ["a", Reference("file", "/f")]
        assert resource.to_trans()["foo"] == ["a", ["file", "/f"]]

    def test_does_not_modify_resource(self, resource):
        """Conversion leaves the resource's values untouched."""
        resource["foo"] = ["a", Reference("file", "/f")]
        resource.to_trans()
        assert resource["foo"] == ["a", Reference("file", "/f")]

    def test_object_data(self, resource):
        """to_data gives the wire shape."""
        resource["ensure"] = ["present"]
        resource.file = "site.pp"
        assert resource.to_trans().to_data() == {
            "name": "bar",
            "type": "file",
            "file": "site.pp",
            "tags": ["bar", "file"],
            "parameters": {"ensure": "present", "path": "bar"},
        }


class TestFlattenValue:
    """Tests for flatten_value."""

    def test_scalars_unchanged(self):
        """Scalars pass through."""
        assert flatten_value("x") == "x"
        assert flatten_value(True) is True

    def test_nested_arrays(self):
        """Nested arrays are converted recursively and not collapsed."""
        assert flatten_value([["a"], [Reference("file", "/f")]]) == [["a"], [["file", "/f"]]]

    def test_single_reference_array(self):
        """An array holding one reference collapses to the pair."""
        assert flatten_value([Reference("file", "/f")]) == ["file", "/f"]
