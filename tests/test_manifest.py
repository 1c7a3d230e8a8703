"""Tests for desired.manifest module."""

import pytest

from desired.manifest import format_value, quote, render
from desired.reference import Reference
from desired.resource import Resource


class TestToManifest:
    """Tests for converting resources to manifest text."""

    @pytest.fixture
    def resource(self):
        """Create a resource of a qualified type."""
        return Resource("one::two", "/my/file", {"noop": True, "foo": ["one", "two"]})

    def test_prints_type_and_title(self, resource):
        """The header holds the type and quoted title."""
        assert "one::two { '/my/file':\n" in resource.to_manifest()

    def test_single_quotes_values(self, resource):
        """Scalar values are single-quoted."""
        assert "    noop => 'true'" in resource.to_manifest()

    def test_prints_arrays(self, resource):
        """Array values use array literal syntax."""
        assert "    foo => ['one','two']" in resource.to_manifest()

    def test_full_text(self, resource):
        """Parameters are comma-separated in insertion order."""
        assert resource.to_manifest() == (
            "one::two { '/my/file':\n"
            "    noop => 'true',\n"
            "    foo => ['one','two']\n"
            "}"
        )

    def test_no_parameters(self):
        """A resource without parameters renders an empty body."""
        assert Resource("foo", "bar").to_manifest() == "foo { 'bar':\n}"

    def test_type_lowercased(self):
        """The type is written lower-case."""
        assert Resource("File", "/f").to_manifest().startswith("file { '/f':")

    def test_references(self):
        """References render as resource references."""
        resource = Resource("service", "nginx", {"require": Reference("package", "nginx")})
        assert "    require => Package[nginx]" in resource.to_manifest()

    def test_does_not_modify_resource(self, resource):
        """Rendering leaves the parameters untouched."""
        before = resource.to_hash()
        resource.to_manifest()
        assert resource.to_hash() == before


class TestFormatting:
    """Tests for value formatting helpers."""

    def test_quote_escapes(self):
        """Quotes and backslashes are escaped."""
        assert quote("it's") == "'it\\'s'"
        assert quote("C:\\dir") == "'C:\\\\dir'"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "'true'"),
            (False, "'false'"),
            (8080, "'8080'"),
            (1.5, "'1.5'"),
            ("text", "'text'"),
            (["a", ["b", "c"]], "['a',['b','c']]"),
            ([Reference("file", "/f"), "x"], "[File[/f],'x']"),
        ],
    )
    def test_format_value(self, value, expected):
        """Each value shape has its manifest form."""
        assert format_value(value) == expected

    def test_render_function(self):
        """render is what to_manifest uses."""
        resource = Resource("foo", "bar", {"a": "b"})
        assert render(resource) == resource.to_manifest()
