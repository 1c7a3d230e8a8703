"""Tagging capability shared by resources.

Tags are lower-case labels used to select subsets of a catalog. Any class
can become taggable by mixing in ``Taggable``.
"""

import re
from collections.abc import Iterable

from desired.exceptions import InvalidTagError

TAG_PATTERN = r"^\w[-\w:.]*$"

_TAG_RE = re.compile(TAG_PATTERN)


def valid_tag(name: object) -> bool:
    """Check whether a value is a valid tag name.

    Examples:
        >>> valid_tag("bar")
        True
        >>> valid_tag("one::two")
        True
        >>> valid_tag("/bar")
        False
    """
    if not isinstance(name, str) or not name:
        return False
    return bool(_TAG_RE.match(name))


class Taggable:
    """Mixin providing a case-insensitive tag set."""

    def _tag_set(self) -> set[str]:
        try:
            return self._tags
        except AttributeError:
            self._tags: set[str] = set()
            return self._tags

    def tag(self, *names: str) -> None:
        """Add one or more tags.

        Qualified tags such as ``apache::mod`` also add each of their
        segments.

        Raises:
            InvalidTagError: If a name is not a valid tag
        """
        tags = self._tag_set()
        for name in names:
            if not valid_tag(name):
                raise InvalidTagError(f"Invalid tag {name!r}")
            name = name.lower()
            tags.add(name)
            if "::" in name:
                tags.update(segment for segment in name.split("::") if segment)

    def tagged(self, *names: str) -> bool:
        """Return True if every given tag is present."""
        tags = self._tag_set()
        return all(str(name).lower() in tags for name in names)

    @property
    def tags(self) -> set[str]:
        """A copy of the current tags."""
        return set(self._tag_set())

    @tags.setter
    def tags(self, names: Iterable[str]) -> None:
        self._tag_set().clear()
        self.tag(*names)
