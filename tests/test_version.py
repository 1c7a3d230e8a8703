"""Tests for version consistency across package files."""

from pathlib import Path

import tomlkit


def test_version_matches_pyproject():
    """Verify that desired.__version__ matches the version in pyproject.toml."""
    from desired import __version__

    # Read pyproject.toml
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    with open(pyproject_path) as f:
        pyproject = tomlkit.load(f)

    expected_version = pyproject["project"]["version"]

    assert __version__ == expected_version, (
        f"Version mismatch: desired.__version__={__version__!r}, "
        f"pyproject.toml version={expected_version!r}"
    )
