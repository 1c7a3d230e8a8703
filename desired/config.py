"""Configuration management for desired.toml."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli
import tomli_w

from desired.exceptions import ConfigNotFoundError, ConfigParseError, ConfigValidationError
from desired.registry import TypeDescriptor, TypeRegistry

CONFIG_FILENAME = "desired.toml"

logger = logging.getLogger(__name__)


@dataclass
class TypeConfig:
    """A resource type declared in configuration.

    Example:
        [types.vhost]
        namevar = "servername"
        parameters = ["port", "docroot"]
    """

    name: str
    namevar: str = "name"
    parameters: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> "TypeConfig":
        """Create a TypeConfig from a TOML dict entry."""
        namevar = data.get("namevar", "name")
        if not isinstance(namevar, str) or not namevar:
            raise ConfigValidationError(f"Type '{name}' has invalid 'namevar': {namevar!r}")

        parameters = data.get("parameters", [])
        if not isinstance(parameters, list) or not all(isinstance(p, str) for p in parameters):
            raise ConfigValidationError(
                f"Type '{name}' field 'parameters' must be a list of strings"
            )

        return cls(name=name, namevar=namevar, parameters=parameters)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a TOML-serializable dict."""
        result: dict[str, Any] = {}
        if self.namevar != "name":
            result["namevar"] = self.namevar
        if self.parameters:
            result["parameters"] = self.parameters
        return result

    def to_descriptor(self) -> TypeDescriptor:
        return TypeDescriptor(
            name=self.name,
            namevar=self.namevar,
            parameters=tuple(self.parameters),
        )


@dataclass
class DesiredConfig:
    """Configuration from desired.toml."""

    path: Path
    types: dict[str, TypeConfig] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "DesiredConfig":
        """Load configuration from desired.toml.

        Args:
            path: Path to the desired.toml file

        Returns:
            Parsed DesiredConfig

        Raises:
            ConfigNotFoundError: If the file doesn't exist
            ConfigParseError: If the file cannot be parsed
            ConfigValidationError: If the configuration is invalid
        """
        if not path.exists():
            raise ConfigNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "rb") as f:
                data = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ConfigParseError(f"Failed to parse {path}: {e}")

        config = cls._from_dict(path, data)
        logger.debug("Loaded %d type(s) from %s", len(config.types), path)
        return config

    @classmethod
    def _from_dict(cls, path: Path, data: dict[str, Any]) -> "DesiredConfig":
        """Create a DesiredConfig from a parsed TOML dict."""
        config = cls(path=path)

        types_data = data.get("types", {})
        if not isinstance(types_data, dict):
            raise ConfigValidationError("'types' must be a table")
        for name, type_config in types_data.items():
            if not isinstance(type_config, dict):
                raise ConfigValidationError(
                    f"Type '{name}' must be a table, got {type(type_config).__name__}"
                )
            config.types[name] = TypeConfig.from_dict(name, type_config)

        return config

    def save(self) -> None:
        """Save configuration to desired.toml."""
        data = self._to_dict()
        with open(self.path, "wb") as f:
            tomli_w.dump(data, f)

    def _to_dict(self) -> dict[str, Any]:
        """Convert to a TOML-serializable dict."""
        data: dict[str, Any] = {}
        if self.types:
            data["types"] = {name: t.to_dict() for name, t in self.types.items()}
        return data

    def add_type(
        self, name: str, namevar: str = "name", parameters: list[str] | None = None
    ) -> TypeConfig:
        """Add a resource type to the config.

        Returns:
            The created TypeConfig object
        """
        type_config = TypeConfig(name=name, namevar=namevar, parameters=parameters or [])
        self.types[name] = type_config
        return type_config

    def apply(self, registry: TypeRegistry) -> None:
        """Register every configured type, overriding same-named types."""
        for type_config in self.types.values():
            registry.register(type_config.to_descriptor())


def find_config(start_path: Path | None = None) -> Path | None:
    """Find desired.toml by walking up the directory tree.

    Args:
        start_path: Starting directory (defaults to current working directory)

    Returns:
        Path to desired.toml if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while True:
        config_path = current / CONFIG_FILENAME
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent
