"""YAML encoding of resources.

Resources and references are written with explicit ``!resource`` and
``!reference`` tags so that decoding rebuilds real objects instead of
bare mappings:

    !resource
    type: file
    title: /etc/motd
    ...
    parameters:
      owner: root
      require: !reference
        type: package
        title: motd

The dumper and loader are private subclasses of PyYAML's safe variants,
so registering these tags never touches PyYAML's global tables.
"""

import logging
from typing import Any

import yaml

from desired.exceptions import ArityError, DesiredError, SerializationError
from desired.reference import Reference
from desired.registry import TypeRegistry
from desired.resource import Resource

logger = logging.getLogger(__name__)

RESOURCE_TAG = "!resource"
REFERENCE_TAG = "!reference"


class ResourceDumper(yaml.SafeDumper):
    """Safe dumper that knows how to write resources and references."""


class ResourceLoader(yaml.SafeLoader):
    """Safe loader that rebuilds resources against a given type registry."""

    def __init__(self, stream: Any, registry: TypeRegistry | None = None) -> None:
        super().__init__(stream)
        self.registry = registry


def _represent_resource(dumper: ResourceDumper, resource: Resource) -> yaml.Node:
    return dumper.represent_mapping(RESOURCE_TAG, resource.to_data())


def _represent_reference(dumper: ResourceDumper, reference: Reference) -> yaml.Node:
    return dumper.represent_mapping(REFERENCE_TAG, reference.to_data())


def _construct_resource(loader: ResourceLoader, node: yaml.Node) -> Resource:
    data = loader.construct_mapping(node, deep=True)
    return Resource.from_data(data, registry=loader.registry)


def _construct_reference(loader: ResourceLoader, node: yaml.Node) -> Reference:
    data = loader.construct_mapping(node, deep=True)
    try:
        return Reference.from_data(data)
    except ArityError as e:
        raise SerializationError(f"Serialized reference is missing its type or title: {data!r}") from e


ResourceDumper.add_multi_representer(Resource, _represent_resource)
ResourceDumper.add_multi_representer(Reference, _represent_reference)
ResourceLoader.add_constructor(RESOURCE_TAG, _construct_resource)
ResourceLoader.add_constructor(REFERENCE_TAG, _construct_reference)


def dump(obj: Any) -> str:
    """Encode a resource, a reference, or lists and dicts of them as YAML."""
    return yaml.dump(
        obj,
        Dumper=ResourceDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def load(text: str, registry: TypeRegistry | None = None) -> Any:
    """Decode YAML produced by ``dump``.

    Args:
        text: YAML document
        registry: Type registry for the decoded resources (defaults to the
                  process-wide registry)

    Raises:
        SerializationError: If the text is not valid YAML or does not
            describe valid resources
    """
    loader = ResourceLoader(text, registry=registry)
    try:
        return loader.get_single_data()
    except SerializationError:
        raise
    except (yaml.YAMLError, DesiredError) as e:
        raise SerializationError(f"Failed to decode resources: {e}") from e
    finally:
        loader.dispose()


def load_resources(text: str, registry: TypeRegistry | None = None) -> list[Resource]:
    """Decode a document holding one resource or a list of resources.

    Raises:
        SerializationError: If the document holds anything else
    """
    loaded = load(text, registry=registry)
    if loaded is None:
        return []
    items = loaded if isinstance(loaded, list) else [loaded]
    for item in items:
        if not isinstance(item, Resource):
            raise SerializationError(f"Expected serialized resources, got {type(item).__name__}")
    logger.debug("Decoded %d resource(s)", len(items))
    return items
