"""Built-in resource type descriptors.

These declare identity only: each type's name and namevar. The behaviour
of the types lives in the execution engine, not here.

Built-in types are registered lazily via default_registry() when first
needed, so importing this module has no side effects.
"""

from desired.registry import TypeDescriptor

FILE_TYPE = TypeDescriptor(name="file", namevar="path")
PACKAGE_TYPE = TypeDescriptor(name="package")
SERVICE_TYPE = TypeDescriptor(name="service")
EXEC_TYPE = TypeDescriptor(name="exec", namevar="command")
USER_TYPE = TypeDescriptor(name="user")
GROUP_TYPE = TypeDescriptor(name="group")
NOTIFY_TYPE = TypeDescriptor(name="notify")

BUILTIN_TYPES = (
    FILE_TYPE,
    PACKAGE_TYPE,
    SERVICE_TYPE,
    EXEC_TYPE,
    USER_TYPE,
    GROUP_TYPE,
    NOTIFY_TYPE,
)
