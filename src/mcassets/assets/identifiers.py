"""
Namespaced identifiers (``namespace:local_id``).
"""

from dataclasses import dataclass

DEFAULT_NAMESPACE = "minecraft"
NAMESPACE_SEPARATOR = ":"


@dataclass(frozen=True)
class Identifier:
    """A namespaced resource name such as ``minecraft:block/stone``."""

    namespace: str
    local_id: str

    @classmethod
    def parse(cls, name: str, default_namespace: str = DEFAULT_NAMESPACE) -> "Identifier":
        """Split a compound name into namespace and local id.

        Names without a namespace prefix fall into ``default_namespace``.
        Only the first separator splits, so ``a:b:c`` has local id ``b:c``.
        """
        if NAMESPACE_SEPARATOR in name:
            namespace, local_id = name.split(NAMESPACE_SEPARATOR, 1)
            return cls(namespace or default_namespace, local_id)
        return cls(default_namespace, name)

    def __str__(self) -> str:
        return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.local_id}"
