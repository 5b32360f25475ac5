"""Interface of the host build system that receives the projected graph.

The projection never calls the host implicitly; every capability it needs
is passed in as a ``NodeHost``.
"""

from typing import Any, Protocol, runtime_checkable

from kontent_source.models.graph import SchemaRegistration
from kontent_source.models.nodes import ProjectedNode


@runtime_checkable
class NodeHost(Protocol):
    """Capabilities the host node store must provide.

    Contract: ``create_types`` is called once, before any ``create_node``.
    """

    def create_types(self, registration: SchemaRegistration) -> None:
        """Register the schema declarations for this run."""
        ...

    def create_node(self, node: ProjectedNode) -> None:
        """Add one node to the store."""
        ...

    def create_node_id(self, identity_key: str) -> str:
        """Turn a stable identity key into the host's node id."""
        ...

    def create_content_digest(self, content: Any) -> str:
        """Fingerprint JSON-compatible content."""
        ...
