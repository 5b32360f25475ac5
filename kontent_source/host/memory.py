"""In-memory host node store.

Stands in for a real build system during local runs and tests. Node ids
are UUIDv5 values of the identity key, content digests are MD5 hex of the
canonical JSON form, so both are reproducible across runs.

WARNING: Nothing is persisted; a new store starts empty.
"""

import hashlib
import json
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

import structlog

from kontent_source.core.exceptions import HostContractError
from kontent_source.models.graph import SchemaRegistration
from kontent_source.models.nodes import ProjectedNode

logger = structlog.get_logger(__name__)

NODE_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "kontent-source")


def canonical_json(content: Any) -> str:
    """Serialize with sorted keys and no insignificant whitespace."""
    return json.dumps(content, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


@dataclass
class InMemoryNodeStore:
    """Append-only node store implementing ``NodeHost``."""

    namespace: uuid.UUID = NODE_ID_NAMESPACE
    registrations: list[SchemaRegistration] = field(default_factory=list)
    nodes: dict[str, ProjectedNode] = field(default_factory=dict)

    def create_types(self, registration: SchemaRegistration) -> None:
        """Record a schema registration batch."""
        self.registrations.append(registration)
        logger.debug("host_types_registered", object_types=len(registration.object_types))

    def create_node(self, node: ProjectedNode) -> None:
        """
        Store a node.

        Raises:
            HostContractError: If no schema was registered yet or the id is taken.
        """
        if not self.registrations:
            raise HostContractError(
                "Schema must be registered before nodes are created",
                {"node_id": node.id},
            )
        if node.id in self.nodes:
            raise HostContractError(
                "Node id already exists",
                {"node_id": node.id, "codename": node.system.get("codename")},
            )
        self.nodes[node.id] = node

    def create_node_id(self, identity_key: str) -> str:
        return str(uuid.uuid5(self.namespace, identity_key))

    def create_content_digest(self, content: Any) -> str:
        return hashlib.md5(canonical_json(content).encode("utf-8")).hexdigest()

    # -------------------------------------------------------------------------
    # Read helpers for callers and tests
    # -------------------------------------------------------------------------

    @property
    def registration(self) -> Optional[SchemaRegistration]:
        """Most recent schema registration, if any."""
        return self.registrations[-1] if self.registrations else None

    def get_node(self, node_id: str) -> Optional[ProjectedNode]:
        return self.nodes.get(node_id)

    def nodes_of_type(self, type_name: str) -> list[ProjectedNode]:
        return [node for node in self.nodes.values() if node.type_name == type_name]
