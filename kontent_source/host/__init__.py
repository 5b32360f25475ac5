"""
Host build-system collaborators.

- base: NodeHost protocol (schema registration, node creation, ids, digests)
- memory: InMemoryNodeStore for local runs and tests
"""

from kontent_source.host.base import NodeHost
from kontent_source.host.memory import InMemoryNodeStore, canonical_json

__all__ = [
    "NodeHost",
    "InMemoryNodeStore",
    "canonical_json",
]
